from abc import ABC, abstractmethod
from typing import Optional

from services.auth_service.application.domain.user import User


class UserRepository(ABC):
    """Output port for user persistence."""

    @abstractmethod
    def save(self, user: User) -> User:
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        pass
