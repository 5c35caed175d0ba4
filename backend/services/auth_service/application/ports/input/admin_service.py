from abc import ABC, abstractmethod
from typing import Optional

from services.auth_service.application.dto.admin import AdminIdentity, AdminLoginResult


class AdminService(ABC):
    """Input port defining the admin portal use cases."""

    @abstractmethod
    def register_admin(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        admin_secret: Optional[str],
    ) -> AdminIdentity:
        """Registers an admin. ``admin_secret`` must match the configured secret."""
        pass

    @abstractmethod
    def login_admin(
        self, email: Optional[str], password: Optional[str]
    ) -> AdminLoginResult:
        pass

    @abstractmethod
    def get_admin(self, admin_id: str) -> AdminIdentity:
        pass
