from abc import ABC, abstractmethod
from typing import Optional

from services.auth_service.application.dto.customer import (
    CustomerAuthResult,
    CustomerProfile,
)


class CustomerService(ABC):
    """Input port defining the customer portal use cases."""

    @abstractmethod
    def register_customer(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        email: Optional[str],
        phone: Optional[str],
        password: Optional[str],
    ) -> CustomerAuthResult:
        pass

    @abstractmethod
    def login_customer(
        self, email: Optional[str], password: Optional[str]
    ) -> CustomerAuthResult:
        pass

    @abstractmethod
    def get_profile(self, user_id: str) -> CustomerProfile:
        pass
