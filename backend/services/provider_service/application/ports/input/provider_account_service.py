from abc import ABC, abstractmethod
from typing import Optional

from services.provider_service.application.domain.provider import (
    ExperienceUnit,
    ServiceType,
)
from services.provider_service.application.dto.provider_account import (
    ProviderLoginResult,
    ProviderProfile,
    ProviderProfileUpdateRequest,
)


class ProviderAccountService(ABC):
    """Input port for provider registration, login and profile use cases."""

    @abstractmethod
    def register_provider(
        self,
        name: str,
        email: str,
        phone: str,
        service_type: ServiceType,
        experience: int,
        password: str,
        experience_unit: ExperienceUnit = ExperienceUnit.YEARS,
    ) -> ProviderProfile:
        pass

    @abstractmethod
    def login_provider(
        self, email: Optional[str], password: Optional[str]
    ) -> ProviderLoginResult:
        pass

    @abstractmethod
    def get_profile(self, provider_id: str) -> ProviderProfile:
        pass

    @abstractmethod
    def update_profile(
        self, provider_id: str, update: ProviderProfileUpdateRequest
    ) -> None:
        pass
