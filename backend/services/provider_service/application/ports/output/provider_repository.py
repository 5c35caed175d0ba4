from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from services.provider_service.application.domain.provider import Provider


class ProviderRepository(ABC):
    """Output port for provider persistence."""

    @abstractmethod
    def save(self, provider: Provider) -> Provider:
        """Inserts a new provider and returns it with its assigned id."""
        pass

    @abstractmethod
    def get_by_id(self, provider_id: str) -> Optional[Provider]:
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Provider]:
        pass

    @abstractmethod
    def email_in_use(self, email: str, exclude_provider_id: Optional[str] = None) -> bool:
        """True when another provider already owns ``email``."""
        pass

    @abstractmethod
    def update_fields(self, provider_id: str, fields: Dict[str, Any]) -> bool:
        """Sets ``fields`` on the provider. Returns False when no provider matched."""
        pass
