import logging
from typing import Optional

from services.provider_service.application.domain.provider import (
    ExperienceUnit,
    Provider,
    ServiceType,
)
from services.provider_service.application.dto.provider_account import (
    ProviderIdentity,
    ProviderLoginResult,
    ProviderProfile,
    ProviderProfileUpdateRequest,
)
from services.provider_service.application.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidArgumentError,
    InvalidCredentialsError,
    ProviderNotFoundError,
)
from services.provider_service.application.ports.input.provider_account_service import (
    ProviderAccountService,
)
from services.provider_service.application.ports.output.provider_repository import (
    ProviderRepository,
)
from shared.models.base_models import ProviderRole, Token, is_valid_object_id, utcnow
from shared.security.password_hasher import PasswordHasher
from shared.security.token_provider import TokenProvider

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class ProviderAccountServiceImpl(ProviderAccountService):
    """
    Concrete implementation of the ProviderAccountService input port.
    Orchestrates provider registration, login and profile maintenance.
    """

    def __init__(
        self,
        provider_repository: ProviderRepository,
        password_hasher: PasswordHasher,
        token_provider: TokenProvider,
    ):
        self.provider_repository = provider_repository
        self.password_hasher = password_hasher
        self.token_provider = token_provider

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
        """
        Handles the business logic for provider registration.
        1. Rejects blank required fields.
        2. Checks the normalized email is not already registered.
        3. Hashes the password and saves a provider with zeroed counters.
        """
        if not all(
            [
                name and name.strip(),
                email and email.strip(),
                phone and phone.strip(),
                service_type,
                experience is not None,
                password,
            ]
        ):
            raise InvalidArgumentError("All fields are required")

        email = normalize_email(email)
        if self.provider_repository.get_by_email(email):
            logger.warning("Provider registration with taken email rejected")
            raise EmailAlreadyRegisteredError("Email already registered")

        provider = Provider(
            name=name.strip(),
            email=email,
            phone=phone.strip(),
            service_type=service_type,
            experience=experience,
            experience_unit=experience_unit,
            hashed_password=self.password_hasher.hash(password),
        )
        saved = self.provider_repository.save(provider)
        logger.info("Provider %s registered", saved.id)
        return ProviderProfile.model_validate(saved, from_attributes=True)

    def login_provider(
        self, email: Optional[str], password: Optional[str]
    ) -> ProviderLoginResult:
        if not email or not password:
            raise InvalidArgumentError("Email and password are required")

        provider = self.provider_repository.get_by_email(normalize_email(email))
        if not provider:
            raise InvalidCredentialsError("Invalid email or password")

        if not self.password_hasher.verify(password, provider.hashed_password):
            raise InvalidCredentialsError("Invalid email or password")

        access_token = self.token_provider.create_access_token(
            data={
                "sub": provider.id,
                "email": provider.email,
                "role": ProviderRole.PROVIDER.value,
            }
        )
        logger.info("Provider %s logged in", provider.id)

        return ProviderLoginResult(
            provider=ProviderIdentity(
                id=provider.id,
                name=provider.name,
                email=provider.email,
                service_type=provider.service_type,
            ),
            token=Token(access_token=access_token, token_type="bearer"),
        )

    def get_profile(self, provider_id: str) -> ProviderProfile:
        provider = self._get_provider(provider_id)
        return ProviderProfile.model_validate(provider, from_attributes=True)

    def update_profile(
        self, provider_id: str, update: ProviderProfileUpdateRequest
    ) -> None:
        if not is_valid_object_id(provider_id):
            raise InvalidArgumentError("Invalid provider ID")

        fields = update.model_dump(exclude_none=True, mode="json")
        if "email" in fields:
            fields["email"] = normalize_email(fields["email"])
            if self.provider_repository.email_in_use(
                fields["email"], exclude_provider_id=provider_id
            ):
                raise EmailAlreadyRegisteredError("Email already in use")

        if not fields:
            raise InvalidArgumentError("No fields to update")

        fields["updated_at"] = utcnow()
        if not self.provider_repository.update_fields(provider_id, fields):
            raise ProviderNotFoundError("Provider not found")
        logger.info("Provider %s profile updated", provider_id)

    def _get_provider(self, provider_id: str) -> Provider:
        if not is_valid_object_id(provider_id):
            raise InvalidArgumentError("Invalid provider ID")
        provider = self.provider_repository.get_by_id(provider_id)
        if not provider:
            raise ProviderNotFoundError("Provider not found")
        return provider
