import logging
from typing import Optional

from services.auth_service.application.domain.user import User as DomainUser
from services.auth_service.application.dto.customer import (
    CustomerAuthResult,
    CustomerProfile,
)
from services.auth_service.application.exceptions import (
    InvalidArgumentError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from services.auth_service.application.ports.input.customer_service import (
    CustomerService,
)
from services.auth_service.application.ports.output.user_repository import (
    UserRepository,
)
from shared.models.base_models import Token, UserRole, is_valid_object_id
from shared.security.password_hasher import PasswordHasher
from shared.security.token_provider import TokenProvider

logger = logging.getLogger(__name__)


class CustomerServiceImpl(CustomerService):
    """
    Concrete implementation of the CustomerService input port.
    Orchestrates the business logic for customer registration and login.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_provider: TokenProvider,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_provider = token_provider

    def register_customer(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        email: Optional[str],
        phone: Optional[str],
        password: Optional[str],
    ) -> CustomerAuthResult:
        """
        Handles the business logic for customer registration.
        1. Requires every field.
        2. Checks if a user with the given email already exists.
        3. Hashes the password.
        4. Saves the new user via the repository.
        5. Returns the profile together with an access token.
        """
        if not all([first_name, last_name, email, phone, password]):
            raise InvalidArgumentError("All fields are required")

        email = email.strip().lower()
        if self.user_repository.get_by_email(email):
            raise UserAlreadyExistsError("User already exists with this email")

        new_user = DomainUser(
            name=f"{first_name.strip()} {last_name.strip()}",
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            email=email,
            phone=phone.strip(),
            hashed_password=self.password_hasher.hash(password),
            role=UserRole.USER,
        )
        saved_user = self.user_repository.save(new_user)
        logger.info("Customer %s registered", saved_user.id)

        return CustomerAuthResult(
            user=self._to_profile(saved_user), token=self._issue_token(saved_user)
        )

    def login_customer(
        self, email: Optional[str], password: Optional[str]
    ) -> CustomerAuthResult:
        """
        Handles the business logic for customer login.
        1. Retrieves the user by email.
        2. Verifies the password.
        3. Creates a JWT access token.
        """
        if not email or not password:
            raise InvalidArgumentError("Email and password are required")

        user = self.user_repository.get_by_email(email.strip().lower())
        if not user:
            raise InvalidCredentialsError("Invalid email or password")

        if not self.password_hasher.verify(password, user.hashed_password):
            raise InvalidCredentialsError("Invalid email or password")

        logger.info("Customer %s logged in", user.id)
        return CustomerAuthResult(
            user=self._to_profile(user), token=self._issue_token(user)
        )

    def get_profile(self, user_id: str) -> CustomerProfile:
        user = None
        if is_valid_object_id(user_id):
            user = self.user_repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundError("User not found")
        return self._to_profile(user)

    def _issue_token(self, user: DomainUser) -> Token:
        access_token = self.token_provider.create_access_token(
            data={"sub": str(user.id), "email": user.email, "role": user.role.value}
        )
        return Token(access_token=access_token, token_type="bearer")

    def _to_profile(self, user: DomainUser) -> CustomerProfile:
        return CustomerProfile.model_validate(user, from_attributes=True)
