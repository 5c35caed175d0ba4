import logging
import secrets
from typing import Optional

from services.auth_service.application.domain.user import User
from services.auth_service.application.dto.admin import AdminIdentity, AdminLoginResult
from services.auth_service.application.exceptions import (
    AccessDeniedError,
    InvalidArgumentError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from services.auth_service.application.ports.input.admin_service import AdminService
from services.auth_service.application.ports.output.user_repository import (
    UserRepository,
)
from shared.models.base_models import Token, UserRole, is_valid_object_id
from shared.security.password_hasher import PasswordHasher
from shared.security.token_provider import TokenProvider

logger = logging.getLogger(__name__)


class AdminServiceImpl(AdminService):
    """
    Concrete implementation of the AdminService input port.
    Admin accounts live in the ``users`` collection with role ``admin``.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_provider: TokenProvider,
        admin_secret: Optional[str],
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_provider = token_provider
        self.admin_secret = admin_secret

    def register_admin(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        admin_secret: Optional[str],
    ) -> AdminIdentity:
        """
        Handles admin registration.
        1. Requires every field.
        2. Checks the admin secret against the configured one.
        3. Rejects an email that is already registered.
        4. Saves the account with the admin role.
        """
        if not name or not email or not password or not admin_secret:
            raise InvalidArgumentError(
                "All fields required (name, email, password, adminSecret)."
            )

        if not self.admin_secret or not secrets.compare_digest(
            admin_secret, self.admin_secret
        ):
            logger.warning("Admin registration with invalid secret rejected")
            raise AccessDeniedError("Invalid admin secret, registration denied.")

        email = email.strip().lower()
        if self.user_repository.get_by_email(email):
            raise UserAlreadyExistsError("Email already registered.")

        saved = self.user_repository.save(
            User(
                name=name.strip(),
                email=email,
                hashed_password=self.password_hasher.hash(password),
                role=UserRole.ADMIN,
            )
        )
        logger.info("Admin %s registered", saved.id)
        return AdminIdentity(id=saved.id, name=saved.name, email=saved.email)

    def login_admin(
        self, email: Optional[str], password: Optional[str]
    ) -> AdminLoginResult:
        """
        Handles admin login.
        1. Requires email and password.
        2. Looks the account up; unknown emails are invalid credentials.
        3. Refuses accounts without the admin role before checking the password.
        4. Verifies the password and issues a token carrying the role.
        """
        if not email or not password:
            raise InvalidArgumentError("Email and password required.")

        user = self.user_repository.get_by_email(email.strip().lower())
        if not user:
            raise InvalidCredentialsError("Invalid credentials.")

        if user.role != UserRole.ADMIN:
            logger.warning("Non-admin account %s refused on admin login", user.id)
            raise AccessDeniedError("Access denied. Not an admin.")

        if not self.password_hasher.verify(password, user.hashed_password):
            raise InvalidCredentialsError("Invalid credentials.")

        access_token = self.token_provider.create_access_token(
            data={"sub": user.id, "email": user.email, "role": UserRole.ADMIN.value}
        )
        logger.info("Admin %s logged in", user.id)

        return AdminLoginResult(
            admin=AdminIdentity(id=user.id, name=user.name, email=user.email),
            token=Token(access_token=access_token, token_type="bearer"),
        )

    def get_admin(self, admin_id: str) -> AdminIdentity:
        user = None
        if is_valid_object_id(admin_id):
            user = self.user_repository.get_by_id(admin_id)
        if not user or user.role != UserRole.ADMIN:
            raise UserNotFoundError("Admin not found.")
        return AdminIdentity(id=user.id, name=user.name, email=user.email)
