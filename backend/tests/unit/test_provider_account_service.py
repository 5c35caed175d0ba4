import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock

project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from services.provider_service.application.domain.provider import (
    ExperienceUnit,
    Provider,
    ServiceType,
)
from services.provider_service.application.dto.provider_account import (
    ProviderProfileUpdateRequest,
)
from services.provider_service.application.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidArgumentError,
    InvalidCredentialsError,
    ProviderNotFoundError,
)
from services.provider_service.application.ports.output.provider_repository import (
    ProviderRepository,
)
from services.provider_service.application.services.provider_account_service_impl import (
    ProviderAccountServiceImpl,
)
from shared.security.password_hasher import PasswordHasher
from shared.security.token_provider import TokenProvider

PROVIDER_ID = "64b7f0c2a1b2c3d4e5f60718"


class TestProviderAccountService(unittest.TestCase):
    def setUp(self):
        # Create mocks for the output ports
        self.mock_provider_repo = MagicMock(spec=ProviderRepository)
        self.mock_password_hasher = MagicMock(spec=PasswordHasher)
        self.mock_token_provider = MagicMock(spec=TokenProvider)

        self.service = ProviderAccountServiceImpl(
            provider_repository=self.mock_provider_repo,
            password_hasher=self.mock_password_hasher,
            token_provider=self.mock_token_provider,
        )

        self.provider = Provider(
            id=PROVIDER_ID,
            name="Mike Johnson",
            email="mike@example.com",
            phone="555-0101",
            hashed_password="hashed_password",
            service_type=ServiceType.PLUMBING,
            experience=5,
        )

    def test_register_provider_success(self):
        # Arrange
        self.mock_provider_repo.get_by_email.return_value = None
        self.mock_password_hasher.hash.return_value = "hashed_password"
        self.mock_provider_repo.save.return_value = self.provider

        # Act
        profile = self.service.register_provider(
            name="Mike Johnson",
            email="  Mike@Example.com ",
            phone="555-0101",
            service_type=ServiceType.PLUMBING,
            experience=5,
            experience_unit=ExperienceUnit.YEARS,
            password="plain_password",
        )

        # Assert
        self.mock_provider_repo.get_by_email.assert_called_once_with("mike@example.com")
        self.mock_password_hasher.hash.assert_called_once_with("plain_password")
        saved = self.mock_provider_repo.save.call_args.args[0]
        self.assertEqual(saved.email, "mike@example.com")
        self.assertEqual(saved.hashed_password, "hashed_password")
        self.assertEqual(
            (saved.total_jobs, saved.pending_jobs, saved.completed_jobs), (0, 0, 0)
        )
        self.assertEqual(saved.total_earnings, 0.0)
        self.assertEqual(saved.rating, 0.0)
        self.assertIsNone(saved.license_image)
        self.assertEqual(profile.id, PROVIDER_ID)
        self.assertFalse(hasattr(profile, "hashed_password"))

    def test_register_provider_duplicate_email(self):
        self.mock_provider_repo.get_by_email.return_value = self.provider

        with self.assertRaises(EmailAlreadyRegisteredError):
            self.service.register_provider(
                name="Mike Johnson",
                email="mike@example.com",
                phone="555-0101",
                service_type=ServiceType.PLUMBING,
                experience=5,
                password="plain_password",
            )
        self.mock_password_hasher.hash.assert_not_called()
        self.mock_provider_repo.save.assert_not_called()

    def test_register_provider_blank_field(self):
        with self.assertRaises(InvalidArgumentError):
            self.service.register_provider(
                name="  ",
                email="mike@example.com",
                phone="555-0101",
                service_type=ServiceType.PLUMBING,
                experience=5,
                password="plain_password",
            )

    def test_login_success(self):
        # Arrange
        self.mock_provider_repo.get_by_email.return_value = self.provider
        self.mock_password_hasher.verify.return_value = True
        self.mock_token_provider.create_access_token.return_value = "test_token"

        # Act
        result = self.service.login_provider("mike@example.com", "correct_password")

        # Assert
        self.mock_password_hasher.verify.assert_called_once_with(
            "correct_password", "hashed_password"
        )
        self.mock_token_provider.create_access_token.assert_called_once_with(
            data={"sub": PROVIDER_ID, "email": "mike@example.com", "role": "provider"}
        )
        self.assertEqual(result.token.access_token, "test_token")
        self.assertEqual(result.provider.service_type, ServiceType.PLUMBING)

    def test_login_missing_fields(self):
        with self.assertRaises(InvalidArgumentError):
            self.service.login_provider("mike@example.com", None)
        self.mock_provider_repo.get_by_email.assert_not_called()

    def test_login_unknown_email(self):
        self.mock_provider_repo.get_by_email.return_value = None

        with self.assertRaises(InvalidCredentialsError):
            self.service.login_provider("nobody@example.com", "password")
        self.mock_password_hasher.verify.assert_not_called()

    def test_login_wrong_password(self):
        self.mock_provider_repo.get_by_email.return_value = self.provider
        self.mock_password_hasher.verify.return_value = False

        with self.assertRaises(InvalidCredentialsError):
            self.service.login_provider("mike@example.com", "wrong_password")
        self.mock_token_provider.create_access_token.assert_not_called()

    def test_get_profile(self):
        self.mock_provider_repo.get_by_id.return_value = self.provider

        profile = self.service.get_profile(PROVIDER_ID)

        self.assertEqual(profile.name, "Mike Johnson")
        self.assertNotIn("hashed_password", profile.model_dump())

    def test_get_profile_errors(self):
        with self.assertRaises(InvalidArgumentError):
            self.service.get_profile("xyz")

        self.mock_provider_repo.get_by_id.return_value = None
        with self.assertRaises(ProviderNotFoundError):
            self.service.get_profile(PROVIDER_ID)

    def test_update_profile_writes_supplied_fields(self):
        self.mock_provider_repo.email_in_use.return_value = False
        self.mock_provider_repo.update_fields.return_value = True

        self.service.update_profile(
            PROVIDER_ID,
            ProviderProfileUpdateRequest(
                email="New@Example.com", service_type=ServiceType.CLEANING
            ),
        )

        self.mock_provider_repo.email_in_use.assert_called_once_with(
            "new@example.com", exclude_provider_id=PROVIDER_ID
        )
        provider_id, fields = self.mock_provider_repo.update_fields.call_args.args
        self.assertEqual(provider_id, PROVIDER_ID)
        self.assertEqual(fields["email"], "new@example.com")
        self.assertEqual(fields["service_type"], "cleaning")
        self.assertIn("updated_at", fields)
        self.assertNotIn("name", fields)

    def test_update_profile_email_taken(self):
        self.mock_provider_repo.email_in_use.return_value = True

        with self.assertRaises(EmailAlreadyRegisteredError):
            self.service.update_profile(
                PROVIDER_ID, ProviderProfileUpdateRequest(email="taken@example.com")
            )
        self.mock_provider_repo.update_fields.assert_not_called()

    def test_update_profile_without_fields(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            self.service.update_profile(PROVIDER_ID, ProviderProfileUpdateRequest())
        self.assertEqual(str(ctx.exception), "No fields to update")

    def test_update_profile_unknown_provider(self):
        self.mock_provider_repo.update_fields.return_value = False

        with self.assertRaises(ProviderNotFoundError):
            self.service.update_profile(
                PROVIDER_ID, ProviderProfileUpdateRequest(phone="555-0199")
            )


if __name__ == "__main__":
    unittest.main()
