import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock

project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from services.provider_service.application.domain.service_offering import (
    Availability,
    ServiceOffering,
)
from services.provider_service.application.dto.service_catalog import (
    ServiceUpdateRequest,
)
from services.provider_service.application.exceptions import (
    InvalidArgumentError,
    ServiceNotFoundError,
)
from services.provider_service.application.ports.output.service_repository import (
    ServiceRepository,
)
from services.provider_service.application.services.service_catalog_service_impl import (
    ServiceCatalogServiceImpl,
)

PROVIDER_ID = "64b7f0c2a1b2c3d4e5f60718"
SERVICE_ID = "64b7f0c2a1b2c3d4e5f60a01"


class TestServiceCatalogService(unittest.TestCase):
    def setUp(self):
        self.mock_service_repo = MagicMock(spec=ServiceRepository)
        self.service = ServiceCatalogServiceImpl(service_repository=self.mock_service_repo)

    def test_list_services_requires_provider_id(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            self.service.list_services(None)
        self.assertEqual(str(ctx.exception), "provider_id is required")

        with self.assertRaises(InvalidArgumentError):
            self.service.list_services("bad-id")

    def test_add_service_defaults_to_available(self):
        self.mock_service_repo.save.side_effect = lambda service: service.model_copy(
            update={"id": SERVICE_ID}
        )

        created = self.service.add_service(
            provider_id=PROVIDER_ID, name="Drain Cleaning", price=120.0
        )

        self.assertEqual(created.id, SERVICE_ID)
        self.assertEqual(created.availability, Availability.AVAILABLE)
        self.mock_service_repo.save.assert_called_once()

    def test_add_service_missing_fields(self):
        for kwargs in (
            {"provider_id": None, "name": "Drain Cleaning", "price": 120.0},
            {"provider_id": PROVIDER_ID, "name": "", "price": 120.0},
            {"provider_id": PROVIDER_ID, "name": "Drain Cleaning", "price": None},
        ):
            with self.assertRaises(InvalidArgumentError):
                self.service.add_service(**kwargs)
        self.mock_service_repo.save.assert_not_called()

    def test_update_service_writes_only_supplied_fields(self):
        self.mock_service_repo.update_fields.return_value = True

        self.service.update_service(
            SERVICE_ID,
            ServiceUpdateRequest(price=150.0, availability=Availability.UNAVAILABLE),
        )

        service_id, fields = self.mock_service_repo.update_fields.call_args.args
        self.assertEqual(service_id, SERVICE_ID)
        self.assertEqual(fields["price"], 150.0)
        self.assertEqual(fields["availability"], "unavailable")
        self.assertNotIn("name", fields)
        self.assertNotIn("description", fields)

    def test_update_unknown_service(self):
        self.mock_service_repo.update_fields.return_value = False

        with self.assertRaises(ServiceNotFoundError):
            self.service.update_service(SERVICE_ID, ServiceUpdateRequest(name="New"))

    def test_delete_service(self):
        self.mock_service_repo.delete.return_value = True
        self.service.delete_service(SERVICE_ID)
        self.mock_service_repo.delete.assert_called_once_with(SERVICE_ID)

        self.mock_service_repo.delete.return_value = False
        with self.assertRaises(ServiceNotFoundError):
            self.service.delete_service(SERVICE_ID)

        with self.assertRaises(InvalidArgumentError):
            self.service.delete_service("nope")

    def test_list_services_returns_repository_result(self):
        offering = ServiceOffering(
            id=SERVICE_ID, provider_id=PROVIDER_ID, name="Drain Cleaning", price=120.0
        )
        self.mock_service_repo.list_by_provider.return_value = [offering]

        self.assertEqual(self.service.list_services(PROVIDER_ID), [offering])


if __name__ == "__main__":
    unittest.main()
