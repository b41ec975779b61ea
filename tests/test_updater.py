"""Tests for service updates."""

import pytest
from unittest.mock import MagicMock

from botocore.exceptions import ClientError

from ecs_deploy.aws.updater import ServiceUpdater
from ecs_deploy.errors import UpstreamError

REVISION_ARN = "arn:aws:ecs:us-east-1:123:task-definition/app-family:8"


class TestServiceUpdater:
    """Tests for ServiceUpdater class."""

    @pytest.fixture
    def mock_clients(self):
        """Create mock AWS clients."""
        clients = MagicMock()
        clients.ecs = MagicMock()
        return clients

    def test_update(self, mock_clients):
        """Test updating a service."""
        ServiceUpdater(mock_clients).update("prod", "worker", 3, REVISION_ARN)

        mock_clients.ecs.update_service.assert_called_once_with(
            cluster="prod",
            service="worker",
            desiredCount=3,
            taskDefinition=REVISION_ARN,
        )

    def test_update_error(self, mock_clients):
        """Test that API errors are wrapped and name the service."""
        error = ClientError(
            {"Error": {"Code": "ServiceNotActiveException", "Message": "Service was not ACTIVE."}},
            "UpdateService",
        )
        mock_clients.ecs.update_service.side_effect = error

        with pytest.raises(UpstreamError) as exc_info:
            ServiceUpdater(mock_clients).update("prod", "worker", 3, REVISION_ARN)

        assert exc_info.value.service == "worker"
        assert exc_info.value.cause is error
        assert "worker" in str(exc_info.value)
        assert "ServiceNotActiveException" in str(exc_info.value)
