"""Tests for ECS service lookup."""

import pytest
from unittest.mock import MagicMock

from botocore.exceptions import ClientError, EndpointConnectionError

from ecs_deploy.aws.locator import ServiceLocator
from ecs_deploy.errors import IdentityMismatchError, NotFoundError, UpstreamError


def service_data(name: str = "web", **overrides) -> dict:
    """Create a DescribeServices service entry."""
    data = {
        "serviceName": name,
        "serviceArn": f"arn:aws:ecs:us-east-1:123:service/prod/{name}",
        "clusterArn": "arn:aws:ecs:us-east-1:123:cluster/prod",
        "taskDefinition": "arn:aws:ecs:us-east-1:123:task-definition/app-family:7",
        "desiredCount": 3,
        "status": "ACTIVE",
    }
    data.update(overrides)
    return data


class TestServiceLocator:
    """Tests for ServiceLocator class."""

    @pytest.fixture
    def mock_clients(self):
        """Create mock AWS clients."""
        clients = MagicMock()
        clients.region = "us-east-1"
        clients.ecs = MagicMock()
        return clients

    @pytest.fixture
    def locator(self, mock_clients):
        """Create a ServiceLocator with mock clients."""
        return ServiceLocator(mock_clients)

    def test_locate_success(self, locator, mock_clients):
        """Test locating an existing service."""
        mock_clients.ecs.describe_services.return_value = {
            "services": [service_data("web")],
            "failures": [],
        }

        service = locator.locate("prod", "web")

        mock_clients.ecs.describe_services.assert_called_once_with(
            cluster="prod", services=["web"]
        )
        assert service.name == "web"
        assert service.desired_count == 3
        assert service.task_definition.endswith("app-family:7")

    def test_locate_not_found(self, locator, mock_clients):
        """Test that a missing service raises NotFoundError."""
        mock_clients.ecs.describe_services.return_value = {
            "services": [],
            "failures": [
                {
                    "arn": "arn:aws:ecs:us-east-1:123:service/prod/web",
                    "reason": "MISSING",
                }
            ],
        }

        with pytest.raises(NotFoundError) as exc_info:
            locator.locate("prod", "web")

        assert "No service web found on cluster prod" in str(exc_info.value)
        assert "MISSING" in str(exc_info.value)
        assert exc_info.value.service == "web"

    def test_locate_not_found_without_failures(self, locator, mock_clients):
        """Test NotFoundError when the response carries no failure details."""
        mock_clients.ecs.describe_services.return_value = {"services": []}

        with pytest.raises(NotFoundError):
            locator.locate("prod", "web")

    def test_locate_identity_mismatch(self, locator, mock_clients):
        """Test that a differently named answer is rejected."""
        mock_clients.ecs.describe_services.return_value = {
            "services": [service_data("web-canary")]
        }

        with pytest.raises(IdentityMismatchError) as exc_info:
            locator.locate("prod", "web")

        assert "looking for web found web-canary" in str(exc_info.value)

    def test_locate_client_error(self, locator, mock_clients):
        """Test that API errors are wrapped with their cause."""
        error = ClientError(
            {"Error": {"Code": "ClusterNotFoundException", "Message": "Cluster not found."}},
            "DescribeServices",
        )
        mock_clients.ecs.describe_services.side_effect = error

        with pytest.raises(UpstreamError) as exc_info:
            locator.locate("prod", "web")

        assert exc_info.value.cause is error
        assert exc_info.value.__cause__ is error
        assert "Failed to describe web" in str(exc_info.value)

    def test_locate_connection_error(self, locator, mock_clients):
        """Test that transport errors are wrapped."""
        mock_clients.ecs.describe_services.side_effect = EndpointConnectionError(
            endpoint_url="https://ecs.us-east-1.amazonaws.com"
        )

        with pytest.raises(UpstreamError):
            locator.locate("prod", "web")

    def test_locate_inactive_service_returned(self, locator, mock_clients):
        """Test that an inactive service is still returned."""
        mock_clients.ecs.describe_services.return_value = {
            "services": [service_data("web", status="DRAINING")]
        }

        service = locator.locate("prod", "web")

        assert service.status == "DRAINING"
