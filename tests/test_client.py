"""Tests for AWS client creation."""

from unittest.mock import patch

from ecs_deploy.aws.client import AWSClients, create_ecs_client
from ecs_deploy.config import ClientConfig, ClusterConfig, load_config


class TestCreateEcsClient:
    """Tests for create_ecs_client function."""

    @patch("ecs_deploy.aws.client.boto3.Session")
    def test_default_session(self, mock_session):
        """Test client creation without a profile."""
        create_ecs_client(ClusterConfig(name="prod", region="us-east-1"))

        mock_session.assert_called_once_with()
        args, kwargs = mock_session.return_value.client.call_args
        assert args == ("ecs",)
        assert kwargs["region_name"] == "us-east-1"

    @patch("ecs_deploy.aws.client.boto3.Session")
    def test_profile_session(self, mock_session):
        """Test client creation with a named profile."""
        create_ecs_client(
            ClusterConfig(name="prod", region="us-east-1", profile="deploy")
        )

        mock_session.assert_called_once_with(profile_name="deploy")

    @patch("ecs_deploy.aws.client.boto3.Session")
    def test_single_attempt_and_timeouts(self, mock_session):
        """Test that the client never retries and uses configured timeouts."""
        create_ecs_client(
            ClusterConfig(name="prod", region="us-east-1"),
            ClientConfig(connect_timeout=3, read_timeout=20),
        )

        boto_config = mock_session.return_value.client.call_args.kwargs["config"]
        assert boto_config.retries == {"total_max_attempts": 1, "mode": "standard"}
        assert boto_config.connect_timeout == 3
        assert boto_config.read_timeout == 20


class TestAWSClients:
    """Tests for AWSClients container."""

    @patch("ecs_deploy.aws.client.boto3.Session")
    def test_attributes(self, mock_session):
        """Test that the container exposes the client and cluster details."""
        clients = AWSClients(load_config(cluster="prod", region="eu-west-1"))

        assert clients.ecs is mock_session.return_value.client.return_value
        assert clients.region == "eu-west-1"
        assert clients.cluster_name == "prod"
