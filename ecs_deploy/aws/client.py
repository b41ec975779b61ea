"""AWS client initialization and configuration."""

import boto3
from botocore.config import Config as BotoConfig

from ecs_deploy.config import ClientConfig, ClusterConfig, Config


def create_ecs_client(
    cluster_config: ClusterConfig, client_config: ClientConfig | None = None
):
    """Create a configured ECS client.

    Deployments never retry, so the client makes a single attempt per call.

    Args:
        cluster_config: Cluster configuration with region and optional profile
        client_config: Timeout settings, defaults when omitted

    Returns:
        Configured boto3 ECS client
    """
    client_config = client_config or ClientConfig()
    boto_config = BotoConfig(
        retries={
            "total_max_attempts": 1,
            "mode": "standard",
        },
        connect_timeout=client_config.connect_timeout,
        read_timeout=client_config.read_timeout,
    )

    session_kwargs = {}
    if cluster_config.profile:
        session_kwargs["profile_name"] = cluster_config.profile

    session = boto3.Session(**session_kwargs)

    return session.client(
        "ecs",
        region_name=cluster_config.region,
        config=boto_config,
    )


class AWSClients:
    """Container for AWS clients."""

    def __init__(self, config: Config):
        """Initialize AWS clients.

        Args:
            config: Application configuration
        """
        self.ecs = create_ecs_client(config.cluster, config.client)
        self.region = config.cluster.region
        self.cluster_name = config.cluster.name
