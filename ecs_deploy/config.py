"""Configuration for ecs-deploy.

All settings come from command line flags; no configuration file is read.
"""

from dataclasses import dataclass, field

from ecs_deploy.errors import ValidationError

DEFAULT_CONNECT_TIMEOUT = 10
DEFAULT_READ_TIMEOUT = 60
MIN_TIMEOUT = 1


@dataclass
class ClusterConfig:
    """Cluster configuration settings."""

    name: str
    region: str
    profile: str | None = None


@dataclass
class ClientConfig:
    """ECS client settings."""

    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
    read_timeout: int = DEFAULT_READ_TIMEOUT


@dataclass
class Config:
    """Application configuration."""

    cluster: ClusterConfig
    client: ClientConfig = field(default_factory=ClientConfig)


def load_config(
    cluster: str,
    region: str,
    profile: str | None = None,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
) -> Config:
    """Build and validate configuration from command line values.

    Args:
        cluster: ECS cluster name
        region: AWS region
        profile: Optional AWS profile name
        connect_timeout: Connection timeout for ECS API calls, in seconds
        read_timeout: Read timeout for ECS API calls, in seconds

    Returns:
        Validated Config object

    Raises:
        ValidationError: If a value is missing or out of range
    """
    if not cluster:
        raise ValidationError("Cluster name is required")
    if not region:
        raise ValidationError("Region is required")

    if connect_timeout < MIN_TIMEOUT:
        raise ValidationError(
            f"Connect timeout must be at least {MIN_TIMEOUT} second"
        )
    if read_timeout < MIN_TIMEOUT:
        raise ValidationError(f"Read timeout must be at least {MIN_TIMEOUT} second")

    return Config(
        cluster=ClusterConfig(name=cluster, region=region, profile=profile or None),
        client=ClientConfig(
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
        ),
    )
