"""Rolling image deployments for ECS services sharing a task definition family."""

__version__ = "0.1.0"
