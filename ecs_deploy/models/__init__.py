"""Data models for ecs-deploy."""

from ecs_deploy.models.request import DEFAULT_TAG, DeploymentRequest
from ecs_deploy.models.service import ServiceDescriptor
from ecs_deploy.models.task_definition import (
    MutatedDefinition,
    RegisteredRevision,
    TaskDefinitionSnapshot,
)

__all__ = [
    "DEFAULT_TAG",
    "DeploymentRequest",
    "ServiceDescriptor",
    "TaskDefinitionSnapshot",
    "MutatedDefinition",
    "RegisteredRevision",
]
