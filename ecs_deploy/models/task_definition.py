"""Task definition models."""

from dataclasses import dataclass, field
from typing import Any

from ecs_deploy.utils.ids import extract_task_definition_name

# Snapshot attribute -> RegisterTaskDefinition / DescribeTaskDefinition key
REGISTER_FIELDS = {
    "family": "family",
    "container_definitions": "containerDefinitions",
    "volumes": "volumes",
    "network_mode": "networkMode",
    "task_role_arn": "taskRoleArn",
    "cpu": "cpu",
    "memory": "memory",
    "requires_compatibilities": "requiresCompatibilities",
    "execution_role_arn": "executionRoleArn",
    "placement_constraints": "placementConstraints",
    "runtime_platform": "runtimePlatform",
    "ephemeral_storage": "ephemeralStorage",
    "pid_mode": "pidMode",
    "ipc_mode": "ipcMode",
    "proxy_configuration": "proxyConfiguration",
}


@dataclass(frozen=True)
class TaskDefinitionSnapshot:
    """A fetched task definition, limited to what can be registered again.

    ``arn`` and ``revision`` identify the fetched document and are never
    submitted when registering.
    """

    family: str
    container_definitions: list[dict[str, Any]]
    volumes: list[dict[str, Any]] = field(default_factory=list)
    network_mode: str | None = None
    task_role_arn: str | None = None
    cpu: str | None = None
    memory: str | None = None
    requires_compatibilities: list[str] = field(default_factory=list)
    execution_role_arn: str | None = None
    placement_constraints: list[dict[str, Any]] = field(default_factory=list)
    runtime_platform: dict[str, Any] | None = None
    ephemeral_storage: dict[str, Any] | None = None
    pid_mode: str | None = None
    ipc_mode: str | None = None
    proxy_configuration: dict[str, Any] | None = None
    arn: str | None = None
    revision: int | None = None

    @classmethod
    def from_api(cls, document: dict[str, Any]) -> "TaskDefinitionSnapshot":
        """Build a snapshot from a DescribeTaskDefinition ``taskDefinition``."""
        kwargs = {
            attr: document[key]
            for attr, key in REGISTER_FIELDS.items()
            if key in document
        }
        kwargs.setdefault("family", "")
        kwargs.setdefault("container_definitions", [])
        return cls(
            arn=document.get("taskDefinitionArn"),
            revision=document.get("revision"),
            **kwargs,
        )

    @property
    def name(self) -> str:
        """family:revision, or the family alone when the revision is unknown."""
        if self.arn:
            return extract_task_definition_name(self.arn)
        if self.revision is None:
            return self.family
        return f"{self.family}:{self.revision}"

    def to_register_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``ecs.register_task_definition``.

        Unset optional fields are left out so ECS applies its own defaults
        exactly as it did for the original revision.
        """
        kwargs = {}
        for attr, key in REGISTER_FIELDS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            kwargs[key] = value
        return kwargs


@dataclass(frozen=True)
class MutatedDefinition:
    """A snapshot with the deploy target container pointed at a new image."""

    definition: TaskDefinitionSnapshot
    image: str
    container_name: str | None = None
    base_arn: str | None = None

    @property
    def family(self) -> str:
        return self.definition.family


@dataclass(frozen=True)
class RegisteredRevision:
    """A task definition revision created by this deployment."""

    family: str
    revision: int
    arn: str

    @classmethod
    def from_api(cls, document: dict[str, Any]) -> "RegisteredRevision":
        """Build from a RegisterTaskDefinition ``taskDefinition``."""
        return cls(
            family=document["family"],
            revision=document["revision"],
            arn=document["taskDefinitionArn"],
        )

    @property
    def name(self) -> str:
        return f"{self.family}:{self.revision}"
