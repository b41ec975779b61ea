"""ECS service descriptor."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ServiceDescriptor:
    """The parts of an ECS service a deployment relies on."""

    name: str
    cluster_arn: str
    task_definition: str
    desired_count: int
    arn: str = ""
    status: str = "ACTIVE"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ServiceDescriptor":
        """Build a descriptor from a DescribeServices entry."""
        return cls(
            name=data["serviceName"],
            cluster_arn=data.get("clusterArn", ""),
            task_definition=data.get("taskDefinition", ""),
            desired_count=data.get("desiredCount", 0),
            arn=data.get("serviceArn", ""),
            status=data.get("status", "ACTIVE"),
        )

    @property
    def is_active(self) -> bool:
        return self.status == "ACTIVE"
