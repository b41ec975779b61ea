"""Image replacement in task definitions.

Only the first container of a task definition is deployed. Any further
containers (sidecars, log routers) are copied through untouched.
"""

import copy
import dataclasses

from ecs_deploy.errors import PreconditionError
from ecs_deploy.models import MutatedDefinition, TaskDefinitionSnapshot


def build_image_ref(repository: str, tag: str) -> str:
    """Join a repository and a tag into an image reference.

    Example:
        >>> build_image_ref("acme/app", "abc123")
        'acme/app:abc123'
    """
    return f"{repository}:{tag}"


def mutate(snapshot: TaskDefinitionSnapshot, image: str) -> MutatedDefinition:
    """Copy a task definition, pointing its first container at ``image``.

    The snapshot passed in is left unmodified.

    Args:
        snapshot: Task definition fetched from ECS
        image: Full image reference to deploy

    Returns:
        The mutated copy along with the image and container it targets

    Raises:
        PreconditionError: If the task definition has no containers
    """
    if not snapshot.container_definitions:
        raise PreconditionError(
            f"Task definition {snapshot.name} has no container definitions"
        )

    containers = copy.deepcopy(snapshot.container_definitions)
    containers[0]["image"] = image

    definition = dataclasses.replace(
        copy.deepcopy(snapshot), container_definitions=containers
    )
    return MutatedDefinition(
        definition=definition,
        image=image,
        container_name=containers[0].get("name"),
        base_arn=snapshot.arn,
    )
