"""Task definition retrieval."""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from ecs_deploy.errors import UpstreamError
from ecs_deploy.models import TaskDefinitionSnapshot

logger = logging.getLogger(__name__)


class TaskDefinitionFetcher:
    """Fetches full task definition documents."""

    def __init__(self, clients):
        self.clients = clients

    def fetch(self, task_definition_ref: str) -> TaskDefinitionSnapshot:
        """Fetch the task definition a service currently runs.

        The document is not validated here; an empty container list is
        reported when the image is swapped.

        Args:
            task_definition_ref: Task definition ARN or family:revision

        Returns:
            Snapshot of the task definition

        Raises:
            UpstreamError: If the DescribeTaskDefinition call fails
        """
        logger.debug(f"Describing task definition {task_definition_ref}")
        try:
            response = self.clients.ecs.describe_task_definition(
                taskDefinition=task_definition_ref
            )
        except (ClientError, BotoCoreError) as e:
            raise UpstreamError(
                f"Failed to describe task definition {task_definition_ref}", cause=e
            ) from e

        return TaskDefinitionSnapshot.from_api(response["taskDefinition"])
