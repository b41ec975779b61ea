"""Task definition registration."""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from ecs_deploy.errors import UpstreamError
from ecs_deploy.models import MutatedDefinition, RegisteredRevision

logger = logging.getLogger(__name__)


class TaskDefinitionRegistrar:
    """Registers mutated task definitions as new revisions.

    Registration only ever adds a revision to the family; the revision the
    mutation started from stays registered.
    """

    def __init__(self, clients):
        self.clients = clients

    def register(self, mutated: MutatedDefinition) -> RegisteredRevision:
        """Register a new revision.

        Args:
            mutated: Definition produced by the image mutator

        Returns:
            The newly created revision

        Raises:
            UpstreamError: If the RegisterTaskDefinition call fails
        """
        logger.debug(f"Registering new revision of {mutated.family}")
        try:
            response = self.clients.ecs.register_task_definition(
                **mutated.definition.to_register_kwargs()
            )
        except (ClientError, BotoCoreError) as e:
            raise UpstreamError(
                f"Failed to register {mutated.family} with image {mutated.image}",
                cause=e,
            ) from e

        revision = RegisteredRevision.from_api(response["taskDefinition"])
        logger.info(f"Registered {revision.name}")
        return revision
