"""Service updates."""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from ecs_deploy.errors import UpstreamError

logger = logging.getLogger(__name__)


class ServiceUpdater:
    """Points services at a task definition revision."""

    def __init__(self, clients):
        self.clients = clients

    def update(
        self, cluster: str, service_name: str, desired_count: int, revision_arn: str
    ) -> None:
        """Update one service.

        Raises:
            UpstreamError: If the UpdateService call fails
        """
        logger.debug(
            f"Updating {service_name} on {cluster} to {revision_arn} "
            f"with desired count {desired_count}"
        )
        try:
            self.clients.ecs.update_service(
                cluster=cluster,
                service=service_name,
                desiredCount=desired_count,
                taskDefinition=revision_arn,
            )
        except (ClientError, BotoCoreError) as e:
            raise UpstreamError(
                f"Failed to update {service_name} on {cluster} to {revision_arn}",
                cause=e,
                service=service_name,
            ) from e
