"""Resolve a named ECS service to its descriptor."""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from ecs_deploy.errors import IdentityMismatchError, NotFoundError, UpstreamError
from ecs_deploy.models import ServiceDescriptor

logger = logging.getLogger(__name__)


class ServiceLocator:
    """Looks up single services on a cluster."""

    def __init__(self, clients):
        self.clients = clients

    def locate(self, cluster: str, service_name: str) -> ServiceDescriptor:
        """Describe one service and check that ECS answered for that service.

        Args:
            cluster: Cluster name or ARN
            service_name: Service name to look up

        Returns:
            Descriptor of the service

        Raises:
            NotFoundError: If the cluster has no such service
            IdentityMismatchError: If ECS returned a differently named service
            UpstreamError: If the DescribeServices call fails
        """
        logger.debug(f"Describing service {service_name} on cluster {cluster}")
        try:
            response = self.clients.ecs.describe_services(
                cluster=cluster, services=[service_name]
            )
        except (ClientError, BotoCoreError) as e:
            raise UpstreamError(
                f"Failed to describe {service_name}", cause=e, service=service_name
            ) from e

        services = response.get("services", [])
        if not services:
            reasons = [
                failure.get("reason", "")
                for failure in response.get("failures", [])
                if failure.get("reason")
            ]
            message = f"No service {service_name} found on cluster {cluster}"
            if reasons:
                message += f" ({', '.join(reasons)})"
            raise NotFoundError(message, service=service_name)

        service = ServiceDescriptor.from_api(services[0])
        if service.name != service_name:
            raise IdentityMismatchError(
                f"Found the wrong service when looking for {service_name} "
                f"found {service.name}",
                service=service_name,
            )

        if not service.is_active:
            logger.warning(f"Service {service.name} has status {service.status}")

        return service
