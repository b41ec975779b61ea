"""AWS Console URL generation."""


def build_cluster_url(cluster_name: str, region: str) -> str:
    """Build AWS Console URL for a cluster.

    Args:
        cluster_name: ECS cluster name
        region: AWS region

    Returns:
        AWS Console URL for the cluster
    """
    return (
        f"https://console.aws.amazon.com/ecs/v2/clusters/{cluster_name}?region={region}"
    )


def build_service_url(cluster_name: str, service_name: str, region: str) -> str:
    """Build AWS Console URL for a service.

    Args:
        cluster_name: ECS cluster name
        service_name: ECS service name
        region: AWS region

    Returns:
        AWS Console URL for the service
    """
    return f"https://console.aws.amazon.com/ecs/v2/clusters/{cluster_name}/services/{service_name}?region={region}"


def build_task_definition_url(family: str, revision: int, region: str) -> str:
    """Build AWS Console URL for a task definition revision.

    Args:
        family: Task definition family
        revision: Revision number
        region: AWS region

    Returns:
        AWS Console URL for the revision
    """
    return f"https://console.aws.amazon.com/ecs/v2/task-definitions/{family}/{revision}?region={region}"
