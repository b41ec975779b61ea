"""Utility functions for handling ECS resource ARNs."""


def extract_task_definition_name(task_def_arn: str) -> str:
    """Extract task definition name:revision from ARN.

    Args:
        task_def_arn: Full task definition ARN

    Returns:
        Task definition name:revision

    Example:
        >>> extract_task_definition_name("arn:aws:ecs:us-east-1:123:task-definition/my-task:5")
        'my-task:5'
    """
    if "/" in task_def_arn:
        return task_def_arn.split("/")[-1]
    return task_def_arn

