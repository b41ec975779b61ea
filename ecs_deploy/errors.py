"""Errors raised while preparing and rolling out a deployment."""


class DeployError(Exception):
    """Base class for every failure that aborts a deployment.

    Args:
        message: Human readable description
        service: Service the failure relates to, if any
        step: Rollout step that failed, filled in by the coordinator
    """

    def __init__(
        self, message: str, service: str | None = None, step: str | None = None
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.step = step

    def __str__(self) -> str:
        return self.message


class ValidationError(DeployError):
    """Required input is missing or empty."""


class NotFoundError(DeployError):
    """The named service does not exist on the cluster."""


class IdentityMismatchError(DeployError):
    """The control plane answered with a different service than requested."""


class UpstreamError(DeployError):
    """A call to the ECS API failed.

    The original exception is kept in ``cause`` and chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        service: str | None = None,
        step: str | None = None,
    ):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, service=service, step=step)
        self.cause = cause


class PreconditionError(DeployError):
    """The fetched task definition cannot be mutated."""
