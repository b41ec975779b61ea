"""Deployment request model."""

from dataclasses import dataclass

from ecs_deploy.errors import ValidationError

DEFAULT_TAG = "latest"


@dataclass(frozen=True)
class DeploymentRequest:
    """A single image rollout across one or more services.

    ``apps`` is ordered and may contain repeats; each entry is updated once per
    occurrence. The exemplar defines the task definition and desired count
    shared by the whole cohort and must be one of ``apps``.
    """

    cluster: str
    repository: str
    region: str
    apps: tuple[str, ...]
    tag: str = DEFAULT_TAG
    debug: bool = False
    profile: str | None = None
    exemplar: str | None = None

    @property
    def exemplar_name(self) -> str:
        """Service whose task definition is used as the template."""
        if self.exemplar:
            return self.exemplar
        return self.apps[0]

    @property
    def image(self) -> str:
        """Full image reference to deploy."""
        return f"{self.repository}:{self.tag}"

    def validate(self) -> None:
        """Check the request before anything is sent to ECS.

        Raises:
            ValidationError: If a required value is missing or empty
        """
        missing = []
        if not self.cluster:
            missing.append("cluster")
        if not self.region:
            missing.append("region")
        if not self.apps:
            missing.append("application name")
        if missing:
            raise ValidationError(
                f"Failed deployment of apps {self._apps_label()}: "
                f"missing parameters ({', '.join(missing)})"
            )

        if not self.repository or not self.tag:
            raise ValidationError(
                f"Failed deployment of apps {self._apps_label()}: "
                "no repository or tag specified"
            )

        if any(not app for app in self.apps):
            raise ValidationError("Application names must not be empty")

        if self.exemplar is not None and self.exemplar not in self.apps:
            raise ValidationError(
                f"Exemplar {self.exemplar} is not one of the applications "
                f"being deployed ({self._apps_label()})"
            )

    def _apps_label(self) -> str:
        return ",".join(self.apps)
