"""End to end rollout of a new image across a cohort of services."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ecs_deploy.aws.fetcher import TaskDefinitionFetcher
from ecs_deploy.aws.locator import ServiceLocator
from ecs_deploy.aws.registrar import TaskDefinitionRegistrar
from ecs_deploy.aws.updater import ServiceUpdater
from ecs_deploy.console_link import (
    build_cluster_url,
    build_service_url,
    build_task_definition_url,
)
from ecs_deploy.errors import DeployError
from ecs_deploy.models import (
    DeploymentRequest,
    RegisteredRevision,
    ServiceDescriptor,
    TaskDefinitionSnapshot,
)
from ecs_deploy.mutator import build_image_ref, mutate

logger = logging.getLogger(__name__)

# Type alias for progress callback
ProgressCallback = Callable[[str], None]


class RolloutState(Enum):
    """Rollout states, in the order a successful run passes through them."""

    VALIDATING = "validating"
    LOCATING_EXEMPLAR = "locating exemplar"
    FETCHING = "fetching task definition"
    MUTATING = "mutating task definition"
    REGISTERING = "registering task definition"
    UPDATING_SERVICES = "updating services"
    DONE = "done"
    FAILED = "failed"


@dataclass
class RolloutResult:
    """Outcome of a rollout.

    A failed rollout is not undone: ``updated_services`` lists, in order,
    the services already running the new revision when the run stopped.
    """

    state: RolloutState
    updated_services: list[str] = field(default_factory=list)
    exemplar: ServiceDescriptor | None = None
    revision: RegisteredRevision | None = None
    error: DeployError | None = None
    failed_state: RolloutState | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is RolloutState.DONE

    def pending_services(self, request: DeploymentRequest) -> list[str]:
        """Services of ``request`` that were not updated."""
        return list(request.apps[len(self.updated_services) :])


class RolloutCoordinator:
    """Drives locate, fetch, mutate, register and update in strict sequence.

    Errors raised by the steps are captured in the returned RolloutResult
    rather than propagated, leaving exit handling to the caller.
    """

    def __init__(
        self,
        locator: ServiceLocator,
        fetcher: TaskDefinitionFetcher,
        registrar: TaskDefinitionRegistrar,
        updater: ServiceUpdater,
        progress_callback: ProgressCallback | None = None,
    ):
        """Initialize the coordinator.

        Args:
            locator: Resolves service names to descriptors
            fetcher: Fetches task definitions
            registrar: Registers new task definition revisions
            updater: Points services at a revision
            progress_callback: Optional callback for progress updates
        """
        self.locator = locator
        self.fetcher = fetcher
        self.registrar = registrar
        self.updater = updater
        self._progress_callback = progress_callback
        self.state = RolloutState.VALIDATING
        self.current_index: int | None = None

    @classmethod
    def from_clients(
        cls, clients, progress_callback: ProgressCallback | None = None
    ) -> "RolloutCoordinator":
        """Create a coordinator whose steps all share one set of AWS clients."""
        return cls(
            locator=ServiceLocator(clients),
            fetcher=TaskDefinitionFetcher(clients),
            registrar=TaskDefinitionRegistrar(clients),
            updater=ServiceUpdater(clients),
            progress_callback=progress_callback,
        )

    def _report_progress(self, message: str) -> None:
        """Report progress if callback is set."""
        logger.info(message)
        if self._progress_callback:
            self._progress_callback(message)

    def _report_document(self, title: str, document: dict[str, Any]) -> None:
        formatted = json.dumps(document, indent=2, sort_keys=True, default=str)
        self._report_progress(f"{title}: \n{formatted}")

    def _transition(self, state: RolloutState) -> None:
        logger.debug(f"Rollout state {self.state.value} -> {state.value}")
        self.state = state

    def run(self, request: DeploymentRequest) -> RolloutResult:
        """Roll the request's image out to every application in order.

        Args:
            request: What to deploy and where

        Returns:
            Result in state DONE, or FAILED with the error and the state it
            occurred in
        """
        self.state = RolloutState.VALIDATING
        self.current_index = None
        result = RolloutResult(state=self.state)

        try:
            self._run(request, result)
        except DeployError as e:
            if e.step is None:
                e.step = self.state.value
            result.error = e
            result.failed_state = self.state
            logger.error(f"Rollout failed while {self.state.value}: {e}")
            self._transition(RolloutState.FAILED)

        result.state = self.state
        return result

    def _run(self, request: DeploymentRequest, result: RolloutResult) -> None:
        request.validate()
        self._report_progress(
            f"Request to deploy sha: {request.tag} at {request.region}"
        )

        self._transition(RolloutState.LOCATING_EXEMPLAR)
        exemplar_name = request.exemplar_name
        self._report_progress(
            f"Describing services for cluster {request.cluster} "
            f"and service {exemplar_name}"
        )
        exemplar = self.locator.locate(request.cluster, exemplar_name)
        result.exemplar = exemplar
        self._report_progress(
            f"Found existing ARN {exemplar.cluster_arn} for service {exemplar.name}"
        )

        self._transition(RolloutState.FETCHING)
        snapshot = self.fetcher.fetch(exemplar.task_definition)
        self._report_progress(f"Current task definition: {snapshot.name}")
        if request.debug:
            self._report_document("Current task description", _describe(snapshot))

        self._transition(RolloutState.MUTATING)
        image = build_image_ref(request.repository, request.tag)
        mutated = mutate(snapshot, image)
        if request.debug:
            self._report_document(
                "Future task description", mutated.definition.to_register_kwargs()
            )

        self._transition(RolloutState.REGISTERING)
        revision = self.registrar.register(mutated)
        result.revision = revision
        self._report_progress(f"Registered new task for {request.tag}: {revision.arn}")
        self._report_progress(
            build_task_definition_url(
                revision.family, revision.revision, request.region
            )
        )

        self._transition(RolloutState.UPDATING_SERVICES)
        for index, app in enumerate(request.apps):
            self.current_index = index
            self.updater.update(
                request.cluster, app, exemplar.desired_count, revision.arn
            )
            result.updated_services.append(app)
            self._report_progress(
                f"Updated {app} service to use new ARN: {revision.arn}"
            )
            self._report_progress(
                build_service_url(request.cluster, app, request.region)
            )

        self.current_index = None
        self._transition(RolloutState.DONE)
        self._report_progress(
            f"Deployed {image} to {len(request.apps)} service(s): "
            f"{build_cluster_url(request.cluster, request.region)}"
        )


def _describe(snapshot: TaskDefinitionSnapshot) -> dict[str, Any]:
    document = snapshot.to_register_kwargs()
    if snapshot.arn:
        document["taskDefinitionArn"] = snapshot.arn
    if snapshot.revision is not None:
        document["revision"] = snapshot.revision
    return document
