"""Main entry point for ecs-deploy."""

import argparse
import logging
import sys

from ecs_deploy.config import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    load_config,
)
from ecs_deploy.errors import ValidationError
from ecs_deploy.models import DEFAULT_TAG, DeploymentRequest

# Exit code for every kind of failed deployment
EXIT_FAILURE = 2


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Set up logging configuration.

    Debug logging includes botocore's request and response logging.

    Args:
        verbose: If True, enable info logging
        debug: If True, enable debug logging
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="ecs-deploy - Roll a new image out to ECS services sharing a task definition",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ecs-deploy -c prod -r us-east-1 -i acme/app -s abc123 -a web -a worker
  ecs-deploy -c prod -r us-east-1 -i acme/app -a web -a worker -e worker

The first application (or the one given with --exemplar) provides the task
definition and desired count used for every application.
        """,
    )

    parser.add_argument(
        "-c", "--cluster", default="", help="Cluster name to deploy to"
    )
    parser.add_argument(
        "-i", "--image", default="", help="Docker repository to pull from"
    )
    parser.add_argument(
        "-s",
        "--tag",
        default=DEFAULT_TAG,
        help="Tag, usually short git SHA to deploy (default: latest)",
    )
    parser.add_argument("-r", "--region", default="", help="AWS region")
    parser.add_argument(
        "-a",
        "--app",
        dest="apps",
        action="append",
        default=None,
        help="Application name (can be specified multiple times)",
    )
    parser.add_argument(
        "-e",
        "--exemplar",
        default=None,
        help="Application whose task definition is used (default: first --app)",
    )
    parser.add_argument("-p", "--profile", default=None, help="AWS profile name")
    parser.add_argument(
        "--connect-timeout",
        type=int,
        default=DEFAULT_CONNECT_TIMEOUT,
        help=f"ECS API connect timeout in seconds (default: {DEFAULT_CONNECT_TIMEOUT})",
    )
    parser.add_argument(
        "--read-timeout",
        type=int,
        default=DEFAULT_READ_TIMEOUT,
        help=f"ECS API read timeout in seconds (default: {DEFAULT_READ_TIMEOUT})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="Enable debug output"
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    return build_parser().parse_args(argv)


def print_status(message: str) -> None:
    """Print a progress line to stdout."""
    print(f"[ecs-deploy] {message}", flush=True)


def build_request(args: argparse.Namespace) -> DeploymentRequest:
    """Build the deployment request from parsed arguments."""
    return DeploymentRequest(
        cluster=args.cluster,
        repository=args.image,
        region=args.region,
        apps=tuple(args.apps or ()),
        tag=args.tag,
        debug=args.debug,
        profile=args.profile,
        exemplar=args.exemplar,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 2 for any failure)
    """
    args = parse_args(argv)
    setup_logging(args.verbose, args.debug)

    request = build_request(args)
    try:
        request.validate()
        config = load_config(
            cluster=request.cluster,
            region=request.region,
            profile=request.profile,
            connect_timeout=args.connect_timeout,
            read_timeout=args.read_timeout,
        )
    except ValidationError as e:
        build_parser().print_usage(sys.stderr)
        print(f"Failed: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # Import here to avoid loading boto3 for --help and validation errors
    from ecs_deploy.aws.client import AWSClients
    from ecs_deploy.coordinator import RolloutCoordinator

    try:
        clients = AWSClients(config)
        coordinator = RolloutCoordinator.from_clients(
            clients, progress_callback=print_status
        )
        result = coordinator.run(request)
    except Exception as e:
        logging.exception(f"Deployment error: {e}")
        print(f"Failed: deployment error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if result.succeeded:
        return 0

    report_failure(request, result)
    return EXIT_FAILURE


def report_failure(request: DeploymentRequest, result) -> None:
    """Describe a failed rollout, including any services left updated."""
    error = result.error
    updated = result.updated_services
    print(
        f"Failed: deployment {request.image} to {request.cluster} "
        f"while {error.step}: {error}",
        file=sys.stderr,
    )
    if updated:
        print(
            f"Services already running the new revision: {', '.join(updated)}",
            file=sys.stderr,
        )
        pending = result.pending_services(request)
        print(f"Services not updated: {', '.join(pending)}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
