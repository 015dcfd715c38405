"""Command-line interface for contract-pusher."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__, reporting
from .client import ApiClient
from .exceptions import NotLoggedInError, ProjectNotInitialisedError, PushError
from .log import setup_logging
from .payloads import compiler_config_for
from .projects import parse_network_ids, resolve_project_configurations
from .push import upload_contracts
from .settings import load_settings
from .truffle_config import load_truffle_config

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contract-pusher",
        description="Push compiled Truffle contracts to a contract monitoring service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  contract-pusher push
  contract-pusher push --networks 1,4
  contract-pusher push --tag v1.2.0
  contract-pusher --debug --project-dir ./my-dapp push
        """,
    )
    parser.add_argument("--debug", action="store_true", help="Show debug output")
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=None,
        help="Root of the Truffle project (defaults to the current directory)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    push_parser = subparsers.add_parser(
        "push",
        help="Push the contracts to the configured projects so they are actively monitored",
    )
    push_parser.add_argument(
        "--tag",
        default="",
        help="Optional tag used for filtering and referencing pushed contracts",
    )
    push_parser.add_argument(
        "--networks",
        default="",
        help="A comma separated list of networks to push",
    )

    return parser


def run_push(args: argparse.Namespace) -> None:
    """
    Run the push command.

    Raises:
        PushError: On any failure, with a user-facing message
    """
    settings = load_settings(args.project_dir)

    if not settings.is_logged_in():
        raise NotLoggedInError(
            "no API token configured",
            "In order to use this command you need to log in first. "
            "Set CONTRACT_PUSHER_TOKEN or add a token to ~/.contract-pusher/config.yaml.",
        )
    if not resolve_project_configurations(settings.projects, settings.project_slug):
        raise ProjectNotInitialisedError(
            "no project configured",
            "You need to initiate the project first. Add a projects section to "
            "contract-pusher.yaml in the root of your Truffle project.",
        )

    logger.info("Setting up your project...")
    logger.info("Analyzing Truffle configuration...")
    truffle_config = load_truffle_config(settings.project_dir)

    client = ApiClient(settings.api_base_url, settings.token, settings.account)
    upload_contracts(
        client,
        settings,
        parse_network_ids(args.networks),
        truffle_config.absolute_build_directory(),
        compiler_config=compiler_config_for(truffle_config),
        tag=args.tag or None,
    )

    logger.info("All Smart Contracts successfully pushed.")


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.debug)

    try:
        if args.command == "push":
            run_push(args)
    except PushError as e:
        logger.debug("unable to upload contracts: %s", e)
        logger.error(reporting.red(e.user_message))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
