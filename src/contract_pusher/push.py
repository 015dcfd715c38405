"""Contract upload orchestration for contract-pusher."""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from . import reporting
from .artifacts import count_network_bound, read_contracts
from .client import ApiClient, split_project_slug
from .exceptions import (
    NoContractsFoundError,
    NoDeployedContractsError,
    ReconciliationError,
    ServerError,
)
from .payloads import build_upload_payload
from .projects import effective_networks, resolve_project_configurations
from .reconcile import find_unpushed, is_complete
from .types import (
    CompilerConfig,
    ContractRecord,
    ProjectConfiguration,
    PushResult,
    Settings,
)

logger = logging.getLogger(__name__)

ContractReader = Callable[[Path, List[str]], List[ContractRecord]]


def push_project(
    client: ApiClient,
    project_slug: str,
    project_configuration: ProjectConfiguration,
    cli_networks: List[str],
    build_dir: Path,
    compiler_config: Optional[CompilerConfig] = None,
    tag: Optional[str] = None,
    contract_reader: ContractReader = read_contracts,
) -> PushResult:
    """
    Push the contracts of a single project and check the server took them all.

    Args:
        client: API client
        project_slug: "slug" or "owner/slug"
        project_configuration: Persisted configuration of the project
        cli_networks: Networks given with --networks
        build_dir: Absolute Truffle build directory
        compiler_config: Optional compiler settings sent with the contracts
        tag: Optional deployment tag
        contract_reader: Function reading contracts for a list of network ids

    Returns:
        PushResult of the upload

    Raises:
        NoContractsFoundError: If the build directory holds no contracts
        NoDeployedContractsError: If no contract is deployed to a selected network
        UploadFailedError: If the request fails
        ServerError: If the API answers with a structured error
        ReconciliationError: If the acknowledged count differs from the expected one
    """
    network_ids = effective_networks(cli_networks, project_configuration)
    contracts = contract_reader(build_dir, network_ids)
    expected_count = count_network_bound(contracts)

    if not contracts:
        raise NoContractsFoundError(
            f"no contracts found in build dir: {build_dir}",
            reporting.no_contracts_message(build_dir),
        )
    if expected_count == 0:
        raise NoDeployedContractsError(
            f"no contracts with a network found in build dir: {build_dir}",
            reporting.no_deployed_contracts_message(build_dir),
        )

    logger.info("We have detected the following Smart Contracts:")
    for line in reporting.detected_contract_lines(contracts):
        logger.info(line)

    logger.info("Uploading contracts...")
    result = client.upload_contracts(
        build_upload_payload(contracts, compiler_config, tag), project_slug
    )

    if result.error is not None:
        raise ServerError(result.error.slug, result.error.message)

    # The acknowledged count decides success; pair matching only feeds the report
    if not is_complete(result.contracts, expected_count):
        unpushed = find_unpushed(contracts, result.contracts)
        raise ReconciliationError(
            pushed_count=len(result.contracts),
            expected_count=expected_count,
            unpushed=unpushed,
            user_message=reporting.unpushed_message(unpushed),
        )

    return result


def upload_contracts(
    client: ApiClient,
    settings: Settings,
    cli_networks: List[str],
    build_dir: Path,
    compiler_config: Optional[CompilerConfig] = None,
    tag: Optional[str] = None,
    contract_reader: ContractReader = read_contracts,
) -> List[str]:
    """
    Push contracts for every configured project, in order.

    The run stops at the first project that fails; the exception propagates
    and remaining projects are not pushed.

    Args:
        client: API client
        settings: Settings of this invocation
        cli_networks: Networks given with --networks
        build_dir: Absolute Truffle build directory
        compiler_config: Optional compiler settings sent with the contracts
        tag: Optional deployment tag
        contract_reader: Function reading contracts for a list of network ids

    Returns:
        Slugs of the projects that were pushed
    """
    configurations = resolve_project_configurations(settings.projects, settings.project_slug)

    pushed_projects = []
    for project_slug, project_configuration in configurations.items():
        logger.info("Pushing Smart Contracts for project: %s", reporting.green(project_slug))

        push_project(
            client,
            project_slug,
            project_configuration,
            cli_networks,
            build_dir,
            compiler_config=compiler_config,
            tag=tag,
            contract_reader=contract_reader,
        )

        account, slug = split_project_slug(project_slug, settings.username or settings.account)
        logger.info(
            "Successfully pushed Smart Contracts for project %s. You can view your contracts at %s",
            reporting.green(slug),
            reporting.green(reporting.dashboard_url(settings.dashboard_url, account, slug)),
        )
        pushed_projects.append(project_slug)

    return pushed_projects
