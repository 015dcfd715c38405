"""Truffle build artifact reading for contract-pusher."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .exceptions import ArtifactReadError
from .types import ContractRecord, NetworkDeployment

logger = logging.getLogger(__name__)


def parse_networks(
    raw_networks: Any, network_ids: Iterable[str]
) -> Dict[str, NetworkDeployment]:
    """
    Decode the "networks" section of a Truffle artifact.

    Args:
        raw_networks: Value of the "networks" key
        network_ids: Network ids to keep; empty keeps every network

    Returns:
        Dictionary mapping network id -> NetworkDeployment.
        Entries without an address are dropped.
    """
    if not isinstance(raw_networks, dict):
        return {}

    selected = set(network_ids)
    networks: Dict[str, NetworkDeployment] = {}
    for network_id, network_data in raw_networks.items():
        network_id = str(network_id)
        if selected and network_id not in selected:
            continue
        if not isinstance(network_data, dict) or not network_data.get("address"):
            continue

        networks[network_id] = NetworkDeployment(
            address=network_data["address"],
            transaction_hash=network_data.get("transactionHash"),
        )

    return networks


def parse_truffle_artifact(file_path: Path, network_ids: Iterable[str]) -> ContractRecord:
    """
    Parse a single Truffle build artifact.

    Args:
        file_path: Path to build/contracts/<Name>.json
        network_ids: Network ids to keep; empty keeps every network

    Returns:
        ContractRecord for the artifact

    Raises:
        ArtifactReadError: If the file is not valid JSON or not an object
    """
    try:
        with open(file_path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ArtifactReadError(
            f"failed reading build artifact {file_path}: {e}",
            f"Couldn't read Truffle build file: {file_path}",
        ) from e

    if not isinstance(data, dict):
        raise ArtifactReadError(
            f"build artifact {file_path} is not a JSON object",
            f"Couldn't read Truffle build file: {file_path}",
        )

    return ContractRecord(
        # Fall back to the file name like truffle does for its own lookups
        name=data.get("contractName") or file_path.stem,
        networks=parse_networks(data.get("networks"), network_ids),
        abi=data.get("abi") or [],
        bytecode=data.get("bytecode"),
        deployed_bytecode=data.get("deployedBytecode"),
        source_map=data.get("sourceMap"),
        deployed_source_map=data.get("deployedSourceMap"),
        source=data.get("source"),
        source_path=data.get("sourcePath"),
        compiler=data.get("compiler"),
        updated_at=data.get("updatedAt"),
    )


def read_contracts(build_dir: Path, network_ids: Iterable[str]) -> List[ContractRecord]:
    """
    Read every contract artifact in a Truffle build directory.

    Args:
        build_dir: Absolute path of the build directory
        network_ids: Network ids to keep on each contract; empty keeps every network

    Returns:
        List of ContractRecord objects, sorted by file name

    Raises:
        ArtifactReadError: If the directory or an artifact cannot be read
    """
    build_dir = Path(build_dir)
    if not build_dir.is_dir():
        raise ArtifactReadError(
            f"build directory not found: {build_dir}",
            f"Couldn't read Truffle build files at: {build_dir}",
        )

    network_ids = list(network_ids)
    contracts = []
    for artifact_file in sorted(build_dir.glob("*.json")):
        contract = parse_truffle_artifact(artifact_file, network_ids)
        logger.debug(
            "Read %s with %d network(s) from %s",
            contract.name,
            len(contract.networks),
            artifact_file.name,
        )
        contracts.append(contract)

    return contracts


def count_network_bound(contracts: Iterable[ContractRecord]) -> int:
    """Number of contracts deployed to at least one network."""
    return sum(1 for contract in contracts if contract.is_network_bound)
