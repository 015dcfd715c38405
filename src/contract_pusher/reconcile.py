"""Matching of local deployments against the contracts the API acknowledged."""

from typing import Iterable, List

from .types import ContractRecord, PushedContract, UnpushedContract


def is_pushed(address: str, network_id: str, pushed: Iterable[PushedContract]) -> bool:
    """
    Check whether a local deployment was acknowledged.

    Both local values are lowercased before comparison; pushed entries are
    already lowercased when decoded.
    """
    address = address.lower()
    network_id = network_id.lower()
    return any(
        p.address == address and p.network_id == network_id for p in pushed
    )


def find_unpushed(
    contracts: Iterable[ContractRecord], pushed: List[PushedContract]
) -> List[UnpushedContract]:
    """
    List every deployment of a network-bound contract missing from the response.

    Args:
        contracts: Contracts that were sent
        pushed: Contracts the API acknowledged

    Returns:
        Unmatched (name, network id, address) triples in original casing
    """
    unpushed = []
    for contract in contracts:
        if not contract.is_network_bound:
            continue
        for network_id, deployment in contract.networks.items():
            if not is_pushed(deployment.address, network_id, pushed):
                unpushed.append(
                    UnpushedContract(
                        name=contract.name,
                        network_id=network_id,
                        address=deployment.address,
                    )
                )
    return unpushed


def is_complete(pushed: List[PushedContract], expected_count: int) -> bool:
    """The acknowledged count is authoritative for push success."""
    return len(pushed) == expected_count
