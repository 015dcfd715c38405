"""User-facing message formatting for contract-pusher."""

import os
import sys
from pathlib import Path
from typing import Iterable, List

from .types import ContractRecord, UnpushedContract


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    GREEN = "\033[92m"
    RED = "\033[91m"


def colors_enabled() -> bool:
    """Colors only on a terminal, and never when NO_COLOR is set."""
    return sys.stdout.isatty() and "NO_COLOR" not in os.environ


def _paint(text: str, color: str) -> str:
    if not colors_enabled():
        return text
    return f"{Colors.BOLD}{color}{text}{Colors.RESET}"


def green(text: str) -> str:
    return _paint(text, Colors.GREEN)


def red(text: str) -> str:
    return _paint(text, Colors.RED)


def detected_contract_lines(contracts: Iterable[ContractRecord]) -> List[str]:
    lines = []
    for contract in contracts:
        if contract.is_network_bound:
            lines.append(f"• {contract.name}")
        else:
            lines.append(
                f"• {contract.name} (not deployed to any network, will be used as a library contract)"
            )
    return lines


def no_contracts_message(build_dir: Path) -> str:
    return (
        f"No contracts detected in build directory: {red(str(build_dir))}. "
        "This can happen when no contracts have been migrated yet or the "
        f"{green('truffle compile')} hasn't been run yet."
    )


def no_deployed_contracts_message(build_dir: Path) -> str:
    return (
        f"No migrated contracts detected in build directory: {red(str(build_dir))}. "
        "This can happen when no contracts have been migrated yet."
    )


def unpushed_message(unpushed: Iterable[UnpushedContract]) -> str:
    """Itemized list of deployments the server did not acknowledge."""
    lines = [
        f"• {red(u.name)} on network {red(u.network_id)} with address {red(u.address)}"
        for u in unpushed
    ]
    return (
        "Some of the contracts haven't been pushed. This can happen when the contract "
        "isn't deployed to a supported network or some other error might have occurred. "
        "Below is the list with all the contracts that weren't pushed successfully:\n"
        + "\n".join(lines)
    )


def dashboard_url(base_url: str, account: str, slug: str) -> str:
    return f"{base_url.rstrip('/')}/{account}/{slug}/contracts"
