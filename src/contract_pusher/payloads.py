"""Upload request payload construction for contract-pusher."""

from typing import Any, Dict, Iterable, Optional

from .truffle_config import TruffleConfig, TruffleConfigType
from .types import CompilerConfig, ContractRecord


def _parse_optimizer(optimizer: Any, config: CompilerConfig) -> None:
    if not isinstance(optimizer, dict):
        return
    if isinstance(optimizer.get("enabled"), bool):
        config.optimizations_used = optimizer["enabled"]
    runs = optimizer.get("runs")
    if isinstance(runs, int) and not isinstance(runs, bool):
        config.optimizations_count = runs


def parse_new_truffle_config(compilers: Dict[str, Any]) -> CompilerConfig:
    """
    Extract compiler settings from a truffle-config.js "compilers" section.

    Args:
        compilers: e.g. {"solc": {"version": "0.5.8", "settings": {"optimizer": {...}}}}

    Returns:
        CompilerConfig with whatever fields are present
    """
    config = CompilerConfig()
    solc = compilers.get("solc")
    if not isinstance(solc, dict):
        return config

    if isinstance(solc.get("version"), str):
        config.compiler_version = solc["version"]

    settings = solc.get("settings")
    if isinstance(settings, dict):
        _parse_optimizer(settings.get("optimizer"), config)
        if isinstance(settings.get("evmVersion"), str):
            config.evm_version = settings["evmVersion"]

    return config


def parse_old_truffle_config(solc: Dict[str, Any]) -> CompilerConfig:
    """
    Extract compiler settings from a truffle.js "solc" section.

    Args:
        solc: e.g. {"optimizer": {"enabled": true, "runs": 200}}

    Returns:
        CompilerConfig with optimizer fields only
    """
    config = CompilerConfig()
    _parse_optimizer(solc.get("optimizer"), config)
    return config


def compiler_config_for(truffle_config: TruffleConfig) -> Optional[CompilerConfig]:
    """Pick the compiler settings matching the configuration flavour, if any."""
    if truffle_config.config_type is TruffleConfigType.NEW and truffle_config.compilers is not None:
        return parse_new_truffle_config(truffle_config.compilers)
    if truffle_config.config_type is TruffleConfigType.OLD and truffle_config.solc is not None:
        return parse_old_truffle_config(truffle_config.solc)
    return None


def build_upload_payload(
    contracts: Iterable[ContractRecord],
    config: Optional[CompilerConfig] = None,
    tag: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the JSON body of an upload request.

    Args:
        contracts: All contracts to send, network-bound or not
        config: Optional compiler settings
        tag: Optional deployment tag

    Returns:
        Dictionary with "contracts" and, when set, "config" and "tag"
    """
    payload: Dict[str, Any] = {
        "contracts": [contract.to_payload() for contract in contracts],
    }
    if config is not None:
        payload["config"] = config.to_payload()
    if tag:
        payload["tag"] = tag
    return payload
