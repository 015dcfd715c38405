"""Shared pytest fixtures for contract-pusher tests."""

import logging
import shutil
from pathlib import Path
from typing import Dict, List

import pytest

from contract_pusher.client import ApiClient
from contract_pusher.types import ContractRecord, NetworkDeployment, Settings

API_URL = "https://api.example.com"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def build_dir(fixtures_dir: Path, tmp_path: Path) -> Path:
    """Copy the sample Truffle build directory into a temporary project."""
    target = tmp_path / "project" / "build" / "contracts"
    shutil.copytree(fixtures_dir / "truffle_build", target)
    return target


@pytest.fixture
def project_dir(build_dir: Path, fixtures_dir: Path) -> Path:
    """Temporary Truffle project with build artifacts and contract-pusher.yaml."""
    root = build_dir.parent.parent
    shutil.copy(fixtures_dir / "contract-pusher.yaml", root / "contract-pusher.yaml")
    (root / "truffle-config.js").write_text("module.exports = {};\n")
    return root


@pytest.fixture
def config_dir(fixtures_dir: Path, tmp_path: Path, monkeypatch) -> Path:
    """Temporary global configuration directory with credentials."""
    target = tmp_path / ".contract-pusher"
    target.mkdir()
    shutil.copy(fixtures_dir / "config.yaml", target / "config.yaml")
    monkeypatch.setenv("CONTRACT_PUSHER_CONFIG_DIR", str(target))
    monkeypatch.delenv("CONTRACT_PUSHER_TOKEN", raising=False)
    monkeypatch.delenv("CONTRACT_PUSHER_API_URL", raising=False)
    return target


@pytest.fixture
def api_client() -> ApiClient:
    """API client pointed at a fake server."""
    return ApiClient(API_URL, "secret-token", "acme")


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings of a logged-in user with no projects."""
    return Settings(
        token="secret-token",
        username="alice",
        organisation="acme",
        api_base_url=API_URL,
        dashboard_url="https://dashboard.example.com",
        project_dir=tmp_path,
    )


def make_contract(name: str, networks: Dict[str, str]) -> ContractRecord:
    """Build a ContractRecord from a network id -> address mapping."""
    return ContractRecord(
        name=name,
        networks={n: NetworkDeployment(address=a) for n, a in networks.items()},
    )


def static_reader(contracts: List[ContractRecord], calls: List = None):
    """Contract reader returning fixed contracts and recording its arguments."""

    def reader(build_dir: Path, network_ids: List[str]) -> List[ContractRecord]:
        if calls is not None:
            calls.append((build_dir, list(network_ids)))
        return contracts

    return reader


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging() between tests."""
    yield
    logger = logging.getLogger("contract_pusher")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
