"""Data types and dataclasses for contract-pusher."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class NetworkDeployment:
    """Deployment of a contract on a single network."""

    address: str  # As written in the build artifact, casing preserved
    transaction_hash: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"address": self.address}
        if self.transaction_hash is not None:
            payload["transactionHash"] = self.transaction_hash
        return payload


@dataclass(frozen=True)
class ContractRecord:
    """A compiled contract read from a Truffle build artifact."""

    # Required fields
    name: str  # contractName
    networks: Dict[str, NetworkDeployment]  # network id -> deployment

    # Opaque artifact fields, forwarded to the API untouched
    abi: List[Dict[str, Any]] = field(default_factory=list)
    bytecode: Optional[str] = None
    deployed_bytecode: Optional[str] = None
    source_map: Optional[str] = None
    deployed_source_map: Optional[str] = None
    source: Optional[str] = None
    source_path: Optional[str] = None
    compiler: Optional[Dict[str, Any]] = None
    updated_at: Optional[str] = None

    @property
    def is_network_bound(self) -> bool:
        """True if the contract has at least one recorded deployment."""
        return len(self.networks) > 0

    def to_payload(self) -> Dict[str, Any]:
        """Serialize using the Truffle artifact field names."""
        payload: Dict[str, Any] = {
            "contractName": self.name,
            "abi": self.abi,
            "networks": {
                network_id: deployment.to_payload()
                for network_id, deployment in self.networks.items()
            },
        }

        optional_fields = {
            "bytecode": self.bytecode,
            "deployedBytecode": self.deployed_bytecode,
            "sourceMap": self.source_map,
            "deployedSourceMap": self.deployed_source_map,
            "source": self.source,
            "sourcePath": self.source_path,
            "compiler": self.compiler,
            "updatedAt": self.updated_at,
        }
        for key, value in optional_fields.items():
            if value is not None:
                payload[key] = value

        return payload


@dataclass
class ProjectConfiguration:
    """Persisted configuration of a single project."""

    networks: List[str] = field(default_factory=list)


# project slug -> configuration
ProjectConfigurationMap = Dict[str, ProjectConfiguration]


@dataclass(frozen=True)
class PushedContract:
    """A contract deployment acknowledged by the API (lowercased)."""

    address: str
    network_id: str


@dataclass(frozen=True)
class ApiError:
    """Structured error returned by the API."""

    slug: str
    message: str


@dataclass
class PushResult:
    """Decoded response of an upload request."""

    contracts: List[PushedContract] = field(default_factory=list)
    error: Optional[ApiError] = None


@dataclass(frozen=True)
class UnpushedContract:
    """A local deployment the API did not acknowledge (original casing)."""

    name: str
    network_id: str
    address: str


@dataclass
class CompilerConfig:
    """Compiler settings sent alongside the contracts."""

    compiler_version: Optional[str] = None
    optimizations_used: Optional[bool] = None
    optimizations_count: Optional[int] = None
    evm_version: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.compiler_version is not None:
            payload["compiler_version"] = self.compiler_version
        if self.optimizations_used is not None:
            payload["optimizations_used"] = self.optimizations_used
        if self.optimizations_count is not None:
            payload["optimizations_count"] = self.optimizations_count
        if self.evm_version is not None:
            payload["evm_version"] = self.evm_version
        return payload


@dataclass
class Settings:
    """Process-wide configuration, passed explicitly to the push flow."""

    token: str = ""
    username: str = ""
    organisation: str = ""
    project_slug: str = ""  # Legacy single-project configuration
    projects: Optional[Any] = None  # Raw persisted project mapping
    api_base_url: str = ""
    dashboard_url: str = ""
    project_dir: Path = field(default_factory=Path.cwd)

    def is_logged_in(self) -> bool:
        return bool(self.token)

    @property
    def account(self) -> str:
        """Account used in API paths: organisation if set, else username."""
        return self.organisation or self.username
