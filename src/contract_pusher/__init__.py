"""
contract-pusher: push compiled Truffle contracts to a contract monitoring service
"""

from importlib.metadata import PackageNotFoundError, version

from .artifacts import count_network_bound, read_contracts
from .client import ApiClient
from .exceptions import (
    ArtifactReadError,
    NoContractsFoundError,
    NoDeployedContractsError,
    NotLoggedInError,
    ProjectNotInitialisedError,
    PushError,
    ReconciliationError,
    ServerError,
    SettingsError,
    TruffleConfigError,
    TruffleConfigNotFoundError,
    UploadFailedError,
)
from .projects import resolve_project_configurations
from .push import push_project, upload_contracts
from .settings import load_settings
from .types import (
    ContractRecord,
    NetworkDeployment,
    ProjectConfiguration,
    PushResult,
    Settings,
)

try:
    __version__ = version("contract-pusher")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "ApiClient",
    "read_contracts",
    "count_network_bound",
    "resolve_project_configurations",
    "push_project",
    "upload_contracts",
    "load_settings",
    "ContractRecord",
    "NetworkDeployment",
    "ProjectConfiguration",
    "PushResult",
    "Settings",
    "PushError",
    "SettingsError",
    "NotLoggedInError",
    "ProjectNotInitialisedError",
    "TruffleConfigNotFoundError",
    "TruffleConfigError",
    "ArtifactReadError",
    "NoContractsFoundError",
    "NoDeployedContractsError",
    "UploadFailedError",
    "ServerError",
    "ReconciliationError",
]
