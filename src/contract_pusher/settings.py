"""Persisted configuration loading for contract-pusher."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .constants import API_BASE_URL, DASHBOARD_URL, ENV_API_URL, ENV_TOKEN
from .exceptions import SettingsError
from .paths import get_config_paths
from .types import Settings

logger = logging.getLogger(__name__)


def load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Top-level mapping of the file.
        Empty dict if the file doesn't exist or is empty.

    Raises:
        SettingsError: If the file is not valid YAML or not a mapping
    """
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.debug("No configuration file at %s", config_path)
        return {}
    except yaml.YAMLError as e:
        raise SettingsError(
            f"invalid YAML in {config_path}: {e}",
            f"Couldn't read configuration file at: {config_path}",
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(
            f"expected a mapping at the top of {config_path}, got {type(data).__name__}",
            f"Configuration file at {config_path} is malformed.",
        )
    return data


def _get_string(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return str(value)


def load_settings(
    project_dir: Optional[Union[Path, str]] = None,
    config_dir: Optional[Union[Path, str]] = None,
) -> Settings:
    """
    Build the settings for one invocation.

    Credentials come from the global configuration file, projects from the
    project configuration file. Environment variables override the token and
    the API URL.

    Args:
        project_dir: Root of the Truffle project (defaults to cwd)
        config_dir: Global configuration directory (defaults to ~/.contract-pusher)

    Returns:
        Settings object

    Raises:
        SettingsError: If either configuration file is malformed
    """
    if project_dir is None:
        project_dir = Path.cwd()
    project_dir = Path(project_dir).absolute()

    global_path, project_path = get_config_paths(project_dir, config_dir)
    global_config = load_yaml_config(global_path)
    project_config = load_yaml_config(project_path)

    token = os.environ.get(ENV_TOKEN) or _get_string(global_config, "token")
    api_base_url = (
        os.environ.get(ENV_API_URL)
        or _get_string(global_config, "api_base_url")
        or API_BASE_URL
    )

    return Settings(
        token=token,
        username=_get_string(global_config, "username"),
        organisation=_get_string(global_config, "organisation"),
        project_slug=_get_string(project_config, "project_slug"),
        projects=project_config.get("projects"),
        api_base_url=api_base_url.rstrip("/"),
        dashboard_url=_get_string(global_config, "dashboard_url") or DASHBOARD_URL,
        project_dir=project_dir,
    )
