"""Path management utilities for contract-pusher."""

import os
from pathlib import Path
from typing import Optional, Union

from .constants import (
    ENV_CONFIG_DIR,
    GLOBAL_CONFIG_DIR_NAME,
    GLOBAL_CONFIG_FILE_NAME,
    PROJECT_CONFIG_FILE_NAME,
)


def get_default_config_dir() -> Path:
    """
    Get default global configuration directory.

    Returns:
        Path from $CONTRACT_PUSHER_CONFIG_DIR, or ~/.contract-pusher
    """
    override = os.environ.get(ENV_CONFIG_DIR)
    if override:
        return Path(override).absolute()
    return Path.home() / GLOBAL_CONFIG_DIR_NAME


def get_config_paths(
    project_dir: Union[Path, str],
    config_dir: Optional[Union[Path, str]] = None,
) -> tuple[Path, Path]:
    """
    Get configuration file paths.

    Args:
        project_dir: Root of the Truffle project
        config_dir: Custom global configuration directory

    Returns:
        Tuple of (global_config_path, project_config_path)
    """
    if config_dir is None:
        config_dir = get_default_config_dir()
    else:
        config_dir = Path(config_dir).absolute()

    global_config_path = config_dir / GLOBAL_CONFIG_FILE_NAME
    project_config_path = Path(project_dir).absolute() / PROJECT_CONFIG_FILE_NAME

    return (global_config_path, project_config_path)
