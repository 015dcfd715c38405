"""Truffle project configuration loading for contract-pusher."""

import json
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DEFAULT_BUILD_DIRECTORY, NEW_TRUFFLE_CONFIG_FILE, OLD_TRUFFLE_CONFIG_FILE
from .exceptions import TruffleConfigError, TruffleConfigNotFoundError


class TruffleConfigType(Enum):
    """
    Truffle configuration file flavours.

    - NEW: truffle-config.js, compiler settings under "compilers"
    - OLD: truffle.js, compiler settings under "solc"
    """

    NEW = "truffle-config.js"
    OLD = "truffle.js"


@dataclass
class TruffleConfig:
    """The parts of a Truffle configuration the push flow needs."""

    project_dir: Path
    config_type: TruffleConfigType
    build_directory: str = DEFAULT_BUILD_DIRECTORY
    compilers: Optional[Dict[str, Any]] = None
    solc: Optional[Dict[str, Any]] = None

    def absolute_build_directory(self) -> Path:
        """Build directory resolved against the project root."""
        build_dir = Path(self.build_directory)
        if build_dir.is_absolute():
            return build_dir
        return (self.project_dir / build_dir).resolve()


def find_truffle_config(project_dir: Path) -> tuple[Path, TruffleConfigType]:
    """
    Locate the Truffle configuration file of a project.

    Args:
        project_dir: Root of the Truffle project

    Returns:
        Tuple of (config_path, config_type); truffle-config.js wins over truffle.js

    Raises:
        TruffleConfigNotFoundError: If neither file exists
    """
    new_config = project_dir / NEW_TRUFFLE_CONFIG_FILE
    if new_config.exists():
        return new_config, TruffleConfigType.NEW

    old_config = project_dir / OLD_TRUFFLE_CONFIG_FILE
    if old_config.exists():
        return old_config, TruffleConfigType.OLD

    raise TruffleConfigNotFoundError(
        f"no truffle configuration in {project_dir}",
        f"Couldn't find {NEW_TRUFFLE_CONFIG_FILE} or {OLD_TRUFFLE_CONFIG_FILE} in {project_dir}. "
        "Run this command from the root of your Truffle project.",
    )


def evaluate_truffle_config(config_path: Path) -> Dict[str, Any]:
    """
    Evaluate a Truffle JavaScript configuration file with node.

    Args:
        config_path: Path to truffle-config.js or truffle.js

    Returns:
        The exported configuration object

    Raises:
        TruffleConfigError: If node fails or prints something that isn't JSON
    """
    script = f"console.log(JSON.stringify(require({json.dumps(str(config_path))})))"
    try:
        result = subprocess.run(
            ["node", "-e", script],
            check=True,
            capture_output=True,
            text=True,
            cwd=config_path.parent,
        )
    except FileNotFoundError as e:
        raise TruffleConfigError(
            "node executable not found",
            "Node.js is required to read the Truffle configuration.",
        ) from e
    except subprocess.CalledProcessError as e:
        raise TruffleConfigError(
            f"failed evaluating {config_path}: {e.stderr}",
            f"Couldn't read Truffle configuration at: {config_path}",
        ) from e

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise TruffleConfigError(
            f"unexpected output evaluating {config_path}: {e}",
            f"Couldn't read Truffle configuration at: {config_path}",
        ) from e

    if not isinstance(data, dict):
        raise TruffleConfigError(
            f"{config_path} does not export an object",
            f"Couldn't read Truffle configuration at: {config_path}",
        )
    return data


def load_truffle_config(project_dir: Path) -> TruffleConfig:
    """
    Load the Truffle configuration of a project.

    Args:
        project_dir: Root of the Truffle project

    Returns:
        TruffleConfig object

    Raises:
        TruffleConfigNotFoundError: If no configuration file exists
        TruffleConfigError: If the configuration cannot be evaluated
    """
    project_dir = Path(project_dir).absolute()
    config_path, config_type = find_truffle_config(project_dir)
    data = evaluate_truffle_config(config_path)

    compilers = data.get("compilers")
    solc = data.get("solc")

    return TruffleConfig(
        project_dir=project_dir,
        config_type=config_type,
        build_directory=data.get("contracts_build_directory") or DEFAULT_BUILD_DIRECTORY,
        compilers=compilers if isinstance(compilers, dict) else None,
        solc=solc if isinstance(solc, dict) else None,
    )
