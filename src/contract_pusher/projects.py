"""Project configuration resolution for contract-pusher."""

import logging
from enum import Enum
from typing import Any, List, Optional

from .types import ProjectConfiguration, ProjectConfigurationMap

logger = logging.getLogger(__name__)


class BlobKind(Enum):
    """
    Shape of a persisted per-project configuration value.

    - NESTED_MAP: a mapping, e.g. {"networks": [1, "4"]}
    - SCALAR: anything else that is present (legacy string, list, number...)
    - ABSENT: null / missing value
    """

    NESTED_MAP = "nested-map"
    SCALAR = "scalar"
    ABSENT = "absent"


def classify_blob(blob: Any) -> BlobKind:
    """
    Classify a raw persisted configuration value.

    Args:
        blob: Value read from the configuration file

    Returns:
        BlobKind of the value
    """
    if blob is None:
        return BlobKind.ABSENT
    if isinstance(blob, dict):
        return BlobKind.NESTED_MAP
    return BlobKind.SCALAR


def decode_network_id(value: Any) -> Optional[str]:
    """
    Convert a persisted network identifier to its canonical string form.

    Args:
        value: Raw list element

    Returns:
        Decimal string for integers, stripped string for strings,
        None for any other type (booleans included)
    """
    # bool is a subclass of int
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value.strip() or None
    return None


def decode_networks(raw_networks: Any) -> List[str]:
    """
    Decode a persisted "networks" list, skipping unsupported elements.

    Args:
        raw_networks: Value of the "networks" key

    Returns:
        List of network id strings in their original order
    """
    if not isinstance(raw_networks, list):
        return []

    networks = []
    for raw in raw_networks:
        network_id = decode_network_id(raw)
        if network_id is None:
            logger.debug("Skipping unsupported network id: %r", raw)
            continue
        networks.append(network_id)
    return networks


def resolve_project_configurations(
    projects: Any, legacy_project_slug: str = ""
) -> ProjectConfigurationMap:
    """
    Build the per-project configuration from persisted settings.

    Malformed entries never fail the resolution: they degrade to a project
    with no configured networks.

    Args:
        projects: Persisted mapping of project slug -> raw configuration
        legacy_project_slug: Single project slug from older configuration files

    Returns:
        Mapping of project slug -> ProjectConfiguration.
        Empty dict if no project mapping is persisted.
    """
    if classify_blob(projects) is not BlobKind.NESTED_MAP:
        return {}

    configurations: ProjectConfigurationMap = {}

    for project_slug, blob in projects.items():
        project_slug = str(project_slug)

        if classify_blob(blob) is not BlobKind.NESTED_MAP:
            logger.debug("No configuration provided for project: %s", project_slug)
            configurations[project_slug] = ProjectConfiguration()
            continue

        if not isinstance(blob.get("networks"), list):
            logger.debug("Failed extracting networks for project: %s", project_slug)

        configurations[project_slug] = ProjectConfiguration(
            networks=decode_networks(blob.get("networks"))
        )

    if legacy_project_slug and legacy_project_slug not in configurations:
        configurations[legacy_project_slug] = ProjectConfiguration()

    return configurations


def parse_network_ids(raw: Optional[str]) -> List[str]:
    """
    Split the comma separated --networks flag.

    Args:
        raw: Flag value, e.g. "1, 4,42"

    Returns:
        List of network ids, empty items removed
    """
    if not raw:
        return []
    return [n.strip() for n in raw.split(",") if n.strip()]


def effective_networks(
    cli_networks: List[str], project_configuration: ProjectConfiguration
) -> List[str]:
    """
    Networks to push for a project: CLI networks first, then persisted ones.

    Duplicates are kept.
    """
    return list(cli_networks) + list(project_configuration.networks)
