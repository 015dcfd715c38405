"""REST API client for contract-pusher."""

import logging
from typing import Any, Dict, Optional

import requests

from .constants import REQUEST_TIMEOUT
from .exceptions import UploadFailedError
from .types import ApiError, PushedContract, PushResult

logger = logging.getLogger(__name__)


def split_project_slug(project_slug: str, default_account: str) -> tuple[str, str]:
    """
    Split a possibly composite "owner/slug" project identifier.

    Args:
        project_slug: "slug" or "owner/slug"
        default_account: Account used when no owner is given

    Returns:
        Tuple of (account, slug)
    """
    if "/" in project_slug:
        account, slug = project_slug.split("/", 1)
        return account, slug
    return default_account, project_slug


def decode_push_result(data: Any) -> PushResult:
    """
    Decode the body of an upload response.

    Addresses and network ids are lowercased here so that comparisons
    against local artifacts only need to normalize the local side.

    Args:
        data: Decoded JSON body

    Returns:
        PushResult object
    """
    result = PushResult()
    if not isinstance(data, dict):
        return result

    error = data.get("error")
    if isinstance(error, dict):
        result.error = ApiError(
            slug=str(error.get("slug", "")),
            message=str(error.get("message", "")),
        )

    for item in data.get("contracts") or []:
        if not isinstance(item, dict):
            continue
        network_id = item.get("network_id") or item.get("networkId") or ""
        result.contracts.append(
            PushedContract(
                address=str(item.get("address", "")).lower(),
                network_id=str(network_id).lower(),
            )
        )

    return result


class ApiClient:
    """Thin wrapper around the monitoring service REST API."""

    def __init__(
        self,
        base_url: str,
        token: str,
        account: str,
        session: Optional[requests.Session] = None,
        timeout: int = REQUEST_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. https://api.tenderly.dev
            token: Bearer token of the logged-in user
            account: Default account (organisation or username) for API paths
            session: Optional pre-configured requests session
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.account = account
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {token}"})

    def contracts_url(self, project_slug: str) -> str:
        account, slug = split_project_slug(project_slug, self.account)
        return f"{self.base_url}/api/v1/account/{account}/project/{slug}/contracts"

    def upload_contracts(self, payload: Dict[str, Any], project_slug: str) -> PushResult:
        """
        Upload contracts to a project.

        Args:
            payload: Request body built by build_upload_payload()
            project_slug: "slug" or "owner/slug"

        Returns:
            PushResult; a structured API error is returned, not raised

        Raises:
            UploadFailedError: If the request fails or the response is unusable
        """
        url = self.contracts_url(project_slug)
        logger.debug("POST %s with %d contract(s)", url, len(payload.get("contracts", [])))

        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise UploadFailedError(
                f"failed uploading contracts: {e}",
                "Couldn't push contracts to the server",
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise UploadFailedError(
                f"failed uploading contracts: status {response.status_code}, invalid JSON body",
                "Couldn't push contracts to the server",
            ) from e

        result = decode_push_result(data)

        # Non-2xx responses are only usable when they carry a structured error
        if not response.ok and result.error is None:
            raise UploadFailedError(
                f"failed uploading contracts: status {response.status_code}",
                "Couldn't push contracts to the server",
            )

        return result
