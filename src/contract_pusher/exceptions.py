"""Custom exception classes for contract-pusher."""

from typing import List, Optional


class PushError(Exception):
    """
    Base exception for push-related errors.

    ``user_message`` is what gets shown to the user; ``str(exc)`` stays the
    technical description and is only logged in debug mode.
    """

    def __init__(self, message: str = "", user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message if user_message is not None else message


class SettingsError(PushError, ValueError):
    """Raised when a configuration file cannot be parsed."""

    pass


class NotLoggedInError(PushError):
    """Raised when no API token is configured."""

    pass


class ProjectNotInitialisedError(PushError):
    """Raised when no project is configured for the current directory."""

    pass


class TruffleConfigNotFoundError(PushError, FileNotFoundError):
    """Raised when neither truffle-config.js nor truffle.js exists."""

    pass


class TruffleConfigError(PushError, RuntimeError):
    """Raised when the truffle configuration cannot be evaluated."""

    pass


class ArtifactReadError(PushError, ValueError):
    """Raised when the build directory or an artifact file cannot be read."""

    pass


class NoContractsFoundError(PushError, ValueError):
    """Raised when the build directory holds no contracts at all."""

    pass


class NoDeployedContractsError(PushError, ValueError):
    """Raised when contracts exist but none is deployed to a selected network."""

    pass


class UploadFailedError(PushError, RuntimeError):
    """Raised when the upload request did not complete."""

    pass


class ServerError(PushError):
    """Raised when the API answers with a structured error."""

    def __init__(self, slug: str, message: str):
        super().__init__(f"api error uploading contracts: {slug}", message)
        self.slug = slug


class ReconciliationError(PushError):
    """Raised when the server acknowledged a different number of contracts than expected."""

    def __init__(
        self,
        pushed_count: int,
        expected_count: int,
        unpushed: List,
        user_message: str,
    ):
        super().__init__(
            f"unexpected number of pushed contracts. Got: {pushed_count} expected: {expected_count}",
            user_message,
        )
        self.pushed_count = pushed_count
        self.expected_count = expected_count
        self.unpushed = unpushed
