"""
Error taxonomy for talking to the generative backend and local storage.
"""


class SocialGodError(Exception):
    """Base exception for the console."""

    pass


class CredentialMissing(SocialGodError):
    """No usable credential is configured for the generative backend."""

    def __init__(self, message: str = "API key not configured"):
        super().__init__(message)


class ConnectionFailed(SocialGodError):
    """Transport, authentication or timeout failure."""

    def __init__(self, message: str, credential_rejected: bool = False):
        super().__init__(message)
        self.credential_rejected = credential_rejected


class GenerationFailed(SocialGodError):
    """The backend answered but the payload could not be used."""

    def __init__(self, operation: str, message: str):
        super().__init__(f"[{operation}] {message}")
        self.operation = operation
        self.message = message


class PersistenceCorrupt(SocialGodError):
    """A persisted snapshot could not be decoded. Always recovered silently."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Snapshot '{key}' is corrupt: {reason}")
        self.key = key
        self.reason = reason
