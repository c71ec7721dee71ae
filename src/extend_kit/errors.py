"""Exception types raised by extend-kit integrations."""


class ExtendKitError(Exception):
    """Base class for extend-kit errors."""


class ManifestParseError(ExtendKitError):
    """Raised when the manifest file is structurally corrupt."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to parse manifest {path}: {reason}")
