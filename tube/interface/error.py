"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    code = "interface_error"


class UnauthenticatedError(InterfaceError):
    """A mutating request arrived without a valid access token."""

    code = "unauthenticated"

    def __init__(self, message: str = "authentication required"):
        super().__init__(message)
