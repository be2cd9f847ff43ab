class GDPError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(GDPError):
    """Requested resource does not exist."""


class InvalidRequestError(GDPError):
    """Request parameters are well-typed but not acceptable (e.g. unknown month)."""


class AuthenticationMissingError(GDPError):
    """No usable session: token absent, undecodable, expired or with an unknown role."""


class AuthorizationDeniedError(GDPError):
    """Session exists but its role lacks the required capability."""


class MalformedStateError(GDPError):
    """Client-side persisted state could not be parsed."""
