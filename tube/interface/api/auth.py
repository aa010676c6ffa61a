"""Resolution of the acting principal from request credentials."""

from tube.domain.service import JWTService
from tube.domain.value import UserId
from tube.interface.error import UnauthenticatedError

BEARER_PREFIX = "bearer "


def extract_token(
    access_token: str | None, authorization: str | None
) -> str | None:
    """Pick the access token from the cookie or the Authorization header.

    The cookie wins when both are present.

    Args:
        access_token: Value of the access token cookie
        authorization: Value of the Authorization header

    Returns:
        Raw token or None
    """
    if access_token:
        return access_token
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        return token or None
    return None


def resolve_principal(
    jwt_service: JWTService,
    access_token: str | None,
    authorization: str | None,
) -> UserId | None:
    """Return the acting user, or None for anonymous requests.

    Invalid or expired tokens are treated as anonymous.
    """
    return jwt_service.get_user_id_from_token(
        extract_token(access_token, authorization)
    )


def require_principal(
    jwt_service: JWTService,
    access_token: str | None,
    authorization: str | None,
) -> UserId:
    """Return the acting user for a request that must be authenticated.

    Raises:
        UnauthenticatedError: If no valid token was presented
    """
    principal_id = resolve_principal(jwt_service, access_token, authorization)
    if principal_id is None:
        raise UnauthenticatedError()
    return principal_id
