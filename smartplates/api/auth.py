"""Shared-secret bearer authentication for the SmartPlates API.

Every router except health depends on verify_token. The secret comes from
API_TOKEN; a server started without one refuses all protected calls.
"""

from fastapi import HTTPException, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from smartplates.api.config import config

bearer_scheme = HTTPBearer(auto_error=False)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


def verify_token(
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> str:
    """Check the request's bearer token against API_TOKEN.

    Raises:
        HTTPException: 503 when the server has no API_TOKEN, 401 when the
            request carries no token or a different one.
    """
    if not config.api_token:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="SmartPlates API is locked: API_TOKEN is not set on the server",
        )

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Bearer token required",
            headers=_UNAUTHORIZED_HEADERS,
        )

    if credentials.credentials != config.api_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Bearer token rejected",
            headers=_UNAUTHORIZED_HEADERS,
        )

    return credentials.credentials
