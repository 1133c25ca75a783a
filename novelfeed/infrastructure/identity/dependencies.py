"""FastAPI dependencies for identity."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from novelfeed.exceptions import CredentialsException
from novelfeed.infrastructure.identity.token_service import verify_access_token

# auto_error=False so a missing header gets the same 401 body as a bad token
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


async def get_current_user_id(
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> int:
    """
    Get the id of the authenticated user from the access token.

    Args:
        token: JWT access token from Authorization header

    Returns:
        The user id carried in the token's subject

    Raises:
        CredentialsException: If the token is missing or invalid
    """
    if not token:
        raise CredentialsException

    user_id = verify_access_token(token)
    if user_id is None or user_id <= 0:
        raise CredentialsException
    return user_id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]
