"""
Bearer token handling.

Tokens are issued by the site's auth service; this service only checks them.
A token is accepted when it is an HS256 JWT signed with ``SECRET_KEY``,
unexpired, of type ``access`` and carrying a numeric user id in ``sub``.
"""

from datetime import UTC, datetime, timedelta

import jwt

from novelfeed.config import get_settings

ALGORITHM = "HS256"
TOKEN_TYPE = "access"


def create_access_token(user_id: int, expires_in: timedelta = timedelta(minutes=15)) -> str:
    """Sign a token the way the auth service does. Used by tests and local tooling."""
    claims = {"sub": str(user_id), "type": TOKEN_TYPE, "exp": datetime.now(UTC) + expires_in}
    return jwt.encode(claims, get_settings().SECRET_KEY, algorithm=ALGORITHM)


def verify_access_token(token: str) -> int | None:
    """Return the user id in a valid access token, or None."""
    try:
        claims = jwt.decode(token, get_settings().SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.InvalidTokenError:
        return None

    if claims.get("type") != TOKEN_TYPE:
        return None
    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject.isdigit():
        return None
    return int(subject)
