"""JWT session token utilities.

Tokens are self-contained: nothing is stored server side, and expiry is the
only way a token stops working. The signing secret is always passed in by
the caller so a missing secret surfaces where the token is used.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from ..core.exceptions import ConfigurationError, ExpiredToken, InvalidToken
from ..core.logging import get_logger

logger = get_logger("security.jwt")

ACCESS_TOKEN_TYPE = "access"


def _require_secret(secret_key: Optional[str]) -> str:
    if not secret_key:
        logger.critical("FATAL: SECRET_KEY is not configured, refusing to handle tokens")
        raise ConfigurationError()
    return secret_key


def create_access_token(
    data: Dict[str, Any],
    secret_key: Optional[str],
    algorithm: str = "HS256",
    expires_delta: timedelta = timedelta(seconds=3600),
) -> str:
    """Create a signed access token carrying ``data`` plus iat/exp/type claims."""
    key = _require_secret(secret_key)

    now = datetime.now(timezone.utc)
    to_encode = data.copy()
    to_encode.update({"iat": now, "exp": now + expires_delta, "type": ACCESS_TOKEN_TYPE})
    return jwt.encode(to_encode, key, algorithm=algorithm)


def decode_access_token(token: str, secret_key: Optional[str], algorithm: str = "HS256") -> Dict[str, Any]:
    """Verify signature and expiry and return the claims.

    Raises ``ExpiredToken`` for an expired token and ``InvalidToken`` for
    anything else that doesn't check out.
    """
    key = _require_secret(secret_key)

    try:
        payload = jwt.decode(token, key, algorithms=[algorithm])
    except ExpiredSignatureError as e:
        raise ExpiredToken() from e
    except JWTError as e:
        raise InvalidToken() from e

    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise InvalidToken()
    return payload


def get_user_id_from_payload(payload: Dict[str, Any]) -> UUID:
    """Extract the account id from the ``sub`` claim."""
    user_id = payload.get("sub")
    if not user_id:
        raise InvalidToken()

    try:
        return UUID(str(user_id))
    except ValueError as e:
        raise InvalidToken() from e
