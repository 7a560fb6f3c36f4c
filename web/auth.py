"""Bearer token authorization for mutation endpoints."""

import jwt
from loguru import logger


def token_from_header(authorization: str | None) -> str | None:
    """Extract the token from an 'Authorization: Bearer <token>' header."""
    if authorization and authorization.startswith("Bearer "):
        return authorization[len("Bearer ") :].strip() or None
    return None


class TokenAuthorizer:
    """Answers whether a bearer token may mutate content.

    Tokens are issued elsewhere; this only verifies signature and expiry.
    """

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self._secret = secret
        self._algorithm = algorithm

    def is_authorized(self, token: str | None) -> bool:
        if not token:
            return False
        try:
            jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError:
            logger.info("Expired token presented")
            return False
        except jwt.InvalidTokenError as e:
            logger.warning("Invalid token: {}", e)
            return False
        return True
