"""Security related functions."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import bcrypt
import jwt
from jwt import InvalidTokenError

from app.core.config import settings
from app.exceptions.base import AuthenticationError


def hash_password(password: str) -> str:
    """Hash a password with bcrypt using the configured cost factor."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a clear-text password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # malformed hash
        return False


class TokenAuthenticator:
    """
    Issues and verifies the bearer tokens used by the API.

    Tokens are HS256 JSON Web Tokens signed with the application secret. The
    ``sub`` claim carries the user id and ``username`` the login name.

    :ivar secret_key: The secret key used to sign and verify tokens.
    :type secret_key: str
    :ivar algorithm: The JWT signing algorithm.
    :type algorithm: str
    """

    def __init__(self):
        self.secret_key = settings.secret_key
        self.algorithm = settings.algorithm

    def create_token(self, user_id: UUID, username: str) -> str:
        """Issue a signed token for the given user."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "username": username,
            "iat": now,
            "exp": now + timedelta(minutes=settings.access_token_expire_minutes),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> dict:
        """
        Verifies a given JSON Web Token (JWT) against the application secret
        and returns its payload. Expired, tampered or otherwise undecodable
        tokens raise an :class:`AuthenticationError`.

        :param token: The JWT token to be verified.
        :return: A dictionary containing the decoded payload of the token.
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except InvalidTokenError as e:
            raise AuthenticationError("token invalid") from e

        if not payload.get("sub"):
            raise AuthenticationError("token invalid")
        return payload
