"""Password hashing and stateless bearer tokens."""
import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

import bcrypt
import jwt
from pydantic import BaseModel

from quiz_api.utils.exceptions import ExpiredTokenError, InvalidTokenError

logger = logging.getLogger(__name__)

BCRYPT_MAX_PASSWORD_BYTES = 72


class TokenClaims(BaseModel):
    username: str


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _password_bytes(plaintext: str) -> bytes:
    # bcrypt only reads the first 72 bytes; newer releases raise instead of truncating
    return plaintext.encode()[:BCRYPT_MAX_PASSWORD_BYTES]


class AuthService:
    """Hashes passwords with bcrypt and signs/verifies JWTs with a shared secret.

    ``clock`` is only used when issuing tokens, so a service built with a clock
    in the past produces tokens that are already expired for everyone else.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        token_ttl: timedelta = timedelta(hours=1),
        bcrypt_rounds: int = 10,
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not secret:
            raise ValueError("A token signing secret is required")
        self._secret = secret
        self._algorithm = algorithm
        self._token_ttl = token_ttl
        self._bcrypt_rounds = bcrypt_rounds
        self._clock = clock

    def hash_password(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self._bcrypt_rounds)
        return bcrypt.hashpw(_password_bytes(plaintext), salt).decode()

    def verify_password(self, plaintext: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_password_bytes(plaintext), hashed.encode())
        except ValueError:
            # malformed stored hash
            return False

    async def hash_password_async(self, plaintext: str) -> str:
        return await asyncio.to_thread(self.hash_password, plaintext)

    async def verify_password_async(self, plaintext: str, hashed: str) -> bool:
        return await asyncio.to_thread(self.verify_password, plaintext, hashed)

    def issue_token(self, username: str) -> str:
        issued_at = self._clock()
        payload = {
            "username": username,
            "iat": issued_at,
            "exp": issued_at + self._token_ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify_token(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "username"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.debug("Rejected expired token")
            raise ExpiredTokenError("Invalid Token", error="Token expired") from exc
        except jwt.PyJWTError as exc:
            logger.debug("Rejected token: %s", exc)
            raise InvalidTokenError("Invalid Token") from exc

        username = payload.get("username")
        if not isinstance(username, str):
            raise InvalidTokenError("Invalid Token")
        return TokenClaims(username=username)
