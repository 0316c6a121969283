import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quiz_api.models.user import User
from quiz_api.services.auth_service import AuthService
from quiz_api.utils.exceptions import DuplicateUsernameError, NotFoundError, StoreError, UnauthorizedError

logger = logging.getLogger(__name__)


class CredentialStore:
    """Users and their bcrypt password hashes.

    Username uniqueness is left to the ``users.username`` unique constraint,
    so concurrent registrations of the same name cannot both succeed.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], auth: AuthService):
        self._session_factory = session_factory
        self._auth = auth

    async def register(self, username: str, password: str) -> User:
        password_hash = await self._auth.hash_password_async(password)

        user = User(username=username, password_hash=password_hash)
        async with self._session_factory() as session:
            session.add(user)
            try:
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                logger.info("Registration rejected, username already taken: %s", username)
                raise DuplicateUsernameError("Username already exists") from exc
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception("Failed to store user %s", username)
                raise StoreError("Failed to store user", error=str(exc)) from exc

        logger.info("Registered user %s", username)
        return user

    async def find_by_username(self, username: str) -> User | None:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(User).where(User.username == username))
                return result.scalars().first()
        except SQLAlchemyError as exc:
            raise StoreError("Failed to look up user", error=str(exc)) from exc

    async def authenticate(self, username: str, password: str) -> User:
        user = await self.find_by_username(username)
        if user is None:
            logger.info("Login for unknown user %s", username)
            raise NotFoundError("User not found")

        if not await self._auth.verify_password_async(password, user.password_hash):
            logger.info("Login with wrong password for %s", username)
            raise UnauthorizedError("Invalid credentials")

        return user
