"""
Auth Service
Registration, login and access token verification.
"""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from feedback_api.exceptions import (
    AuthError,
    ConflictError,
    InvalidCredentialsError,
    StorageError,
    ValidationError,
)
from feedback_api.models.user import User
from feedback_api.schemas.auth import AuthResult, TokenClaims
from feedback_api.utils.security import (
    hash_password_async,
    verify_password_async,
    create_access_token,
    decode_access_token,
    DUMMY_PASSWORD_HASH
)

logger = logging.getLogger(__name__)


class AuthService:
    """
    Credential checks and token issuance.

    Errors are raised as application exceptions; database failures are
    wrapped in StorageError so no driver detail reaches the client.
    """

    async def get_user_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    def issue_token(self, user: User) -> str:
        """Sign a one-hour access token for the user."""
        return create_access_token(data={"sub": str(user.id), "email": user.email})

    async def register(
        self,
        db: AsyncSession,
        email: Optional[str],
        password: Optional[str]
    ) -> AuthResult:
        """
        Create a user and return a token for it.

        The existence check and the insert are separate statements; a
        concurrent duplicate is caught by the unique constraint on email.

        Raises:
            ValidationError: email or password missing
            ConflictError: email already registered
            StorageError: database failure
        """
        if not email or not password:
            raise ValidationError("Email and password required")

        try:
            existing_user = await self.get_user_by_email(db, email)
        except SQLAlchemyError as e:
            raise StorageError("Internal server error", operation="register.lookup") from e

        if existing_user:
            raise ConflictError("User already exists", context={"email": email})

        user = User(email=email, password_hash=await hash_password_async(password))
        db.add(user)

        try:
            await db.commit()
            await db.refresh(user)
        except IntegrityError as e:
            await db.rollback()
            raise ConflictError("User already exists", context={"email": email, "race": True}) from e
        except SQLAlchemyError as e:
            await db.rollback()
            raise StorageError("Internal server error", operation="register.insert") from e

        logger.info("Registered user %s", user.id)

        return AuthResult(token=self.issue_token(user), email=user.email)

    async def login(
        self,
        db: AsyncSession,
        email: Optional[str],
        password: Optional[str]
    ) -> AuthResult:
        """
        Check credentials and return a fresh token.

        Raises:
            InvalidCredentialsError: unknown email or wrong password
            StorageError: database failure
        """
        user = None
        if email:
            try:
                user = await self.get_user_by_email(db, email)
            except SQLAlchemyError as e:
                raise StorageError("Internal server error", operation="login.lookup") from e

        # Always run one bcrypt comparison so unknown emails aren't faster
        if user is None or not password:
            await verify_password_async(password or "", DUMMY_PASSWORD_HASH)
            raise InvalidCredentialsError()

        if not await verify_password_async(password, user.password_hash):
            raise InvalidCredentialsError(context={"user_id": str(user.id)})

        logger.info("User %s logged in", user.id)

        return AuthResult(token=self.issue_token(user), email=user.email)

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Decode an access token into its claims.

        Raises:
            AuthError: token missing, malformed, tampered with or expired
        """
        if not token:
            raise AuthError("Unauthorized")

        payload = decode_access_token(token)
        if payload is None:
            raise AuthError("Invalid or expired token")

        user_id = payload.get("sub")
        email = payload.get("email")
        if not user_id or not email:
            raise AuthError("Invalid or expired token")

        return TokenClaims(id=user_id, email=email)


auth_service = AuthService()
