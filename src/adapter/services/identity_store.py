import logging
from datetime import datetime

import bcrypt
from pydantic import EmailStr, TypeAdapter, ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.identity_store import (
    DUPLICATE_IDENTITY,
    IDENTITY_STORE_UNAVAILABLE,
    INVALID_CREDENTIAL,
    INVALID_EMAIL,
    SIGNUP_DISABLED,
    WEAK_PASSWORD,
    CreatedIdentity,
    IIdentityStore,
)
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Identity

logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)


class SqlIdentityStore(IIdentityStore):
    """
    Identity store backed by the identities table.

    Uniqueness of email is enforced by the database index; a lost race on
    insert is resolved the same way as an email found up front.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        signup_enabled: bool = True,
        min_password_length: int = 0,
        bcrypt_rounds: int = 12,
    ):
        self.uow = uow
        self.signup_enabled = signup_enabled
        self.min_password_length = min_password_length
        self.bcrypt_rounds = bcrypt_rounds

    async def exists(self, email: str) -> Result[bool]:
        try:
            async with self.uow:
                identity = await self.uow.identities.get_by_email(email)
        except SQLAlchemyError as exc:
            logger.error(f"Identity lookup failed for {email}: {exc}")
            return Return.err(
                Error(IDENTITY_STORE_UNAVAILABLE, "Identity store unavailable", str(exc))
            )
        return Return.ok(identity is not None)

    async def create(
        self, email: str, password: str, display_name: str
    ) -> Result[CreatedIdentity]:
        if not self.signup_enabled:
            return Return.err(
                Error(SIGNUP_DISABLED, "Email/password sign-up is not enabled")
            )

        try:
            _email_adapter.validate_python(email)
        except ValidationError:
            return Return.err(Error(INVALID_EMAIL, "The email address is badly formatted"))

        if len(password) < self.min_password_length:
            return Return.err(
                Error(
                    WEAK_PASSWORD,
                    f"Password should be at least {self.min_password_length} characters",
                )
            )

        try:
            async with self.uow:
                existing = await self.uow.identities.get_by_email(email)
                if existing is not None:
                    return await self._authenticate_existing(existing, password)

                password_hash = bcrypt.hashpw(
                    password.encode("utf-8"), bcrypt.gensalt(self.bcrypt_rounds)
                )
                identity = Identity(
                    email=email,
                    display_name=display_name,
                    password_hash=password_hash.decode("utf-8"),
                )
                try:
                    identity = await self.uow.identities.create(identity)
                    await self.uow.commit()
                except IntegrityError:
                    # Another request inserted the same email first
                    await self.uow.rollback()
                    existing = await self.uow.identities.get_by_email(email)
                    if existing is None:
                        raise
                    return await self._authenticate_existing(existing, password)

                logger.info(f"Identity created for {email} with ID: {identity.id}")
                return Return.ok(CreatedIdentity(identity=identity))
        except SQLAlchemyError as exc:
            logger.error(f"Identity creation failed for {email}: {exc}")
            return Return.err(
                Error(IDENTITY_STORE_UNAVAILABLE, "Identity store unavailable", str(exc))
            )

    async def _authenticate_existing(
        self, existing: Identity, password: str
    ) -> Result[CreatedIdentity]:
        logger.info(f"Email {existing.email} already in use, trying supplied credentials")
        try:
            password_valid = bcrypt.checkpw(
                password.encode("utf-8"), existing.password_hash.encode("utf-8")
            )
        except ValueError:
            logger.error(f"Stored credential for identity {existing.id} is unreadable")
            return Return.err(
                Error(INVALID_CREDENTIAL, "Stored credential for this account is invalid")
            )

        if not password_valid:
            return Return.err(Error(DUPLICATE_IDENTITY, "User already exists"))

        existing.last_sign_in_at = datetime.utcnow()
        existing = await self.uow.identities.update(existing)
        await self.uow.commit()
        return Return.ok(CreatedIdentity(identity=existing, already_exists=True))
