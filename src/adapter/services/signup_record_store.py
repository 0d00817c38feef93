import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.signup_record_store import ISignupRecordStore
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SignupRecord

logger = logging.getLogger(__name__)


class SqlSignupRecordStore(ISignupRecordStore):
    """Record store backed by the signup_records table"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def save(self, identity_id: str, record: SignupRecord) -> Result[SignupRecord]:
        record.identity_id = identity_id
        try:
            async with self.uow:
                saved = await self.uow.signup_records.upsert(record)
                await self.uow.commit()
        except SQLAlchemyError as exc:
            logger.error(f"Saving signup record for {identity_id} failed: {exc}")
            return Return.err(
                Error("RECORD_PERSIST_FAILED", "Could not save signup record", str(exc))
            )

        logger.info(f"Signup record saved for identity {identity_id}")
        return Return.ok(saved)

    async def get(self, identity_id: str) -> Optional[SignupRecord]:
        async with self.uow:
            record = await self.uow.signup_records.get_by_identity_id(identity_id)
            if record is None:
                return None
            # Detached copy; leaving the unit of work expires loaded rows
            return SignupRecord.model_validate(record.model_dump())
