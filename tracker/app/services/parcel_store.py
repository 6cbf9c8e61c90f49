"""
Parcel store service.

Translates parcel operations into statements against the ``parcel`` table
using a caller-supplied SQLAlchemy session. The store never opens or closes
the session; it commits after each successful write and rolls back on
failure.

Conditional writes (``set_address``, ``delete``) only touch parcels that are
still ``registered``. When the condition fails they affect zero rows and
return normally, so callers cannot tell "unknown number" from "wrong status"
through these calls alone.
"""

from typing import List

from pydantic import ValidationError
from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tracker.app.core.exceptions import ParcelNotFoundError, PersistenceError
from tracker.app.core.observability import observe
from tracker.app.models.parcel import ParcelRecord
from tracker.app.models.parcel_enums import ParcelStatus, status_value
from tracker.app.schemas.parcel import Parcel

# The sqlite3 driver raises OverflowError for ints outside 64-bit range
# without SQLAlchemy wrapping it.
DB_ERRORS = (SQLAlchemyError, OverflowError)


class ParcelStore:
    """CRUD access to parcel rows over an already-open session."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, parcel: Parcel) -> int:
        """
        Insert a new parcel row.

        Args:
            parcel: Record to store; its ``number`` is ignored

        Returns:
            Newly assigned parcel number

        Raises:
            PersistenceError: If the insert or number retrieval fails
        """
        with observe("add", client=parcel.client) as log_data:
            record = ParcelRecord(
                client=parcel.client,
                status=status_value(parcel.status),
                address=parcel.address,
                created_at=parcel.created_at
            )
            try:
                self.db.add(record)
                self.db.flush()
                number = record.number
                self.db.commit()
            except DB_ERRORS as exc:
                self.db.rollback()
                raise PersistenceError("add", exc) from exc

            log_data["number"] = number
            return number

    def get(self, number: int) -> Parcel:
        """
        Fetch one parcel by number.

        Raises:
            ParcelNotFoundError: If no row matches
            PersistenceError: On any other read failure
        """
        with observe("get", number=number):
            query = (
                select(ParcelRecord)
                .where(ParcelRecord.number == number)
                .execution_options(populate_existing=True)
            )
            try:
                record = self.db.execute(query).scalar_one_or_none()
                if record is None:
                    raise ParcelNotFoundError(number)
                return Parcel.model_validate(record)
            except (*DB_ERRORS, ValidationError) as exc:
                self.db.rollback()
                raise PersistenceError("get", exc) from exc

    def get_by_client(self, client: int) -> List[Parcel]:
        """
        Fetch every parcel owned by ``client``.

        Order is whatever the engine returns. An unknown client yields an
        empty list. The result is fully drained before returning.
        """
        with observe("get_by_client", client=client) as log_data:
            query = (
                select(ParcelRecord)
                .where(ParcelRecord.client == client)
                .execution_options(populate_existing=True)
            )
            try:
                records = self.db.execute(query).scalars().all()
                parcels = [Parcel.model_validate(record) for record in records]
            except (*DB_ERRORS, ValidationError) as exc:
                self.db.rollback()
                raise PersistenceError("get_by_client", exc) from exc

            log_data["count"] = len(parcels)
            return parcels

    def set_status(self, number: int, status: str) -> None:
        """Overwrite the status of a parcel. Unknown numbers are a no-op."""
        stmt = (
            update(ParcelRecord)
            .where(ParcelRecord.number == number)
            .values(status=status_value(status))
        )
        self._write("set_status", stmt, number=number)

    def set_address(self, number: int, address: str) -> None:
        """Overwrite the address of a parcel that is still registered."""
        stmt = (
            update(ParcelRecord)
            .where(
                ParcelRecord.number == number,
                ParcelRecord.status == ParcelStatus.REGISTERED.value
            )
            .values(address=address)
        )
        self._write("set_address", stmt, number=number)

    def delete(self, number: int) -> None:
        """Remove a parcel that is still registered."""
        stmt = delete(ParcelRecord).where(
            ParcelRecord.number == number,
            ParcelRecord.status == ParcelStatus.REGISTERED.value
        )
        self._write("delete", stmt, number=number)

    def _write(self, operation: str, stmt, **fields) -> None:
        with observe(operation, **fields) as log_data:
            try:
                result = self.db.execute(stmt)
                self.db.commit()
            except DB_ERRORS as exc:
                self.db.rollback()
                raise PersistenceError(operation, exc) from exc

            log_data["affected"] = result.rowcount
