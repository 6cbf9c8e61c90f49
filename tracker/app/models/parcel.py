"""
Parcel database model.

One row per tracked shipment, keyed by an auto-assigned parcel number.
"""

from sqlalchemy import Column, Integer, Text
from tracker.app.db.session import Base


class ParcelRecord(Base):
    """
    Row mapping for the ``parcel`` table.

    Status is stored as free text; no state machine is enforced at this layer.
    """
    __tablename__ = "parcel"
    __table_args__ = {"sqlite_autoincrement": True}

    number = Column(Integer, primary_key=True, autoincrement=True)
    client = Column(Integer)
    status = Column(Text)
    address = Column(Text)
    created_at = Column(Text)

    def __repr__(self):
        return f"<ParcelRecord(number={self.number}, client={self.client}, status='{self.status}')>"
