import uuid
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from tripsplit.db.session import Base

class Event(Base):
    __tablename__ = "events"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    color = Column(String, nullable=False)
    created_by = Column(String, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    members = relationship(
        "Member",
        back_populates="event",
        cascade="all, delete-orphan",
        order_by="Member.created_at",
    )
    transactions = relationship(
        "Transaction",
        back_populates="event",
        cascade="all, delete-orphan",
        order_by="Transaction.date.desc()",
    )
