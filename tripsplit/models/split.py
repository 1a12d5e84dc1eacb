import uuid
from sqlalchemy import Column, String, ForeignKey, Numeric, Boolean
from sqlalchemy.orm import relationship
from sqlalchemy.sql import false
from tripsplit.db.session import Base

class Split(Base):
    __tablename__ = "splits"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    transaction_id = Column(String, ForeignKey("transactions.id", ondelete="CASCADE"), nullable=False, index=True)
    member_id = Column(String, ForeignKey("members.id", ondelete="CASCADE"), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    settled = Column(Boolean, nullable=False, default=False, server_default=false())

    transaction = relationship("Transaction", back_populates="splits")
    member = relationship("Member")
