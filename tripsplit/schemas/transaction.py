from datetime import datetime
from decimal import Decimal
from typing import List
from pydantic import Field
from tripsplit.schemas.common import InModel, Money, OutModel
from tripsplit.schemas.member import MemberOut

class SplitInput(InModel):
    member_id: str
    amount: Decimal = Field(gt=0)
    settled: bool = False

class TransactionCreate(InModel):
    description: str = Field(min_length=1)
    amount: Decimal = Field(gt=0)
    paid_by_id: str = Field(min_length=1)
    splits: List[SplitInput] = Field(min_length=1)
    date: datetime | None = None

class SplitOut(OutModel):
    id: str
    member_id: str
    amount: Money
    settled: bool
    member: MemberOut

class TransactionOut(OutModel):
    id: str
    event_id: str
    description: str
    amount: Money
    paid_by_id: str
    paid_by: MemberOut
    date: datetime
    splits: List[SplitOut]

class TransactionEnvelope(OutModel):
    transaction: TransactionOut

class TransactionsEnvelope(OutModel):
    transactions: List[TransactionOut]
