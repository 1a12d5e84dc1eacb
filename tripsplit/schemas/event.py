from datetime import datetime
from typing import List
from pydantic import Field
from tripsplit.schemas.common import InModel, OutModel
from tripsplit.schemas.member import MemberOut
from tripsplit.schemas.transaction import TransactionOut

class EventCreate(InModel):
    name: str = Field(min_length=1)
    color: str | None = None

class EventUpdate(InModel):
    name: str | None = Field(default=None, min_length=1)
    color: str | None = None

class EventOut(OutModel):
    id: str
    name: str
    color: str
    created_by: str
    created_at: datetime | None = None
    members: List[MemberOut] = []

class EventSummaryOut(EventOut):
    member_count: int
    transaction_count: int

class EventDetailOut(EventOut):
    transactions: List[TransactionOut] = []

class EventEnvelope(OutModel):
    event: EventOut

class EventDetailEnvelope(OutModel):
    event: EventDetailOut

class EventsEnvelope(OutModel):
    events: List[EventSummaryOut]
