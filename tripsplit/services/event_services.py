import logging
from fastapi import HTTPException
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from tripsplit.core.config import settings
from tripsplit.models.event import Event
from tripsplit.models.split import Split
from tripsplit.models.transaction import Transaction
from tripsplit.schemas.event import EventCreate, EventUpdate, EventOut, EventDetailOut, EventSummaryOut

logger = logging.getLogger(__name__)


async def load_event(db: AsyncSession, event_id: str, user_id: str, with_transactions: bool = False) -> Event:
    """Fetch an owned event with members (and optionally the full transaction tree)."""
    options = [selectinload(Event.members)]
    if with_transactions:
        options.append(
            selectinload(Event.transactions).options(
                selectinload(Transaction.paid_by),
                selectinload(Transaction.splits).selectinload(Split.member),
            )
        )

    q = (
        select(Event)
        .options(*options)
        .where(Event.id == event_id, Event.created_by == user_id)
        .execution_options(populate_existing=True)
    )
    event = await db.scalar(q)

    if not event:
        raise HTTPException(404, "Event not found")

    return event


async def create_event(db: AsyncSession, data: EventCreate, user_id: str):
    event = Event(
        name=data.name,
        color=data.color or settings.DEFAULT_EVENT_COLOR,
        created_by=user_id,
    )
    db.add(event)
    await db.commit()

    logger.info("Event %s created by %s", event.id, user_id)

    event = await load_event(db, event.id, user_id)
    return EventOut.model_validate(event)


async def list_events(db: AsyncSession, user_id: str):
    q = (
        select(Event)
        .options(selectinload(Event.members))
        .where(Event.created_by == user_id)
        .order_by(Event.created_at.desc(), Event.id.desc())
    )
    events = (await db.scalars(q)).all()

    counts_q = (
        select(Transaction.event_id, func.count(Transaction.id))
        .join(Event, Event.id == Transaction.event_id)
        .where(Event.created_by == user_id)
        .group_by(Transaction.event_id)
    )
    txn_counts = dict((await db.execute(counts_q)).all())

    return [
        EventSummaryOut(
            **EventOut.model_validate(event).model_dump(),
            member_count=len(event.members),
            transaction_count=txn_counts.get(event.id, 0),
        )
        for event in events
    ]


async def get_event(db: AsyncSession, event_id: str, user_id: str):
    event = await load_event(db, event_id, user_id, with_transactions=True)
    return EventDetailOut.model_validate(event)


async def update_event(db: AsyncSession, data: EventUpdate, event_id: str, user_id: str):
    event = await load_event(db, event_id, user_id)

    if data.name:
        event.name = data.name

    if data.color:
        event.color = data.color

    await db.commit()

    event = await load_event(db, event_id, user_id)
    return EventOut.model_validate(event)


async def delete_event(db: AsyncSession, event_id: str, user_id: str):
    # ORM cascade needs the whole tree loaded
    event = await load_event(db, event_id, user_id, with_transactions=True)

    await db.delete(event)
    await db.commit()

    logger.info("Event %s deleted", event_id)

    return {"success": True}
