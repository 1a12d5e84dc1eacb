from fastapi import Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from tripsplit.core.security import verify_token
from tripsplit.models.event import Event
from tripsplit.models.member import Member


class AuthUser(BaseModel):
    id: str


async def get_current_user(payload: dict = Depends(verify_token)) -> AuthUser:
    user_id = payload.get("sub")

    if user_id is None:
        raise HTTPException(status_code=401, detail="Invalid authentication credentials")

    return AuthUser(id=str(user_id))


async def ensure_event_owner(db: AsyncSession, event_id: str, user_id: str) -> Event:
    q = select(Event).where(Event.id == event_id, Event.created_by == user_id)
    event = await db.scalar(q)

    # someone else's event is reported the same as a missing one
    if not event:
        raise HTTPException(404, "Event not found")

    return event


async def fetch_event_member_ids(db: AsyncSession, event_id: str) -> set[str]:
    q = select(Member.id).where(Member.event_id == event_id)
    res = await db.execute(q)
    return {row[0] for row in res.all()}
