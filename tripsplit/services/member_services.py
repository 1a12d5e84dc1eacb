import logging
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from tripsplit.core.dependencies import ensure_event_owner
from tripsplit.models.member import Member
from tripsplit.schemas.member import MemberAdd, MemberOut

logger = logging.getLogger(__name__)


async def list_members(db: AsyncSession, event_id: str, user_id: str):
    await ensure_event_owner(db, event_id, user_id)

    q = (
        select(Member)
        .where(Member.event_id == event_id)
        .order_by(Member.created_at, Member.id)
    )
    members = (await db.scalars(q)).all()
    return [MemberOut.model_validate(m) for m in members]


async def add_members(db: AsyncSession, data: MemberAdd, event_id: str, user_id: str):
    """Returns the created members; a single-member request yields a list of one."""
    await ensure_event_owner(db, event_id, user_id)

    if data.members is not None:
        members = [Member(event_id=event_id, name=name.strip()) for name in data.members]
    else:
        members = [Member(event_id=event_id, name=data.name.strip(), user_id=data.user_id)]

    db.add_all(members)
    await db.commit()

    for m in members:
        await db.refresh(m)

    logger.info("Added %s member(s) to event %s", len(members), event_id)

    return [MemberOut.model_validate(m) for m in members]
