"""Liveness, database reachability and row counts for operators."""

import logging
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from tripsplit.db.session import engine
from tripsplit.models.event import Event
from tripsplit.models.member import Member
from tripsplit.models.transaction import Transaction
from tripsplit.schemas.system import DbHealthOut, HealthOut, MetricsOut

logger = logging.getLogger(__name__)


async def probe_database() -> DbHealthOut:
    # reported, not raised: the endpoint exists to describe the failure
    try:
        async with engine.connect() as conn:
            await conn.exec_driver_sql("SELECT 1")
    except Exception as e:
        logger.warning("Database health probe failed: %s", e)
        return DbHealthOut(db=False, error=str(e))

    return DbHealthOut(db=True, message="Database is connected")


def liveness() -> HealthOut:
    return HealthOut(status="ok")


async def count_rows(db: AsyncSession) -> MetricsOut:
    q = select(
        select(func.count(Event.id)).scalar_subquery(),
        select(func.count(Member.id)).scalar_subquery(),
        select(func.count(Transaction.id)).scalar_subquery(),
    )
    events, members, transactions = (await db.execute(q)).one()

    return MetricsOut(events=events, members=members, transactions=transactions)
