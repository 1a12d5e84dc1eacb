import logging
from decimal import Decimal
from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from tripsplit.core.config import settings
from tripsplit.core.dependencies import ensure_event_owner, fetch_event_member_ids
from tripsplit.models.split import Split
from tripsplit.models.transaction import Transaction
from tripsplit.schemas.transaction import TransactionCreate, TransactionOut

logger = logging.getLogger(__name__)


def _with_tree(q):
    return q.options(
        selectinload(Transaction.paid_by),
        selectinload(Transaction.splits).selectinload(Split.member),
    )


async def list_transactions(db: AsyncSession, event_id: str, user_id: str):
    await ensure_event_owner(db, event_id, user_id)

    q = _with_tree(
        select(Transaction)
        .where(Transaction.event_id == event_id)
        .order_by(Transaction.date.desc(), Transaction.id.desc())
    )
    transactions = (await db.scalars(q)).all()
    return [TransactionOut.model_validate(t) for t in transactions]


async def create_transaction(db: AsyncSession, data: TransactionCreate, event_id: str, user_id: str):
    await ensure_event_owner(db, event_id, user_id)

    event_member_ids = await fetch_event_member_ids(db, event_id)

    # -----------------------------------
    # 1. Validate payer
    # -----------------------------------
    if data.paid_by_id not in event_member_ids:
        raise HTTPException(400, "Payer is not a member of the event")

    # -----------------------------------
    # 2. Validate split members
    # -----------------------------------
    member_ids = [s.member_id for s in data.splits]

    if len(member_ids) != len(set(member_ids)):
        raise HTTPException(400, "Duplicate members found in splits")

    if not set(member_ids) <= event_member_ids:
        raise HTTPException(400, "One or more members in splits are not members of the event")

    # -----------------------------------
    # 3. Validate amounts
    # -----------------------------------
    splits_total = sum((s.amount for s in data.splits), Decimal("0"))
    tolerance = Decimal(str(settings.SPLIT_TOLERANCE))

    if abs(splits_total - data.amount) > tolerance:
        raise HTTPException(
            400,
            f"Sum of splits must equal the total amount ({splits_total} != {data.amount})"
        )

    # -----------------------------------
    # 4. Create transaction with splits
    # -----------------------------------
    transaction = Transaction(
        event_id=event_id,
        description=data.description,
        amount=data.amount,
        paid_by_id=data.paid_by_id,
        splits=[
            Split(member_id=s.member_id, amount=s.amount, settled=s.settled)
            for s in data.splits
        ],
    )
    if data.date:
        transaction.date = data.date

    db.add(transaction)
    await db.commit()

    logger.info("Transaction %s recorded in event %s", transaction.id, event_id)

    q = _with_tree(
        select(Transaction)
        .where(Transaction.id == transaction.id)
        .execution_options(populate_existing=True)
    )
    transaction = await db.scalar(q)
    return TransactionOut.model_validate(transaction)


async def delete_transaction(db: AsyncSession, event_id: str, transaction_id: str, user_id: str):
    await ensure_event_owner(db, event_id, user_id)

    q = (
        select(Transaction)
        .options(selectinload(Transaction.splits))
        .where(Transaction.id == transaction_id, Transaction.event_id == event_id)
    )
    transaction = await db.scalar(q)

    if not transaction:
        raise HTTPException(404, "Transaction not found")

    await db.delete(transaction)
    await db.commit()

    logger.info("Transaction %s deleted from event %s", transaction_id, event_id)

    return {"success": True}
