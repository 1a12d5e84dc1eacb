from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from tripsplit.db.session import get_db
from tripsplit.core.dependencies import AuthUser, get_current_user
from tripsplit.schemas.transaction import TransactionCreate, TransactionEnvelope, TransactionsEnvelope
from tripsplit.services.transaction_services import list_transactions, create_transaction, delete_transaction

router = APIRouter()

@router.get("/{event_id}/transactions", response_model=TransactionsEnvelope)
async def event_transactions(event_id: str, db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return {"transactions": await list_transactions(db, event_id, user.id)}

@router.post("/{event_id}/transactions", response_model=TransactionEnvelope, status_code=status.HTTP_201_CREATED)
async def add_transaction(
    event_id: str,
    data: TransactionCreate,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user)
):
    return {"transaction": await create_transaction(db, data, event_id, user.id)}

@router.delete("/{event_id}/transactions/{transaction_id}")
async def del_transaction(
    event_id: str,
    transaction_id: str,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user)
):
    return await delete_transaction(db, event_id, transaction_id, user.id)
