from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from tripsplit.db.session import get_db
from tripsplit.core.dependencies import AuthUser, get_current_user
from tripsplit.schemas.balances import BalancesOut, EventSettlementOut, MemberBalanceOut
from tripsplit.services.balance_services import get_event_balances, get_member_balance, get_simplified_settlements

router = APIRouter()

@router.get("/{event_id}/balances", response_model=BalancesOut)
async def event_balances(event_id: str, db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return {"balances": await get_event_balances(db, event_id, user.id)}

# declared before /{member_id} so "simplified" is not taken as a member id
@router.get("/{event_id}/balances/simplified", response_model=EventSettlementOut)
async def simplified(event_id: str, db: AsyncSession = Depends(get_db), user: AuthUser = Depends(get_current_user)):
    return await get_simplified_settlements(db, event_id, user.id)

@router.get("/{event_id}/balances/{member_id}", response_model=MemberBalanceOut)
async def member_balance(
    event_id: str,
    member_id: str,
    db: AsyncSession = Depends(get_db),
    user: AuthUser = Depends(get_current_user)
):
    return await get_member_balance(db, event_id, member_id, user.id)
