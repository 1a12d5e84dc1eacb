from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from tripsplit.core.balances import compute_balances, net_balances, total_to_pay, total_to_receive
from tripsplit.core.utils import simplify_debts
from tripsplit.schemas.balances import MemberBalanceOut, Settlement
from tripsplit.services.event_services import load_event


async def get_event_balances(db: AsyncSession, event_id: str, user_id: str):
    event = await load_event(db, event_id, user_id, with_transactions=True)
    return compute_balances(event.members, event.transactions)


async def get_member_balance(db: AsyncSession, event_id: str, member_id: str, user_id: str):
    balances = await get_event_balances(db, event_id, user_id)

    balance = balances.get(member_id)
    if balance is None:
        raise HTTPException(404, "Member not found")

    return MemberBalanceOut(
        balance=balance,
        total_to_pay=total_to_pay(balance),
        total_to_receive=total_to_receive(balance),
        settled_up=not balance.will_pay and not balance.will_receive,
    )


async def get_simplified_settlements(db: AsyncSession, event_id: str, user_id: str):
    balances = await get_event_balances(db, event_id, user_id)
    net = net_balances(balances)

    settlements = [
        Settlement(
            from_id=debtor_id,
            from_name=balances[debtor_id].member_name,
            to_id=creditor_id,
            to_name=balances[creditor_id].member_name,
            amount=amount,
        )
        for debtor_id, creditor_id, amount in simplify_debts(net)
    ]

    return {"net": net, "settlements": settlements}
