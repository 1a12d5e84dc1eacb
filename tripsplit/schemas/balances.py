from typing import List
from tripsplit.schemas.common import Money, OutModel

class PayEntry(OutModel):
    to_member_id: str
    to_member_name: str
    amount: Money

class ReceiveEntry(OutModel):
    from_member_id: str
    from_member_name: str
    amount: Money

class MemberBalance(OutModel):
    member_id: str
    member_name: str
    balance: Money
    will_pay: List[PayEntry] = []
    will_receive: List[ReceiveEntry] = []

class BalancesOut(OutModel):
    balances: dict[str, MemberBalance]

class MemberBalanceOut(OutModel):
    balance: MemberBalance
    total_to_pay: Money
    total_to_receive: Money
    settled_up: bool

class Settlement(OutModel):
    from_id: str
    from_name: str | None
    to_id: str
    to_name: str | None
    amount: Money

class EventSettlementOut(OutModel):
    net: dict[str, Money]
    settlements: list[Settlement]
