from decimal import Decimal, ROUND_HALF_UP, getcontext
from typing import Dict, List, Tuple
from collections import deque

getcontext().prec = 28
CENTS = Decimal("0.01")
ZERO = Decimal("0")


def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps floats like 0.1 from expanding to their binary value
    return Decimal(str(value))


def simplify_debts(net_map: Dict[str, Decimal]) -> List[Tuple[str, str, Decimal]]:
    """
    Standard Greedy algorithm to minimize number of transactions.

    Takes net balances (positive = receives) and returns
    (debtor_id, creditor_id, amount) transfers that clear them.
    """
    creditors = []
    debtors = []

    for uid, bal in net_map.items():
        if bal > CENTS:  # Avoid rounding noise
            creditors.append([uid, bal])
        elif bal < -CENTS:
            debtors.append([uid, -bal])

    # id as tie-breaker keeps the output stable for equal amounts
    creditors.sort(key=lambda x: (-x[1], x[0]))
    debtors.sort(key=lambda x: (-x[1], x[0]))

    creditors = deque(creditors)
    debtors = deque(debtors)

    transfers: List[Tuple[str, str, Decimal]] = []

    while creditors and debtors:
        cred_id, cred_amt = creditors[0]
        debt_id, debt_amt = debtors[0]

        pay_amt = qround(min(cred_amt, debt_amt))

        if pay_amt > 0:
            transfers.append((debt_id, cred_id, pay_amt))

        new_cred = qround(cred_amt - pay_amt)
        new_debt = qround(debt_amt - pay_amt)

        creditors.popleft()
        debtors.popleft()

        if new_cred > ZERO:
            creditors.appendleft([cred_id, new_cred])
        if new_debt > ZERO:
            debtors.appendleft([debt_id, new_debt])

    return transfers
