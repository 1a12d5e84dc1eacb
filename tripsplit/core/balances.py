"""
Balance computation for an event.

Debts are accumulated per ordered (debtor, creditor) pair. The reverse pair
is tracked on its own, so A -> B and B -> A can both be outstanding at the
same time; nothing is netted across pairs. For a minimal set of transfers
use `simplify_debts` on the resulting net balances instead.
"""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, Tuple

from tripsplit.core.utils import ZERO, to_decimal
from tripsplit.schemas.balances import MemberBalance, PayEntry, ReceiveEntry

logger = logging.getLogger(__name__)


def compute_balances(members: Iterable, transactions: Iterable) -> Dict[str, MemberBalance]:
    """
    Build a MemberBalance for every member of the roster.

    `members` are objects with `id` and `name`; `transactions` carry
    `paid_by` (a member) and `splits`, each split with `member`, `amount`
    and `settled`. ORM rows and plain objects both work.

    Settled splits and splits owed by the payer to themselves are skipped.
    A split member missing from the roster gets no record of their own and
    is shown to counterparties under their raw id.
    """
    names: Dict[str, str] = {}
    running: Dict[str, Decimal] = {}
    for member in members:
        names[member.id] = member.name
        running[member.id] = ZERO

    # (debtor_id, creditor_id) -> outstanding amount
    debts: Dict[Tuple[str, str], Decimal] = defaultdict(lambda: ZERO)

    for txn in transactions:
        payer_id = txn.paid_by.id
        for split in txn.splits:
            if split.settled or split.member.id == payer_id:
                continue
            debts[(split.member.id, payer_id)] += to_decimal(split.amount)

    will_pay = defaultdict(list)
    will_receive = defaultdict(list)

    # sorted so list order does not depend on transaction order
    for (debtor_id, creditor_id), amount in sorted(debts.items()):
        if amount == ZERO:
            continue

        for member_id in (debtor_id, creditor_id):
            if member_id not in names:
                logger.warning("Split references member %s outside the roster", member_id)

        if debtor_id in running:
            running[debtor_id] -= amount
            will_pay[debtor_id].append(PayEntry(
                to_member_id=creditor_id,
                to_member_name=names.get(creditor_id, creditor_id),
                amount=amount,
            ))
        if creditor_id in running:
            running[creditor_id] += amount
            will_receive[creditor_id].append(ReceiveEntry(
                from_member_id=debtor_id,
                from_member_name=names.get(debtor_id, debtor_id),
                amount=amount,
            ))

    return {
        member_id: MemberBalance(
            member_id=member_id,
            member_name=names[member_id],
            balance=running[member_id],
            will_pay=will_pay[member_id],
            will_receive=will_receive[member_id],
        )
        for member_id in names
    }


def total_to_pay(balance: MemberBalance) -> Decimal:
    return sum((debt.amount for debt in balance.will_pay), ZERO)


def total_to_receive(balance: MemberBalance) -> Decimal:
    return sum((credit.amount for credit in balance.will_receive), ZERO)


def net_balances(balances: Dict[str, MemberBalance]) -> Dict[str, Decimal]:
    return {member_id: b.balance for member_id, b in balances.items()}
