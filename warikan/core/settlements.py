"""
Settlement netting for a group's expenses.

Every expense is split evenly across all members of the group. The engine works
out each member's net balance (paid minus fair share) and turns the balances
into the smallest practical list of direct payments.

Member order matters: it decides who receives the remainder of an uneven split
and which member is picked first when several have the same balance.
"""

import heapq
import logging
from typing import Dict, List, Mapping, Sequence

from warikan.core.utils import split_evenly
from warikan.schemas.balances import MemberBalance
from warikan.schemas.expense import ExpenseBase
from warikan.schemas.settlements import Settlement

logger = logging.getLogger(__name__)


def tally_balances(
    expenses: Sequence[ExpenseBase], members: Sequence[str]
) -> List[MemberBalance]:
    """
    Per-member paid / fair share / balance, in member order.

    Raises ValueError if an expense was paid by someone outside `members`.
    """
    paid: Dict[str, int] = {member: 0 for member in members}

    for exp in expenses:
        if exp.payer not in paid:
            raise ValueError(f"Payer {exp.payer!r} is not a member of the group")
        paid[exp.payer] += exp.amount

    shares = split_evenly(sum(paid.values()), len(members))

    return [
        MemberBalance(
            member=member,
            paid=paid[member],
            fair_share=share,
            balance=paid[member] - share,
        )
        for member, share in zip(members, shares)
    ]


def simplify_debts(balances: Mapping[str, int]) -> List[Settlement]:
    """
    Greedy netting: the largest debtor pays the largest creditor until every
    balance is zero. Ties go to whoever comes first in `balances`.
    """
    rank = {member: i for i, member in enumerate(balances)}

    # (signed key, rank, member): both heaps pop the largest magnitude first
    creditors = [(-bal, rank[m], m) for m, bal in balances.items() if bal > 0]
    debtors = [(bal, rank[m], m) for m, bal in balances.items() if bal < 0]
    heapq.heapify(creditors)
    heapq.heapify(debtors)

    settlements: List[Settlement] = []

    while creditors and debtors:
        cred_key, cred_rank, creditor = heapq.heappop(creditors)
        debt_key, debt_rank, debtor = heapq.heappop(debtors)

        amount = min(-cred_key, -debt_key)
        settlements.append(Settlement(from_member=debtor, to=creditor, amount=amount))

        if -cred_key > amount:
            heapq.heappush(creditors, (cred_key + amount, cred_rank, creditor))
        if -debt_key > amount:
            heapq.heappush(debtors, (debt_key + amount, debt_rank, debtor))

    return settlements


def calculate_settlements(
    expenses: Sequence[ExpenseBase], members: Sequence[str]
) -> List[Settlement]:
    """
    Payments that settle `expenses` among `members`.

    Groups with fewer than two members never need a settlement. Otherwise every
    payer must be listed in `members` (ValueError if not).
    """
    if len(members) < 2:
        return []

    balances = {b.member: b.balance for b in tally_balances(expenses, members)}
    settlements = simplify_debts(balances)

    logger.debug(
        "Netted %d expenses across %d members into %d settlements",
        len(expenses),
        len(members),
        len(settlements),
    )
    return settlements
