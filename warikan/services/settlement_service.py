from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from warikan.core.settlements import calculate_settlements, tally_balances
from warikan.schemas.balances import MemberBalance
from warikan.schemas.settlements import Settlement
from warikan.services.expense_services import load_group_expenses
from warikan.services.group_services import get_group_or_404

async def compute_group_settlements(db: AsyncSession, group_name: str) -> List[Settlement]:
    group = await get_group_or_404(db, group_name)
    expenses = await load_group_expenses(db, group)

    return calculate_settlements(expenses, group.member_names)

async def compute_group_balances(db: AsyncSession, group_name: str) -> List[MemberBalance]:
    group = await get_group_or_404(db, group_name)
    expenses = await load_group_expenses(db, group)

    return tally_balances(expenses, group.member_names)
