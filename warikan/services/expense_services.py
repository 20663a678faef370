import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from fastapi import HTTPException
from warikan.models.expense import Expense
from warikan.models.group import Group
from warikan.schemas.expense import ExpenseCreate, ExpenseOut
from warikan.services.group_services import get_group_or_404

logger = logging.getLogger(__name__)


def to_expense_out(expense: Expense, group_name: str) -> ExpenseOut:
    return ExpenseOut(
        id=expense.id,
        group_name=group_name,
        expense_name=expense.expense_name,
        payer=expense.payer,
        amount=expense.amount
    )

async def load_group_expenses(db: AsyncSession, group: Group) -> List[ExpenseOut]:
    q = select(Expense).where(Expense.group_id == group.id).order_by(Expense.id)
    result = await db.scalars(q)
    return [to_expense_out(e, group.name) for e in result.all()]

# payer must already belong to the group; settlement netting relies on it
async def create_expense(db: AsyncSession, data: ExpenseCreate) -> ExpenseOut:
    group = await get_group_or_404(db, data.group_name)

    if data.payer not in group.member_names:
        raise HTTPException(400, "Payer is not a member of the group")

    expense = Expense(
        group_id=group.id,
        expense_name=data.expense_name,
        payer=data.payer,
        amount=data.amount
    )

    db.add(expense)
    await db.commit()
    await db.refresh(expense)

    logger.info("Recorded expense %r in group %r: %s paid %d", expense.expense_name, group.name, expense.payer, expense.amount)
    return to_expense_out(expense, group.name)

async def get_expenses_by_group(db: AsyncSession, group_name: str) -> List[ExpenseOut]:
    group = await get_group_or_404(db, group_name)
    return await load_group_expenses(db, group)
