from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from warikan.core.dependencies import get_db
from warikan.schemas.expense import ExpenseCreate, ExpenseOut
from warikan.services.expense_services import create_expense, get_expenses_by_group

router = APIRouter()

@router.post("/", response_model=ExpenseOut)
async def add_expense(data: ExpenseCreate, db: AsyncSession = Depends(get_db)):
    return await create_expense(db, data)

@router.get("/{group_name}", response_model=List[ExpenseOut])
async def group_expenses(group_name: str, db: AsyncSession = Depends(get_db)):
    return await get_expenses_by_group(db, group_name)
