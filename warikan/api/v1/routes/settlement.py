from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from warikan.core.dependencies import get_db
from warikan.schemas.balances import MemberBalance
from warikan.schemas.settlements import Settlement
from warikan.services.settlement_service import compute_group_balances, compute_group_settlements

router = APIRouter()


@router.get("/{group_name}", response_model=List[Settlement])
async def get_settlements(group_name: str, db: AsyncSession = Depends(get_db)):
    return await compute_group_settlements(db, group_name)


@router.get("/{group_name}/balances", response_model=List[MemberBalance])
async def get_balances(group_name: str, db: AsyncSession = Depends(get_db)):
    return await compute_group_balances(db, group_name)
