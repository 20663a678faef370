from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from warikan.core.dependencies import get_db
from warikan.schemas.group import GroupCreate, GroupOut
from warikan.services.group_services import create_group, get_group_or_404, list_groups, to_group_out

router = APIRouter()

@router.get("/", response_model=List[GroupOut])
async def all_groups(db: AsyncSession = Depends(get_db)):
    groups = await list_groups(db)
    return [to_group_out(g) for g in groups]

@router.get("/{name}", response_model=GroupOut)
async def group_by_name(name: str, db: AsyncSession = Depends(get_db)):
    group = await get_group_or_404(db, name)
    return to_group_out(group)

@router.post("/", response_model=GroupOut)
async def create_new_group(data: GroupCreate, db: AsyncSession = Depends(get_db)):
    group = await create_group(db, data)
    return to_group_out(group)
