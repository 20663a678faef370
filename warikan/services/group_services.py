import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from fastapi import HTTPException
from warikan.models.group import Group
from warikan.models.group_member import GroupMember
from warikan.schemas.group import GroupCreate, GroupOut

logger = logging.getLogger(__name__)


def to_group_out(group: Group) -> GroupOut:
    return GroupOut(name=group.name, members=group.member_names)

async def list_groups(db: AsyncSession) -> List[Group]:
    result = await db.execute(select(Group).order_by(Group.id))
    return result.scalars().all()

async def get_group_by_name(db: AsyncSession, name: str) -> Optional[Group]:
    q = select(Group).where(Group.name == name)
    result = await db.execute(q)
    return result.scalar_one_or_none()

async def get_group_or_404(db: AsyncSession, name: str) -> Group:
    group = await get_group_by_name(db, name)

    if not group:
        raise HTTPException(404, f"Group {name} does not exist")

    return group

async def create_group(db: AsyncSession, data: GroupCreate) -> Group:
    if await get_group_by_name(db, data.name):
        raise HTTPException(400, "A group with the same name already exists")

    if len(data.members) != len(set(data.members)):
        raise HTTPException(400, "Duplicate members found in group")

    group = Group(
        name=data.name,
        members=[
            GroupMember(name=member, position=i)
            for i, member in enumerate(data.members)
        ]
    )

    db.add(group)
    await db.commit()

    logger.info("Created group %r with %d members", group.name, len(data.members))
    return group
