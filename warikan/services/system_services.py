import logging
from sqlalchemy import select, func, delete
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from warikan.models.expense import Expense
from warikan.models.group import Group
from warikan.models.group_member import GroupMember

logger = logging.getLogger(__name__)


async def check_db_service(engine: AsyncEngine):
    try:
        async with engine.connect() as conn:
            await conn.exec_driver_sql("SELECT 1")
        return {"db": True, "message": "Database is connected"}
    except Exception as e:
        return {"db": False, "error": str(e)}

async def system_health():
    return {
        "status": "ok"
    }

async def system_metrics(db: AsyncSession):
    groups_q = select(func.count(Group.id))
    expenses_q = select(func.count(Expense.id))

    groups_res = await db.execute(groups_q)
    expenses_res = await db.execute(expenses_q)

    return {
        "groups": groups_res.scalar(),
        "expenses": expenses_res.scalar()
    }

async def reset_data(db: AsyncSession):
    await db.execute(delete(Expense))
    await db.execute(delete(GroupMember))
    await db.execute(delete(Group))
    await db.commit()

    logger.warning("All groups and expenses were deleted")
    return {"status": "reset"}
