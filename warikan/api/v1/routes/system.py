from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from warikan.core.config import Settings
from warikan.core.dependencies import get_db, get_engine, get_settings
from warikan.services.system_services import check_db_service, reset_data, system_metrics, system_health

router = APIRouter()

@router.get("/health/db")
async def check_db(engine: AsyncEngine = Depends(get_engine)):
    return await check_db_service(engine)

@router.get("/metrics")
async def metrics(
    db: AsyncSession = Depends(get_db)
):
    return await system_metrics(db)

@router.get("/health")
async def health():
    return await system_health()

# wipes all data; seeds browser test runs
@router.get("/init")
async def init_data(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    if not settings.ALLOW_RESET:
        raise HTTPException(403, "Reset is disabled")
    return await reset_data(db)
