from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine

async def get_db(request: Request):
    async with request.app.state.sessionmaker() as session:
        yield session

def get_engine(request: Request) -> AsyncEngine:
    return request.app.state.engine

def get_settings(request: Request):
    return request.app.state.settings
