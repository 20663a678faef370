import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from warikan.api.v1.routes.expense import router as expense_router
from warikan.api.v1.routes.group import router as group_router
from warikan.api.v1.routes.settlement import router as settlement_router
from warikan.api.v1.routes.system import router as system_router
from warikan.core.config import Settings, settings as default_settings
from warikan.core.db_check import wait_for_db
from warikan.db.session import init_models, make_engine, make_sessionmaker

# registers tables on Base.metadata
from warikan.models import expense, group, group_member  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    await wait_for_db(engine, retries=app.state.settings.DB_CONNECT_RETRIES)
    await init_models(engine)
    yield
    await engine.dispose()


def create_app(settings: Settings = default_settings) -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Warikan Backend", lifespan=lifespan)

    engine = make_engine(settings.DATABASE_URL)
    app.state.settings = settings
    app.state.engine = engine
    app.state.sessionmaker = make_sessionmaker(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        return {"message": "Warikan Backend is live"}

    app.include_router(system_router, prefix="/api/v1/system", tags=["system"])
    app.include_router(group_router, prefix="/api/v1/groups", tags=["groups"])
    app.include_router(expense_router, prefix="/api/v1/expenses", tags=["expenses"])
    app.include_router(settlement_router, prefix="/api/v1/settlements", tags=["settlements"])

    logger.debug("Application created for %s", settings.DATABASE_URL)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("warikan.main:app", host="0.0.0.0", port=8000, reload=False)
