from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import get_settings
from app.db.session import engine, init_db
from app.logging_config import configure_logging
from app.routers import calls as calls_router
from app.routers import pages as pages_router

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    init_db(engine)
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# Routers
app.include_router(pages_router.router)
app.include_router(calls_router.router)
