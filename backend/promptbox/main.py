"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from promptbox.config import settings
from promptbox.database import engine, get_db
from promptbox.logger import configure_logging
from promptbox.models import Base

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup, dispose the engine on shutdown."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("PromptBox API ready")

    yield

    await engine.dispose()


app = FastAPI(
    title="PromptBox API",
    version="1.0.0",
    description="Prompt library and multi-format content transcoder.",
    lifespan=lifespan,
)

# CORS
origins = [o.strip() for o in settings.CORS_ORIGINS.split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
async def health_check():
    """Verify API and database connectivity."""
    try:
        async for db in get_db():
            await db.execute(text("SELECT 1"))
            return {"status": "ok", "database": "connected"}
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return {"status": "error", "database": str(e)}


# Register routers
from promptbox.routes.prompts import router as prompts_router
from promptbox.routes.transcode import router as transcode_router
from promptbox.routes.tags import router as tags_router
from promptbox.routes.auth import router as auth_router
app.include_router(prompts_router)
app.include_router(transcode_router)
app.include_router(tags_router)
app.include_router(auth_router)


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn
    uvicorn.run("promptbox.main:app", host="0.0.0.0", port=settings.API_PORT)
