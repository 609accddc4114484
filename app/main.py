import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .config import CORS_ORIGINS, DATABASE_URL, LOG_LEVEL, TASK_STORE
from .database import build_engine, check_connection, create_tables
from .repositories import InMemoryTaskRepository, SqlTaskRepository, TaskRepository
from .routers.tasks import create_tasks_router

logger = logging.getLogger(__name__)


def build_repository(store: str = TASK_STORE, database_url: str = DATABASE_URL) -> TaskRepository:
    """Create the task store selected by configuration."""
    if store == "memory":
        logger.info("Using in-memory task store")
        return InMemoryTaskRepository()
    if store != "sql":
        raise ValueError(f"Unknown task store: {store!r}")

    engine = build_engine(database_url)
    create_tables(engine)
    logger.info("Using SQL task store at %s", engine.url.render_as_string(hide_password=True))
    return SqlTaskRepository(engine)


def create_app(repository: Optional[TaskRepository] = None) -> FastAPI:
    logging.basicConfig(level=LOG_LEVEL)

    if repository is None:
        repository = build_repository()

    app = FastAPI(
        title="Study Organizer API",
        description="Task tracking API for the study organizer",
        version="1.0.0",
    )

    # Configure CORS; the default "*" leaves the API open to any frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials="*" not in CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"detail": "Database error"})

    app.include_router(create_tasks_router(repository), tags=["tasks"])

    @app.get("/")
    def read_root():
        return {"message": "Study Organizer API running – v2"}

    @app.get("/health")
    def health_check():
        engine = getattr(repository, "engine", None)
        if engine is not None and not check_connection(engine):
            return JSONResponse(status_code=503, content={"status": "unhealthy"})
        return {"status": "healthy"}

    app.state.repository = repository
    return app


app = create_app()
