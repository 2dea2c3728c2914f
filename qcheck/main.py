from fastapi import FastAPI
import asyncio
import logging
from pathlib import Path
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from qcheck.api.errors import register_error_handlers
from qcheck.api.middleware import request_logging_middleware
from qcheck.api.router import api_router
from qcheck.core.config import settings
from qcheck.core.logging import configure_logging
from qcheck.db.init_db import seed_demo_data
from qcheck.services.db_diagnostic import startup_diagnostic_task

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

def _run_migrations_if_needed():
    """Apply Alembic migrations automatically in production if enabled.

    Controlled by env var AUTO_APPLY_MIGRATIONS (default: on). Safe to run repeatedly.
    """
    if settings.env.lower() != "prod" or not settings.auto_apply_migrations:
        return
    from alembic import command
    from alembic.config import Config
    alembic_ini = Path(__file__).resolve().parents[1] / "alembic.ini"
    if not alembic_ini.exists():
        logger.warning("[migrate] alembic.ini not found at %s, skipping auto-migrations", alembic_ini)
        return
    cfg = Config(str(alembic_ini))
    # Ensure script_location resolves correctly when launched from arbitrary CWD
    script_location = Path(__file__).resolve().parents[1] / "alembic"
    if script_location.exists():
        cfg.set_main_option("script_location", str(script_location))
    logger.info("[migrate] Applying Alembic migrations -> head ...")
    try:
        command.upgrade(cfg, "head")
    except Exception:  # pragma: no cover
        # Do not kill the app on migration failure; can be retried manually.
        logger.exception("[migrate] Migration failed")
        return
    logger.info("[migrate] Migrations applied successfully")

app = FastAPI(title=settings.app_name, version="0.1.0")

# Configurable CORS origins (CORS_ORIGINS env). If empty -> dev defaults.
origins = settings.cors_origins
logger.info("[startup] Resolved CORS origins: %s", origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.middleware("http")(request_logging_middleware)
register_error_handlers(app)

app.include_router(api_router)

_background_tasks: set[asyncio.Task] = set()

@app.on_event("startup")
async def startup():
    _run_migrations_if_needed()
    if settings.is_dev and settings.seed_demo_data:
        try:
            await asyncio.to_thread(seed_demo_data)
        except SQLAlchemyError:
            # Storage problems are reported per request and by the diagnostic
            logger.exception("[seed] Demo data seeding failed")
    if settings.startup_db_check:
        # One-shot, fire & forget: the outcome is only logged
        task = asyncio.create_task(startup_diagnostic_task(settings.startup_db_check_delay))
        _background_tasks.add(task)
        task.add_done_callback(_background_tasks.discard)
