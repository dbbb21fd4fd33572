import logging
import sys
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import config
from app.core.db.engine import check_database_connection, get_db_util
from app.core.error_handler import global_exception_handler, validation_exception_handler
from app.modules.users import router as users_router
from app.modules.containers import router as containers_router
from app.modules.dashboard import router as dashboard_router
from app.modules.reports import router as reports_router

# Configure logging to output to console
logging.basicConfig(
    level=getattr(logging, config.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)
logger.info("Starting Container Tracker API...")

app = FastAPI(
    title="Container Tracker API",
    description="Track shipping containers from departure to arrival",
    version="1.0.0",
)

# Request bodies that fail validation are reported as 400
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Session cookies are SameSite=None, so credentials must be allowed
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /api prefix
app.include_router(users_router, prefix="/api")
app.include_router(containers_router, prefix="/api")
app.include_router(dashboard_router, prefix="/api")
app.include_router(reports_router, prefix="/api")


@app.get("/api/health")
async def health(db: AsyncSession = Depends(get_db_util)) -> dict[str, str]:
    database_ok = await check_database_connection(db)
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "ok" if database_ok else "unavailable",
    }
