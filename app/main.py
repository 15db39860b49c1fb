# app/main.py
# config must load first: it reads .env from the project root
from app.config import CORS_ORIGINS, LOG_LEVEL, UPLOAD_DIR

import logging
from datetime import datetime

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db, init_db
from app.errors import register_exception_handlers

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="PaieFacile API")

# ---------------------------------------------------------------------
# Import routers AFTER app creation (avoids early eval / circular import)
# ---------------------------------------------------------------------
from .auth.login import router as auth_router
from .employees.router import router as employee_router
from .salary.router import router as salary_router
from .company.router import router as company_router
from .attestations.router import router as attestations_router
from .upload_router import router as upload_router

# -------------------- Middleware & static files --------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.mount("/uploads", StaticFiles(directory=str(UPLOAD_DIR)), name="uploads")

# ------------------- Routers -------------------
app.include_router(auth_router)
app.include_router(employee_router)
app.include_router(salary_router)
app.include_router(company_router)
app.include_router(upload_router)
app.include_router(attestations_router)


@app.get("/api/health")
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.exception("Health check: database unreachable")
        return JSONResponse(
            {"status": "error", "message": "Database connection failed", "error": str(e)},
            status_code=500,
        )
    return {
        "status": "ok",
        "message": "Database connected successfully",
        "timestamp": datetime.utcnow().isoformat() + "Z",
    }


# ------------------- STARTUP -------------------
@app.on_event("startup")
def _create_tables_and_log_routes():
    init_db()
    logger.info("Database synced successfully")
    for r in app.routes:
        if hasattr(r, "methods"):
            logger.debug("  %-45s %s", r.path, sorted(r.methods))
