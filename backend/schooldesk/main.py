"""
Point d'entrée principal de l'API SchoolDesk.
Démarrage : uvicorn schooldesk.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from sqlalchemy.exc import SQLAlchemyError

import schooldesk.models  # noqa: F401 — enregistre tous les modèles dans Base.metadata avant les routers
from schooldesk.config import settings
from schooldesk.init_db import init_db
from schooldesk.routers import (
    classes,
    fee_structures,
    fees,
    sections,
    staff,
    staff_roles,
    students,
    transport,
)
from schooldesk.routers import settings as settings_router

logger = logging.getLogger(__name__)

UI_ENTRY_POINT = "SFM.html"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Cycle de vie de l'application : prépare le schéma si demandé par la configuration.
    RESET_DB_ON_STARTUP efface toutes les données ; il n'est jamais actif par défaut.
    """
    if settings.RESET_DB_ON_STARTUP or settings.INIT_DB_ON_STARTUP:
        init_db(reset=settings.RESET_DB_ON_STARTUP)
        logger.info("Base initialisée (reset=%s).", settings.RESET_DB_ON_STARTUP)
    yield


app = FastAPI(
    title="SchoolDesk API",
    description="API de gestion administrative d'école : élèves, personnel, classes, transport et frais",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS — autorise tous les ports localhost en développement (à restreindre en production).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)


app.include_router(settings_router.router)
app.include_router(staff_roles.router)
app.include_router(classes.router)
app.include_router(sections.router)
app.include_router(fee_structures.router)
app.include_router(fees.router)
app.include_router(students.router)
app.include_router(staff.router)
app.include_router(transport.routes_router)
app.include_router(transport.stops_router)


@app.exception_handler(SQLAlchemyError)
async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Base indisponible ou erreur du pilote : 500 avec le message sous-jacent."""
    logger.error("Erreur de stockage : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": str(getattr(exc, "orig", None) or exc)},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "SchoolDesk API", "version": "0.1.0"}


@app.get("/", include_in_schema=False)
def index():
    """Sert la page d'entrée de l'interface d'administration."""
    entry = Path(settings.STATIC_DIR) / UI_ENTRY_POINT
    if not entry.is_file():
        raise HTTPException(status_code=404, detail="Interface d'administration introuvable.")
    return FileResponse(entry)
