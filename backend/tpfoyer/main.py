"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the student housing backend.
Controllers are intentionally thin: they accept requests, delegate to
services, and return JSON responses. Bodies are not validated, and a
lookup of a missing id is not translated here: the service error
propagates and the client receives a generic server error.

Endpoints implemented, for each of `foyer`, `universite` and `etudiant`:
- GET /{entity}/retrieve-all-{entity}s
- GET /{entity}/retrieve-{entity}/{id}
- POST /{entity}/add-{entity}
- PUT /{entity}/modify-{entity}
- DELETE /{entity}/remove-{entity}/{id}
"""

import json
import logging
import time
import uuid
from typing import List

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from sqlmodel import Session

from . import repositories, services
from .config import settings
from .database import create_db_and_tables, get_session
from .schemas import EtudiantSchema, FoyerSchema, UniversiteSchema

app = FastAPI(title="Foyer Management API")
logger = logging.getLogger("tpfoyer.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

create_db_and_tables()


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    context = {
        "request_id": req_id,
        "path": request.url.path,
        "method": request.method,
        "client": request.client.host if request.client else "unknown",
    }
    try:
        response = await call_next(request)
    except Exception:
        context["duration_ms"] = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception("request_failed %s", json.dumps(context, ensure_ascii=True))
        raise
    response.headers["X-Request-ID"] = req_id
    context["status_code"] = response.status_code
    context["duration_ms"] = round((time.perf_counter() - started) * 1000.0, 2)
    logger.info("request_done %s", json.dumps(context, ensure_ascii=True))
    return response


def get_foyer_service(db: Session = Depends(get_session)) -> services.FoyerService:
    return services.FoyerService(repositories.FoyerRepository(db))


def get_universite_service(db: Session = Depends(get_session)) -> services.UniversiteService:
    return services.UniversiteService(repositories.UniversiteRepository(db))


def get_etudiant_service(db: Session = Depends(get_session)) -> services.EtudiantService:
    return services.EtudiantService(repositories.EtudiantRepository(db))


@app.get("/")
def health():
    """Liveness probe."""
    return {"status": "ok"}


# Foyer

@app.get('/foyer/retrieve-all-foyers', response_model=List[FoyerSchema])
def retrieve_all_foyers(svc: services.FoyerService = Depends(get_foyer_service)):
    """List every foyer."""
    return [FoyerSchema.from_model(f) for f in svc.retrieve_all()]

@app.get('/foyer/retrieve-foyer/{foyer_id}', response_model=FoyerSchema)
def retrieve_foyer(foyer_id: int, svc: services.FoyerService = Depends(get_foyer_service)):
    """Return one foyer; an unknown id surfaces as a server error."""
    return FoyerSchema.from_model(svc.retrieve(foyer_id))

@app.post('/foyer/add-foyer', response_model=FoyerSchema)
def add_foyer(payload: FoyerSchema, svc: services.FoyerService = Depends(get_foyer_service)):
    """Create a foyer and echo it back with its generated `idFoyer`."""
    return FoyerSchema.from_model(svc.add(payload.to_model()))

@app.put('/foyer/modify-foyer', response_model=FoyerSchema)
def modify_foyer(payload: FoyerSchema, svc: services.FoyerService = Depends(get_foyer_service)):
    """Replace the foyer identified by the body's `idFoyer`."""
    return FoyerSchema.from_model(svc.modify(payload.to_model()))

@app.delete('/foyer/remove-foyer/{foyer_id}')
def remove_foyer(foyer_id: int, svc: services.FoyerService = Depends(get_foyer_service)):
    svc.remove(foyer_id)
    return Response(status_code=200)


# Universite

@app.get('/universite/retrieve-all-universites', response_model=List[UniversiteSchema])
def retrieve_all_universites(svc: services.UniversiteService = Depends(get_universite_service)):
    """List every university with its nested foyer."""
    return [UniversiteSchema.from_model(u) for u in svc.retrieve_all()]

@app.get('/universite/retrieve-universite/{universite_id}', response_model=UniversiteSchema)
def retrieve_universite(universite_id: int, svc: services.UniversiteService = Depends(get_universite_service)):
    return UniversiteSchema.from_model(svc.retrieve(universite_id))

@app.post('/universite/add-universite', response_model=UniversiteSchema)
def add_universite(payload: UniversiteSchema, svc: services.UniversiteService = Depends(get_universite_service)):
    """Create a university.

    A nested `foyer` is linked by its `idFoyer`; the foyer itself must
    already exist and is not created or updated here.
    """
    return UniversiteSchema.from_model(svc.add(payload.to_model()))

@app.put('/universite/modify-universite', response_model=UniversiteSchema)
def modify_universite(payload: UniversiteSchema, svc: services.UniversiteService = Depends(get_universite_service)):
    """Replace a university; a null or missing `foyer` detaches its foyer."""
    return UniversiteSchema.from_model(svc.modify(payload.to_model()))

@app.delete('/universite/remove-universite/{universite_id}')
def remove_universite(universite_id: int, svc: services.UniversiteService = Depends(get_universite_service)):
    svc.remove(universite_id)
    return Response(status_code=200)


# Etudiant

@app.get('/etudiant/retrieve-all-etudiants', response_model=List[EtudiantSchema])
def retrieve_all_etudiants(svc: services.EtudiantService = Depends(get_etudiant_service)):
    return [EtudiantSchema.from_model(e) for e in svc.retrieve_all()]

@app.get('/etudiant/retrieve-etudiant/{etudiant_id}', response_model=EtudiantSchema)
def retrieve_etudiant(etudiant_id: int, svc: services.EtudiantService = Depends(get_etudiant_service)):
    return EtudiantSchema.from_model(svc.retrieve(etudiant_id))

@app.post('/etudiant/add-etudiant', response_model=EtudiantSchema)
def add_etudiant(payload: EtudiantSchema, svc: services.EtudiantService = Depends(get_etudiant_service)):
    return EtudiantSchema.from_model(svc.add(payload.to_model()))

@app.put('/etudiant/modify-etudiant', response_model=EtudiantSchema)
def modify_etudiant(payload: EtudiantSchema, svc: services.EtudiantService = Depends(get_etudiant_service)):
    return EtudiantSchema.from_model(svc.modify(payload.to_model()))

@app.delete('/etudiant/remove-etudiant/{etudiant_id}')
def remove_etudiant(etudiant_id: int, svc: services.EtudiantService = Depends(get_etudiant_service)):
    svc.remove(etudiant_id)
    return Response(status_code=200)
