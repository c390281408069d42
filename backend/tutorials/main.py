"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the tutorial records backend.
Controllers are intentionally thin: they accept requests, delegate to
`TutorialService`, and return JSON responses.

Endpoints implemented (base path /api):
- GET /tutorials[?title=]
- GET /tutorials/published
- GET /tutorials/{id}
- POST /tutorials
- PUT /tutorials/{id}
- DELETE /tutorials/{id}
- DELETE /tutorials
"""

from fastapi import APIRouter, FastAPI, Depends, HTTPException, Path, Request
from fastapi.responses import JSONResponse, HTMLResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from typing import Annotated, List, Optional
import json
import logging
import time
import uuid
from .config import settings
from .database import init_schema, get_session
from .schemas import TutorialCreate, TutorialUpdate, TutorialRead, MessageOut, DeleteAllOut
from .services import TutorialService, TutorialNotFound

app = FastAPI(title="Tutorials API")
logger = logging.getLogger("tutorials.api")
if not logging.getLogger().handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

if settings.ENV != "dev" and settings.uses_default_database:
    logger.warning("ENV=%s is using the default SQLite database; set DATABASE_URL", settings.ENV)

init_schema()


def _log_payload(request: Request, **fields) -> str:
    payload = {
        "request_id": getattr(request.state, "request_id", ""),
        "path": request.url.path,
        "method": request.method,
        **fields,
    }
    return json.dumps(payload, ensure_ascii=True)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    request.state.request_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    client = request.client.host if request.client else "unknown"
    logged = request.url.path.startswith("/api")
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        if logged:
            elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
            logger.exception("request_failed %s", _log_payload(request, duration_ms=elapsed_ms, client=client))
        raise
    response.headers["X-Request-ID"] = request.state.request_id
    if logged:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.info(
            "request_done %s",
            _log_payload(request, status_code=response.status_code, duration_ms=elapsed_ms, client=client),
        )
    return response


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Report store faults as 500 without retrying."""
    logger.exception("database_error %s", _log_payload(request, error=type(exc).__name__))
    return JSONResponse(status_code=500, content={"detail": "database error"})


router = APIRouter(prefix="/api", tags=["tutorials"])

# ids are generated by the store as positive 64-bit integers
MAX_TUTORIAL_ID = 2**63 - 1
TutorialId = Annotated[int, Path(ge=1, le=MAX_TUTORIAL_ID)]


@router.get('/tutorials', response_model=List[TutorialRead])
def list_tutorials(title: Optional[str] = None, db: Session = Depends(get_session)):
    """List all tutorials, optionally only those whose title contains `title`."""
    return TutorialService(db).list(title)


# declared before /tutorials/{tutorial_id} so "published" is not parsed as an id
@router.get('/tutorials/published', response_model=List[TutorialRead])
def list_published(db: Session = Depends(get_session)):
    """List tutorials with `published` set."""
    return TutorialService(db).list_published()


@router.get('/tutorials/{tutorial_id}', response_model=TutorialRead)
def get_tutorial(tutorial_id: TutorialId, db: Session = Depends(get_session)):
    try:
        return TutorialService(db).get(tutorial_id)
    except TutorialNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post('/tutorials', response_model=TutorialRead, status_code=201)
def create_tutorial(payload: TutorialCreate, db: Session = Depends(get_session)):
    """Create a tutorial and return it with its generated id.

    `published` defaults to false when omitted.
    """
    return TutorialService(db).create(payload)


@router.put('/tutorials/{tutorial_id}', response_model=TutorialRead)
def update_tutorial(tutorial_id: TutorialId, payload: TutorialUpdate, db: Session = Depends(get_session)):
    """Update the fields present in the body; omitted fields are unchanged."""
    try:
        return TutorialService(db).update(tutorial_id, payload)
    except TutorialNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete('/tutorials/{tutorial_id}', response_model=MessageOut)
def delete_tutorial(tutorial_id: TutorialId, db: Session = Depends(get_session)):
    try:
        TutorialService(db).delete(tutorial_id)
    except TutorialNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {'message': f'Tutorial id={tutorial_id} was deleted successfully'}


@router.delete('/tutorials', response_model=DeleteAllOut)
def delete_all_tutorials(db: Session = Depends(get_session)):
    """Delete every tutorial. This cannot be undone."""
    count = TutorialService(db).delete_all()
    return {'message': f'{count} tutorials were deleted successfully', 'deleted': count}


app.include_router(router)


@app.get("/", response_class=HTMLResponse)
def home():
    """Minimal homepage for quick manual testing."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
      <meta charset="UTF-8" />
      <title>Tutorials API</title>
      <style>
        body { font-family: Arial, sans-serif; margin: 32px; }
        a { color: #0a6; }
        .card { max-width: 640px; padding: 16px; border: 1px solid #ddd; border-radius: 8px; }
      </style>
    </head>
    <body>
      <div class="card">
        <h1>Tutorials API</h1>
        <ul>
          <li><a href="/docs">Swagger UI</a></li>
          <li><a href="/api/tutorials">All tutorials</a></li>
          <li><a href="/api/tutorials/published">Published tutorials</a></li>
        </ul>
      </div>
    </body>
    </html>
    """


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
