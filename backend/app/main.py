import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import Session

from app.auth import ensure_user
from app.config import ADMIN_PASSWORD, ADMIN_USERNAME, AUTH_REALM, CORS_ORIGINS
from app.database import engine, init_db
from app.errors import TournamentError, UnauthorizedError
from app.logging_config import configure_logging
from app.routes import players, qualifying, tournaments

configure_logging()
logger = logging.getLogger(__name__)

APP_NAME = "Tournament Bracket API"

app = FastAPI(title=APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(tournaments.router, prefix="/api", tags=["tournaments"])
app.include_router(players.router, prefix="/api", tags=["players"])
app.include_router(qualifying.router, prefix="/api", tags=["qualifying"])


# ============================================================================
# Error mapping: every failure leaves the API as {"detail": ...}
# ============================================================================


@app.exception_handler(TournamentError)
async def tournament_error_handler(request: Request, exc: TournamentError):
    headers = None
    if isinstance(exc, UnauthorizedError):
        headers = {"WWW-Authenticate": f'Basic realm="{AUTH_REALM}"'}
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("Validation error on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request parameters", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.on_event("startup")
def on_startup():
    init_db()  # Use centralized init_db() which imports models and creates tables

    if ADMIN_USERNAME and ADMIN_PASSWORD:
        with Session(engine) as session:
            ensure_user(session, ADMIN_USERNAME, ADMIN_PASSWORD)
    else:
        logger.warning("ADMIN_USERNAME/ADMIN_PASSWORD not set; no user seeded")

    route_count = sum(1 for r in app.routes if getattr(r, "path", None))
    logger.info("%s started with %d routes", APP_NAME, route_count)


@app.get("/api/health")
def health_check():
    return {"app_name": APP_NAME, "status": "healthy"}
