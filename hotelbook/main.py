import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from .config import settings
from .db import SessionLocal, init_db
from .errors import register_error_handlers
from .limiter import limiter
from .routers import auth_views, rooms_views, bookings_views
from .services.seed import seed_database

# --- Logging configuration ---
_level = logging.DEBUG if getattr(settings, "DEBUG", False) else logging.INFO
logging.basicConfig(
    level=_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# Align uvicorn loggers with our level
for _name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    logging.getLogger(_name).setLevel(_level)
logger = logging.getLogger("hotelbook.startup")
logger.info("Starting %s (DEBUG=%s)", settings.APP_NAME, getattr(settings, "DEBUG", False))

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    description=(
        f"{settings.APP_NAME}: room catalog, bearer-token login and room bookings.\n\n"
        "Protected endpoints expect an `Authorization: Bearer <token>` header "
        "obtained from `POST /login`."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=True,
)

@app.on_event("startup")
def startup_event():
    """Creates missing tables and seeds the catalog and default user."""
    logger.info("Running startup tasks...")
    init_db()
    db = SessionLocal()
    try:
        seed_database(db)
    finally:
        db.close()
    logger.info("Startup tasks complete.")


# Add the limiter to the app state
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)
# Add the exception handler for rate limit exceeded errors
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
register_error_handlers(app)

app.include_router(auth_views.router)
app.include_router(rooms_views.router)
app.include_router(bookings_views.router)

@app.get("/healthz")
@limiter.exempt
def healthz():
    return {"status": "ok"}
