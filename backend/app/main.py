from fastapi import FastAPI, Request
import time, os
from fastapi.middleware.cors import CORSMiddleware

# Selective access-log filter for uvicorn
import logging

logger = logging.getLogger(__name__)

class _SkipProgressAccessLogs(logging.Filter):
    """Hide uvicorn access logs for /api/v1/progress/* to prevent console spam."""
    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except Exception:
            return True
        # Keep all logs except progress endpoint polls
        return "/api/v1/progress/" not in msg

# Attach the filter once
_access_logger = logging.getLogger("uvicorn.access")
# Avoid duplicate filters on reload
if not any(isinstance(f, _SkipProgressAccessLogs) for f in getattr(_access_logger, "filters", [])):
    _access_logger.addFilter(_SkipProgressAccessLogs())

# Routers
from .routers.cv import router as cv_router
from .routers.health import router as health_router
from .routers.progress import router as progress_router

import geocv

app = FastAPI(
    title="geocv Local API",
    version=geocv.__version__,
    description="Local-first API exposing blocked cross-validation",
)

# CORS for dev (Vite @ 5173) + optional env override
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:8080",
        "http://127.0.0.1:8080",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
extra = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
if extra:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=extra,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Request logging that re-raises (successful responses go through uvicorn.access)
@app.middleware("http")
async def log_requests(request: Request, call_next):
    t0 = time.time()
    try:
        return await call_next(request)
    except Exception as e:
        dt = (time.time() - t0) * 1000
        logger.error("%s %s -> ERR in %.1fms: %s: %s", request.method, request.url.path, dt, type(e).__name__, e)
        raise

# Routers
app.include_router(health_router,   prefix="/api/v1", tags=["health"])
app.include_router(cv_router,       prefix="/api/v1", tags=["crossval"])
app.include_router(progress_router, prefix="/api/v1", tags=["progress"])

@app.get("/healthz")
def healthz():
    return {"ok": True}
