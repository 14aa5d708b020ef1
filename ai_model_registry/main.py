# COMPONENT: FASTAPI APPLICATION ENTRY POINT
# REQUIREMENTS SATISFIED:
#   - API initialization and routing
#   - Middleware configuration (logging + CORS)
#   - AWS Lambda compatibility via Mangum
"""
ai_model_registry/main.py

Primary application entry point for the AI Model Registry backend. This
module assembles the FastAPI application, registers middleware, mounts
the API routers, and exposes the AWS Lambda handler.

Execution Order:
    1. Environment variables are loaded from .env
    2. FastAPI app is created
    3. ASGI request/response logging middleware is attached
    4. CORS middleware is configured from ALLOWED_ORIGINS
    5. API routers are mounted under API_PREFIX (default /api)
    6. A global OPTIONS handler is installed for CORS preflight
    7. The Mangum handler is created for AWS Lambda deployment

Configuration (environment / .env):
    ALLOWED_ORIGINS  comma-separated CORS allowlist
    API_PREFIX       router mount prefix
    LOG_LEVEL        0 silent, 1 INFO, 2 DEBUG
    LOG_FILE         optional log file path

Run locally with ``uvicorn ai_model_registry.main:app``.
"""
import os
from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Response
from starlette.middleware.cors import CORSMiddleware
from mangum import Mangum

from ai_model_registry.api.routers.models import router as models_router
from ai_model_registry.api.routers.enums import router as enums_router
from ai_model_registry.api.middleware.log_requests import DeepASGILogger
from ai_model_registry.utils.logging import logger

# -------------------------------------------------------------
# Configuration
# -------------------------------------------------------------
DEFAULT_ORIGIN = "http://localhost:3000"
ALLOWED_ORIGINS = [
    o.strip()
    for o in os.getenv("ALLOWED_ORIGINS", DEFAULT_ORIGIN).split(",")
    if o.strip()
]
API_PREFIX = os.getenv("API_PREFIX", "/api")

# -------------------------------------------------------------
# Create the FastAPI app FIRST
# -------------------------------------------------------------
app = FastAPI(title="AI Model Registry API", version="0.1.0")

# -------------------------------------------------------------
# Add middleware SECOND
# -------------------------------------------------------------
app.add_middleware(DeepASGILogger)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -------------------------------------------------------------
# Include Routers THIRD
# -------------------------------------------------------------
app.include_router(models_router, prefix=API_PREFIX)
app.include_router(enums_router, prefix=API_PREFIX)

logger.info("App ready: prefix=%s origins=%s", API_PREFIX, ALLOWED_ORIGINS)


# -------------------------------------------------------------
# Global preflight handler (prevents OPTIONS -> 405 behind API Gateway)
# -------------------------------------------------------------
@app.options("/{path:path}")
async def preflight_handler(path: str):
    return Response(
        status_code=204,
        headers={
            "Access-Control-Allow-Origin": ALLOWED_ORIGINS[0] if ALLOWED_ORIGINS else "*",
            "Access-Control-Allow-Methods": "GET,POST,PUT,PATCH,DELETE,OPTIONS",
            "Access-Control-Allow-Headers": "content-type,authorization",
        },
    )


# -------------------------------------------------------------
# Create Lambda handler LAST
# -------------------------------------------------------------
handler = Mangum(app)
