from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from .config import settings
from .errors import ConfigurationError, ValidationError
from .routers import estimate, pdf

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger("webvaluator")

INVALID_REQUEST = "Invalid request data"

app = FastAPI(
    title="WebValuator",
    description="Website development cost estimator",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(estimate.router, prefix="/api")
app.include_router(pdf.router, prefix="/api")


@app.exception_handler(ValidationError)
def handle_validation_error(request: Request, exc: ValidationError):
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={"error": INVALID_REQUEST, **exc.to_dict()},
    )


@app.exception_handler(RequestValidationError)
def handle_request_validation_error(request: Request, exc: RequestValidationError):
    # Malformed JSON or a body that doesn't fit the route's model
    logger.info("Rejected %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": INVALID_REQUEST})


@app.exception_handler(ConfigurationError)
def handle_configuration_error(request: Request, exc: ConfigurationError):
    logger.error("Pricing configuration error: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Pricing configuration error", "detail": str(exc)},
    )


@app.exception_handler(StarletteHTTPException)
def handle_http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.get("/health")
def health():
    return {"status": "ok", "app": "webvaluator"}
