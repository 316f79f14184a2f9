from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from datetime import datetime, timezone
import logging
import time

from string_analyzer import __version__
from string_analyzer.config import CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from string_analyzer.database import init_db
from string_analyzer.api.routes import router
from string_analyzer.errors import InvalidInputError, StringAnalyzerError, ValidationError

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="String Analyzer Service",
    description="Analyze, store and filter strings, including natural language queries",
    version=__version__
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Initialize database on startup
@app.on_event("startup")
def on_startup():
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully")


# Access log
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        elapsed = (time.perf_counter() - start) * 1000
        logger.error(f"{request.method} {request.url.path} 500 {elapsed:.1f}ms")
        raise
    elapsed = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed:.1f}ms")
    return response


# Include routers
app.include_router(router, tags=["strings"])


# Root endpoint doubles as health check
@app.get("/")
def root():
    return {"status": "ok"}


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


# Domain error handler
@app.exception_handler(StringAnalyzerError)
async def domain_exception_handler(request: Request, exc: StringAnalyzerError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message}
    )


# Validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid query parameter values or types"

    for error in exc.errors():
        loc = tuple(error.get('loc', ()))
        field = loc[-1] if loc else "request"
        errors[str(field)] = error['msg']

        if loc and loc[0] == "body":
            message = ValidationError.message
            # A present but non-string value is a type error, not a bad request
            if loc == ("body", "value") and error.get('type') != "missing":
                status_code = InvalidInputError.status_code
                message = InvalidInputError.message

    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "details": errors
        }
    )


# HTTPException handler
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    # If detail is already a dict with 'error' key, return as is
    if isinstance(exc.detail, dict) and 'error' in exc.detail:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail
        )
    # Otherwise wrap it
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)}
    )


# Generic error handler
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal_server_error"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host=HOST, port=PORT)
