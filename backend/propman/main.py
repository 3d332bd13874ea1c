import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from propman.core.config import settings
from propman.registry import registry
from propman.routers import (
    login_router, rental_properties_router, revenue_rates_router, contracts_router,
    tenants_router, property_groups_router, user_notes_router, uploads_router,
    generic_router
)
from propman.utils.exceptions import PropmanException

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Propman API",
    description="API for rental property, contract and tenant management",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,      # Refresh token travels as a cookie
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count", "X-Page-Number", "X-Page-Size", "Location"],
)


def jsonable_errors(exc: RequestValidationError):
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


# Exception handlers
@app.exception_handler(PropmanException)
async def propman_exception_handler(request: Request, exc: PropmanException):
    status_code_map = {
        "AUTHENTICATION_ERROR": status.HTTP_401_UNAUTHORIZED,
        "BAD_REQUEST_ERROR": status.HTTP_400_BAD_REQUEST,
        "NOT_FOUND_ERROR": status.HTTP_404_NOT_FOUND,
        "CONFLICT_ERROR": status.HTTP_409_CONFLICT,
        "STORAGE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    }

    status_code = status_code_map.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "message": exc.message,
            "detail": str(exc)
        }
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "BAD_REQUEST_ERROR",
            "message": "Invalid request.",
            "detail": jsonable_errors(exc)
        }
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {str(exc)}")
    # DBAPI message only; the statement and its parameters stay in the log
    reason = getattr(exc, "orig", None) or exc
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": "An error occurred while processing the request.",
            "error": str(reason)
        }
    )


# Include routers; entity specific routes take precedence over /api/{entity_name}
app.include_router(login_router)
app.include_router(rental_properties_router)
app.include_router(revenue_rates_router)
app.include_router(contracts_router)
app.include_router(tenants_router)
app.include_router(property_groups_router)
app.include_router(user_notes_router)
app.include_router(uploads_router)
app.include_router(generic_router)

# Health check
@app.get("/health")
def health_check():
    return {"status": "healthy", "service": "Propman API"}

# Root endpoint
@app.get("/", response_class=PlainTextResponse)
def root():
    """Routes served by the generic entity router"""
    return "\n".join(registry.routes())
