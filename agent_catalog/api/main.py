"""Main FastAPI application for the agent catalog."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..config import get_cors_origins
from ..errors import AgentCatalogError
from ..logger import get_logger, log_error
from .routes import agents, submissions
from .schemas import HealthResponse

logger = get_logger("agent_catalog.api")

app = FastAPI(
    title="Agent Catalog",
    description="Approved agent catalog with a moderation queue for new submissions",
    version=__version__
)
app.add_middleware(CORSMiddleware, allow_origins=get_cors_origins(), allow_methods=["*"], allow_headers=["*"])

# Register routes
app.include_router(agents.router)
app.include_router(submissions.router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render errors as {"message": ...}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Unparseable request bodies are client errors, same as invalid payloads."""
    return JSONResponse(status_code=400, content={"message": "Invalid agent data submitted"})


@app.exception_handler(AgentCatalogError)
async def catalog_exception_handler(request: Request, exc: AgentCatalogError):
    log_error(logger, "Unhandled catalog error", exc_info=exc, path=request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.get("/", response_model=HealthResponse)
def root():
    """Health check endpoint."""
    return {
        "service": "agent-catalog",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}
