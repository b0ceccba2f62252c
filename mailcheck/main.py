from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mailcheck.api.router import api_router
from mailcheck.core.errors import dns_lookup_error_handler, http_exception_handler
from mailcheck.core.logging import setup_logging
from mailcheck.services.email_validation import DnsLookupError


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    setup_logging()
    yield


app = FastAPI(
    title="Simple Email Validation API",
    version="1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url=None,
)

app.add_exception_handler(DnsLookupError, dns_lookup_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]

app.include_router(api_router)


@app.get("/", include_in_schema=False)
async def root(request: Request) -> RedirectResponse:
    """Redirect to the interactive API docs."""
    return RedirectResponse(url=f"{request.base_url}docs", status_code=302)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint for load balancers."""
    return {"status": "healthy"}
