"""Exception handlers registered on the application."""

from fastapi import Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse, PlainTextResponse

from mailcheck.core.logging import get_logger
from mailcheck.services.email_validation import DnsLookupError

logger = get_logger(__name__)


async def dns_lookup_error_handler(request: Request, exc: DnsLookupError) -> Response:
    """Report a failed resolver call as a bad gateway."""
    logger.bind(domain=exc.domain, path=request.url.path, error=str(exc)).warning("dns_lookup_failed")
    return JSONResponse(
        status_code=502,
        content={"detail": "DNS lookup failed"},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """
    Plain-text 404 for unmatched routes, JSON detail for everything else.

    A known path hit with an unsupported method counts as unmatched too.
    """
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found.", status_code=404)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )
