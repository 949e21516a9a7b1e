from typing import Awaitable, Callable, Dict

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from rodo_audit.config import settings

SECURITY_HEADERS: Dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}

CallNext = Callable[[Request], Awaitable[Response]]


async def security_headers(request: Request, call_next: CallNext) -> Response:
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


async def limit_body_size(request: Request, call_next: CallNext) -> Response:
    declared = request.headers.get("content-length")
    if declared is not None:
        try:
            size = int(declared)
        except ValueError:
            return JSONResponse(status_code=400, content={"detail": "Invalid Content-Length", "code": "bad_request"})
        if size > settings.max_body_bytes:
            return JSONResponse(
                status_code=413,
                content={"detail": "Request body too large", "code": "payload_too_large"},
            )
    return await call_next(request)
