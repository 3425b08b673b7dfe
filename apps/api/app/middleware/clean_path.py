"""Middleware that redirects requests to their canonical path."""

import logging

from cleanpath_core import (
    Changed,
    RedirectTargetError,
    build_redirect_target,
    get_settings,
    normalize_path,
    split_path_and_query,
)
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


def get_raw_path(request: Request) -> str:
    """Return the request path as sent by the client, still percent-encoded."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path, _ = split_path_and_query(raw_path.decode("latin-1"))
        return path
    return request.scope.get("path", "")


def get_raw_query(request: Request) -> str:
    """Return the request query string verbatim."""
    return request.scope.get("query_string", b"").decode("latin-1")


class CleanPathMiddleware(BaseHTTPMiddleware):
    """Middleware that permanently redirects non-canonical request paths.

    Repeated "/" are merged, "." and ".." are resolved and a trailing "/" is
    appended unless the last segment has a file extension. Canonical paths
    pass through untouched.

    Options left as None are read from settings.
    """

    def __init__(
        self,
        app: ASGIApp,
        enabled: bool | None = None,
        redirect_status: int | None = None,
        absolute: bool | None = None,
    ) -> None:
        super().__init__(app)
        if None in (enabled, redirect_status, absolute):
            settings = get_settings()
            if enabled is None:
                enabled = settings.clean_path_enabled
            if redirect_status is None:
                redirect_status = settings.clean_path_redirect_status
            if absolute is None:
                absolute = settings.clean_path_absolute_redirects
        self.enabled = enabled
        self.redirect_status = redirect_status
        self.absolute = absolute

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Redirect to the canonical path or hand the request on."""
        if not self.enabled:
            return await call_next(request)

        original_path = get_raw_path(request)
        result = normalize_path(original_path)
        if not isinstance(result, Changed):
            return await call_next(request)

        location = self.redirect_location(request, result.path)
        logger.debug("Redirecting %s -> %s", original_path, location)
        # RedirectResponse would quote the already validated location again
        return Response(status_code=self.redirect_status, headers={"location": location})

    def redirect_location(self, request: Request, path: str) -> str:
        """Build the Location for ``path``, keeping the original query string."""
        # base_url is built from scheme and host only, never the decoded path
        base_url = str(request.base_url) if self.absolute else None
        try:
            return build_redirect_target(path, get_raw_query(request), base_url)
        except RedirectTargetError:
            logger.error("Cannot build redirect target for %r", get_raw_path(request))
            raise
