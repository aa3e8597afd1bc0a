"""Method Override — lets HTML forms send PUT/PATCH/DELETE.

Reads the target method from the "_method" query parameter (or the
X-HTTP-Method-Override header) of a POST request and rewrites the ASGI scope
before routing. Only POST is ever rewritten, and only to PUT, PATCH or DELETE.

No business logic. Pure cross-cutting concern.
"""

from urllib.parse import parse_qs

from starlette.types import ASGIApp, Receive, Scope, Send

OVERRIDABLE_METHODS = frozenset({"PUT", "PATCH", "DELETE"})
OVERRIDE_HEADER = b"x-http-method-override"


class MethodOverrideMiddleware:
    """ASGI middleware that swaps POST for the method named by the client."""

    def __init__(self, app: ASGIApp, param: str = "_method") -> None:
        self.app = app
        self.param = param

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "POST":
            override = self._requested_method(scope)
            if override in OVERRIDABLE_METHODS:
                scope = dict(scope, method=override)
        await self.app(scope, receive, send)

    def _requested_method(self, scope: Scope) -> str | None:
        query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
        values = query.get(self.param)
        if values:
            return values[0].upper()
        for name, value in scope.get("headers", []):
            if name == OVERRIDE_HEADER:
                return value.decode("latin-1").upper()
        return None
