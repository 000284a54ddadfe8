"""
CORS Middleware

Starlette's CORSMiddleware with one change: every OPTIONS request is
answered right away with 204, whatever the route and origin.
Access-Control-Allow-Origin is only echoed back for allowed origins.
"""
from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.types import Receive, Scope, Send


class PreflightCORSMiddleware(CORSMiddleware):
    """Allow-list CORS where preflight never reaches the router."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "OPTIONS":
            await super().__call__(scope, receive, send)
            return

        response = self.options_response(Headers(scope=scope))
        await response(scope, receive, send)

    def options_response(self, request_headers: Headers) -> Response:
        headers = dict(self.preflight_headers)
        origin = request_headers.get("origin")

        if origin and self.is_allowed_origin(origin=origin):
            headers["Access-Control-Allow-Origin"] = origin
        else:
            headers.pop("Access-Control-Allow-Origin", None)

        return Response(status_code=204, headers=headers)
