"""
Request ID propagation.

A client-supplied X-Request-ID is reused when it looks like an identifier;
anything else is replaced by a generated one. The id is bound into the log
context for the whole request and echoed on the response.
"""

import re
import uuid

from accounts.logging import bind_context

REQUEST_ID_HEADER = b"x-request-id"
_ACCEPTED_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")


def resolve_request_id(raw: bytes | None) -> str:
    """Return the client's id when acceptable, otherwise a new uuid4 hex."""
    if raw:
        candidate = raw.decode("latin-1")
        if _ACCEPTED_ID.fullmatch(candidate):
            return candidate
    return uuid.uuid4().hex


class RequestIDMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        incoming = dict(scope.get("headers") or []).get(REQUEST_ID_HEADER)
        request_id = resolve_request_id(incoming)
        scope.setdefault("state", {})["request_id"] = request_id
        bind_context(request_id=request_id)

        async def send_with_id(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", []).append((REQUEST_ID_HEADER, request_id.encode()))
            await send(message)

        await self.app(scope, receive, send_with_id)
