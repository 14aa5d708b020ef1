# COMPONENT: API REQUEST / RESPONSE LOGGING MIDDLEWARE
# REQUIREMENTS SATISFIED: backend observability and debugging support
"""
ai_model_registry/api/middleware/log_requests.py

Defines a custom ASGI middleware for HTTP request and response logging.

Each request is tagged with a short request ID. Method, path, status code
and latency are logged at INFO; request and response bodies (pretty-printed
when they are JSON) are logged at DEBUG. Non-HTTP ASGI events pass through
untouched, and the middleware never modifies the request or the response.
"""
import json
import uuid
import time
from starlette.types import ASGIApp, Receive, Scope, Send

from ai_model_registry.utils.logging import logger


def _render_body(raw: bytes) -> str:
    text = raw.decode("utf-8", errors="replace")
    try:
        return json.dumps(json.loads(text), indent=2)
    except ValueError:
        return text


class DeepASGILogger:
    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        rid = str(uuid.uuid4())[:8]
        method = scope.get("method")
        path = scope.get("path")

        body_bytes = b""

        async def recv_wrapper():
            nonlocal body_bytes
            msg = await receive()
            if msg["type"] == "http.request":
                body_bytes += msg.get("body", b"")
            return msg

        resp_body = b""
        status_code = None

        async def send_wrapper(message):
            nonlocal resp_body, status_code

            if message["type"] == "http.response.start":
                status_code = message["status"]

            if message["type"] == "http.response.body":
                resp_body += message.get("body", b"")

            await send(message)

        start = time.time()
        await self.app(scope, recv_wrapper, send_wrapper)
        duration_ms = round((time.time() - start) * 1000, 2)

        logger.info("[RID %s] %s %s -> %s (%s ms)", rid, method, path, status_code, duration_ms)
        if body_bytes:
            logger.debug("[RID %s] request body: %s", rid, _render_body(body_bytes))
        if resp_body:
            logger.debug("[RID %s] response body: %s", rid, _render_body(resp_body))
