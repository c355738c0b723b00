# leaddesk/middleware/request_logger.py
import logging
import time

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger("leaddesk.http")


class RequestLoggerMiddleware:
    """
    Logs every HTTP request with method, path, status, duration and the
    X-Req-Id header sent by the client.
    """
    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.time()
        method = scope.get("method", "-")
        path = scope.get("path", "-")
        rid = "-"
        for key, value in scope.get("headers") or []:
            if key == b"x-req-id":
                rid = value.decode("latin-1")
                break

        status = {"code": 500}

        async def send_wrapper(message: Message):
            if message["type"] == "http.response.start":
                status["code"] = message["status"]
            await send(message)

        logger.info("[HTTP >] rid=%s %s %s", rid, method, path)
        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            dur_ms = (time.time() - start) * 1000
            logger.info("[HTTP <] rid=%s %s %s status=%d in %.1fms", rid, method, path, status["code"], dur_ms)
