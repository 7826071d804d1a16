# Routes package init
"""
NetDemo — API Routes Package
==============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - greeting.py:  ANY  /hello   (fixed greeting, 200)
                    ANY  /401     (fixed text, 401)
    - square.py:    ANY  /square  (square of the `num` header)
    - users.py:     ANY  /users   (fixed JSON user listing)
    - counter.py:   POST /incr    (add body delta to the counter)

Every path is a literal; there are no path parameters. All five routes
accept every HTTP method, including ones outside the usual set (TRACE,
PROPFIND, ...). /incr rejects non-POST methods itself so that the 405 body
is the plain-text message rather than the framework default.

Registration:
    Starlette pins plain function endpoints to GET unless methods are
    listed, and any listed set makes the router answer its own 405 for
    everything else. Wrapping the handler in AnyMethodEndpoint turns it
    into an ASGI app, which Starlette registers with no method set at all.
    Handlers therefore take a starlette Request and return a Response
    (no FastAPI parameter injection).

Design Principle:
    Routes are THIN: pull the input off the request, call a service,
    choose the status code and body. Errors are raised as NetDemoError
    subclasses and rendered by the global handlers in main.py.
"""

from typing import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import request_response
from starlette.types import Receive, Scope, Send

Handler = Callable[[Request], Awaitable[Response]]


class AnyMethodEndpoint:
    """ASGI wrapper around a `handler(request) -> Response` coroutine."""

    def __init__(self, handler: Handler):
        self.handler = handler
        self.__name__ = handler.__name__
        self._app = request_response(handler)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self._app(scope, receive, send)
