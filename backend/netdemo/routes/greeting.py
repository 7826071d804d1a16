"""
NetDemo — Fixed Text Routes
=============================

What:  /hello (200) and /401 (401). Both ignore the request entirely and
       return byte-identical responses on every call, for any method.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from starlette.requests import Request

from netdemo.routes import AnyMethodEndpoint

router = APIRouter(tags=["Greeting"])

HELLO_TEXT = "Hello World from Go."
UNAUTHORIZED_TEXT = "UnAuthorized"


async def hello(request: Request) -> PlainTextResponse:
    return PlainTextResponse(HELLO_TEXT)


async def unauthorized(request: Request) -> PlainTextResponse:
    """Demonstrates choosing a non-200 status explicitly."""
    return PlainTextResponse(UNAUTHORIZED_TEXT, status_code=401)


router.add_route("/hello", AnyMethodEndpoint(hello))
router.add_route("/401", AnyMethodEndpoint(unauthorized))
