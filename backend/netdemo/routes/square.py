"""
NetDemo — Square Route Handler
================================

What:  Reads the `num` request header and answers with its square.
How:   SquareService validates and computes; ValidationError (400) is
       rendered by the global handler with the service's message.

Responses:
    200  "Square of 120 is equal to 14400"
    400  "num is not integer"       (header missing or not an integer)
    400  "num is smaller than 100"  (parsed value < 100)
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from starlette.requests import Request

from netdemo.routes import AnyMethodEndpoint
from netdemo.services.square_service import square_service

router = APIRouter(tags=["Square"])


async def square(request: Request) -> PlainTextResponse:
    """
    Square the integer carried in the `num` header.

    A missing or malformed value produces our own 400 text, never a
    framework 422.
    """
    num, result = square_service.square(request.headers.get("num"))
    return PlainTextResponse(f"Square of {num} is equal to {result}")


router.add_route("/square", AnyMethodEndpoint(square))
