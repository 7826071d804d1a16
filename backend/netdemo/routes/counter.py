"""
NetDemo — Counter Route Handler
=================================

What:  POST /incr adds the body's `num` to the application's Counter and
       reports the new value.
Who:   Any client; the Counter is shared by every request to this app.

Request Flow:
    1. Reject every method other than POST (405, counter untouched)
    2. Read the whole body
    3. IncrementService decodes it (bad bodies count as num=0) and applies it
    4. Return 200 "Value of Counter is {value} \\n"

Counter access goes through get_counter(), which returns the instance
create_app() stored on app.state. Tests build a fresh app and therefore a
fresh counter.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from starlette.requests import Request

from netdemo.exceptions import MethodNotAllowedError
from netdemo.routes import AnyMethodEndpoint
from netdemo.services.counter_service import Counter, increment_service

router = APIRouter(tags=["Counter"])

COUNTER_PATH = "/incr"


def get_counter(request: Request) -> Counter:
    """The Counter owned by the running application."""
    return request.app.state.counter


async def increment(request: Request) -> PlainTextResponse:
    if request.method != "POST":
        raise MethodNotAllowedError(expected="POST", received=request.method)

    counter = get_counter(request)
    body = await request.body()
    value = increment_service.increment(counter, body)
    return PlainTextResponse(f"Value of Counter is {value} \n")


router.add_route(COUNTER_PATH, AnyMethodEndpoint(increment))
