"""
NetDemo — Users Route Handler
===============================

What:  /users returns the fixed two-user listing as JSON, for any method.
How:   UsersService builds and encodes the payload. The encoded string is
       written as-is with an application/json content type, so the body is
       exactly the serializer's compact output.

Error responses (handled by global exception handlers):
    HTTP 500: encoding failed (SerializationError), body = error text
"""

from fastapi import APIRouter, Response
from starlette.requests import Request

from netdemo.routes import AnyMethodEndpoint
from netdemo.services.users_service import users_service

router = APIRouter(tags=["Users"])


async def list_users(request: Request) -> Response:
    payload = users_service.list_users()
    body = users_service.encode(payload)
    return Response(content=body, status_code=200, media_type="application/json")


router.add_route("/users", AnyMethodEndpoint(list_users))
