"""
NetDemo — Users Service
=========================

What:  Builds and encodes the fixed two-user listing for GET /users.
How:   A fresh UsersResponse per call; encoding goes through Pydantic's
       JSON serializer and any serializer failure becomes SerializationError.
"""

from pydantic_core import PydanticSerializationError

from netdemo.exceptions import SerializationError
from netdemo.schemas.user import User, UsersResponse


class UsersService:

    def list_users(self) -> UsersResponse:
        """Return the two demo users, id 1 before id 2."""
        return UsersResponse(
            status=200,
            users=[
                User(id=1, name="Taro", age=23),
                User(id=2, name="Hanako", age=21),
            ],
        )

    def encode(self, payload: UsersResponse) -> str:
        """
        Serialize `payload` to compact JSON.

        Raises:
            SerializationError: the serializer rejected the payload; the
                message is the serializer's own error text.
        """
        try:
            return payload.model_dump_json()
        except PydanticSerializationError as e:
            raise SerializationError(
                message=str(e),
                context={"model": type(payload).__name__},
            ) from e


users_service = UsersService()
