"""
NetDemo — User Listing Schemas
================================

What:  Pydantic models for the GET /users JSON payload.
How:   UsersResponse.model_dump_json() produces the compact wire format:

    {"status":200,"users":[{"id":1,"name":"Taro","age":23},{"id":2,"name":"Hanako","age":21}]}

Field declaration order is the key order on the wire; list order is kept
as constructed.
"""

from typing import List

from pydantic import BaseModel, Field


class User(BaseModel):
    """A fixed demo user. Built inline per request, never stored."""

    id: int = Field(description="User identifier")
    name: str = Field(description="Display name")
    age: int = Field(description="Age in years")

    model_config = {"frozen": True}


class UsersResponse(BaseModel):
    """
    What:  Envelope returned by GET /users.
    Who:   Built fresh by UsersService.list_users() on every call.
    """

    status: int = Field(description="HTTP status echoed in the body")
    users: List[User] = Field(description="Users in insertion order")
