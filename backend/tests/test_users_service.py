"""
NetDemo — Users Service Unit Tests
====================================

What:  Tests for the fixed user listing and its JSON encoding.
"""

from unittest.mock import MagicMock

import pytest
from pydantic_core import PydanticSerializationError

from netdemo.exceptions import SerializationError
from netdemo.services.users_service import UsersService

EXPECTED_JSON = (
    '{"status":200,"users":['
    '{"id":1,"name":"Taro","age":23},'
    '{"id":2,"name":"Hanako","age":21}]}'
)


class TestUsersService:

    def setup_method(self):
        self.service = UsersService()

    def test_list_users_fixed_order(self):
        result = self.service.list_users()
        assert result.status == 200
        assert [u.id for u in result.users] == [1, 2]
        assert [u.name for u in result.users] == ["Taro", "Hanako"]

    def test_list_users_fresh_each_call(self):
        assert self.service.list_users() is not self.service.list_users()

    def test_encode_compact_json(self):
        assert self.service.encode(self.service.list_users()) == EXPECTED_JSON

    def test_encode_failure_raises_serialization_error(self):
        payload = MagicMock()
        payload.model_dump_json.side_effect = PydanticSerializationError("cannot serialize")

        with pytest.raises(SerializationError, match="cannot serialize") as exc_info:
            self.service.encode(payload)
        assert exc_info.value.status_code == 500
