"""
NetDemo — Square Service
==========================

What:  Parses the `num` header value and squares it.
Who:   Called by the GET /square route handler.

Validation order:
    1. Missing or not a base-10 integer → ValidationError("num is not integer")
    2. Parsed value below MIN_NUM        → ValidationError("num is smaller than 100")
    3. Otherwise return (n, n * n)

Integer syntax is deliberately narrower than int(): an optional sign
followed by ASCII digits. int() would also accept " 120 ", "1_000" and
non-ASCII digits, none of which count as integers here.

Squaring uses Python's arbitrary-precision int, so there is no overflow.
"""

import logging
import re
from typing import Optional, Tuple

from netdemo.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Inclusive lower bound: 100 is accepted, 99 is not.
MIN_NUM = 100

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class SquareService:
    """Stateless; a single module-level instance is shared by all requests."""

    def parse_num(self, raw: Optional[str]) -> int:
        """
        Convert a header value to an int.

        Raises:
            ValidationError: value is None or not an optionally-signed run
                of ASCII digits.
        """
        if raw is None or not _INTEGER_RE.fullmatch(raw):
            raise ValidationError(
                message="num is not integer",
                field="num",
                context={"raw": raw},
            )
        return int(raw)

    def square(self, raw: Optional[str]) -> Tuple[int, int]:
        """
        Validate `raw` and return the number together with its square.

        Raises:
            ValidationError: not an integer, or smaller than MIN_NUM.
        """
        num = self.parse_num(raw)
        if num < MIN_NUM:
            raise ValidationError(
                message=f"num is smaller than {MIN_NUM}",
                field="num",
                context={"num": num, "min": MIN_NUM},
            )
        return num, num * num


square_service = SquareService()
