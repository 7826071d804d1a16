"""
NetDemo — Counter State & Increment Service
=============================================

What:  The only mutable state in the application, plus the logic that
       decodes POST /incr bodies and applies them.
Who:   create_app() builds one Counter and stores it on app.state; the
       /incr route reaches it through the get_counter() dependency.
When:  Counter lives as long as its application instance. It starts at 0,
       is never reset and is never persisted.

Ownership & Mutation Policy:
    - Exactly one writer: IncrementService.increment().
    - Counter.add() is a plain read-modify-write with no lock.
    - Routes are `async def` coroutines on a single event loop, and add()
      contains no await point, so increments within one process are never
      interleaved and never lost.
    - Calling add() from several threads at once (e.g. from sync handlers
      running in a threadpool) is NOT safe: concurrent updates can be lost.
    - Each uvicorn worker process has its own independent Counter.

Decode Policy:
    A body that is empty, not JSON, not an object, or whose `num` is not an
    integer decodes to IncrementRequest(num=0). The failure is logged and
    never reported to the client, so such a request still answers 200 with
    the unchanged counter value.
"""

import logging

from pydantic import ValidationError as PydanticValidationError

from netdemo.schemas.counter import IncrementRequest

logger = logging.getLogger(__name__)


class Counter:
    """Process-local integer counter owned by one application instance."""

    def __init__(self, initial: int = 0):
        self.value = initial

    def add(self, delta: int) -> int:
        """Add `delta` and return the new value."""
        self.value = self.value + delta
        return self.value

    def __repr__(self) -> str:
        return f"Counter(value={self.value})"


class IncrementService:

    def decode(self, body: bytes) -> IncrementRequest:
        """
        Decode a POST /incr body, falling back to a zero delta.

        Never raises for client input.
        """
        try:
            return IncrementRequest.model_validate_json(body)
        except PydanticValidationError as e:
            logger.warning(
                "Ignoring undecodable increment body (%d bytes): %d error(s), first: %s",
                len(body),
                e.error_count(),
                e.errors()[0]["msg"] if e.error_count() else "unknown",
            )
            return IncrementRequest()

    def increment(self, counter: Counter, body: bytes) -> int:
        """Decode `body`, apply its delta to `counter`, return the new value."""
        request = self.decode(body)
        value = counter.add(request.num)
        logger.debug("Counter incremented by %d to %d", request.num, value)
        return value


increment_service = IncrementService()
