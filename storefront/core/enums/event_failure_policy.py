"""Handler failure policies for the event dispatcher.

- FAIL_FAST: First handler exception aborts the remaining handlers and
  propagates to the caller of notify(). Default.
- ISOLATE: Every handler runs; failures are logged and returned to the
  caller of notify() as HandlerFailure records.
"""

from enum import Enum


class HandlerFailurePolicy(str, Enum):
    """How the dispatcher reacts when an event handler raises."""

    FAIL_FAST = "fail_fast"
    ISOLATE = "isolate"
