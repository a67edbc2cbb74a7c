"""Already-resolved futures for the *_async entry points.

The async variants never defer the work itself: the mutation and the
whole fan-out run before the call returns. What the caller gets back is
a future bound to the running loop, finished with the outcome, so the
update can be awaited alongside other coroutines.
"""

from __future__ import annotations

import asyncio
from typing import Callable


def run_resolved(fn: Callable[[], None]) -> asyncio.Future[None]:
    """Run fn now; return a done future holding its result or exception.

    Raises RuntimeError without running fn when no event loop is running.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[None] = loop.create_future()
    try:
        fn()
    except Exception as exc:
        future.set_exception(exc)
    else:
        future.set_result(None)
    return future
