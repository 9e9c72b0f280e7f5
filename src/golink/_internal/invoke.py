"""Invoke helpers — call sync or async lookups uniformly.

``resolve_async()`` accepts ``def`` and ``async def`` lookups. A plain
function is treated as potentially blocking (a database driver, a file
read) and runs in an anyio worker thread so the event loop keeps serving
other requests.

Usage::

    from golink._internal.invoke import invoke_lookup

    value = await invoke_lookup(lookup, key)
"""

import inspect
from collections.abc import Callable
from typing import Any

import anyio.to_thread


async def invoke_lookup(lookup: Callable[[str], Any], key: str) -> Any:
    """Call *lookup* exactly once with *key* and return its result.

    Coroutine functions are awaited directly. Other callables run in a
    worker thread; if they hand back an awaitable anyway (a lambda
    returning a coroutine), it is awaited too.
    """
    if inspect.iscoroutinefunction(lookup):
        return await lookup(key)

    result = await anyio.to_thread.run_sync(lookup, key)
    if inspect.isawaitable(result):
        result = await result
    return result
