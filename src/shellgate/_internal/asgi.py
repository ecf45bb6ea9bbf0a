"""Raw ASGI type aliases and the lifespan protocol.

Only ``shellgate.http.request``, ``shellgate.server`` and the edge ASGI
adapter touch these; everything else works with ``Request``/``Response``.
"""

import inspect
from collections.abc import Awaitable, Callable, MutableMapping, Sequence
from typing import Any, TypeAlias

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp: TypeAlias = Callable[[Scope, Receive, Send], Awaitable[None]]

Hook: TypeAlias = Callable[[], Any]


async def run_lifespan(
    receive: Receive,
    send: Send,
    *,
    startup: Sequence[Hook] = (),
    shutdown: Sequence[Hook] = (),
) -> None:
    """Run the ASGI lifespan protocol with sync or async hooks.

    Hooks run in registration order. A failing startup hook is reported
    as ``lifespan.startup.failed``.
    """
    while True:
        message = await receive()
        msg_type = message["type"]

        if msg_type == "lifespan.startup":
            try:
                for hook in startup:
                    result = hook()
                    if inspect.isawaitable(result):
                        await result
            except Exception as exc:
                await send({"type": "lifespan.startup.failed", "message": str(exc)})
                return
            await send({"type": "lifespan.startup.complete"})

        elif msg_type == "lifespan.shutdown":
            for hook in shutdown:
                result = hook()
                if inspect.isawaitable(result):
                    await result
            await send({"type": "lifespan.shutdown.complete"})
            return
