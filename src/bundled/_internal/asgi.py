"""ASGI callable signatures.

Raw ASGI types, as defined by ASGI 3.0. Only the handler, sender,
and test client touch these; everything else sees ``Request`` and
``Response``.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

Scope: TypeAlias = MutableMapping[str, Any]
Message: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[Message]]
Send: TypeAlias = Callable[[Message], Awaitable[None]]
