import asyncio
from typing import Callable, TypeVar

T = TypeVar("T")


async def deferred(factory: Callable[[], T], delay: float = 0.0) -> T:
    """Produce ``factory()`` once ``delay`` seconds have elapsed."""
    if delay > 0:
        await asyncio.sleep(delay)
    return factory()
