from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from fpkit import Task


@dataclass
class Recorder:
    """Collects markers in the order producers are invoked and settle."""

    events: list[str] = field(default_factory=list)

    def delayed(self, name: str, value: Any, delay: float = 0.0) -> Task[Any]:
        async def _run() -> Any:
            self.events.append(f"start:{name}")
            await asyncio.sleep(delay)
            self.events.append(f"end:{name}")
            return value

        return Task(_run)

    def failing(self, name: str, exc: Exception, delay: float = 0.0) -> Task[Any]:
        async def _run() -> Any:
            self.events.append(f"start:{name}")
            await asyncio.sleep(delay)
            self.events.append(f"fail:{name}")
            raise exc

        return Task(_run)

    def hanging(self, name: str) -> Task[Any]:
        async def _run() -> Any:
            self.events.append(f"start:{name}")
            await asyncio.get_running_loop().create_future()

        return Task(_run)


@dataclass
class Counter:
    count: int = 0

    def increment(self) -> int:
        self.count += 1
        return self.count


class Boom(Exception):
    pass
