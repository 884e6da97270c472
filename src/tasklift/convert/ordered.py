# src/tasklift/convert/ordered.py

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Sequence
from typing import TypeVar

T = TypeVar("T")


class OrderedGatherError(Exception):
    """All failures of a gather_ordered() call, sorted by input position."""

    def __init__(self, failures: Sequence[tuple[int, Exception]]) -> None:
        self.failures = sorted(failures, key=lambda item: item[0])
        super().__init__(f"{len(self.failures)} of the gathered operations failed")

    @property
    def first(self) -> Exception:
        return self.failures[0][1]

    @property
    def errors(self) -> list[Exception]:
        return [e for _, e in self.failures]


async def gather_ordered(awaitables: Sequence[Awaitable[T]]) -> list[T]:
    """
    Await everything concurrently; result i belongs to awaitables[i].

    On the first failure the rest is cancelled (asyncio.TaskGroup semantics) and
    OrderedGatherError is raised with whatever failed before cancellation.
    Cancelling the caller cancels all children and propagates CancelledError.
    """
    results: list[T | None] = [None] * len(awaitables)
    failures: list[tuple[int, Exception]] = []

    async def _slot(pos: int, aw: Awaitable[T]) -> None:
        try:
            results[pos] = await aw
        except Exception as e:
            failures.append((pos, e))
            raise

    try:
        async with asyncio.TaskGroup() as tg:
            for pos, aw in enumerate(awaitables):
                tg.create_task(_slot(pos, aw))
    except ExceptionGroup:
        if failures:
            raise OrderedGatherError(failures) from None
        raise

    return results  # type: ignore[return-value]
