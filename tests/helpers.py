"""Test helpers (small, reusable doubles).

Resources, trackers and loggers shared by the combinator suites. Async
variants sleep for a tick so they genuinely suspend.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field


async def tick() -> None:
    await asyncio.sleep(0)


@dataclass
class ExecutionTracker:
    """Ordered record of what ran."""

    steps: list[str] = field(default_factory=list)

    def record(self, step: str) -> None:
        self.steps.append(step)

    async def record_async(self, step: str) -> None:
        await tick()
        self.steps.append(step)


@dataclass
class DisposableResource:
    """Sync resource released through close()."""

    value: int = 42
    close_calls: int = 0
    tracker: ExecutionTracker | None = None
    name: str = "resource"

    @property
    def is_disposed(self) -> bool:
        return self.close_calls > 0

    def read(self) -> str:
        if self.is_disposed:
            raise RuntimeError(f"{self.name} used after close")
        return f"Used {self.value}"

    def close(self) -> None:
        self.close_calls += 1
        if self.tracker is not None:
            self.tracker.record(f"close {self.name}")


@dataclass
class AsyncDisposableResource:
    """Async resource released through aclose()."""

    aclose_calls: int = 0
    used: bool = False

    @property
    def is_cleaned_up(self) -> bool:
        return self.aclose_calls > 0

    async def use(self) -> None:
        await tick()
        self.used = True

    async def get_data(self) -> int:
        await tick()
        return 42 if self.used else 0

    async def aclose(self) -> None:
        await tick()
        self.aclose_calls += 1


@dataclass
class Logger:
    errors: list[BaseException | str] = field(default_factory=list)

    @property
    def error_logged(self) -> bool:
        return bool(self.errors)

    def log_error(self, error: BaseException | str) -> None:
        self.errors.append(error)

    async def log_error_async(self, error: BaseException | str) -> None:
        await tick()
        self.errors.append(error)


@dataclass
class MetricsTracker:
    attempts: int = 0
    network_errors: int = 0
    timeouts: int = 0

    def record_attempt(self) -> None:
        self.attempts += 1

    async def record_attempt_async(self) -> None:
        await tick()
        self.attempts += 1

    async def record_network_error_async(self) -> None:
        await tick()
        self.network_errors += 1

    async def record_timeout_async(self) -> None:
        await tick()
        self.timeouts += 1


@dataclass
class LockTracker:
    is_locked: bool = False
    releases: int = 0

    def acquire(self) -> None:
        self.is_locked = True

    def release(self) -> None:
        self.is_locked = False
        self.releases += 1

    async def acquire_async(self) -> None:
        await tick()
        self.is_locked = True

    async def release_async(self) -> None:
        await tick()
        self.is_locked = False
        self.releases += 1


class CallCounter:
    """Callable wrapper counting invocations of a sync function."""

    def __init__(self, fn):
        self.fn = fn
        self.calls = 0

    def __call__(self, *args):
        self.calls += 1
        return self.fn(*args)


class AsyncCallCounter:
    """Callable wrapper counting invocations of an async function."""

    def __init__(self, fn):
        self.fn = fn
        self.calls = 0

    async def __call__(self, *args):
        self.calls += 1
        return await self.fn(*args)
