"""CPU utilization sampling from two time-separated counter snapshots."""
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Sequence

import psutil

from .config import SAMPLE_INTERVAL_SECONDS


class SnapshotError(RuntimeError):
    """Raised when the OS refuses to hand out CPU counters."""


@dataclass(frozen=True)
class CoreTickSnapshot:
    """Cumulative time one logical core has spent in each state since boot."""

    user: float
    nice: float
    sys: float
    irq: float
    idle: float

    @property
    def busy(self) -> float:
        return self.user + self.nice + self.sys + self.irq


@dataclass(frozen=True)
class ProcessCpuSnapshot:
    """Accumulated CPU time of the current process and a monotonic wall mark."""

    user_micros: int
    system_micros: int
    wall_clock: float  # seconds, time.monotonic()

    @property
    def cpu_micros(self) -> int:
        return self.user_micros + self.system_micros


def _core_from_psutil(times) -> CoreTickSnapshot:
    # nice is absent on Windows, where irq is called "interrupt".
    return CoreTickSnapshot(
        user=times.user,
        nice=getattr(times, "nice", 0.0),
        sys=times.system,
        irq=getattr(times, "irq", getattr(times, "interrupt", 0.0)),
        idle=times.idle,
    )


def read_core_ticks() -> List[CoreTickSnapshot]:
    """Read per-core counters, one entry per logical core in OS order."""
    try:
        per_cpu = psutil.cpu_times(percpu=True)
    except (OSError, psutil.Error) as exc:
        raise SnapshotError(f"CPU tick counters unavailable: {exc}") from exc
    if not per_cpu:
        raise SnapshotError("CPU tick counters unavailable: no cores reported")
    return [_core_from_psutil(times) for times in per_cpu]


def read_process_cpu() -> ProcessCpuSnapshot:
    try:
        times = psutil.Process().cpu_times()
    except (OSError, psutil.Error) as exc:
        raise SnapshotError(f"process CPU time unavailable: {exc}") from exc
    return ProcessCpuSnapshot(
        user_micros=int(round(times.user * 1_000_000)),
        system_micros=int(round(times.system * 1_000_000)),
        wall_clock=time.monotonic(),
    )


def system_utilization(
    first: Sequence[CoreTickSnapshot], second: Sequence[CoreTickSnapshot]
) -> float:
    """
    Percentage of non-idle time across all cores between two snapshots.

    Cores are matched by index; if a core appeared or vanished between the
    snapshots only the cores present in both are counted. When no time
    elapsed on any core the result is 0.0 rather than NaN.
    """
    idle_diff = 0.0
    total_diff = 0.0
    for before, after in zip(first, second):
        idle = after.idle - before.idle
        idle_diff += idle
        total_diff += idle + (after.busy - before.busy)

    if total_diff <= 0:
        logging.debug("No CPU ticks elapsed between snapshots; reporting 0.0%%")
        return 0.0
    return round(100 - (idle_diff / total_diff) * 100, 2)


def process_utilization(first: ProcessCpuSnapshot, second: ProcessCpuSnapshot) -> float:
    """
    CPU time used by the process as a percentage of elapsed wall time.

    Exceeds 100 when the process keeps more than one core busy.
    """
    elapsed_ms = (second.wall_clock - first.wall_clock) * 1000
    if elapsed_ms <= 0:
        return 0.0
    cpu_ms = (second.cpu_micros - first.cpu_micros) / 1000
    return round(cpu_ms / elapsed_ms * 100, 2)


async def sample_system_cpu(
    interval: float = SAMPLE_INTERVAL_SECONDS,
    read: Callable[[], Sequence[CoreTickSnapshot]] = read_core_ticks,
) -> float:
    first = read()
    await asyncio.sleep(interval)
    second = read()
    return system_utilization(first, second)


async def sample_process_cpu(
    interval: float = SAMPLE_INTERVAL_SECONDS,
    read: Callable[[], ProcessCpuSnapshot] = read_process_cpu,
) -> float:
    first = read()
    await asyncio.sleep(interval)
    second = read()
    return process_utilization(first, second)
