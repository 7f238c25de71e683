"""Assemble one host metrics report from independent OS queries."""
from __future__ import annotations

import asyncio
import dataclasses
import datetime as dt
import platform
import socket
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import psutil

from .config import Settings, get_settings
from .formatting import format_bytes, format_duration, format_megabytes
from .network import collect_network
from .sampler import SnapshotError, sample_process_cpu, sample_system_cpu


class ReportUnavailableError(RuntimeError):
    """Raised when a collaborator the report cannot do without has failed."""


@dataclass(frozen=True)
class SystemReport:
    collected_at: str
    cpu_count: int
    load_average: float
    memory: Dict[str, Any]
    disk: Dict[str, Any]
    cpu: Dict[str, Any]
    uptime: Dict[str, Any]
    process: Dict[str, Any]
    network: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


def _usage(total: int, free: int) -> Dict[str, Any]:
    used = total - free
    percent = round(used / total * 100, 2) if total else 0.0
    return {
        "total_bytes": total,
        "free_bytes": free,
        "used_bytes": used,
        "usage_percent": percent,
        "total": format_megabytes(total),
        "free": format_megabytes(free),
        "used": format_megabytes(used),
    }


def read_memory() -> Dict[str, Any]:
    memory = psutil.virtual_memory()
    return _usage(memory.total, memory.available)


def read_disk(path: str) -> Dict[str, Any]:
    try:
        usage = psutil.disk_usage(path)
    except OSError as exc:
        raise ReportUnavailableError(f"Failed to get disk usage for {path}: {exc}") from exc
    disk = _usage(usage.total, usage.free)
    disk["path"] = path
    return disk


def read_uptime() -> Dict[str, Any]:
    now = time.time()
    system_seconds = int(now - psutil.boot_time())
    process_seconds = int(now - psutil.Process().create_time())
    return {
        "system_seconds": system_seconds,
        "system": format_duration(system_seconds),
        "process_seconds": process_seconds,
        "process": format_duration(process_seconds),
    }


def read_process() -> Dict[str, Any]:
    proc = psutil.Process()
    memory = proc.memory_info()
    uname = platform.uname()
    return {
        "pid": proc.pid,
        "python_version": platform.python_version(),
        "platform": uname.system.lower(),
        "architecture": uname.machine,
        "hostname": socket.gethostname(),
        "resident_memory_bytes": memory.rss,
        "virtual_memory_bytes": memory.vms,
        "resident_memory": format_bytes(memory.rss),
        "virtual_memory": format_bytes(memory.vms),
    }


def read_load_average() -> float:
    return round(psutil.getloadavg()[0], 2)


def _unwrap(results: List[Any]) -> List[Any]:
    """Raise the first failure among joined results, as ReportUnavailableError."""
    for result in results:
        if isinstance(result, ReportUnavailableError):
            raise result
        if isinstance(result, (SnapshotError, OSError, psutil.Error)):
            raise ReportUnavailableError(str(result) or result.__class__.__name__) from result
        if isinstance(result, BaseException):
            raise result
    return results


async def collect_report(
    settings: Optional[Settings] = None, *, sample_interval: Optional[float] = None
) -> SystemReport:
    """
    Collect a complete report.

    Every query runs concurrently and all of them are joined before the
    report is assembled, even when one fails. A disk, CPU counter or host
    state failure raises ReportUnavailableError; a network failure only
    empties the network section.
    """
    settings = settings or get_settings()
    interval = settings.sample_interval if sample_interval is None else sample_interval
    collected_at = dt.datetime.now(dt.timezone.utc).isoformat()

    results = await asyncio.gather(
        asyncio.to_thread(read_disk, settings.disk_path),
        sample_system_cpu(interval),
        sample_process_cpu(interval),
        asyncio.to_thread(collect_network),
        asyncio.to_thread(psutil.cpu_count, True),
        asyncio.to_thread(read_load_average),
        asyncio.to_thread(read_memory),
        asyncio.to_thread(read_uptime),
        asyncio.to_thread(read_process),
        return_exceptions=True,
    )
    (
        disk,
        system_cpu,
        process_cpu,
        (interfaces, bandwidth),
        cpu_count,
        load_average,
        memory,
        uptime,
        process,
    ) = _unwrap(results)

    return SystemReport(
        collected_at=collected_at,
        cpu_count=cpu_count or 0,
        load_average=load_average,
        memory=memory,
        disk=disk,
        cpu={
            "system_usage_percent": system_cpu,
            "process_usage_percent": process_cpu,
        },
        uptime=uptime,
        process=process,
        network={"interfaces": interfaces, "bandwidth": bandwidth},
    )


SYSTEM_FIELDS: List[str] = ["cpu_count", "load_average", "memory", "disk", "cpu", "process"]


def _select(report: SystemReport, fields: List[str]) -> Dict[str, Any]:
    data = report.to_dict()
    selected = {"collected_at": data["collected_at"]}
    selected.update({name: data[name] for name in fields})
    return selected


def system_section(report: SystemReport) -> Dict[str, Any]:
    return _select(report, SYSTEM_FIELDS)


def uptime_section(report: SystemReport) -> Dict[str, Any]:
    return _select(report, ["uptime"])


def network_section(report: SystemReport) -> Dict[str, Any]:
    return _select(report, ["network"])
