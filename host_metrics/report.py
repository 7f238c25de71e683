"""One-shot console report of the host metrics."""
from __future__ import annotations

import asyncio
import logging
import sys
from typing import List

from .config import configure_logging, get_settings
from .formatting import format_percent
from .metrics import ReportUnavailableError, SystemReport, collect_report


def render_report(report: SystemReport) -> List[str]:
    memory = report.memory
    disk = report.disk
    cpu = report.cpu
    uptime = report.uptime
    bandwidth = report.network["bandwidth"]
    return [
        "=== Server Performance & Usage ===",
        f"CPU Count: {report.cpu_count}",
        f"Load Average (1 min): {report.load_average:.2f}",
        f"Memory - Total: {memory['total']}, Free: {memory['free']}, Used: {memory['used']}, "
        f"Usage: {format_percent(memory['usage_percent'])}",
        f"Disk Storage ({disk['path']}): Total: {disk['total']}, Free: {disk['free']}, Used: {disk['used']}, "
        f"Usage: {format_percent(disk['usage_percent'])}",
        f"System CPU Usage (all cores): {format_percent(cpu['system_usage_percent'])}",
        f"Process CPU Usage (this process): {format_percent(cpu['process_usage_percent'])}",
        f"Uptime - System: {uptime['system']}, Process: {uptime['process']}",
        f"Network ({bandwidth['interface_count']} interfaces): Received: {bandwidth['total_rx']}, "
        f"Sent: {bandwidth['total_tx']}",
    ]


def main() -> None:
    settings = get_settings()
    configure_logging(settings)

    try:
        report = asyncio.run(collect_report(settings))
    except ReportUnavailableError as exc:
        logging.error("Report unavailable: %s", exc)
        sys.exit(1)

    for line in render_report(report):
        print(line)


if __name__ == "__main__":
    main()
