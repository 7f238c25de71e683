"""Shared fixtures for the host metrics tests."""

import pytest

from host_metrics.config import Settings
from host_metrics.metrics import SystemReport


@pytest.fixture
def settings() -> Settings:
    return Settings(disk_path="/", sample_interval=0.0)


@pytest.fixture
def sample_report() -> SystemReport:
    return SystemReport(
        collected_at="2026-01-01T00:00:00+00:00",
        cpu_count=4,
        load_average=0.42,
        memory={
            "total_bytes": 8 * 1024**3,
            "free_bytes": 2 * 1024**3,
            "used_bytes": 6 * 1024**3,
            "usage_percent": 75.0,
            "total": "8192.00 MB",
            "free": "2048.00 MB",
            "used": "6144.00 MB",
        },
        disk={
            "total_bytes": 100 * 1024**3,
            "free_bytes": 40 * 1024**3,
            "used_bytes": 60 * 1024**3,
            "usage_percent": 60.0,
            "total": "102400.00 MB",
            "free": "40960.00 MB",
            "used": "61440.00 MB",
            "path": "/",
        },
        cpu={"system_usage_percent": 12.5, "process_usage_percent": 0.75},
        uptime={
            "system_seconds": 90065,
            "system": "1d 1h 1m 5s",
            "process_seconds": 65,
            "process": "1m 5s",
        },
        process={
            "pid": 1234,
            "python_version": "3.12.0",
            "platform": "linux",
            "architecture": "x86_64",
            "hostname": "web-1",
            "resident_memory_bytes": 50 * 1024**2,
            "virtual_memory_bytes": 200 * 1024**2,
            "resident_memory": "50 MB",
            "virtual_memory": "200 MB",
        },
        network={
            "interfaces": [
                {
                    "name": "eth0",
                    "address": "10.0.0.5",
                    "netmask": "255.255.255.0",
                    "mac": "aa:bb:cc:dd:ee:ff",
                    "type": "wired",
                    "speed_mbps": 1000,
                    "rx_bytes": 1024,
                    "tx_bytes": 2048,
                    "rx": "1 KB",
                    "tx": "2 KB",
                    "rx_errors": 0,
                    "tx_errors": 0,
                    "rx_dropped": 0,
                    "tx_dropped": 0,
                }
            ],
            "bandwidth": {
                "interface_count": 1,
                "total_rx_bytes": 1024,
                "total_tx_bytes": 2048,
                "total_rx": "1 KB",
                "total_tx": "2 KB",
            },
        },
    )
