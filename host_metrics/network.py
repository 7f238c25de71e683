"""Network interface enumeration and cumulative bandwidth totals."""
from __future__ import annotations

import logging
import socket
from typing import Any, Dict, List, Tuple

import psutil

from .formatting import format_bytes

UNKNOWN = "Unknown"

_WIRELESS_PREFIXES = ("wl", "wlan", "wifi", "wi-fi", "ath", "ra")
_VIRTUAL_PREFIXES = ("docker", "veth", "br-", "virbr", "vmnet", "vboxnet", "tun", "tap", "utun", "zt", "tailscale")


def _link_type(name: str) -> str:
    lowered = name.lower()
    if lowered.startswith(_VIRTUAL_PREFIXES):
        return "virtual"
    if lowered.startswith(_WIRELESS_PREFIXES):
        return "wireless"
    return "wired"


def _is_loopback(name: str, address: str) -> bool:
    return name.lower().startswith("lo") or address.startswith("127.")


def empty_bandwidth() -> Dict[str, Any]:
    return {
        "interface_count": 0,
        "total_rx_bytes": 0,
        "total_tx_bytes": 0,
        "total_rx": format_bytes(0),
        "total_tx": format_bytes(0),
    }


def _interface_entry(name: str, inet, link, stat, counters) -> Dict[str, Any]:
    speed = stat.speed if stat is not None and stat.speed and stat.speed > 0 else None
    entry: Dict[str, Any] = {
        "name": name,
        "address": inet.address,
        "netmask": inet.netmask,
        "mac": link.address if link is not None else UNKNOWN,
        "type": _link_type(name),
        "speed_mbps": speed if speed is not None else UNKNOWN,
    }
    if counters is None:
        for key in ("rx_bytes", "tx_bytes", "rx", "tx", "rx_errors", "tx_errors", "rx_dropped", "tx_dropped"):
            entry[key] = UNKNOWN
        return entry
    entry.update(
        {
            "rx_bytes": counters.bytes_recv,
            "tx_bytes": counters.bytes_sent,
            "rx": format_bytes(counters.bytes_recv),
            "tx": format_bytes(counters.bytes_sent),
            "rx_errors": counters.errin,
            "tx_errors": counters.errout,
            "rx_dropped": counters.dropin,
            "tx_dropped": counters.dropout,
        }
    )
    return entry


def summarize_bandwidth(interfaces: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Sum cumulative rx/tx bytes over interfaces that reported counters."""
    summary = empty_bandwidth()
    summary["interface_count"] = len(interfaces)
    for entry in interfaces:
        if isinstance(entry.get("rx_bytes"), int):
            summary["total_rx_bytes"] += entry["rx_bytes"]
        if isinstance(entry.get("tx_bytes"), int):
            summary["total_tx_bytes"] += entry["tx_bytes"]
    summary["total_rx"] = format_bytes(summary["total_rx_bytes"])
    summary["total_tx"] = format_bytes(summary["total_tx_bytes"])
    return summary


def list_interfaces() -> List[Dict[str, Any]]:
    """Describe every non-loopback interface that carries an IPv4 address."""
    addrs = psutil.net_if_addrs()
    stats = psutil.net_if_stats()
    try:
        counters = psutil.net_io_counters(pernic=True)
    except (OSError, psutil.Error) as exc:
        logging.warning("Per-interface counters unavailable: %s", exc)
        counters = {}

    interfaces = []
    for name, entries in addrs.items():
        inet = next((addr for addr in entries if addr.family == socket.AF_INET), None)
        if inet is None or _is_loopback(name, inet.address):
            continue
        link = next((addr for addr in entries if addr.family == psutil.AF_LINK), None)
        interfaces.append(_interface_entry(name, inet, link, stats.get(name), counters.get(name)))
    return interfaces


def collect_network() -> Tuple[List[Dict[str, Any]], Dict[str, Any]]:
    """Return (interfaces, bandwidth summary); degrades to empty data on failure."""
    try:
        interfaces = list_interfaces()
    except Exception as exc:  # pylint: disable=broad-except
        logging.warning("Network statistics unavailable: %s", exc)
        return [], empty_bandwidth()
    return interfaces, summarize_bandwidth(interfaces)
