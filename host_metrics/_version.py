from importlib.metadata import version

try:
    __version__ = version("host-metrics-service")
except Exception:  # pragma: no cover - fallback when package metadata missing
    __version__ = "0.1.0"
