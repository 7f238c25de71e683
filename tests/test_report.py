"""Tests for the one-shot console report."""

import psutil
import pytest

from host_metrics import report
from host_metrics.config import Settings
from host_metrics.metrics import ReportUnavailableError


class TestRenderReport:
    """Tests for render_report."""

    def test_lines(self, sample_report):
        lines = report.render_report(sample_report)
        assert lines[0] == "=== Server Performance & Usage ==="
        assert "CPU Count: 4" in lines
        assert "Load Average (1 min): 0.42" in lines
        assert (
            "Memory - Total: 8192.00 MB, Free: 2048.00 MB, Used: 6144.00 MB, Usage: 75.00%" in lines
        )
        assert "Disk Storage (/): Total: 102400.00 MB, Free: 40960.00 MB, Used: 61440.00 MB, Usage: 60.00%" in lines
        assert "System CPU Usage (all cores): 12.50%" in lines
        assert "Process CPU Usage (this process): 0.75%" in lines
        assert "Uptime - System: 1d 1h 1m 5s, Process: 1m 5s" in lines
        assert "Network (1 interfaces): Received: 1 KB, Sent: 2 KB" in lines


class TestMain:
    """Tests for the console entry point."""

    def test_prints_report(self, monkeypatch, capsys, sample_report):
        async def fake_collect(settings):
            return sample_report

        monkeypatch.setattr(report, "collect_report", fake_collect)
        report.main()
        out = capsys.readouterr().out
        assert out.startswith("=== Server Performance & Usage ===\n")
        assert "System CPU Usage (all cores): 12.50%" in out

    def test_exits_on_unavailable_report(self, monkeypatch, capsys):
        async def fake_collect(settings):
            raise ReportUnavailableError("Failed to get disk usage for /: boom")

        monkeypatch.setattr(report, "collect_report", fake_collect)
        with pytest.raises(SystemExit) as excinfo:
            report.main()
        assert excinfo.value.code == 1
        assert capsys.readouterr().out == ""

    def test_exits_on_host_state_error(self, monkeypatch, capsys):
        """Test a psutil failure during collection exits instead of crashing."""

        def denied():
            raise psutil.AccessDenied()

        monkeypatch.setattr(report, "get_settings", lambda: Settings(disk_path="/", sample_interval=0.0))
        monkeypatch.setattr(psutil, "boot_time", denied)
        with pytest.raises(SystemExit) as excinfo:
            report.main()
        assert excinfo.value.code == 1
        assert capsys.readouterr().out == ""
