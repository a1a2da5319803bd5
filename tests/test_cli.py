# tests/test_cli.py
"""
Tests for the pyspeed-info command.
"""

import argparse

import pytest
from pyspeed import DeviceInfo, RuntimeManager, __version__
from pyspeed.cli import format_bytes, main, non_negative_int, print_system_info


class TestFormatBytes:

    def test_units(self):
        assert format_bytes(512) == "512.00 B"
        assert format_bytes(1536) == "1.50 KB"
        assert format_bytes(3 * 1024**3) == "3.00 GB"


class TestMain:
    """Test the CLI entry point."""

    def test_system_info(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out

        assert f"pyspeed v{__version__} - System Information" in out
        assert "Implementation:" in out
        assert "Recommendations for cpu-bound work" in out

    def test_io_workload(self, capsys):
        assert main(["--workload", "io"]) == 0
        assert "threading" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_unknown_technique(self):
        with pytest.raises(SystemExit):
            main(["--benchmark", "caching"])

    def test_benchmark(self, capsys):
        assert main(["--benchmark", "comprehension", "slots", "--size", "1000"]) == 0
        out = capsys.readouterr().out

        assert "Benchmark results:" in out
        assert "comprehension:" in out
        assert "Speedup:" in out

    def test_benchmark_profiling(self, capsys):
        assert main(["--benchmark", "profiling", "--size", "1000"]) == 0
        assert "squares_loop" in capsys.readouterr().out

    def test_check_guide(self, capsys, guide_path):
        assert main(["--check-guide", str(guide_path)]) == 0
        assert "All snippets passed" in capsys.readouterr().out

    def test_check_guide_failure(self, capsys, tmp_path):
        path = tmp_path / "bad.md"
        path.write_text("```python\ndef broken(:\n```\n", encoding="utf-8")

        assert main(["--check-guide", str(path)]) == 1
        assert "✗ snippet #0" in capsys.readouterr().out

    def test_check_guide_unterminated_fence(self, capsys, tmp_path):
        path = tmp_path / "unterminated.md"
        path.write_text("```python\nx = 1\n```\n\n```python\ny = 2\n", encoding="utf-8")

        assert main(["--check-guide", str(path)]) == 1
        assert "unterminated code fence" in capsys.readouterr().out

    def test_check_guide_missing_file(self, capsys, tmp_path):
        assert main(["--check-guide", str(tmp_path / "nope.md")]) == 1
        assert "Cannot read guide" in capsys.readouterr().out

    @pytest.mark.parametrize("size", ["-1", "ten"])
    def test_invalid_size_rejected(self, size, capsys):
        """argparse rejects sizes that are negative or not integers."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--benchmark", "slots", "--size", size])
        assert exc_info.value.code == 2
        assert "--size" in capsys.readouterr().err

    def test_zero_size_accepted(self, capsys):
        assert main(["--benchmark", "memory_release", "--size", "0"]) == 0


class TestNonNegativeInt:

    def test_values(self):
        assert non_negative_int("0") == 0
        assert non_negative_int("42") == 42

    @pytest.mark.parametrize("value", ["-5", "1.5", ""])
    def test_rejected(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            non_negative_int(value)


class TestPrintSystemInfo:

    def test_gpu_total_line(self, capsys):
        """Detected GPUs are listed along with their combined memory."""
        manager = RuntimeManager()
        manager.devices = [d for d in manager.devices if d.device_type == "cpu"] + [
            DeviceInfo(device_id=0, device_type="cuda", total_memory=4 * 1024**3,
                       available_memory=1024**3, device_name="Fake A"),
            DeviceInfo(device_id=1, device_type="cuda", total_memory=4 * 1024**3,
                       available_memory=1024**3, device_name="Fake B"),
        ]

        print_system_info(manager)
        out = capsys.readouterr().out

        assert "GPU 1: Fake B" in out
        assert "Total GPU memory: 8.00 GB" in out
