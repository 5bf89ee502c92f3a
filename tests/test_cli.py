"""
Tests for the command line front end.
Run with: pytest tests/test_cli.py -v
"""
import pytest
from rich.logging import RichHandler

import portsweep.main as cli
from portsweep.scanner import PortScanner
from tests.conftest import make_ui, output_of


@pytest.fixture
def no_scan(monkeypatch):
    """Fails the test if a scanner is ever constructed."""
    created = []

    def forbidden(*args, **kwargs):
        created.append((args, kwargs))
        raise AssertionError("scan must not start")

    monkeypatch.setattr(cli, "PortScanner", forbidden)
    return created


@pytest.fixture
def fake_scanner(monkeypatch, fake_probe):
    def factory(config, ui=None):
        return PortScanner(config, probe=fake_probe, ui=ui)

    monkeypatch.setattr(cli, "PortScanner", factory)
    return fake_probe


class TestUsage:
    """Test help and usage output"""

    def test_help_flag(self, no_scan):
        ui = make_ui()
        assert cli.main(["-h"], ui=ui) == 0
        out = output_of(ui)
        assert "usage: portsweep -j THREADS IPADDR" in out
        assert "THREADS" in out
        assert not no_scan

    def test_long_help_flag(self, no_scan):
        ui = make_ui()
        assert cli.main(["--help", "127.0.0.1"], ui=ui) == 0
        assert "usage:" in output_of(ui)

    def test_no_address_prints_usage(self, no_scan):
        ui = make_ui()
        assert cli.main([], ui=ui) == 0
        assert "usage:" in output_of(ui)


class TestConfigurationErrors:
    """Configuration errors are one line on stdout and never start a scan"""

    def test_zero_threads(self, no_scan):
        ui = make_ui()
        assert cli.main(["-j", "0", "127.0.0.1"], ui=ui) == 0
        out = output_of(ui)
        assert out.startswith("invalid thread count:")
        assert out.count("\n") == 1
        assert not no_scan

    def test_non_numeric_threads(self, no_scan):
        ui = make_ui()
        assert cli.main(["-j", "abc", "127.0.0.1"], ui=ui) == 0
        assert output_of(ui) == "error parsing options: argument -j: invalid int value: 'abc'\n"
        assert not no_scan

    def test_unknown_option(self, no_scan):
        ui = make_ui()
        assert cli.main(["--bogus", "127.0.0.1"], ui=ui) == 0
        assert output_of(ui).startswith("error parsing options:")

    def test_bad_address(self, no_scan):
        ui = make_ui()
        assert cli.main(["foobar"], ui=ui) == 0
        assert output_of(ui) == "could not parse foobar as an IP address\n"


class TestScanRun:
    """Test a full run through the CLI with a fake prober"""

    @pytest.mark.parametrize("threads", ["1", "4", "16"])
    def test_output_format(self, fake_scanner, threads):
        ui = make_ui()
        assert cli.main(["-j", threads, "127.0.0.1"], ui=ui) == 0
        assert output_of(ui) == "...\n1025 is open\n2048 is open\n65000 is open\n"

    def test_ipv6_target(self, fake_scanner):
        ui = make_ui()
        assert cli.main(["::1"], ui=ui) == 0
        assert output_of(ui).endswith("65000 is open\n")

    def test_default_thread_count(self, monkeypatch, fake_probe):
        seen = {}

        def factory(config, ui=None):
            seen["workers"] = config.workers
            return PortScanner(config, probe=fake_probe, ui=ui)

        monkeypatch.setattr(cli, "PortScanner", factory)
        cli.main(["127.0.0.1"], ui=make_ui())
        assert seen["workers"] == 4

    def test_worker_crash_exit_code(self, monkeypatch):
        async def broken(port):
            raise RuntimeError("probe bug")

        def factory(config, ui=None):
            return PortScanner(config, probe=broken, ui=ui)

        monkeypatch.setattr(cli, "PortScanner", factory)
        ui = make_ui()
        assert cli.main(["127.0.0.1"], ui=ui) == 1
        assert "Fatal Error" in output_of(ui)

    def test_unexpected_error_exit_code(self, monkeypatch):
        """Errors outside the scan taxonomy still end in one line, not a traceback"""
        class PipeClosed:
            def __init__(self, config, ui=None):
                pass

            async def scan(self):
                raise BrokenPipeError(32, "Broken pipe")

        monkeypatch.setattr(cli, "PortScanner", PipeClosed)
        ui = make_ui()
        assert cli.main(["127.0.0.1"], ui=ui) == 1
        assert "Fatal Error" in output_of(ui)
        assert "Broken pipe" in output_of(ui)


class TestLogging:
    """Test logging setup"""

    def test_verbose_enables_debug(self, fake_scanner):
        import logging
        cli.main(["-v", "127.0.0.1"], ui=make_ui())
        logger = logging.getLogger("portsweep")
        assert logger.level == logging.DEBUG
        assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1

    def test_default_level_warning(self, fake_scanner):
        import logging
        cli.main(["127.0.0.1"], ui=make_ui())
        assert logging.getLogger("portsweep").level == logging.WARNING
