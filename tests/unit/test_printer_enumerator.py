import subprocess

import pytest

from ghostprint.config.settings import Settings
from ghostprint.pipeline.exceptions import PrinterEnumerationError, UnexpectedError
from ghostprint.printers.command_enumerator import (
    CupsPrinterEnumerator,
    WindowsPrinterEnumerator,
)
from ghostprint.printers.factory import PrinterEnumeratorFactory
from ghostprint.printers.models import PrinterDescriptor
from ghostprint.printers.static_enumerator import StaticPrinterEnumerator


class FakeProc:
    def __init__(self, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class TestCupsPrinterEnumerator:
    def test_runs_lpstat_and_parses_lines(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []

        def fake_run(cmd, capture_output, text, timeout):
            calls.append((cmd, timeout))
            return FakeProc(stdout="HP-1\nOffice_Printer\n\n")

        monkeypatch.setattr("subprocess.run", fake_run)

        printers = CupsPrinterEnumerator(timeout_seconds=5).list_printers()

        assert calls == [(["lpstat", "-e"], 5)]
        assert printers == [
            PrinterDescriptor(name="HP-1"),
            PrinterDescriptor(name="Office_Printer"),
        ]

    def test_no_destinations_is_empty_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "subprocess.run",
            lambda *a, **k: FakeProc(returncode=1, stderr="lpstat: No destinations added."),
        )
        assert CupsPrinterEnumerator(timeout_seconds=5).list_printers() == []

    def test_raises_on_failure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "subprocess.run",
            lambda *a, **k: FakeProc(returncode=1, stderr="scheduler is not running"),
        )
        with pytest.raises(PrinterEnumerationError, match="rc=1"):
            CupsPrinterEnumerator(timeout_seconds=5).list_printers()

    def test_raises_when_lpstat_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_run(*a, **k):
            raise FileNotFoundError("lpstat")

        monkeypatch.setattr("subprocess.run", fake_run)
        with pytest.raises(PrinterEnumerationError, match="Could not run 'lpstat'"):
            CupsPrinterEnumerator(timeout_seconds=5).list_printers()

    def test_raises_on_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fake_run(cmd, **k):
            raise subprocess.TimeoutExpired(cmd, k["timeout"])

        monkeypatch.setattr("subprocess.run", fake_run)
        with pytest.raises(PrinterEnumerationError, match="did not finish"):
            CupsPrinterEnumerator(timeout_seconds=5).list_printers()

    def test_enumeration_error_is_unexpected(self) -> None:
        error = PrinterEnumerationError("boom")
        assert isinstance(error, UnexpectedError)
        assert error.title == "No Printer found"
        assert error.exit_code == 1


class TestWindowsPrinterEnumerator:
    def test_runs_get_printer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []

        def fake_run(cmd, **k):
            calls.append(cmd)
            return FakeProc(stdout="Microsoft Print to PDF\r\nHP LaserJet 400\r\n")

        monkeypatch.setattr("subprocess.run", fake_run)

        printers = WindowsPrinterEnumerator(timeout_seconds=5).list_printers()

        assert calls[0][0] == "powershell"
        assert "Get-Printer | Select-Object -ExpandProperty Name" in calls[0]
        assert [p.name for p in printers] == ["Microsoft Print to PDF", "HP LaserJet 400"]


class TestStaticPrinterEnumerator:
    def test_returns_configured_names(self) -> None:
        enumerator = StaticPrinterEnumerator(["HP-1", "HP-2"])
        assert enumerator.list_printers() == [
            PrinterDescriptor(name="HP-1"),
            PrinterDescriptor(name="HP-2"),
        ]


class TestPrinterEnumeratorFactory:
    def test_creates_cups_backend(self) -> None:
        enumerator = PrinterEnumeratorFactory.create(Settings(printer_backend="cups"))
        assert isinstance(enumerator, CupsPrinterEnumerator)

    def test_creates_windows_backend(self) -> None:
        enumerator = PrinterEnumeratorFactory.create(Settings(printer_backend="Windows"))
        assert isinstance(enumerator, WindowsPrinterEnumerator)

    def test_creates_static_backend(self) -> None:
        settings = Settings(printer_backend="static", static_printers=["HP-1"])
        enumerator = PrinterEnumeratorFactory.create(settings)
        assert isinstance(enumerator, StaticPrinterEnumerator)
        assert enumerator.list_printers() == [PrinterDescriptor(name="HP-1")]

    def test_raises_for_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="Unknown printer backend 'lpd'"):
            PrinterEnumeratorFactory.create(Settings(printer_backend="lpd"))
