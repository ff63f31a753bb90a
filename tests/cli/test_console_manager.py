from __future__ import annotations

import pytest
from rich.console import Console

from fileconverter.cli.console import ENV_DISABLE_RICH, ConsoleManager, rich_enabled


def test_console_manager_yields_console() -> None:  # noqa: D103
    with ConsoleManager(record=True) as console:
        assert isinstance(console, Console)
        console.print("Start")
        console.print("Done")
        output = console.export_text()

    for expected in ("Start", "Done"):
        assert expected in output


def test_rich_disabled_by_env(monkeypatch: pytest.MonkeyPatch) -> None:  # noqa: D103
    assert rich_enabled()
    monkeypatch.setenv(ENV_DISABLE_RICH, "1")
    assert not rich_enabled()

    with ConsoleManager() as console:
        assert console.color_system is None


def test_force_use_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:  # noqa: D103
    monkeypatch.setenv(ENV_DISABLE_RICH, "1")
    with ConsoleManager(force_use=False, record=True) as console:
        console.print("[bold]plain[/bold]")
        assert console.export_text().strip() == "plain"


def test_exceptions_propagate() -> None:  # noqa: D103
    with pytest.raises(ZeroDivisionError):
        with ConsoleManager(record=True) as console:
            1 / 0
    assert "ZeroDivisionError" in console.export_text()
