import io
import logging

import pytest

from adapters.primary import console
from config.settings import get_settings


@pytest.fixture(autouse=True)
def clean_logging(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("FUNCVALUES_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FUNCVALUES_LOG_FORMAT", raising=False)
    get_settings.cache_clear()
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    get_settings.cache_clear()


def test_main_prints_all_scenarios() -> None:
    out = io.StringIO()
    assert console.main(out) == 0
    assert out.getvalue().splitlines() == [
        "[1, 2, 3] -> [2, 4, 6]",
        "[1, 2, 3] -> [4, 8, 12]",
        "[2, 4, 6]",
        "[2, 4, 6]",
        "[3, 6, 9]",
        "5: 120",
        "9: 362880",
        "7",
        "21",
        "166",
    ]


def test_main_writes_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    assert console.main() == 0
    captured = capsys.readouterr()
    assert "9: 362880" in captured.out


def test_debug_logging_does_not_touch_stdout(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("FUNCVALUES_LOG_LEVEL", "debug")
    out = io.StringIO()
    console.main(out)
    assert "DEBUG" not in out.getvalue()
    assert len(out.getvalue().splitlines()) == 10


@pytest.mark.parametrize(
    "variable, value",
    [("FUNCVALUES_LOG_LEVEL", "verbose"), ("FUNCVALUES_LOG_FORMAT", "xml")],
)
def test_invalid_settings_fall_back_to_defaults(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    variable: str,
    value: str,
) -> None:
    monkeypatch.setenv(variable, value)
    out = io.StringIO()
    assert console.main(out) == 0
    assert len(out.getvalue().splitlines()) == 10
    assert logging.getLogger().level == logging.WARNING
    assert "Invalid logging settings" in capsys.readouterr().err
