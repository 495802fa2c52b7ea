from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_layer_modules_present():
    for rel in [
        "core/domain/value_objects.py",
        "core/domain/transformations.py",
        "core/domain/arithmetic.py",
        "core/application/scenarios.py",
        "ports/transformation_port.py",
        "adapters/primary/console.py",
        "adapters/secondary/memory/transformation_adapter.py",
        "config/settings.py",
    ]:
        assert (ROOT / rel).is_file(), f"Expected module '{rel}' to exist"


def test_console_script_declared():
    content = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    assert 'funcvalues = "adapters.primary.console:main"' in content
