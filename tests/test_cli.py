from pathlib import Path

import pytest
from typer.testing import CliRunner

from wirestack import __version__
from wirestack.cli.commands import app

runner = CliRunner()

SCRIPT = """\
class Timing:
    def __init__(self, app):
        self.app = app

    def __call__(self, request):
        return self.app(request)

def open_db(request, response):
    pass

def close_db(request):
    pass

def hello(request):
    return "hello"

assert server().name == "wirestack-check"
run_before(open_db)
run_after(close_db)
use(Timing)
run(hello)
"""


@pytest.fixture
def script(tmp_path: Path) -> Path:
    path = tmp_path / "config.ws"
    path.write_text(SCRIPT)
    return path


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"wirestack v{__version__}" in result.output


def test_check_prints_pipeline(script: Path) -> None:
    result = runner.invoke(app, ["check", str(script), "--post-hooks"])
    assert result.exit_code == 0, result.output
    assert "open_db" in result.output
    assert "close_db" in result.output
    assert "Timing" in result.output
    assert "hello" in result.output


def test_check_default_mode_rejects_single_argument_after_hook(script: Path) -> None:
    result = runner.invoke(app, ["check", str(script)])
    assert result.exit_code == 1
    assert "InvalidCallableError" in result.output


def test_check_missing_script(tmp_path: Path) -> None:
    result = runner.invoke(app, ["check", str(tmp_path / "missing.ws")])
    assert result.exit_code == 1
    assert "couldn't read" in result.output


def test_check_script_without_application(tmp_path: Path) -> None:
    path = tmp_path / "config.ws"
    path.write_text("x = 1\n")
    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 1
    assert "MissingApplicationError" in result.output
