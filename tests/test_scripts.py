import importlib.util
import os
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / 'scripts'


def load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def captured_run(monkeypatch):
    """Replace subprocess.run so launching records the command instead."""
    calls = []
    run_app = load_script("run_app")
    monkeypatch.setattr(run_app.subprocess, "run", lambda cmd, **kwargs: calls.append((cmd, kwargs)))
    return run_app, calls


def test_run_app_uses_ui_port_from_env(captured_run, monkeypatch):
    run_app, calls = captured_run
    monkeypatch.setenv("UI_PORT", "9100")
    monkeypatch.setattr(run_app.sys, "argv", ["run_app.py"])

    run_app.main()

    cmd, kwargs = calls[0]
    assert cmd[1:4] == ["-m", "streamlit", "run"]
    assert cmd[4].endswith(os.path.join("custom_pricing", "ui", "app_streamlit.py"))
    assert cmd[5:7] == ["--server.port", "9100"]
    assert kwargs["env"]["PYTHONPATH"].split(os.pathsep)[0].endswith("src")


def test_run_app_forwards_port_and_extra_options(captured_run, monkeypatch):
    run_app, calls = captured_run
    monkeypatch.delenv("UI_PORT", raising=False)
    monkeypatch.setattr(run_app.sys, "argv", ["run_app.py", "--port", "8600", "--server.headless", "true"])

    run_app.main()

    cmd, _ = calls[0]
    assert cmd[5:] == ["--server.port", "8600", "--server.headless", "true"]
