import importlib
import runpy
import sys

import pytest


def test_import_does_not_run_app():
    module = importlib.import_module("gradebot.__main__")
    assert module.app.info.name == "gradebot"


def test_run_as_module_shows_help(monkeypatch, capsys):
    monkeypatch.delitem(sys.modules, "gradebot.__main__", raising=False)
    monkeypatch.setattr("sys.argv", ["gradebot", "--help"])
    with pytest.raises(SystemExit) as exc:
        runpy.run_module("gradebot", run_name="__main__")
    assert exc.value.code == 0
    assert "--dir" in capsys.readouterr().out
