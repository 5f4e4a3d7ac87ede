from pathlib import Path

from stacknt import config


def test_max_depth_default(monkeypatch):
    monkeypatch.delenv("STACKNT_MAX_DEPTH", raising=False)
    assert config.get_max_depth() == config.DEFAULT_MAX_DEPTH


def test_max_depth_override(monkeypatch):
    monkeypatch.setenv("STACKNT_MAX_DEPTH", " 64 ")
    assert config.get_max_depth() == 64


def test_invalid_max_depth_falls_back(monkeypatch):
    for raw in ["lots", "0", "-5", ""]:
        monkeypatch.setenv("STACKNT_MAX_DEPTH", raw)
        assert config.get_max_depth() == config.DEFAULT_MAX_DEPTH


def test_history_default(monkeypatch, tmp_path):
    monkeypatch.delenv("STACKNT_HISTORY", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert config.get_history_file() == tmp_path / ".stacknt_history"


def test_history_override(monkeypatch, tmp_path):
    target = tmp_path / "hist"
    monkeypatch.setenv("STACKNT_HISTORY", str(target))
    assert config.get_history_file() == Path(target)


def test_history_disabled(monkeypatch):
    monkeypatch.setenv("STACKNT_HISTORY", "")
    assert config.get_history_file() is None
