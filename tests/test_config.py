import importlib

import pytest

import config


@pytest.fixture
def reload_config(monkeypatch):
    for name in ("AUTOCLICKER_HOTKEY", "AUTOCLICKER_DELAY_MS", "AUTOCLICKER_BUTTON", "AUTOCLICKER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config):
    cfg = reload_config()
    assert cfg.DEFAULT_HOTKEY == "f9"
    assert cfg.DEFAULT_DELAY_MS == 20
    assert cfg.DEFAULT_BUTTON == "left"
    assert cfg.LOG_LEVEL == "INFO"


def test_overrides(reload_config):
    cfg = reload_config(
        AUTOCLICKER_HOTKEY=" F6 ",
        AUTOCLICKER_DELAY_MS="0",
        AUTOCLICKER_BUTTON="Right",
        AUTOCLICKER_LOG_LEVEL="debug",
    )
    assert cfg.DEFAULT_HOTKEY == "f6"
    assert cfg.DEFAULT_DELAY_MS == 0
    assert cfg.DEFAULT_BUTTON == "right"
    assert cfg.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize("raw", ["fast", "-5", "1.5", "10000000000000"])
def test_bad_delay_falls_back(reload_config, caplog, raw):
    cfg = reload_config(AUTOCLICKER_DELAY_MS=raw)
    assert cfg.DEFAULT_DELAY_MS == 20
    assert "AUTOCLICKER_DELAY_MS" in caplog.text


def test_bad_button_falls_back(reload_config, caplog):
    cfg = reload_config(AUTOCLICKER_BUTTON="thumb")
    assert cfg.DEFAULT_BUTTON == "left"
    assert "expected one of left, right, middle" in caplog.text
