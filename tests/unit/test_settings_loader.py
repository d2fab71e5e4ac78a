from __future__ import annotations

import pytest

from wsbridge.runtime.settings_loader import load_settings
from wsbridge.config.backend import FRAME_HEADER_SIZE, BACKEND_READ_CHUNK_SIZE

_ENV = ("WS_PORT", "BACKEND_HOST", "BACKEND_PORT")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.server.port == 9010
    assert settings.server.host == "0.0.0.0"
    assert settings.server.ws_path == "/"
    assert settings.backend.host == "localhost"
    assert settings.backend.port == 7777
    assert settings.backend.header_size == FRAME_HEADER_SIZE == 8
    assert settings.backend.read_chunk_size == BACKEND_READ_CHUNK_SIZE


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WS_PORT", "8100")
    monkeypatch.setenv("BACKEND_HOST", " lycan.internal ")
    monkeypatch.setenv("BACKEND_PORT", "7000")
    settings = load_settings()
    assert settings.server.port == 8100
    assert settings.backend.host == "lycan.internal"
    assert settings.backend.port == 7000


def test_unparsable_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WS_PORT", "not-a-port")
    monkeypatch.setenv("BACKEND_HOST", "   ")
    settings = load_settings()
    assert settings.server.port == 9010
    assert settings.backend.host == "localhost"


@pytest.mark.parametrize("value", ["0", "65536", "-1"])
def test_out_of_range_port_is_rejected(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("BACKEND_PORT", value)
    with pytest.raises(ValueError):
        load_settings()
