from __future__ import annotations

import pytest

from udict.config import API_URL, Config, Theme


def test_defaults() -> None:
    config = Config.from_env({})
    assert config == Config()
    assert config.api_url == API_URL
    assert config.timeout == 5.0
    assert config.log_file is None
    assert config.theme == Theme()


def test_environment_overrides() -> None:
    config = Config.from_env({
        "UDICT_API_URL": "http://localhost:8080/define",
        "UDICT_TIMEOUT": "2.5",
        "UDICT_LOG_FILE": "/tmp/udict.log",
    })
    assert config.api_url == "http://localhost:8080/define"
    assert config.timeout == 2.5
    assert config.log_file == "/tmp/udict.log"


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_bad_timeout_is_rejected(value: str) -> None:
    with pytest.raises(ValueError, match="UDICT_TIMEOUT"):
        Config.from_env({"UDICT_TIMEOUT": value})
