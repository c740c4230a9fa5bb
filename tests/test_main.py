import logging

import pytest

import main
from config import ConfigError


def test_log_level_defaults_to_info():
    assert main.log_level_from_env({}) == logging.INFO


def test_log_level_name_is_case_insensitive():
    assert main.log_level_from_env({'RAY_ARENA_LOG_LEVEL': ' debug '}) == logging.DEBUG


def test_unknown_log_level_is_config_error():
    with pytest.raises(ConfigError, match="RAY_ARENA_LOG_LEVEL"):
        main.log_level_from_env({'RAY_ARENA_LOG_LEVEL': 'verbose'})


def test_main_exits_with_message_on_unknown_log_level(monkeypatch):
    monkeypatch.setenv('RAY_ARENA_LOG_LEVEL', 'verbose')
    monkeypatch.setattr(main, 'ArenaGame', None)

    with pytest.raises(SystemExit) as excinfo:
        main.main()

    assert "RAY_ARENA_LOG_LEVEL" in str(excinfo.value.code)
