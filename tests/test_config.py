import pytest

from taarana.config import Config
from taarana.errors import ConfigError


def test_defaults():
    config = Config.from_env({})
    assert config.port == 10000
    assert config.backend == "memory"
    assert config.debug is False
    assert config.log_level == "INFO"


def test_values_from_env():
    config = Config.from_env({
        "TAARANA_PORT": "8080",
        "TAARANA_DEBUG": "true",
        "TAARANA_BACKEND": "Supabase",
        "SUPABASE_URL": "https://example.supabase.co",
        "SUPABASE_KEY": "service-key",
        "LOG_LEVEL": "debug",
    })
    assert config.port == 8080
    assert config.debug is True
    assert config.backend == "supabase"
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("env", [
    {"TAARANA_BACKEND": "mongo"},
    {"TAARANA_BACKEND": "supabase"},
    {"TAARANA_PORT": "eighty"},
    {"TAARANA_SESSION_TTL": "0"},
    {"LOG_LEVEL": "LOUD"},
])
def test_invalid_env(env):
    with pytest.raises(ConfigError):
        Config.from_env(env)
