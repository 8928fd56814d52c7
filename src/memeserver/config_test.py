import os
from unittest.mock import patch

import pytest

from .config import DEFAULT_PORT, load_settings, parse_port
from .errors import ConfigError


@pytest.fixture
def environ():
    return {"REDDIT_CLIENT_ID": "id", "REDDIT_CLIENT_SECRET": "secret"}


class TestLoadSettings:
    def test_reads_credentials(self, environ):
        settings = load_settings(environ)
        assert settings.credentials.client_id == "id"
        assert settings.credentials.client_secret.get_secret_value() == "secret"

    def test_port_defaults_to_3000(self, environ):
        assert load_settings(environ).port == DEFAULT_PORT == 3000

    def test_port_from_environment(self, environ):
        environ["PORT"] = "8080"
        assert load_settings(environ).port == 8080

    @pytest.mark.parametrize("name", ["REDDIT_CLIENT_ID", "REDDIT_CLIENT_SECRET"])
    def test_missing_credential_raises(self, environ, name):
        del environ[name]
        with pytest.raises(ConfigError, match=name):
            load_settings(environ)

    @pytest.mark.parametrize("name", ["REDDIT_CLIENT_ID", "REDDIT_CLIENT_SECRET"])
    def test_empty_credential_raises(self, environ, name):
        environ[name] = ""
        with pytest.raises(ConfigError, match=name):
            load_settings(environ)

    def test_secret_is_not_in_repr(self, environ):
        environ["REDDIT_CLIENT_SECRET"] = "hunter2"
        settings = load_settings(environ)
        assert "hunter2" not in repr(settings)
        assert "hunter2" not in str(settings.credentials)

    def test_defaults_to_process_environment(self, environ):
        with patch.dict(os.environ, environ, clear=True):
            assert load_settings().credentials.client_id == "id"


class TestParsePort:
    @pytest.mark.parametrize("raw,expected", [("0", 0), ("3000", 3000), ("+3000", 3000), ("65535", 65535)])
    def test_valid(self, raw, expected):
        assert parse_port(raw) == expected

    def test_none_is_default(self):
        assert parse_port(None) == DEFAULT_PORT

    # Arabic-Indic and fullwidth digits are rejected.
    @pytest.mark.parametrize(
        "raw",
        ["", "abc", "-1", "+", "80.5", " 80", "\u0663\u0660\u0660\u0660", "\uff13\uff10\uff10\uff10", "65536", "100000"],
    )
    def test_invalid(self, raw):
        with pytest.raises(ConfigError):
            parse_port(raw)
