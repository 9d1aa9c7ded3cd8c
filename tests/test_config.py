"""
Tests for configuration and credential loading.
"""

import plistlib

import pytest

from pause.config import Config, load_api_key
from pause.errors import SecretsError


def write_plist(path, data):
    with open(path, "wb") as fp:
        plistlib.dump(data, fp)


class TestConfig:

    def test_defaults(self, monkeypatch):
        for name in ("GROQ_URL", "GROQ_MODEL", "GROQ_TEMPERATURE", "GROQ_MAX_TOKENS"):
            monkeypatch.delenv(name, raising=False)

        cfg = Config()

        assert cfg.groq_url == "https://api.groq.com/openai/v1/chat/completions"
        assert cfg.groq_model == "llama3-8b-8192"
        assert cfg.temperature == 0.7
        assert cfg.max_tokens == 120

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("GROQ_MODEL", "llama-3.1-8b-instant")
        monkeypatch.setenv("GROQ_MAX_TOKENS", "60")

        cfg = Config()

        assert cfg.groq_model == "llama-3.1-8b-instant"
        assert cfg.max_tokens == 60


class TestLoadApiKey:

    def test_env_wins(self, monkeypatch, tmp_path):
        path = tmp_path / "secrets.plist"
        write_plist(path, {"GROQ_API_KEY": "from-file"})
        monkeypatch.setenv("GROQ_API_KEY", "from-env")

        assert load_api_key(str(path)) == "from-env"

    def test_from_secrets_file(self, tmp_path):
        path = tmp_path / "secrets.plist"
        write_plist(path, {"GROQ_API_KEY": "gsk_test"})

        assert load_api_key(str(path)) == "gsk_test"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SecretsError, match="not found or malformed"):
            load_api_key(str(tmp_path / "nope.plist"))

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "secrets.plist"
        path.write_bytes(b"this is not a plist")

        with pytest.raises(SecretsError, match="not found or malformed"):
            load_api_key(str(path))

    def test_missing_key(self, tmp_path):
        path = tmp_path / "secrets.plist"
        write_plist(path, {"OTHER_KEY": "x"})

        with pytest.raises(SecretsError, match="GROQ_API_KEY not found"):
            load_api_key(str(path))

    def test_non_string_key(self, tmp_path):
        path = tmp_path / "secrets.plist"
        write_plist(path, {"GROQ_API_KEY": 42})

        with pytest.raises(SecretsError, match="GROQ_API_KEY not found"):
            load_api_key(str(path))
