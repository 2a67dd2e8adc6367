import pytest

from src import cors_config


@pytest.fixture(autouse=True)
def clear_cors_env(monkeypatch):
    """Ensure each test starts without CORS-specific environment variables."""
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
    monkeypatch.delenv("CORS_ALLOW_ORIGIN_REGEXES", raising=False)


def test_defaults_include_local_dev_and_github_pages():
    explicit, regex = cors_config.get_cors_settings()

    assert "http://localhost:5173" in explicit
    assert regex == list(cors_config.DEFAULT_REGEX_ORIGINS)


@pytest.mark.parametrize("raw", ["", "   ", " , ,"])
def test_blank_env_values_fall_back_to_defaults(monkeypatch, raw):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", raw)
    monkeypatch.setenv("CORS_ALLOW_ORIGIN_REGEXES", raw)

    explicit, regex = cors_config.get_cors_settings()

    assert explicit == list(cors_config.DEFAULT_EXPLICIT_ORIGINS)
    assert regex == list(cors_config.DEFAULT_REGEX_ORIGINS)


def test_custom_env_values_override_defaults(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://names.example.com, https://api.example.com")
    monkeypatch.setenv("CORS_ALLOW_ORIGIN_REGEXES", "https://(.+\\.)?example\\.com, *")

    explicit, regex = cors_config.get_cors_settings()

    assert explicit == ["https://names.example.com", "https://api.example.com"]
    assert regex == ["https://(.+\\.)?example\\.com"]


def test_combine_regex_patterns():
    assert cors_config.combine_regex_patterns([]) is None
    assert cors_config.combine_regex_patterns(["a", "b"]) == "(?:a)|(?:b)"
