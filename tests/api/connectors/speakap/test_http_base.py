"""Testes da configuração imutável do cliente."""

from __future__ import annotations

import dataclasses

import pytest

from api.connectors.speakap.http_base import DEFAULT_API_VERSION, SpeakapApiConfig
from utils.errors import InvalidConfigError, SpeakapError


@pytest.mark.parametrize("scheme", ["ftp", "HTTPS", "", "ws"])
def test_invalid_scheme_fails_construction(scheme: str) -> None:
    with pytest.raises(InvalidConfigError, match="http or https"):
        SpeakapApiConfig(scheme=scheme, hostname="api.speakap.io")


def test_invalid_config_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        SpeakapApiConfig(scheme="gopher", hostname="api.speakap.io")
    assert issubclass(InvalidConfigError, SpeakapError)


def test_missing_hostname_fails_construction() -> None:
    with pytest.raises(InvalidConfigError):
        SpeakapApiConfig(scheme="https", hostname="")


def test_defaults_and_derived_values() -> None:
    config = SpeakapApiConfig(scheme="https", hostname="api.speakap.io", app_id="a", app_secret="b")

    assert config.api_version == DEFAULT_API_VERSION == "1.1"
    assert config.access_token == "a_b"
    assert config.base_url == "https://api.speakap.io"
    assert config.default_accept == "application/vnd.speakap.api-v1.1+json"
    assert config.timeout_seconds is None


@pytest.mark.parametrize(("app_id", "app_secret"), [(None, "b"), ("a", None), ("", "")])
def test_access_token_requires_both_credentials(app_id: str | None, app_secret: str | None) -> None:
    config = SpeakapApiConfig(
        scheme="https",
        hostname="api.speakap.io",
        app_id=app_id,
        app_secret=app_secret,
    )
    assert config.access_token is None


def test_config_is_immutable_and_hides_secret() -> None:
    config = SpeakapApiConfig(scheme="https", hostname="api.speakap.io", app_id="a", app_secret="topsecret")

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.app_secret = "other"  # type: ignore[misc]
    assert "topsecret" not in repr(config)
