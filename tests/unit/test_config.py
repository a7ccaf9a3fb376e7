"""Unit tests for ClientConfig."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.client.config import DEFAULT_API_BASE_URL, ClientConfig, get_client_config


class TestClientConfig:
    """Tests for ClientConfig validation."""

    def test_valid_config_with_all_fields(self) -> None:
        """Config accepts valid values for all fields."""
        config = ClientConfig(
            api_base_url="https://chat.example.com",
            request_timeout=30.0,
            start_delay=0.5,
        )

        assert config.api_base_url == "https://chat.example.com"
        assert config.request_timeout == 30.0
        assert config.start_delay == 0.5

    def test_config_with_default_values(self) -> None:
        """Without environment overrides the defaults apply."""
        with patch.dict("os.environ", {}, clear=True):
            config = ClientConfig()

        assert config.api_base_url == DEFAULT_API_BASE_URL
        assert config.request_timeout is None
        assert config.start_delay == 2.0

    def test_config_strips_trailing_slash(self) -> None:
        """Trailing slash and whitespace are removed from the base URL."""
        config = ClientConfig(api_base_url="  http://localhost:5000/  ")

        assert config.api_base_url == "http://localhost:5000"

    def test_config_rejects_non_http_url(self) -> None:
        """Base URL without an http(s) scheme is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(api_base_url="localhost:5000")

        assert "API_BASE_URL" in str(exc_info.value)

    def test_config_rejects_negative_start_delay(self) -> None:
        """Start delay below zero is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(start_delay=-1.0)

        assert "start_delay" in str(exc_info.value)

    def test_config_rejects_zero_timeout(self) -> None:
        """A zero timeout is rejected; None is the way to disable it."""
        with pytest.raises(ValidationError) as exc_info:
            ClientConfig(request_timeout=0.0)

        assert "request_timeout" in str(exc_info.value)


class TestGetClientConfig:
    """Tests for get_client_config factory function."""

    def test_get_config_from_environment(self) -> None:
        """get_client_config reads every option from the environment."""
        env = {
            "API_BASE_URL": "http://api.internal:9000/",
            "REQUEST_TIMEOUT": "15",
            "START_DELAY": "0",
        }
        with patch.dict("os.environ", env):
            config = get_client_config()

        assert config.api_base_url == "http://api.internal:9000"
        assert config.request_timeout == 15.0
        assert config.start_delay == 0.0

    def test_blank_timeout_means_no_timeout(self) -> None:
        """An empty REQUEST_TIMEOUT leaves requests without a timeout."""
        with patch.dict("os.environ", {"REQUEST_TIMEOUT": "  "}):
            config = get_client_config()

        assert config.request_timeout is None

    @pytest.mark.parametrize(
        ("name", "value"),
        [("REQUEST_TIMEOUT", "soon"), ("START_DELAY", "two"), ("START_DELAY", "-1")],
    )
    def test_bad_numeric_env_raises_validation_error(self, name: str, value: str) -> None:
        """Unparseable or out-of-range numbers fail like a bad URL does."""
        with patch.dict("os.environ", {name: value}), pytest.raises(ValidationError) as exc_info:
            get_client_config()

        assert name.lower() in str(exc_info.value)

    def test_padded_numeric_env_is_accepted(self) -> None:
        with patch.dict("os.environ", {"REQUEST_TIMEOUT": " 7.5 ", "START_DELAY": " 1 "}):
            config = get_client_config()

        assert config.request_timeout == 7.5
        assert config.start_delay == 1.0
