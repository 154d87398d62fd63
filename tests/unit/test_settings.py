import pytest
from pydantic import ValidationError

from dataproc_client.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_api_base_url(self) -> None:
        s = Settings()
        assert s.api_base_url == "http://localhost:3000"

    def test_default_process_path(self) -> None:
        s = Settings()
        assert s.process_path == "/bfhl"

    def test_default_request_timeout(self) -> None:
        s = Settings()
        assert s.request_timeout_seconds == 30

    def test_default_processing_provider(self) -> None:
        s = Settings()
        assert s.processing_provider == "http"

    def test_keeps_result_on_failure_by_default(self) -> None:
        s = Settings()
        assert s.clear_result_on_failure is False


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_api_base_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_BASE_URL", "https://api.example.com")
        s = Settings()
        assert s.api_base_url == "https://api.example.com"

    def test_loads_api_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_TOKEN", "secret-token")
        s = Settings()
        assert s.api_token == "secret-token"

    def test_loads_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "5")
        s = Settings()
        assert s.request_timeout_seconds == 5

    def test_loads_clear_result_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLEAR_RESULT_ON_FAILURE", "true")
        s = Settings()
        assert s.clear_result_on_failure is True


class TestSettingsValidation:
    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ValidationError):
            Settings()
