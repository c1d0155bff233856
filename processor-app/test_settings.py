import pytest
from pydantic import ValidationError

from text_processor.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TABLE_NAME", "LOG_LEVEL", "AWS_REGION", "DYNAMODB_ENDPOINT_URL"):
        monkeypatch.delenv(name, raising=False)


class TestSettingsDefaults:
    def test_default_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLE_NAME", "texts")
        s = Settings()
        assert s.log_level == "INFO"

    def test_default_endpoint_is_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLE_NAME", "texts")
        s = Settings()
        assert s.dynamodb_endpoint_url is None
        assert s.aws_region is None


class TestSettingsFromEnv:
    def test_loads_table_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLE_NAME", "processed-texts")
        s = Settings()
        assert s.table_name == "processed-texts"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLE_NAME", "texts")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_endpoint_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLE_NAME", "texts")
        monkeypatch.setenv("DYNAMODB_ENDPOINT_URL", "http://localhost:8000")
        s = Settings()
        assert s.dynamodb_endpoint_url == "http://localhost:8000"


class TestSettingsValidation:
    def test_missing_table_name_raises(self) -> None:
        with pytest.raises(ValidationError):
            Settings()
