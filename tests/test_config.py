import pytest

from zeeschedule.core.config import (
    DEFAULT_BASE_URL,
    AppConfig,
    ConfigError,
    LoggingConfig,
    SourceConfig,
    load_app_config,
)


def test_defaults_when_default_file_is_absent(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    config = load_app_config()

    assert config == AppConfig()
    assert config.source.base_url == DEFAULT_BASE_URL
    assert config.logging.level == "WARNING"


def test_explicit_missing_file_is_an_error(tmp_path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_app_config(tmp_path / "nope.yaml")


def test_load_yaml_with_env_expansion(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("ZEE_BASE", "https://mirror.example.test/schedule/")
    monkeypatch.delenv("ZEE_TIMEOUT", raising=False)
    path = tmp_path / "app.yaml"
    path.write_text(
        "source:\n"
        "  base_url: ${ZEE_BASE}\n"
        "  timeout: ${ZEE_TIMEOUT:-12.5}\n"
        "logging:\n"
        "  level: debug\n"
        "  file: logs/zee.log\n",
        encoding="utf-8",
    )

    config = load_app_config(path)

    assert config.source.base_url == "https://mirror.example.test/schedule/"
    assert config.source.timeout == 12.5
    assert config.logging.level == "DEBUG"
    assert str(config.logging.file) == "logs/zee.log"


def test_empty_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "app.yaml"
    path.write_text("", encoding="utf-8")

    assert load_app_config(path) == AppConfig()


def test_invalid_yaml(tmp_path) -> None:
    path = tmp_path / "app.yaml"
    path.write_text("source: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError) as exc_info:
        load_app_config(path)

    assert exc_info.value.path == path
    assert exc_info.value.details


def test_non_mapping_document(tmp_path) -> None:
    path = tmp_path / "app.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_app_config(path)


@pytest.mark.parametrize(
    "body",
    [
        "source:\n  base_url: ftp://example.test/\n",
        "source:\n  timeout: 0\n",
        "logging:\n  level: LOUD\n",
    ],
)
def test_validation_errors_become_config_errors(tmp_path, body) -> None:
    path = tmp_path / "app.yaml"
    path.write_text(body, encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid app configuration"):
        load_app_config(path)


def test_models_validate_directly() -> None:
    assert SourceConfig(base_url="HTTPS://example.test/").base_url == "HTTPS://example.test/"
    assert LoggingConfig(level="info").level == "INFO"
