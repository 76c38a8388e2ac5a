from unittest.mock import MagicMock, patch

import pytest

from config.settings import Settings
from utils.error_handling import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "NOTION_TOKEN",
        "NOTION_SECRET_ARN",
        "NOTION_DATABASE_ID",
        "NOTION_LEADS_DATABASE_ID",
        "NOTION_VERSION",
        "NOTION_TIMEOUT_SECONDS",
        "NOTION_MAX_RECORDS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_from_environment_reads_all_fields(clean_env):
    clean_env.setenv("NOTION_TOKEN", "tok")
    clean_env.setenv("NOTION_DATABASE_ID", "kb")
    clean_env.setenv("NOTION_LEADS_DATABASE_ID", "leads")
    clean_env.setenv("NOTION_TIMEOUT_SECONDS", "4.5")
    clean_env.setenv("NOTION_MAX_RECORDS", "50")

    settings = Settings.from_environment()

    assert settings.notion_token == "tok"
    assert settings.knowledge_database_id == "kb"
    assert settings.leads_database_id == "leads"
    assert settings.timeout_seconds == 4.5
    assert settings.max_records == 50
    assert settings.notion_version == "2022-06-28"


def test_missing_token_raises(clean_env):
    clean_env.setenv("NOTION_DATABASE_ID", "kb")
    with pytest.raises(ConfigurationError):
        Settings.from_environment()


def test_missing_database_id_raises(clean_env):
    clean_env.setenv("NOTION_TOKEN", "tok")
    with pytest.raises(ConfigurationError):
        Settings.from_environment()


def test_leads_database_is_optional(clean_env):
    clean_env.setenv("NOTION_TOKEN", "tok")
    clean_env.setenv("NOTION_DATABASE_ID", "kb")
    assert Settings.from_environment().leads_database_id == ""


@pytest.mark.parametrize("secret_string", ['{"token": "from-secret"}', "from-secret"])
@patch("config.settings.boto3")
def test_token_loaded_from_secrets_manager(mock_boto3, secret_string, clean_env):
    mock_client = MagicMock()
    mock_boto3.client.return_value = mock_client
    mock_client.get_secret_value.return_value = {"SecretString": secret_string}
    clean_env.setenv("NOTION_SECRET_ARN", "arn:aws:secretsmanager:eu-west-2:123:secret:notion")
    clean_env.setenv("NOTION_DATABASE_ID", "kb")

    settings = Settings.from_environment()

    assert settings.notion_token == "from-secret"
    mock_client.get_secret_value.assert_called_once_with(
        SecretId="arn:aws:secretsmanager:eu-west-2:123:secret:notion"
    )


@patch("config.settings.boto3")
def test_secret_failure_is_a_configuration_error(mock_boto3, clean_env):
    mock_boto3.client.return_value.get_secret_value.side_effect = Exception("AccessDenied")
    clean_env.setenv("NOTION_SECRET_ARN", "arn:aws:secretsmanager:eu-west-2:123:secret:notion")
    clean_env.setenv("NOTION_DATABASE_ID", "kb")

    with pytest.raises(ConfigurationError):
        Settings.from_environment()


def test_settings_are_read_only(settings):
    with pytest.raises(Exception):
        settings.notion_token = "other"
