from infrastructure.config.settings import Settings


def test_dev_defaults(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "dev")
    monkeypatch.setenv("NOTION_DATABASE_ID", "kb")
    monkeypatch.setenv("NOTION_LEADS_DATABASE_ID", "leads")

    settings = Settings.from_environment()

    assert settings.environment == "dev"
    assert settings.notion_database_id == "kb"
    assert settings.notion_leads_database_id == "leads"
    assert settings.lambda_memory_mb == 256


def test_prod_overrides(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "prod")

    settings = Settings.from_environment()

    assert settings.environment == "prod"
    assert settings.lambda_memory_mb == 512
    assert settings.lambda_timeout_seconds == 30
