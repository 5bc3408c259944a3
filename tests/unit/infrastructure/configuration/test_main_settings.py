from htmx_todo.infrastructure.configuration.main_settings import Settings


def test_defaults_point_at_packaged_web_assets(monkeypatch):
    for name in ("APP_ENV", "LOG_LEVEL", "LOG_FORMAT", "PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_env == "local"
    assert settings.port == 8000
    assert (settings.templates_dir / "index.html").is_file()
    assert (settings.static_dir / "js" / "script.js").is_file()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("APP_ENV", "prod")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PORT", "9000")

    settings = Settings(_env_file=None)

    assert settings.app_env == "prod"
    assert settings.log_level == "DEBUG"
    assert settings.port == 9000
