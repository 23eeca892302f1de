"""
Tests for settings loading.
"""

from app.infra.config import Settings, get_settings, reload_settings


def test_directories_from_environment(tmp_path):
    settings = Settings()
    assert settings.config_dir == tmp_path / "config"
    assert settings.data_dir == tmp_path / "data"
    assert settings.config_dir.is_dir()
    assert settings.data_dir.is_dir()


def test_export_dir_defaults_to_data_dir(tmp_path):
    assert Settings().export_dir == tmp_path / "data"


def test_export_dir_override(tmp_path, monkeypatch):
    monkeypatch.setenv("TODOLIST_EXPORT_DIR", str(tmp_path / "out"))
    assert Settings().export_dir == tmp_path / "out"


def test_default_db_url_points_into_data_dir(tmp_path):
    assert Settings().get_db_url() == f"sqlite+aiosqlite:///{tmp_path / 'data' / 'todolist.db'}"


def test_database_url_override(monkeypatch):
    monkeypatch.setenv("TODOLIST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    assert Settings().get_db_url() == "sqlite+aiosqlite:///:memory:"


def test_yaml_preferences(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "settings.yaml").write_text("theme: dark\nlanguage: de\n", encoding="utf-8")

    settings = Settings()
    assert settings.preferences.theme == "dark"
    assert settings.preferences.language == "de"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
    assert reload_settings() is get_settings()
