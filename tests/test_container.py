from src.hours_tracker.hours_tracker.main import create_app


def test_create_app_with_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("STORAGE_BACKEND", "memory")

    container = create_app()

    assert [r.name for r in container.store.roles] == ["Administrador", "Usuario"]
    assert [p.name for p in container.store.positions] == ["Administrador"]
    assert container.auth_service.current_user is None
    assert container.auth_service.login("admin", "admin").role == "Administrador"


def test_settings_module_selection(monkeypatch):
    from config import get_settings_module

    monkeypatch.setenv("APP_ENV", "prod")
    assert get_settings_module() == "config.production"
    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "config.testing"
    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"
