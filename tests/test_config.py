from __future__ import annotations

from canvas_app.config import CONFIG_ENV_VAR, EngineSettings, load_settings


def test_defaults_without_file(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert load_settings() == EngineSettings()


def test_loads_engine_table(tmp_path):
    path = tmp_path / "canvas.toml"
    path.write_text('[engine]\ndefault_tax_rate = 25.0\ndefault_tax_region = "kenya"\n', encoding="utf-8")

    settings = load_settings(path)
    assert settings.default_tax_rate == 25.0
    assert settings.default_tax_region == "kenya"
    assert settings.default_growth_rate == 15.0


def test_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "canvas.toml"
    path.write_text('[engine]\nlog_level = "DEBUG"\n', encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_settings().log_level == "DEBUG"
