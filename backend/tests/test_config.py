from format_tiles.core.config import Settings


def test_settings_read_env_file():
    assert Settings.model_config["env_file"] == ".env"


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("MOODLE_RELEASE", "4.1.8 (Build: 20240122)")
    monkeypatch.setenv("WWWROOT", "https://moodle.example.com/")

    config = Settings()

    assert config.MOODLE_RELEASE == "4.1.8 (Build: 20240122)"
    assert config.WWWROOT == "https://moodle.example.com"


def test_blank_wwwroot_falls_back_to_localhost():
    assert Settings(WWWROOT="  ").WWWROOT == "http://localhost"
