from pathlib import Path

from leitner.application.config import AppConfig, default_database_url, resolve_config


def test_defaults_live_under_home(mock_home):
    config = resolve_config()
    assert config.database_url == default_database_url()
    assert str(mock_home) in config.database_url
    assert config.deck_path is None
    assert config.seed_on_init is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LEITNER_DATABASE_URL", "sqlite:///env.db")
    monkeypatch.setenv("LEITNER_SEED_ON_INIT", "false")
    config = resolve_config()
    assert config.database_url == "sqlite:///env.db"
    assert config.seed_on_init is False


def test_toml_file(mock_home):
    cfg_dir = mock_home / ".config/leitner"
    cfg_dir.mkdir(parents=True)
    (cfg_dir / "config.toml").write_text(
        'database_url = "sqlite:///from-file.db"\ndeck_path = "decks/chess.yaml"\n',
        encoding="utf-8",
    )

    config = AppConfig()

    assert config.database_url == "sqlite:///from-file.db"
    assert config.deck_path == Path("decks/chess.yaml").resolve()


def test_cli_overrides_beat_env_and_file(mock_home, monkeypatch):
    (mock_home / ".leitner.toml").write_text('database_url = "sqlite:///file.db"\n', encoding="utf-8")
    monkeypatch.setenv("LEITNER_DATABASE_URL", "sqlite:///env.db")

    config = resolve_config({"database_url": "sqlite:///cli.db", "deck_path": None})

    assert config.database_url == "sqlite:///cli.db"


def test_env_beats_file(mock_home, monkeypatch):
    (mock_home / ".leitner.toml").write_text('database_url = "sqlite:///file.db"\n', encoding="utf-8")
    monkeypatch.setenv("LEITNER_DATABASE_URL", "sqlite:///env.db")

    assert resolve_config().database_url == "sqlite:///env.db"
