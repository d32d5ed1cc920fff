"""Tests for configuration loading."""

import os
from pathlib import Path
from unittest.mock import patch

from focus_minion.core.config import (
    Config,
    create_default_config,
    get_config_path,
    get_data_dir,
    load_config,
)


def write_config(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class TestPaths:
    """Tests for config/data directory resolution."""

    def test_xdg_config_path(self, isolated_dirs: Path) -> None:
        assert get_config_path() == isolated_dirs / "config" / "focus-minion" / "config.toml"

    def test_cwd_config_takes_priority(self, isolated_dirs: Path) -> None:
        write_config(isolated_dirs / "config.toml", "[timer]\n")
        assert get_config_path() == isolated_dirs / "config.toml"

    def test_xdg_data_dir(self, isolated_dirs: Path) -> None:
        assert get_data_dir() == isolated_dirs / "data" / "focus-minion"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_creates_default_file(self, isolated_dirs: Path) -> None:
        config = load_config()

        assert config == Config()
        config_file = isolated_dirs / "config" / "focus-minion" / "config.toml"
        assert config_file.read_text(encoding="utf-8") == create_default_config()

    def test_default_file_round_trips(self, isolated_dirs: Path) -> None:
        load_config()
        assert load_config() == Config()

    def test_reads_sections(self, isolated_dirs: Path) -> None:
        write_config(
            isolated_dirs / "config.toml",
            """
[timer]
work_minutes = 50
break_minutes = 10
cycles = 2
last_break = true

[player]
app_name = "Spotify"
fallback_volume = 30

[sound]
completion_sound = "~/sounds/gong.aiff"
repeat = 3

[logging]
level = "debug"
""",
        )

        config = load_config()

        assert config.timer.work_minutes == 50
        assert config.timer.break_minutes == 10
        assert config.timer.cycles == 2
        assert config.timer.last_break is True
        assert config.player.app_name == "Spotify"
        assert config.player.fallback_volume == 30
        assert config.player.settle_delay == 0.5
        assert config.sound.completion_sound == str(Path("~/sounds/gong.aiff").expanduser())
        assert config.sound.repeat == 3
        assert config.logging.level == "DEBUG"

    def test_invalid_timer_section_uses_defaults(
        self, isolated_dirs: Path, capsys
    ) -> None:
        write_config(isolated_dirs / "config.toml", "[timer]\nwork_minutes = 0\n")

        config = load_config()

        assert config.timer.work_minutes == 25
        assert "Invalid timer configuration" in capsys.readouterr().out

    def test_invalid_player_section_uses_defaults(self, isolated_dirs: Path) -> None:
        write_config(isolated_dirs / "config.toml", "[player]\nfallback_volume = 140\n")

        assert load_config().player.fallback_volume == 50

    def test_malformed_toml_uses_defaults(self, isolated_dirs: Path, capsys) -> None:
        write_config(isolated_dirs / "config.toml", "[timer\nwork_minutes = ")

        assert load_config() == Config()
        assert "Using default configuration" in capsys.readouterr().out

    def test_env_overrides_log_level(self, isolated_dirs: Path, monkeypatch) -> None:
        monkeypatch.setenv("FOCUS_MINION_LOG_LEVEL", "warning")
        assert load_config().logging.level == "WARNING"

    def test_dotenv_in_config_dir(self, isolated_dirs: Path) -> None:
        write_config(
            isolated_dirs / "config" / "focus-minion" / ".env",
            "FOCUS_MINION_LOG_LEVEL=error\n",
        )

        with patch.dict(os.environ, {}):
            assert load_config().logging.level == "ERROR"
