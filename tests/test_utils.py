"""
Tests for configuration loading, logging and input helpers.
"""

import pytest

from subdispatch.commands import CommandManager
from subdispatch.models.senders import ConsoleSender, Player
from subdispatch.utility.logger import game_log
from subdispatch.utility.utils import load_config, split_command_line, validate_player_name


class TestLoadConfig:

    def test_reads_yaml(self):
        cfg = load_config()
        assert cfg["telnet_port"] == 0
        assert cfg["ops"] == ["Admin"]

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_config("nope.yaml")

    def test_malformed_yaml(self, config_dir):
        (config_dir / "bad.yaml").write_text("a: [1, 2\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Error parsing"):
            load_config("bad.yaml")

    def test_empty_file_is_empty_dict(self, config_dir):
        (config_dir / "empty.yaml").write_text("", encoding="utf-8")
        assert load_config("empty.yaml") == {}


class TestGameLog:

    def test_prints_category(self, capsys):
        game_log("DISPATCH", "hello")
        assert "[DISPATCH]" in capsys.readouterr().out

    def test_debug_filtered_at_info(self, config_dir, capsys):
        (config_dir / "config.yaml").write_text("logging:\n  level: info\n", encoding="utf-8")
        game_log("DISPATCH", "quiet", level="debug")
        game_log("DISPATCH", "loud")
        out = capsys.readouterr().out
        assert "quiet" not in out
        assert "loud" in out

    def test_disabled(self, config_dir, capsys):
        (config_dir / "config.yaml").write_text("logging:\n  enabled: false\n", encoding="utf-8")
        game_log("DISPATCH", "nothing")
        assert capsys.readouterr().out == ""


class TestSplitCommandLine:

    def test_with_slash(self):
        assert split_command_line("/demo heal 3") == ("demo", ["heal", "3"])

    def test_without_slash(self):
        assert split_command_line("  demo  ") == ("demo", [])

    def test_blank(self):
        assert split_command_line("") == (None, [])


class TestValidatePlayerName:

    def test_valid(self):
        assert validate_player_name("  Steve_2 ") == "Steve_2"

    @pytest.mark.parametrize("name", ["", "ab", "x" * 17, "bad name!", "Console"])
    def test_invalid(self, name):
        with pytest.raises(ValueError):
            validate_player_name(name)


class TestGameLogFallback:

    def test_broken_config_falls_back_to_defaults(self, config_dir, capsys):
        (config_dir / "config.yaml").write_text("logging: [oops\n", encoding="utf-8")
        game_log("DISPATCH", "still here")
        game_log("DISPATCH", "hidden", level="debug")
        out = capsys.readouterr().out
        assert "still here" in out
        assert "hidden" not in out

    def test_missing_config_falls_back_to_defaults(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("SUBDISPATCH_CONFIG_DIR", str(tmp_path / "absent"))
        game_log("DISPATCH", "no config")
        assert "no config" in capsys.readouterr().out


class TestDispatchWithBadConfig:

    def test_perform_does_not_raise(self, config_dir):
        (config_dir / "config.yaml").write_text("logging: [oops\n", encoding="utf-8")
        assert CommandManager().perform(ConsoleSender(), "mycmd", ["x"]) is True
        assert CommandManager().perform(Player("Steve"), "mycmd", ["x"]) is True

    def test_denial_still_sent(self, config_dir, manager, player):
        (config_dir / "config.yaml").write_text("logging: [oops\n", encoding="utf-8")
        assert manager.perform(player, "mycmd", ["heal"]) is True
        assert player.messages == ["§cYou cannot execute this command."]
