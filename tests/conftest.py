import pytest

from subdispatch.commands import CommandManager, subcommand
from subdispatch.models.senders import Player

TEST_CONFIG = """\
telnet_host: 127.0.0.1
telnet_port: 0
max_total_connections: 10
max_connections_per_ip: 2

logging:
  enabled: true
  level: debug

ops:
  - Admin

permissions:
  default:
    - demo.helloworld
  players:
    medic:
      - demo.heal
"""


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Point load_config() at a throwaway config directory."""
    (tmp_path / "config.yaml").write_text(TEST_CONFIG, encoding="utf-8")
    monkeypatch.setenv("SUBDISPATCH_CONFIG_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def calls():
    return []


@pytest.fixture
def heal(calls):
    @subcommand("heal", description="Heals you", syntax="/mycmd heal", permission="mycmd.heal")
    def _heal(actor, args):
        calls.append((actor, list(args)))
    return _heal


@pytest.fixture
def manager(heal):
    m = CommandManager()
    m.register_subcommand(heal)
    return m


@pytest.fixture
def player():
    return Player("Steve")
