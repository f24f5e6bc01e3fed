"""
Tests for the ordered subcommand registry.
"""

import pytest

from subdispatch.commands import CommandRegistry, SubcommandDescriptor


def make(name, permission="p"):
    return SubcommandDescriptor(name, f"{name} description", f"/cmd {name}", permission, lambda a, b: None)


class TestRegister:

    def test_register_appends_in_order(self):
        reg = CommandRegistry()
        a, b, c = make("a"), make("b"), make("c")
        for d in (a, b, c):
            reg.register(d)
        assert reg.list_all() == [a, b, c]
        assert len(reg) == 3

    def test_duplicates_are_kept(self):
        reg = CommandRegistry()
        reg.register(make("dup", "first"))
        reg.register(make("dup", "second"))
        assert len(reg) == 2

    def test_rejects_non_descriptor(self):
        with pytest.raises(TypeError):
            CommandRegistry().register(lambda a, b: None)

    def test_list_all_is_a_copy(self):
        reg = CommandRegistry()
        reg.register(make("a"))
        reg.list_all().clear()
        assert len(reg) == 1

    def test_decorator_registers(self):
        reg = CommandRegistry()

        @reg.subcommand("heal", description="Heals you", syntax="/mycmd heal", permission="mycmd.heal")
        def heal(actor, args):
            pass

        assert reg.list_all() == [heal]
        assert "HEAL" in reg


class TestFindByName:

    def test_distinct_names_never_cross(self):
        reg = CommandRegistry()
        names = ["heal", "feed", "fly", "home"]
        descriptors = [reg.register(make(n)) for n in names]
        for d in descriptors:
            assert reg.find_by_name(d.name) is d

    @pytest.mark.parametrize("token", ["Heal", "heal", "HEAL", "hEaL"])
    def test_case_insensitive(self, token):
        reg = CommandRegistry()
        d = reg.register(make("Heal"))
        assert reg.find_by_name(token) is d

    def test_first_registered_wins(self):
        reg = CommandRegistry()
        first = reg.register(make("dup", "first"))
        reg.register(make("DUP", "second"))
        assert reg.find_by_name("dup") is first

    def test_not_found(self):
        reg = CommandRegistry()
        reg.register(make("heal"))
        assert reg.find_by_name("kill") is None
        assert "kill" not in reg
