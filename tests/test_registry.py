"""Tests for the command registry."""

import logging

import pytest

from ngcli.exceptions import RegistryError
from ngcli.models.command import Command
from ngcli.models.interface import CommandContext, CommandDescription, CommandScope
from ngcli.registry import CommandRegistry


class LintCommand(Command):
    description = CommandDescription(
        name="lint",
        description="Runs linting tools.",
        scope=CommandScope.IN_PROJECT,
        aliases=("l",),
    )

    def run(self, options):
        return 0


class TestRegister:
    """Tests for registering commands."""

    def test_register_and_get(self):
        """A registered command is found by name and alias."""
        registry = CommandRegistry()
        registry.register(LintCommand)

        assert registry.get("lint") is LintCommand
        assert registry.get("l") is LintCommand
        assert registry.get("missing") is None
        assert "lint" in registry
        assert "l" in registry
        assert len(registry) == 1

    def test_register_returns_class(self):
        """register() can be used as a decorator."""
        registry = CommandRegistry()

        @registry.register
        class Other(Command):
            description = CommandDescription(name="other")

            def run(self, options):
                return 0

        assert registry.get("other") is Other

    def test_duplicate_name_rejected(self):
        """Registering the same name twice fails."""
        registry = CommandRegistry()
        registry.register(LintCommand)

        with pytest.raises(RegistryError, match="already registered"):
            registry.register(LintCommand)

    def test_alias_clash_rejected(self):
        """An alias that matches an existing name fails."""
        registry = CommandRegistry()
        registry.register(LintCommand)

        class Clash(Command):
            description = CommandDescription(name="clash", aliases=("lint",))

            def run(self, options):
                return 0

        with pytest.raises(RegistryError):
            registry.register(Clash)
        assert "clash" not in registry

    def test_missing_description_rejected(self):
        """Classes without a CommandDescription cannot be registered."""

        class NoDescription(Command):
            def run(self, options):
                return 0

        with pytest.raises(RegistryError, match="no CommandDescription"):
            CommandRegistry().register(NoDescription)

    def test_registries_are_independent(self):
        """Separate registries do not share state."""
        first = CommandRegistry()
        second = CommandRegistry()
        first.register(LintCommand)
        assert "lint" not in second


class TestLookup:
    """Tests for listing and creating commands."""

    def test_descriptions_sorted(self):
        """descriptions() is ordered by command name."""
        registry = CommandRegistry()
        registry.discover()
        names = [d.name for d in registry.descriptions()]
        assert names == sorted(names)
        assert names == registry.names()

    def test_create_by_alias(self):
        """create() instantiates the class with its own description."""
        registry = CommandRegistry()
        registry.register(LintCommand)
        context = CommandContext()

        command = registry.create("l", context, logging.getLogger("tests"))

        assert isinstance(command, LintCommand)
        assert command.description is LintCommand.description

    def test_create_unknown(self):
        """create() rejects unknown names."""
        with pytest.raises(RegistryError, match="Unknown command"):
            CommandRegistry().create("nope", CommandContext(), logging.getLogger("tests"))


class TestDiscover:
    """Tests for built-in command discovery."""

    def test_discovers_builtins(self):
        """All built-in commands are found."""
        registry = CommandRegistry()
        found = registry.discover()

        assert {cls.description.name for cls in found} == {
            "config",
            "help",
            "new",
            "settings",
            "version",
        }

    def test_builtins_cover_all_scopes(self):
        """Built-ins include in-project, out-of-project and everywhere commands."""
        registry = CommandRegistry()
        registry.discover()
        scopes = {d.scope for d in registry.descriptions()}
        assert scopes == set(CommandScope)

    def test_discover_twice_fails(self):
        """Discovering into the same registry twice reports duplicates."""
        registry = CommandRegistry()
        registry.discover()
        with pytest.raises(RegistryError):
            registry.discover()
