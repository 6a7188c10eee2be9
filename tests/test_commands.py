import pytest

from tinysh.commands import Builtin, BuiltinCommand, ExternalCommand, classify


class TestClassify:
    @pytest.mark.parametrize("name", ["cd", "echo", "exit", "pwd", "type"])
    def test_builtins(self, name):
        assert classify(name) == BuiltinCommand(Builtin(name))

    @pytest.mark.parametrize("name", ["ls", "ECHO", "ech", "echo2", "./pwd"])
    def test_everything_else_is_external(self, name):
        command = classify(name)
        assert isinstance(command, ExternalCommand)
        assert command.name == name

    def test_builtin_names(self):
        assert sorted(Builtin.names()) == ["cd", "echo", "exit", "pwd", "type"]
