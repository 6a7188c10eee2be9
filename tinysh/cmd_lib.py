import os
import logging
import subprocess
from typing import Callable
from tinysh.config import ShellContext
from tinysh.redirection import Redirection
from tinysh.cmd_result import CommandResult, ExecStatus
from tinysh.path_resolver import find_which_path
from tinysh.errors import ShellError, UsageError, ExecutionError
from tinysh.commands import (
    Builtin,
    BuiltinCommand,
    Command,
    classify,
)

logger = logging.getLogger(__name__)


def expect_args(name: str, args: list[str], count: int) -> None:
    if len(args) != count:
        raise UsageError(f"{name}: expected {count} argument(s), got {len(args)}")


class CommandLibrary:
    def __init__(self, shell_context: ShellContext) -> None:
        self.shell_context = shell_context
        self.command_lib = {
            Builtin.EXIT: self.handle_exit,
            Builtin.ECHO: self.handle_echo,
            Builtin.TYPE: self.handle_type,
            Builtin.PWD: self.handle_pwd,
            Builtin.CD: self.handle_cd,
        }

    def find_command(
        self, context: Redirection, command: Command
    ) -> Callable[[list[str]], CommandResult]:
        if isinstance(command, BuiltinCommand):
            command_func = self.command_lib[command.kind]
            return lambda args: command_func(context, args)

        # Search for Custom Command Case
        file_path = find_which_path(self.shell_context.search_path, command.name)
        if not file_path:
            return self.not_found(context, command.name)
        return self.handle_custom_exec(context, command.name, file_path)

    # Command Not Found Case, Reported on the Output Channel
    def not_found(
        self, context: Redirection, name: str
    ) -> Callable[[list[str]], CommandResult]:
        return lambda _: CommandResult.lines(
            context, stdout=[f"{name}: command not found"]
        )

    # exit Command Case
    def handle_exit(self, context: Redirection, args: list[str]) -> CommandResult:
        expect_args("exit", args, 1)
        if args[0] != "0":
            raise UsageError(f"exit: {args[0]}: only status 0 is supported")
        return CommandResult(context, status=ExecStatus.STOP)

    # echo Command Case
    def handle_echo(self, context: Redirection, args: list[str]) -> CommandResult:
        return CommandResult.lines(context, stdout=[" ".join(args)])

    # type Command Case
    def handle_type(self, context: Redirection, args: list[str]) -> CommandResult:
        expect_args("type", args, 1)
        name = args[0]

        # Argument is Actual Command
        if isinstance(classify(name), BuiltinCommand):
            return CommandResult.lines(context, stdout=[f"{name} is a shell builtin"])

        found_file_path = find_which_path(self.shell_context.search_path, name)
        if found_file_path:
            return CommandResult.lines(context, stdout=[f"{name} is {found_file_path}"])
        return CommandResult.lines(context, stderr=[f"{name}: not found"])

    # pwd Case
    def handle_pwd(self, context: Redirection, _) -> CommandResult:
        # Working Directory May Have Been Removed Underneath Us
        try:
            cwd = os.getcwd()
        except OSError as e:
            raise ExecutionError(f"pwd: {e.strerror}") from e
        return CommandResult.lines(context, stdout=[cwd])

    # Custom Exec Case, Runs to Completion Before Any Output is Written
    def handle_custom_exec(
        self, context: Redirection, name: str, file_path: str
    ) -> Callable[[list[str]], CommandResult]:

        def handler(args: list[str]) -> CommandResult:
            argv = [file_path, *args]
            logger.debug("spawning %r", argv)
            try:
                process = subprocess.run(argv, capture_output=True)
            except OSError as e:
                raise ExecutionError(f"{name}: {e.strerror}") from e
            except ValueError as e:
                raise ExecutionError(f"{name}: {e}") from e

            logger.debug("%s exited with status %d", name, process.returncode)
            return CommandResult(
                context,
                stdout=[process.stdout.decode("utf-8", errors="replace")],
                stderr=[process.stderr.decode("utf-8", errors="replace")],
                flush=True,
            )

        return handler

    # cd Case
    def handle_cd(self, context: Redirection, args: list[str]) -> CommandResult:
        expect_args("cd", args, 1)

        path = args[0]
        if path == "~":
            if self.shell_context.home is None:
                raise ShellError("cd: HOME not set")
            path = self.shell_context.home

        try:
            os.chdir(path)
        except FileNotFoundError:
            return CommandResult.lines(
                context, stderr=[f"cd: {path}: No such file or directory"]
            )
        except OSError as e:
            raise ExecutionError(f"cd: {path}: {e.strerror}") from e
        except ValueError as e:
            raise ExecutionError(f"cd: {path}: {e}") from e
        return CommandResult(context)
