import sys
import logging
from typing import Callable
from tinysh.config import ShellContext
from tinysh.cmd_lib import CommandLibrary
from tinysh.cmd_result import CommandResult, ExecStatus
from tinysh.commands import classify
from tinysh.errors import ShellError, UsageError
from tinysh.prompt import Prompt
from tinysh.redirection import Redirection, plan_redirections
from tinysh.tokenizer import tokenize

logger = logging.getLogger(__name__)


class TinyShell:
    def __init__(self, shell_context: ShellContext, prompter=None) -> None:
        self.cmd_lib = CommandLibrary(shell_context)
        self.prompter = prompter or Prompt(shell_context.search_path)

    def run(self) -> None:
        while True:
            try:
                user_input = self.prompter.ask()
            except (EOFError, KeyboardInterrupt):
                break

            if self.handle_line(user_input) is ExecStatus.STOP:
                break

    def handle_line(self, user_input: str) -> ExecStatus:
        try:
            return self.execute_line(user_input)
        except ShellError as e:
            logger.debug("command failed: %r", user_input, exc_info=True)
            sys.stderr.write(f"tinysh: {e.message}\n")
            sys.stderr.flush()
            return ExecStatus.CONTINUE

    def execute_line(self, user_input: str) -> ExecStatus:
        tokens = tokenize(user_input)

        # User Input Does Not Exist Case
        if not tokens:
            return ExecStatus.CONTINUE

        cmdline, plan = plan_redirections(tokens)
        context = Redirection(plan)
        try:
            if not cmdline:
                raise UsageError("missing command before redirection")

            cmd, *args = cmdline
            # Search Command Library for Correct Function To Use
            command_func = self.cmd_lib.find_command(context, classify(cmd))
            return self.execute(command_func, args)
        finally:
            # Allow The Closing of Output Files Even With Crashes
            context.close()

    def execute(
        self, command_func: Callable[[list[str]], CommandResult], args: list[str]
    ) -> ExecStatus:
        result = command_func(args)
        return result.output()
