import readline
from typing import Iterable
from prompt_toolkit import prompt
from prompt_toolkit.shortcuts import CompleteStyle
from prompt_toolkit.completion import WordCompleter, Completion
from tinysh.commands import Builtin
from tinysh.path_resolver import list_executables

PROMPT = "$ "


def get_commands(search_path: Iterable[str]) -> list[str]:
    commands = set(Builtin.names())
    commands.update(list_executables(search_path))
    return sorted(commands)


class ShellCompleter(WordCompleter):
    def get_completions(self, document, complete_event):
        # Trailing Space Lets the User Type the First Argument Right Away
        for comp in super().get_completions(document, complete_event):
            yield Completion(
                text=f"{comp.text} ",
                start_position=comp.start_position,
                display=comp.display_text,
                display_meta=comp.display_meta,
            )


class Prompt:
    def __init__(self, search_path: Iterable[str] = (), prompt_toolkit=False):
        if prompt_toolkit:
            self._completer_generator = self._shell_completer
            self.ask = self._tool_ask
        else:
            self._completer_generator = self._readline_completer
            self.ask = lambda: input(PROMPT).rstrip("\r")

        self._command_completer = self._completer_generator(get_commands(search_path))

    # Creates a Command Completer for Prompt Toolkit
    def _shell_completer(self, cmds: list[str]) -> ShellCompleter:
        return ShellCompleter(cmds, WORD=True)

    # Creates a Command Completer for Readline Module
    def _readline_completer(self, cmds: list[str]) -> None:
        def command_completer(text, state):
            matches = [cmd for cmd in cmds if cmd.startswith(text)]
            # readline Asks for Match `state` Until it Gets None
            return f"{matches[state]} " if state < len(matches) else None

        # libedit (macOS) Spells the Tab Binding Differently From GNU readline
        readline.set_completer(command_completer)
        if "libedit" in (readline.__doc__ or ""):
            readline.parse_and_bind("bind ^I rl_complete")
        else:
            readline.parse_and_bind("tab: complete")
        return

    # Asks a prompt using Prompt Toolkit
    def _tool_ask(self) -> str:
        return prompt(
            PROMPT,
            completer=self._command_completer,
            complete_style=CompleteStyle.MULTI_COLUMN,
        ).strip()
