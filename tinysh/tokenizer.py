"""
Splits one input line into tokens.

Quoting is a three mode state machine: unquoted, single quoted and double
quoted. Each mode owns a transition method that consumes one character.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Mode(Enum):
    UNQUOTED = "unquoted"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"


# Characters a Backslash Escapes Inside Double Quotes
DOUBLE_QUOTE_ESCAPABLE = frozenset({"\\", "$", '"'})


class Tokenizer:
    def __init__(self) -> None:
        self.tokens: list[str] = []
        self.current: list[str] = []
        self.mode = Mode.UNQUOTED
        self.escaped = False
        self._transitions = {
            Mode.UNQUOTED: self._unquoted,
            Mode.SINGLE_QUOTED: self._single_quoted,
            Mode.DOUBLE_QUOTED: self._double_quoted,
        }

    def feed(self, char: str) -> None:
        self._transitions[self.mode](char)

    def finish(self) -> list[str]:
        # Unterminated Quotes Keep Everything Read So Far
        if self.mode is not Mode.UNQUOTED:
            logger.debug("input ended inside %s mode", self.mode.value)
        self._flush()
        return self.tokens

    def _flush(self) -> None:
        if self.current:
            self.tokens.append("".join(self.current))
            self.current = []

    def _unquoted(self, char: str) -> None:
        if self.escaped:
            self.current.append(char)
            self.escaped = False
        elif char == "\\":
            self.escaped = True
        elif char == "'":
            self.mode = Mode.SINGLE_QUOTED
        elif char == '"':
            self.mode = Mode.DOUBLE_QUOTED
        elif char == " ":
            self._flush()
        else:
            self.current.append(char)

    def _single_quoted(self, char: str) -> None:
        if char == "'":
            self.mode = Mode.UNQUOTED
        else:
            self.current.append(char)

    def _double_quoted(self, char: str) -> None:
        if self.escaped:
            # Backslash Survives Unless it Escapes a Special Character
            if char not in DOUBLE_QUOTE_ESCAPABLE:
                self.current.append("\\")
            self.current.append(char)
            self.escaped = False
        elif char == "\\":
            self.escaped = True
        elif char == '"':
            self.mode = Mode.UNQUOTED
        else:
            self.current.append(char)


def tokenize(line: str) -> list[str]:
    tokenizer = Tokenizer()
    for char in line:
        tokenizer.feed(char)
    tokens = tokenizer.finish()
    logger.debug("tokenized %r into %r", line, tokens)
    return tokens
