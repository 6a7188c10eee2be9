import sys
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO
from tinysh.errors import RedirectionError

logger = logging.getLogger(__name__)


class Channel(Enum):
    OUTPUT_CH = "output_ch"
    ERROR_CH = "error_ch"


OPERATORS = {
    ">": Channel.OUTPUT_CH,
    "1>": Channel.OUTPUT_CH,
    "2>": Channel.ERROR_CH,
}


@dataclass
class RedirectionPlan:
    """Where each stream goes; a channel missing from `channels` is inherited."""

    channels: dict[Channel, str] = field(default_factory=dict)
    # Targets Replaced by a Later Operator, Still Created
    superseded: list[str] = field(default_factory=list)

    @property
    def output_path(self) -> str | None:
        return self.channels.get(Channel.OUTPUT_CH)

    @property
    def error_path(self) -> str | None:
        return self.channels.get(Channel.ERROR_CH)


def plan_redirections(tokens: list[str]) -> tuple[list[str], RedirectionPlan]:
    args, plan = [], RedirectionPlan()
    token_stream = iter(tokens)

    for token in token_stream:
        channel = OPERATORS.get(token, None)
        if not channel:
            args.append(token)
            continue

        # Grab File Name of New Redirection
        target = next(token_stream, None)
        if target is None:
            raise RedirectionError("parse error near `\\n'")

        if previous := plan.channels.get(channel, None):
            plan.superseded.append(previous)
        plan.channels[channel] = target

    logger.debug("redirection plan %r leaves args %r", plan, args)
    return args, plan


def open_target(path: str) -> TextIO:
    try:
        return open(path, "w", encoding="utf-8")
    except OSError as e:
        raise RedirectionError(f"{path}: {e.strerror}") from e
    except ValueError as e:
        raise RedirectionError(f"{path}: {e}") from e


class Redirection:
    """Open output and error targets for one command invocation."""

    def __init__(self, plan: RedirectionPlan) -> None:
        self.output_file: TextIO = sys.stdout
        self.error_file: TextIO = sys.stderr
        self.close_output = self.close_error = lambda: None

        try:
            for fn in plan.superseded:
                open_target(fn).close()

            # Redirect Output
            if plan.output_path:
                self.set_output(open_target(plan.output_path))

            # Redirect Error
            if plan.error_path:
                self.set_error(open_target(plan.error_path))
        except RedirectionError:
            self.close()
            raise

    # Closes All Open Files
    def close(self) -> None:
        self.close_output()
        self.close_error()
        self.close_output = self.close_error = lambda: None

    def set_output(self, file: TextIO) -> None:
        self.output_file = file
        self.close_output = file.close

    def set_error(self, file: TextIO) -> None:
        self.error_file = file
        self.close_error = file.close
