from dataclasses import dataclass
from enum import Enum


class Builtin(Enum):
    CD = "cd"
    ECHO = "echo"
    EXIT = "exit"
    PWD = "pwd"
    TYPE = "type"

    @classmethod
    def names(cls) -> list[str]:
        return [kind.value for kind in cls]


@dataclass(frozen=True)
class BuiltinCommand:
    kind: Builtin


@dataclass(frozen=True)
class ExternalCommand:
    name: str


Command = BuiltinCommand | ExternalCommand

_BUILTINS = {kind.value: kind for kind in Builtin}


def classify(token: str) -> Command:
    # Exact, Case Sensitive Match Only
    if kind := _BUILTINS.get(token, None):
        return BuiltinCommand(kind)
    return ExternalCommand(token)
