from enum import Enum
from typing import Iterable, TextIO
from tinysh.redirection import Redirection


class ExecStatus(Enum):
    CONTINUE = "continue"
    STOP = "stop"


class CommandResult:
    def __init__(
        self,
        context: Redirection,
        stdout: Iterable[str] = (),
        stderr: Iterable[str] = (),
        status: ExecStatus = ExecStatus.CONTINUE,
        flush: bool = False,
    ) -> None:
        self.context = context
        self.stdout = stdout
        self.stderr = stderr
        self.status = status
        self._write = self._write_and_flush if flush else self._write_only

    @classmethod
    def lines(
        cls,
        context: Redirection,
        stdout: Iterable[str] = (),
        stderr: Iterable[str] = (),
        status: ExecStatus = ExecStatus.CONTINUE,
    ) -> "CommandResult":
        # Builtins Produce Whole Lines, Each Gets its Terminator Here
        return cls(
            context,
            stdout=[f"{line}\n" for line in stdout],
            stderr=[f"{line}\n" for line in stderr],
            status=status,
        )

    def _write_only(self, target: TextIO, data: str) -> None:
        target.write(data)

    def _write_and_flush(self, target: TextIO, data: str) -> None:
        target.write(data)
        target.flush()

    def output(self) -> ExecStatus:
        for data in self.stdout:
            if data:
                self._write(self.context.output_file, data)
        for data in self.stderr:
            if data:
                self._write(self.context.error_file, data)
        return self.status
