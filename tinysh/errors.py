class ShellError(Exception):
    """Error reported to the user; the shell keeps prompting afterwards."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# Wrong Argument Count, Bad exit Status, Missing Command
class UsageError(ShellError):
    pass


# Missing Target Token or Target File That Cannot Be Opened
class RedirectionError(ShellError):
    pass


# Search Path Directory Exists But Cannot Be Listed
class ResolverError(ShellError):
    pass


# Spawn Failure or Unexpected OS Error From a Builtin
class ExecutionError(ShellError):
    pass
