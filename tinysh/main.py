from tinysh.config import get_config
from tinysh.log import configure_logging
from tinysh.prompt import Prompt
from tinysh.shell import TinyShell


def main() -> int:
    config = get_config()
    configure_logging(config.log_level)

    shell_context = config.context()
    prompter = Prompt(shell_context.search_path, prompt_toolkit=config.prompt_toolkit)
    TinyShell(shell_context, prompter).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
