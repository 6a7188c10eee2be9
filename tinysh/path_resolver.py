import os
import logging
from typing import Iterable
from tinysh.errors import ResolverError

logger = logging.getLogger(__name__)


def find_which_path(search_path: Iterable[str], name: str) -> str | None:
    """Return the first entry named `name` across the search path directories.

    Directories that do not exist are skipped. Any other listing failure is
    raised as a ResolverError instead of being treated as "not found".
    """
    for directory in search_path:
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    # First Match By Path Order Wins, Whatever its File Type
                    if entry.name == name:
                        logger.debug("resolved %s to %s", name, entry.path)
                        return entry.path
        except FileNotFoundError:
            continue
        except OSError as e:
            raise ResolverError(f"{directory}: {e.strerror}") from e

    logger.debug("%s not found in search path", name)
    return None


def list_executables(search_path: Iterable[str]) -> set[str]:
    # Completion Candidates, Unreadable Directories Are Ignored
    names = set()
    for directory in search_path:
        try:
            with os.scandir(directory) as entries:
                for item in entries:
                    if item.is_file() and os.access(item.path, os.X_OK):
                        names.add(item.name)
        except OSError:
            continue
    return names
