"""Error codes for CLI exit status.

Each sync error kind maps to one of these codes (see ``output/errors.py``).
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the repo-docs command.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (missing argument, URL without org/repo)
    - 2: Environment error (HOME unset, non-git directory in the cache)
    - 3: VCS error (git clone/pull exited nonzero)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    VCS_ERROR = 3

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
