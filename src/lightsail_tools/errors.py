"""Lightsail tools errors."""
from typing import Optional


class Error(Exception):
    """Generic lightsail-tools error."""


class SubprocessError(Error):
    """Subprocess handling error.

    :ivar str stdout: standard output of the failed command
    :ivar str stderr: standard error of the failed command
    :ivar returncode: exit status, `None` if the command never ran

    """
    def __init__(self, msg: str, stdout: str = '', stderr: str = '',
                 returncode: Optional[int] = None) -> None:
        super().__init__(msg)
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode


class CommandNotFound(Error):
    """Failed to find the aws command in the PATH."""


class ValidationError(Error):
    """A domain name or DNS zone given by the user is not usable."""


class PropagationTimeout(Error, TimeoutError):
    """A DNS entry did not show up in its zone in time."""
