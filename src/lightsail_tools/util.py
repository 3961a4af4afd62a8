"""Utilities for lightsail-tools."""
import logging
import os
import subprocess
from typing import Callable
from typing import List
from typing import Tuple

from lightsail_tools import errors

logger = logging.getLogger(__name__)


# Colors text red
ANSI_SGR_RED = "\033[31m"
# Resets output format
ANSI_SGR_RESET = "\033[0m"

ALREADY_EXISTS = "already exist"
"""Substring of the aws error output when a resource was created by a previous run."""


def run_script(params: List[str], log: Callable[[str], None] = logger.debug) -> Tuple[str, str]:
    """Run the script with the given params.

    :param list params: List of parameters to pass to subprocess.run
    :param callable log: Logger method to use for errors

    :returns: standard output and standard error of the command
    :rtype: tuple

    :raises .errors.SubprocessError: if the command can't be run or
        exits with a nonzero status

    """
    logger.debug("Running %s", " ".join(params))
    try:
        proc = subprocess.run(params,
                              check=False,
                              stdout=subprocess.PIPE,
                              stderr=subprocess.PIPE,
                              universal_newlines=True)

    except (OSError, ValueError):
        msg = "Unable to run the command: %s" % " ".join(params)
        log(msg)
        raise errors.SubprocessError(msg)

    if proc.returncode != 0:
        log("Error while running %s.\n%s\n%s" % (
            " ".join(params), proc.stdout, proc.stderr))
        msg = "%s failed: %s" % (
            _command_name(params), _last_line(proc.stderr, proc.stdout)
            or "exit status %d" % proc.returncode)
        raise errors.SubprocessError(msg, stdout=proc.stdout, stderr=proc.stderr,
                                     returncode=proc.returncode)

    return proc.stdout, proc.stderr


def _command_name(params: List[str]) -> str:
    """Program basename followed by its subcommands, options left out."""
    words = [os.path.basename(params[0])] if params else []
    for param in params[1:]:
        if param.startswith("-"):
            break
        words.append(param)
    return " ".join(words)


def _last_line(*outputs: str) -> str:
    """Last non-blank line of the first output that has one."""
    for output in outputs:
        lines = [line.strip() for line in (output or "").splitlines() if line.strip()]
        if lines:
            return lines[-1]
    return ""


def already_exists(error: errors.SubprocessError) -> bool:
    """Did the command fail because the resource is already there?

    :param .errors.SubprocessError error: failure raised by `run_script`

    :rtype: bool

    """
    return ALREADY_EXISTS in (error.stderr or '')


def exe_exists(exe: str) -> bool:
    """Determine whether path/name refers to an executable.

    :param str exe: Executable path or name

    :returns: If exe is a valid executable
    :rtype: bool

    """
    path, _ = os.path.split(exe)
    if path:
        return is_executable(exe)
    for path in os.environ["PATH"].split(os.pathsep):
        if is_executable(os.path.join(path, exe)):
            return True

    return False


def is_executable(path: str) -> bool:
    """Is path an executable file?

    :param str path: path to test

    :returns: True if path is an executable file
    :rtype: bool

    """
    return os.path.isfile(path) and os.access(path, os.X_OK)
