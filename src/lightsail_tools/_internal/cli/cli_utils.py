"""Utilities for CLI."""
import argparse
import copy
import inspect
from typing import Any
from typing import Optional

from lightsail_tools import configuration
from lightsail_tools._internal import constants


def flag_default(name: str) -> Any:
    """Default value for CLI flag."""
    return copy.deepcopy(constants.CLI_DEFAULTS[name])


def config_help(name: str, hidden: bool = False) -> Optional[str]:
    """Extract the help message for a `configuration.NamespaceConfig` property docstring."""
    if hidden:
        return argparse.SUPPRESS
    return inspect.getdoc(getattr(configuration.NamespaceConfig, name))


class CustomHelpFormatter(argparse.HelpFormatter):
    """This is a clone of ArgumentDefaultsHelpFormatter, with bugfixes.

    In particular we fix https://bugs.python.org/issue28742
    """

    def _get_help_string(self, action: argparse.Action) -> Optional[str]:
        helpstr = action.help
        if action.help and '%(default)' not in action.help and '(default:' not in action.help:
            if action.default != argparse.SUPPRESS and action.default is not None:
                defaulting_nargs = [argparse.OPTIONAL, argparse.ZERO_OR_MORE]
                if helpstr and (action.option_strings or action.nargs in defaulting_nargs):
                    helpstr += ' (default: %(default)s)'
        return helpstr


def positive_int(value: str) -> int:
    """Converts value to an int and checks that it is positive.

    This function should used as the type parameter for argparse
    arguments.

    :param str value: value provided on the command line

    :returns: integer representation of value
    :rtype: int

    :raises argparse.ArgumentTypeError: if value isn't a positive integer

    """
    try:
        int_value = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("value must be an integer")

    if int_value < 1:
        raise argparse.ArgumentTypeError("value must be positive")
    return int_value


def nonnegative_float(value: str) -> float:
    """Converts value to a float and checks that it is not negative.

    :param str value: value provided on the command line

    :returns: float representation of value
    :rtype: float

    :raises argparse.ArgumentTypeError: if value isn't a non-negative number

    """
    try:
        float_value = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError("value must be a number")

    if float_value < 0:
        raise argparse.ArgumentTypeError("value must be non-negative")
    return float_value
