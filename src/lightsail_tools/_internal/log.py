"""Logging utilities for lightsail-tools.

The best way to use this module is through `pre_arg_parse_setup` and
`post_arg_parse_setup`. `pre_arg_parse_setup` configures a minimal
terminal logger and an except hook so errors raised while parsing the
command line are reported. `post_arg_parse_setup` relies on the parsed
command line arguments and sets the terminal verbosity and the optional
debug log file requested by the user.

Progress messages are logged at INFO, which is shown by default. Every
aws invocation is logged at DEBUG.

"""
import functools
import logging
import logging.handlers
import sys
import traceback
from types import TracebackType
from typing import IO
from typing import Optional
from typing import Type

from lightsail_tools import configuration
from lightsail_tools import errors
from lightsail_tools import util
from lightsail_tools._internal import constants

# Logging format
CLI_FMT = "%(message)s"
FILE_FMT = "%(asctime)s:%(levelname)s:%(name)s:%(message)s"


logger = logging.getLogger(__name__)


def pre_arg_parse_setup() -> None:
    """Setup logging before command line arguments are parsed.

    Terminal logging is setup using
    `lightsail_tools._internal.constants.DEFAULT_LOGGING_LEVEL`, and
    `sys.excepthook` is set to report fatal exceptions.

    """
    stream_handler = ColoredStreamHandler()
    stream_handler.setFormatter(logging.Formatter(CLI_FMT))
    stream_handler.setLevel(constants.DEFAULT_LOGGING_LEVEL)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # send all records to handlers
    root_logger.addHandler(stream_handler)

    sys.excepthook = functools.partial(
        post_arg_parse_except_hook,
        debug='--debug' in sys.argv)


def post_arg_parse_setup(config: configuration.NamespaceConfig) -> None:
    """Setup logging after command line arguments are parsed.

    This function assumes `pre_arg_parse_setup` was called earlier and
    the root logging configuration has not been modified.

    :param lightsail_tools.configuration.NamespaceConfig config: Configuration object

    """
    root_logger = logging.getLogger()
    stderr_handler = None
    for handler in root_logger.handlers:
        if isinstance(handler, ColoredStreamHandler):
            stderr_handler = handler
    msg = 'Previously configured logging handlers have been removed!'
    assert stderr_handler is not None, msg

    if config.log_file:
        root_logger.addHandler(setup_log_file_handler(config, FILE_FMT))

    if config.quiet:
        level = constants.QUIET_LOGGING_LEVEL
    else:
        level = constants.DEFAULT_LOGGING_LEVEL - config.verbose_count * 10

    stderr_handler.setLevel(level)
    logger.debug('Root logging level set at %d', level)

    sys.excepthook = functools.partial(
        post_arg_parse_except_hook, debug=config.debug)


def setup_log_file_handler(config: configuration.NamespaceConfig,
                           fmt: str) -> logging.Handler:
    """Setup file debug logging.

    :param lightsail_tools.configuration.NamespaceConfig config: Configuration object
    :param str fmt: logging format string

    :returns: file handler
    :rtype: logging.Handler

    """
    try:
        handler = logging.handlers.RotatingFileHandler(
            config.log_file, maxBytes=2 ** 20,
            backupCount=config.max_log_backups)
    except IOError as error:
        raise errors.Error("Unable to open the log file: {0}".format(error))
    # rotate on each invocation so every run starts a fresh file
    handler.doRollover()
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=fmt))
    return handler


class ColoredStreamHandler(logging.StreamHandler):
    """Sends colored logging output to a stream.

    If the specified stream is not a tty, the class works like the
    standard `logging.StreamHandler`. Default red_level is
    `logging.WARNING`.

    :ivar bool colored: True if output should be colored
    :ivar bool red_level: The level at which to output

    """
    def __init__(self, stream: Optional[IO] = None) -> None:
        super().__init__(stream)
        self.colored = (sys.stderr.isatty() if stream is None else
                        stream.isatty())
        self.red_level = logging.WARNING

    def format(self, record: logging.LogRecord) -> str:
        """Formats the string representation of record.

        :param logging.LogRecord record: Record to be formatted

        :returns: Formatted, string representation of record
        :rtype: str

        """
        out = super().format(record)
        if self.colored and record.levelno >= self.red_level:
            return ''.join((util.ANSI_SGR_RED, out, util.ANSI_SGR_RESET))
        return out


def post_arg_parse_except_hook(exc_type: Type[BaseException], exc_value: BaseException,
                               trace: TracebackType, debug: bool) -> None:
    """Logs fatal exceptions and reports them to the user.

    If debug is True, the full exception and traceback is shown to the
    user, otherwise, it is suppressed. sys.exit is always called with a
    nonzero status.

    :param type exc_type: type of the raised exception
    :param BaseException exc_value: raised exception
    :param traceback trace: traceback of where the exception was raised
    :param bool debug: True if the traceback should be shown to the user

    """
    exc_info = (exc_type, exc_value, trace)
    # constants.QUIET_LOGGING_LEVEL or higher should be used to
    # display message the user, otherwise, a lower level like
    # logger.DEBUG should be used
    assert constants.QUIET_LOGGING_LEVEL <= logging.ERROR
    if exc_type is KeyboardInterrupt:
        logger.error('Exiting due to user request.')
        sys.exit(1)
    if debug or not issubclass(exc_type, Exception):
        logger.error('Exiting abnormally:', exc_info=exc_info)
    else:
        logger.debug('Exiting abnormally:', exc_info=exc_info)

    if issubclass(exc_type, errors.Error):
        logger.error('%s Error: %s', constants.FAILURE_MARKER, exc_value)
    else:
        output = ''.join(traceback.format_exception_only(exc_type, exc_value)).rstrip()
        logger.error('%s An unexpected error occurred: %s', constants.FAILURE_MARKER, output)
    sys.exit(1)
