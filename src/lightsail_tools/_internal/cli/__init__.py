"""Lightsail tools command line argument & config processing."""
import argparse
import logging
import sys
from typing import List
from typing import NoReturn

import configargparse

import lightsail_tools
from lightsail_tools._internal.cli.cli_utils import config_help
from lightsail_tools._internal.cli.cli_utils import CustomHelpFormatter
from lightsail_tools._internal.cli.cli_utils import flag_default
from lightsail_tools._internal.cli.cli_utils import nonnegative_float
from lightsail_tools._internal.cli.cli_utils import positive_int

logger = logging.getLogger(__name__)

DESCRIPTION = ("Attach a certificate to a Lightsail container and update DNS records "
               "(default command).")


class ArgParser(configargparse.ArgParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, "{0}: error: {1}\n".format(self.prog, message))


def build_parser() -> ArgParser:
    """Create the argument parser, including config file handling.

    :returns: the parser
    :rtype: ArgParser

    """
    parser = ArgParser(
        prog="lightsail-tools",
        description=DESCRIPTION,
        formatter_class=CustomHelpFormatter,
        args_for_setting_config_path=["--config"],
        default_config_files=flag_default("config_files"),
        config_arg_help_message="path to config file (default: {0})".format(
            " and ".join(flag_default("config_files"))))

    parser.add_argument(
        "--version", action="version",
        version="%(prog)s {0}".format(lightsail_tools.__version__))

    parser.add_argument(
        "--container-name", dest="container_name", metavar="CONTAINER_NAME",
        required=True, help=config_help("container_name"))
    parser.add_argument(
        "--domain-name", dest="domain_name", metavar="DOMAIN_NAME",
        required=True, help=config_help("domain_name"))
    parser.add_argument(
        "-c", "--cert-name", dest="cert_name", metavar="CERT_NAME",
        default=flag_default("cert_name"), help=config_help("cert_name"))
    parser.add_argument(
        "-z", "--dns-zone", dest="dns_zone", metavar="DNS_ZONE",
        default=flag_default("dns_zone"), help=config_help("dns_zone"))
    parser.add_argument(
        "-r", "--region", dest="region",
        default=flag_default("region"), help=config_help("region"))

    aws = parser.add_argument_group("aws")
    aws.add_argument(
        "--dns-region", dest="dns_region",
        default=flag_default("dns_region"), help=config_help("dns_region"))
    aws.add_argument(
        "--profile", dest="profile",
        default=flag_default("profile"), help=config_help("profile"))
    aws.add_argument(
        "--aws-cli", dest="aws_cli",
        default=flag_default("aws_cli"), help=config_help("aws_cli"))
    aws.add_argument(
        "--merge-domains", dest="merge_domains", action="store_true",
        default=flag_default("merge_domains"), help=config_help("merge_domains"))
    aws.add_argument(
        "--propagation-attempts", dest="propagation_attempts", type=positive_int,
        default=flag_default("propagation_attempts"),
        help=config_help("propagation_attempts"))
    aws.add_argument(
        "--propagation-delay", dest="propagation_delay", type=nonnegative_float,
        default=flag_default("propagation_delay"),
        help=config_help("propagation_delay"))

    output = parser.add_argument_group("output")
    # --help is automatically provided by argparse
    output.add_argument(
        "-v", "--verbose", dest="verbose_count", action="count",
        default=flag_default("verbose_count"), help="This flag can be used "
        "multiple times to incrementally increase the verbosity of output, "
        "e.g. -vv.")
    output.add_argument(
        "-q", "--quiet", dest="quiet", action="store_true",
        default=flag_default("quiet"),
        help="Silence all output except errors.")
    output.add_argument(
        "--debug", action="store_true", default=flag_default("debug"),
        help="Show tracebacks in case of errors.")
    output.add_argument(
        "--log-file", dest="log_file", metavar="PATH",
        default=flag_default("log_file"), help=config_help("log_file"))
    output.add_argument(
        "--max-log-backups", dest="max_log_backups", type=int,
        default=flag_default("max_log_backups"), help=argparse.SUPPRESS)

    return parser


def prepare_and_parse_args(args: List[str]) -> argparse.Namespace:
    """Returns parsed command line arguments.

    :param list args: command line arguments with the program name removed

    :returns: parsed command line arguments
    :rtype: argparse.Namespace

    """
    parsed_args = build_parser().parse_args(args)
    logger.debug("Parsed arguments: %r", parsed_args)
    return parsed_args
