"""Lightsail tools constants."""
import logging
import os
from typing import Any
from typing import Dict

DNS_REGION = "us-east-1"
"""Lightsail DNS zones and their certificates only live in this region."""

CLI_DEFAULTS: Dict[str, Any] = dict(  # noqa
    config_files=[
        # https://freedesktop.org/wiki/Software/xdg-user-dirs/
        os.path.join(os.environ.get("XDG_CONFIG_HOME", "~/.config"),
                     "lightsail-tools", "cli.ini"),
    ],

    container_name=None,
    domain_name=None,
    cert_name=None,
    dns_zone=None,
    region="ca-central-1",
    dns_region=DNS_REGION,
    profile=None,
    aws_cli="aws",
    merge_domains=False,
    propagation_attempts=10,
    propagation_delay=5.0,

    verbose_count=0,
    quiet=False,
    debug=False,
    log_file=None,
    max_log_backups=10,
)
"""Defaults for CLI flags and `.NamespaceConfig` attributes."""

CERT_NAME_SUFFIX = "-cert"
"""Appended to the sanitized domain name to build a certificate name."""

APEX_RECORD = "@"
"""Record name of the zone apex."""

DEFAULT_DOMAIN_KEY = "_"
"""Key of the container service's public domain map used by the tool."""

QUIET_LOGGING_LEVEL = logging.ERROR
"""Logging level to use in quiet mode."""

DEFAULT_LOGGING_LEVEL = logging.INFO
"""Default logging level to use when not in quiet mode."""

SUCCESS_MARKER = "✅"
"""Prefix of the final success message."""

FAILURE_MARKER = "❌"
"""Prefix of the error line printed before exiting."""
