"""Lightsail tools user-supplied configuration."""
import argparse
import re
from typing import Any
from typing import Optional

from lightsail_tools import errors

_CERT_NAME_RE = re.compile(r'[A-Za-z0-9-]+')


class NamespaceConfig:
    """Configuration wrapper around :class:`argparse.Namespace`.

    Attributes that are not defined as properties below are looked up on
    the wrapped namespace.

    :ivar namespace: Namespace typically produced by
        :meth:`argparse.ArgumentParser.parse_args`.
    :type namespace: :class:`argparse.Namespace`

    """

    def __init__(self, namespace: argparse.Namespace) -> None:
        self.namespace: argparse.Namespace
        # Avoid recursion loop because of the delegation defined in __setattr__
        object.__setattr__(self, 'namespace', namespace)

        # Check command line parameters sanity, and error out in case of problem.
        _check_config_sanity(self)

    # Delegate any attribute not explicitly defined to the underlying namespace object.

    def __getattr__(self, name: str) -> Any:
        return getattr(self.namespace, name)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(self.namespace, name, value)

    @property
    def container_name(self) -> str:
        """Lightsail container service name (wrap in quotes if it contains hyphens)."""
        return self.namespace.container_name

    @property
    def domain_name(self) -> str:
        """Fully qualified domain name to attach to the container service."""
        return self.namespace.domain_name

    @property
    def cert_name(self) -> Optional[str]:
        """Custom certificate name. Derived from the domain name if not given."""
        return self.namespace.cert_name

    @property
    def dns_zone(self) -> Optional[str]:
        """Lightsail DNS zone holding the domain. Inferred from the domain name if
        not given."""
        return self.namespace.dns_zone

    @property
    def region(self) -> str:
        """AWS region of the container service."""
        return self.namespace.region

    @property
    def dns_region(self) -> str:
        """AWS region of Lightsail DNS zones and certificates."""
        return self.namespace.dns_region

    @property
    def profile(self) -> Optional[str]:
        """Named profile passed to the aws command."""
        return self.namespace.profile

    @property
    def aws_cli(self) -> str:
        """Name or path of the aws command line tool."""
        return self.namespace.aws_cli

    @property
    def merge_domains(self) -> bool:
        """Keep the domains already served by the container service instead of
        replacing them with the new domain."""
        return self.namespace.merge_domains

    @property
    def propagation_attempts(self) -> int:
        """How many times to look for the new DNS entry before giving up."""
        return self.namespace.propagation_attempts

    @property
    def propagation_delay(self) -> float:
        """Seconds to wait between two lookups of the new DNS entry."""
        return self.namespace.propagation_delay

    @property
    def log_file(self) -> Optional[str]:
        """Also write a debug log to this file."""
        return self.namespace.log_file


def _check_config_sanity(config: NamespaceConfig) -> None:
    """Validate command line options and raise an error if
    requirements are not met.

    :param config: NamespaceConfig instance holding user configuration
    :type config: :class:`lightsail_tools.configuration.NamespaceConfig`

    :raises .errors.ValidationError: if an option has an unusable value

    """
    if config.propagation_attempts < 1:
        raise errors.ValidationError(
            "--propagation-attempts must be at least 1, got {0}".format(
                config.propagation_attempts))
    if config.propagation_delay < 0:
        raise errors.ValidationError(
            "--propagation-delay must not be negative, got {0}".format(
                config.propagation_delay))
    if config.dns_zone is not None and not config.dns_zone.strip("."):
        raise errors.ValidationError("--dns-zone must not be empty")
    if config.cert_name is not None and not _CERT_NAME_RE.fullmatch(config.cert_name):
        raise errors.ValidationError(
            "--cert-name may only contain letters, digits and hyphens, got '{0}'".format(
                config.cert_name))
