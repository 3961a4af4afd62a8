"""Lightsail tools main entry point."""
import logging
import sys
from typing import List
from typing import NamedTuple
from typing import Optional
from typing import Union

import lightsail_tools
from lightsail_tools import configuration
from lightsail_tools import errors
from lightsail_tools._internal import binder
from lightsail_tools._internal import cert_manager
from lightsail_tools._internal import cli
from lightsail_tools._internal import constants
from lightsail_tools._internal import dns
from lightsail_tools._internal import domains
from lightsail_tools._internal import lightsail
from lightsail_tools._internal import log

logger = logging.getLogger(__name__)


class Attachment(NamedTuple):
    """What `attach_cert` set up, handed over to `update_dns`."""
    domain: str
    zone_name: str
    record_name: str
    full_record_name: str
    cert_name: str
    target: str


def _container_target(client: lightsail.LightsailClient, container_name: str) -> str:
    """Host name of the container service, fetched fresh from Lightsail."""
    target = domains.clean_target(client.get_container_service_url(container_name))
    if not target:
        raise errors.Error(
            "Container service '{0}' has no public URL. Is it deployed?".format(container_name))
    return target


def attach_cert(client: lightsail.LightsailClient, container_name: str, domain_name: str,
                cert_name: Optional[str] = None, dns_zone: Optional[str] = None,
                merge_domains: bool = False) -> Attachment:
    """Provision the certificate, the CNAME record and the domain mapping.

    :param .LightsailClient client: Lightsail client
    :param str container_name: container service name
    :param str domain_name: fully qualified domain name
    :param str cert_name: certificate name, derived from the domain if `None`
    :param str dns_zone: DNS zone, inferred from the domain if `None`
    :param bool merge_domains: keep domains already served by the service

    :returns: names and target to use for the DNS update
    :rtype: Attachment

    :raises .errors.ValidationError: before any remote call if the domain
        or zone is unusable

    """
    parts = domains.split_domain(domain_name, dns_zone)
    domain_name = domains.full_record_name(parts.record_name, parts.zone_name)

    cert_name = cert_manager.ensure_certificate(client, domain_name, cert_name)

    target = _container_target(client, container_name)
    full_name = dns.ensure_cname(client, parts.zone_name, parts.record_name, target)

    binder.bind_domain(client, container_name, domain_name, merge=merge_domains)

    return Attachment(domain=domain_name, zone_name=parts.zone_name,
                      record_name=parts.record_name, full_record_name=full_name,
                      cert_name=cert_name, target=target)


def update_dns(client: lightsail.LightsailClient, container_name: str, attachment: Attachment,
               max_attempts: int = 10, delay: float = 5.0) -> None:
    """Point the alias A record of the domain at the container service.

    Waits for the CNAME record created by `attach_cert` to be listed in
    the zone first.

    :param .LightsailClient client: Lightsail client
    :param str container_name: container service name
    :param Attachment attachment: result of `attach_cert`
    :param int max_attempts: lookups of the CNAME record before giving up
    :param float delay: seconds between lookups

    """
    logger.info("Updating DNS Zone '%s' with record '%s'...",
                attachment.zone_name, attachment.record_name)
    target = _container_target(client, container_name)

    dns.wait_for_record(client, attachment.full_record_name, attachment.zone_name,
                        max_attempts=max_attempts, delay=delay)
    dns.upsert_a_record(client, attachment.zone_name, attachment.record_name, target)


def run(config: configuration.NamespaceConfig) -> int:
    """Attach the certificate and update the DNS records.

    :param config: Configuration object
    :type config: configuration.NamespaceConfig

    :returns: exit status
    :rtype: int

    """
    client = lightsail.LightsailClient.from_config(config)
    client.verify_cli()

    attachment = attach_cert(client, config.container_name, config.domain_name,
                             cert_name=config.cert_name, dns_zone=config.dns_zone,
                             merge_domains=config.merge_domains)
    update_dns(client, config.container_name, attachment,
               max_attempts=config.propagation_attempts, delay=config.propagation_delay)

    print('{0} Operation completed successfully.'.format(constants.SUCCESS_MARKER))
    return 0


def main(cli_args: Optional[List[str]] = None) -> Optional[Union[str, int]]:
    """Run the default command.

    :param cli_args: command line, defaults to ``sys.argv[1:]``
    :type cli_args: `list` of `str`

    :returns: value for `sys.exit` about the exit status
    :rtype: `str` or `int` or `None`

    """
    if cli_args is None:
        cli_args = sys.argv[1:]

    log.pre_arg_parse_setup()

    logger.debug("lightsail-tools version: %s", lightsail_tools.__version__)
    logger.debug("Arguments: %r", cli_args)

    if not cli_args:
        cli.build_parser().print_help()
        return 1

    # note: arg parser internally handles --help (and exits afterwards)
    args = cli.prepare_and_parse_args(cli_args)
    config = configuration.NamespaceConfig(args)

    log.post_arg_parse_setup(config)

    return run(config)
