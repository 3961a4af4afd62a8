"""Lightsail certificate provisioning."""
import logging
from typing import Optional

from lightsail_tools import errors
from lightsail_tools import util
from lightsail_tools._internal import domains
from lightsail_tools._internal import lightsail

logger = logging.getLogger(__name__)


def ensure_certificate(client: lightsail.LightsailClient, domain: str,
                       cert_name: Optional[str] = None) -> str:
    """Make sure a certificate named ``cert_name`` exists for ``domain``.

    The certificate is requested when it's missing. It is never updated
    or deleted. A creation request refused because the certificate
    already exists counts as success.

    :param .LightsailClient client: Lightsail client
    :param str domain: domain the certificate is for
    :param str cert_name: certificate name, derived from ``domain`` if `None`

    :returns: the certificate name
    :rtype: str

    :raises .errors.SubprocessError: if a Lightsail call fails

    """
    cert_name = cert_name or domains.cert_name_from_domain(domain)

    if client.certificate_exists(cert_name):
        logger.info("Certificate '%s' already exists.", cert_name)
        return cert_name

    logger.info("Certificate '%s' not found. Creating...", cert_name)
    try:
        client.create_certificate(cert_name, domain)
    except errors.SubprocessError as error:
        if not util.already_exists(error):
            raise
        logger.info("Certificate '%s' already exists in AWS.", cert_name)
    else:
        logger.info("Certificate creation request sent.")
    return cert_name
