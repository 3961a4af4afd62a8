"""Mapping of domains to a Lightsail container service."""
import logging
from typing import Dict
from typing import List

from lightsail_tools._internal import constants
from lightsail_tools._internal import lightsail

logger = logging.getLogger(__name__)


def bind_domain(client: lightsail.LightsailClient, service_name: str, domain: str,
                merge: bool = False) -> Dict[str, List[str]]:
    """Serve ``domain`` from the container service.

    Lightsail provisions and attaches the matching certificate on its own
    once the domain is mapped. By default the service's public domains
    are replaced by ``domain`` alone. With ``merge``, domains already
    mapped, under any key, are kept.

    :param .LightsailClient client: Lightsail client
    :param str service_name: container service name
    :param str domain: domain to serve
    :param bool merge: keep the domains already mapped

    :returns: the public domain map sent to Lightsail
    :rtype: dict

    """
    url = client.get_container_service_url(service_name)
    if url:
        logger.debug("Container service '%s' is served at %s", service_name, url)
    else:
        logger.warning("Container service '%s' has no public URL yet.", service_name)

    public_domains = {constants.DEFAULT_DOMAIN_KEY: [domain]}
    if merge:
        public_domains = {key: list(names) for key, names
                          in client.get_public_domain_names(service_name).items()}
        if not any(domain in names for names in public_domains.values()):
            public_domains.setdefault(constants.DEFAULT_DOMAIN_KEY, []).append(domain)

    logger.info("Mapping domain '%s' to container service '%s'...", domain, service_name)
    client.update_public_domain_names(service_name, public_domains)
    logger.info("Domain attached successfully (SSL will be provisioned automatically).")
    return public_domains
