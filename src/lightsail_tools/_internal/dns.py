"""Lightsail DNS zone reconciliation."""
import logging
import time

from lightsail_tools import errors
from lightsail_tools import util
from lightsail_tools._internal import domains
from lightsail_tools._internal import lightsail

logger = logging.getLogger(__name__)


def ensure_cname(client: lightsail.LightsailClient, zone: str, record_name: str,
                 target: str) -> str:
    """Create a CNAME from the record to ``target`` unless the name is taken.

    Any existing entry with the same name, whatever its type, is left
    alone.

    :param .LightsailClient client: Lightsail client
    :param str zone: DNS zone
    :param str record_name: record name inside the zone, ``@`` for the apex
    :param str target: host name the record points at

    :returns: full name of the record
    :rtype: str

    """
    full_name = domains.full_record_name(record_name, zone)
    logger.info("Checking if DNS record '%s' exists in zone '%s'...", record_name, zone)

    if full_name in client.get_domain_entry_names(zone):
        logger.info("DNS record '%s' already exists.", full_name)
        return full_name

    logger.info("DNS record '%s' not found. Creating CNAME record...", full_name)
    entry = {
        "name": full_name,
        "type": "CNAME",
        "target": target,
    }
    try:
        client.create_domain_entry(zone, entry)
    except errors.SubprocessError as error:
        if not util.already_exists(error):
            raise
        logger.info("CNAME record '%s' already exists. Skipping creation.", full_name)
    else:
        logger.info("CNAME record '%s' -> '%s' created.", full_name, target)
    return full_name


def upsert_a_record(client: lightsail.LightsailClient, zone: str, record_name: str,
                    target: str) -> None:
    """Point the alias A record ``record_name`` at ``target``.

    Lightsail may list the record by its short or its full name, both
    match. An existing A record keeps its identity (id, name, type and
    any other field Lightsail returned) and gets the new target and alias
    flag. A missing one is created.

    :param .LightsailClient client: Lightsail client
    :param str zone: DNS zone
    :param str record_name: record name as it appears in the zone entries
    :param str target: host name the alias resolves to

    """
    names = {record_name, domains.full_record_name(record_name, zone)}
    existing = next((entry for entry in client.get_domain_entries(zone)
                     if entry.get("name") in names and entry.get("type") == "A"), None)

    if existing is not None:
        updated = dict(existing, target=target, isAlias=True)
        client.update_domain_entry(zone, updated)
        logger.info("A record '%s' in zone '%s' updated to alias '%s'.",
                    record_name, zone, target)
        return

    entry = {
        "name": record_name,
        "type": "A",
        "target": target,
        "isAlias": True,
    }
    try:
        client.create_domain_entry(zone, entry)
    except errors.SubprocessError as error:
        if not util.already_exists(error):
            raise
        logger.info("A record '%s' already exists. Skipping creation.", record_name)
    else:
        logger.info("A record '%s' in zone '%s' created as alias of '%s'.",
                    record_name, zone, target)


def wait_for_record(client: lightsail.LightsailClient, record_name: str, zone: str,
                    max_attempts: int = 10, delay: float = 5.0) -> None:
    """Wait for an entry to show up in the DNS zone.

    The zone is polled up to ``max_attempts`` times, ``delay`` seconds
    apart.

    :param .LightsailClient client: Lightsail client
    :param str record_name: full name of the entry
    :param str zone: DNS zone
    :param int max_attempts: number of lookups before giving up
    :param float delay: seconds between lookups

    :raises .errors.PropagationTimeout: if the entry never showed up

    """
    for attempt in range(1, max_attempts + 1):
        if record_name in client.get_domain_entry_names(zone):
            logger.info("Domain entry '%s' now exists in zone '%s'.", record_name, zone)
            return
        logger.info("Waiting for domain entry to propagate... (%d/%d)", attempt, max_attempts)
        time.sleep(delay)
    raise errors.PropagationTimeout(
        "Domain entry '{0}' did not appear in Lightsail DNS after {1:g}s.".format(
            record_name, max_attempts * delay))
