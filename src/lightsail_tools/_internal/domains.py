"""Domain name helpers shared by the certificate and DNS steps."""
import re
from typing import NamedTuple
from typing import Optional

from lightsail_tools import errors
from lightsail_tools._internal import constants

_SCHEME_RE = re.compile(r'^https?://')
_CERT_NAME_INVALID_RE = re.compile(r'[^a-z0-9-]')


class DomainParts(NamedTuple):
    """A domain name split into the record and the zone holding it."""
    record_name: str
    zone_name: str

    @property
    def full_record_name(self) -> str:
        """Name of the record as Lightsail lists it in the zone."""
        return full_record_name(self.record_name, self.zone_name)


def split_domain(domain: str, zone: Optional[str] = None) -> DomainParts:
    """Split a fully qualified domain name into record and zone.

    Without an explicit zone, a two label domain is the apex (``@``) of
    itself, otherwise the leftmost label is the record and the remaining
    labels are the zone.

    :param str domain: fully qualified domain name
    :param str zone: DNS zone, inferred from ``domain`` if `None`

    :returns: record name and zone name
    :rtype: DomainParts

    :raises .errors.ValidationError: if the domain has fewer than two
        labels or does not belong to ``zone``

    """
    domain = domain.strip().rstrip('.').lower()
    labels = domain.split('.')
    if len(labels) < 2 or not all(labels):
        raise errors.ValidationError(
            "Invalid domain name provided: '{0}'".format(domain))

    if zone:
        zone = zone.strip().rstrip('.').lower()
        if len(zone.split('.')) < 2:
            raise errors.ValidationError(
                "Invalid DNS zone provided: '{0}'".format(zone))
        if domain == zone:
            return DomainParts(constants.APEX_RECORD, zone)
        if not domain.endswith('.' + zone):
            raise errors.ValidationError(
                "Domain '{0}' is not part of DNS zone '{1}'".format(domain, zone))
        return DomainParts(domain[:-len(zone) - 1], zone)

    if len(labels) == 2:
        return DomainParts(constants.APEX_RECORD, domain)
    return DomainParts(labels[0], '.'.join(labels[1:]))


def full_record_name(record_name: str, zone: str) -> str:
    """The zone itself for the apex record, ``record.zone`` otherwise."""
    return zone if record_name == constants.APEX_RECORD else '{0}.{1}'.format(record_name, zone)


def cert_name_from_domain(domain: str) -> str:
    """Generate a certificate name based on the domain.

    Characters other than lowercase letters, digits and hyphens become
    hyphens. A name that already carries the suffix is returned as is,
    so the function can be applied to its own output.

    :param str domain: domain name
    :returns: certificate name matching ``^[a-z0-9-]+-cert$``
    :rtype: str

    """
    name = _CERT_NAME_INVALID_RE.sub('-', domain.lower())
    if name.endswith(constants.CERT_NAME_SUFFIX):
        return name
    return name + constants.CERT_NAME_SUFFIX


def clean_target(url: Optional[str]) -> str:
    """Turn a container service URL into a DNS target.

    Removes one leading ``http://`` or ``https://`` and one trailing slash.

    :param str url: public URL of the container service
    :rtype: str

    """
    if not url:
        return ''
    url = _SCHEME_RE.sub('', url.strip())
    if url.endswith('/'):
        url = url[:-1]
    return url
