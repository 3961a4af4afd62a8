"""Test utilities."""
import copy
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from lightsail_tools import errors


class FakeLightsail:
    """In-memory stand-in for `.LightsailClient`.

    :ivar dict zones: entries of each DNS zone
    :ivar list calls: names of the methods called, in order

    """

    def __init__(self, url: str = "https://svc.region.cs.example/",
                 zones: Optional[Dict[str, List[Dict[str, Any]]]] = None,
                 certificates: Optional[List[str]] = None) -> None:
        self.url = url
        self.zones = copy.deepcopy(zones) if zones else {}
        self.certificates = list(certificates or [])
        self.public_domains: Dict[str, List[str]] = {}
        self.calls: List[str] = []
        self._next_id = 1

    def verify_cli(self) -> None:
        self.calls.append("verify_cli")

    def certificate_exists(self, cert_name: str) -> bool:
        self.calls.append("certificate_exists")
        return cert_name in self.certificates

    def create_certificate(self, cert_name: str, domain: str) -> None:
        self.calls.append("create_certificate")
        self.certificates.append(cert_name)

    def get_domain_entry_names(self, zone: str) -> List[str]:
        self.calls.append("get_domain_entry_names")
        return [entry["name"] for entry in self._zone(zone)]

    def get_domain_entries(self, zone: str) -> List[Dict[str, Any]]:
        self.calls.append("get_domain_entries")
        return copy.deepcopy(self._zone(zone))

    def create_domain_entry(self, zone: str, entry: Dict[str, Any]) -> None:
        self.calls.append("create_domain_entry")
        self._zone(zone).append(dict(entry, id="new-{0}".format(self._next_id)))
        self._next_id += 1

    def update_domain_entry(self, zone: str, entry: Dict[str, Any]) -> None:
        self.calls.append("update_domain_entry")
        entries = self._zone(zone)
        for i, existing in enumerate(entries):
            if existing.get("id") == entry.get("id"):
                entries[i] = dict(entry)
                return
        raise errors.SubprocessError("NotFoundException", stderr="entry not found")

    def get_container_service_url(self, service_name: str) -> str:
        self.calls.append("get_container_service_url")
        return self.url

    def get_public_domain_names(self, service_name: str) -> Dict[str, List[str]]:
        self.calls.append("get_public_domain_names")
        return copy.deepcopy(self.public_domains)

    def update_public_domain_names(self, service_name: str,
                                   domains: Dict[str, List[str]]) -> None:
        self.calls.append("update_public_domain_names")
        self.public_domains = copy.deepcopy(domains)

    def entries(self, zone: str) -> List[Dict[str, Any]]:
        """Entries of the zone without the ids Lightsail assigned."""
        return [{key: value for key, value in entry.items() if key != "id"}
                for entry in self.zones[zone]]

    def _zone(self, zone: str) -> List[Dict[str, Any]]:
        if zone not in self.zones:
            raise errors.SubprocessError(
                "Error while running aws lightsail get-domain",
                stderr="NotFoundException: The domain does not exist", returncode=254)
        return self.zones[zone]


def already_exists_error(what: str = "Entry") -> errors.SubprocessError:
    """The error raised by `run_script` when Lightsail refuses a duplicate."""
    return errors.SubprocessError(
        "Error while running aws lightsail.",
        stderr="An error occurred (InvalidInputException): {0} already exists".format(what),
        returncode=254)
