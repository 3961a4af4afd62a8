"""Thin wrapper around the ``aws lightsail`` command line tool.

Every method is a single invocation of the aws command. Container service
calls go to the service region, certificate and DNS calls go to the DNS
region.
"""
import json
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from lightsail_tools import configuration
from lightsail_tools import errors
from lightsail_tools import util
from lightsail_tools._internal import constants

DomainEntry = Dict[str, Any]


class LightsailClient:
    """Runs ``aws lightsail`` subcommands and decodes their output.

    :ivar str region: region of the container service
    :ivar str dns_region: region of DNS zones and certificates

    """

    def __init__(self, region: str, dns_region: str = constants.DNS_REGION,
                 profile: Optional[str] = None, aws_cli: str = "aws") -> None:
        self.region = region
        self.dns_region = dns_region
        self.profile = profile
        self.aws_cli = aws_cli

    @classmethod
    def from_config(cls, config: configuration.NamespaceConfig) -> 'LightsailClient':
        """Build a client from the user's configuration."""
        return cls(config.region, config.dns_region, config.profile, config.aws_cli)

    def verify_cli(self) -> None:
        """Check the aws command can be found.

        :raises .errors.CommandNotFound: if it can't

        """
        if not util.exe_exists(self.aws_cli):
            raise errors.CommandNotFound(
                "Unable to find the aws command '{0}' in the PATH. Install the AWS CLI "
                "or point --aws-cli at it.".format(self.aws_cli))

    def _run(self, region: str, *args: str) -> str:
        params = [self.aws_cli, "lightsail"] + list(args) + ["--region", region]
        if self.profile:
            params += ["--profile", self.profile]
        stdout, _ = util.run_script(params)
        return stdout

    def _run_json(self, region: str, *args: str) -> Any:
        stdout = self._run(region, *(args + ("--output", "json")))
        try:
            return json.loads(stdout) if stdout.strip() else None
        except ValueError as error:
            raise errors.Error(
                "Unable to decode the output of aws lightsail {0}: {1}".format(args[0], error))

    def certificate_exists(self, cert_name: str) -> bool:
        """Is there a certificate named exactly ``cert_name``?"""
        stdout = self._run(
            self.dns_region, "get-certificates",
            "--query", "certificates[?certificateName=='{0}']".format(cert_name),
            "--output", "text")
        return stdout.strip() != ''

    def create_certificate(self, cert_name: str, domain: str) -> None:
        """Request a new certificate for ``domain``."""
        self._run(self.dns_region, "create-certificate",
                  "--certificate-name", cert_name, "--domain-name", domain)

    def get_domain_entry_names(self, zone: str) -> List[str]:
        """Names of all entries of the DNS zone."""
        stdout = self._run(
            self.dns_region, "get-domain", "--domain-name", zone,
            "--query", "domain.domainEntries[].name", "--output", "text")
        return stdout.split()

    def get_domain_entries(self, zone: str) -> List[DomainEntry]:
        """All entries of the DNS zone, as returned by Lightsail."""
        entries = self._run_json(
            self.dns_region, "get-domain", "--domain-name", zone,
            "--query", "domain.domainEntries")
        return entries or []

    def create_domain_entry(self, zone: str, entry: DomainEntry) -> None:
        """Add ``entry`` to the DNS zone."""
        self._run(self.dns_region, "create-domain-entry", "--domain-name", zone,
                  "--domain-entry", json.dumps(entry))

    def update_domain_entry(self, zone: str, entry: DomainEntry) -> None:
        """Replace the entry of the DNS zone that has the same id as ``entry``."""
        self._run(self.dns_region, "update-domain-entry", "--domain-name", zone,
                  "--domain-entry", json.dumps(entry))

    def get_container_service_url(self, service_name: str) -> str:
        """Public URL of the container service, empty if it has none yet."""
        stdout = self._run(
            self.region, "get-container-services", "--service-name", service_name,
            "--query", "containerServices[0].url", "--output", "text").strip()
        # the text output format renders a missing value as None
        return '' if stdout == 'None' else stdout

    def get_public_domain_names(self, service_name: str) -> Dict[str, List[str]]:
        """Map of certificate name to domains currently served by the container service."""
        domains = self._run_json(
            self.region, "get-container-services", "--service-name", service_name,
            "--query", "containerServices[0].publicDomainNames")
        return domains or {}

    def update_public_domain_names(self, service_name: str,
                                   domains: Dict[str, List[str]]) -> None:
        """Replace the public domain map of the container service."""
        self._run(self.region, "update-container-service", "--service-name", service_name,
                  "--public-domain-names", json.dumps(domains))
