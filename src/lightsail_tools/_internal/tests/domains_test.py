"""Tests for lightsail_tools._internal.domains."""
import re
import sys
import unittest

import pytest

from lightsail_tools import errors
from lightsail_tools._internal import domains


class SplitDomainTest(unittest.TestCase):
    """Tests for lightsail_tools._internal.domains.split_domain."""

    def test_apex(self):
        for domain in ("example.com", "foo.io", "a.b"):
            parts = domains.split_domain(domain)
            assert parts.record_name == "@"
            assert parts.zone_name == domain
            assert parts.full_record_name == domain

    def test_subdomain(self):
        parts = domains.split_domain("app.example.com")
        assert parts == ("app", "example.com")
        assert parts.full_record_name == "app.example.com"

    def test_deep_subdomain(self):
        parts = domains.split_domain("a.b.c.example.co.uk")
        assert parts.record_name == "a"
        assert parts.zone_name == "b.c.example.co.uk"

    def test_normalizes(self):
        assert domains.split_domain("App.Example.COM.") == ("app", "example.com")

    def test_too_few_labels(self):
        for domain in ("localhost", "", "example..com", ".com"):
            with pytest.raises(errors.ValidationError):
                domains.split_domain(domain)

    def test_explicit_zone(self):
        parts = domains.split_domain("a.b.example.com", "example.com")
        assert parts == ("a.b", "example.com")
        assert parts.full_record_name == "a.b.example.com"

    def test_explicit_zone_apex(self):
        assert domains.split_domain("shop.example.com", "shop.example.com") == \
            ("@", "shop.example.com")

    def test_explicit_zone_trailing_dot(self):
        assert domains.split_domain("app.example.com", "Example.com.") == \
            ("app", "example.com")

    def test_domain_outside_zone(self):
        with pytest.raises(errors.ValidationError):
            domains.split_domain("app.example.net", "example.com")
        with pytest.raises(errors.ValidationError):
            domains.split_domain("badexample.com", "example.com")

    def test_invalid_zone(self):
        with pytest.raises(errors.ValidationError):
            domains.split_domain("app.example.com", "com")


class CertNameFromDomainTest(unittest.TestCase):
    """Tests for lightsail_tools._internal.domains.cert_name_from_domain."""

    def test_simple(self):
        assert domains.cert_name_from_domain("app.example.com") == "app-example-com-cert"

    def test_sanitizes(self):
        assert domains.cert_name_from_domain("*.My_Site.example.com") == \
            "--my-site-example-com-cert"

    def test_keeps_hyphens(self):
        assert domains.cert_name_from_domain("my-app.example.com") == "my-app-example-com-cert"

    def test_idempotent(self):
        for domain in ("app.example.com", "EXAMPLE.org", "x_y.z", "a.cert"):
            once = domains.cert_name_from_domain(domain)
            assert domains.cert_name_from_domain(once) == once
            assert re.match(r'^[a-z0-9-]+-cert$', once)


class CleanTargetTest(unittest.TestCase):
    """Tests for lightsail_tools._internal.domains.clean_target."""

    def test_https_trailing_slash(self):
        assert domains.clean_target("https://a.b.c/") == "a.b.c"

    def test_http(self):
        assert domains.clean_target("http://a.b.c") == "a.b.c"

    def test_bare(self):
        assert domains.clean_target("a.b.c") == "a.b.c"

    def test_strips_only_once(self):
        assert domains.clean_target("https://https://a.b.c//") == "https://a.b.c/"

    def test_empty(self):
        assert domains.clean_target("") == ""
        assert domains.clean_target(None) == ""


if __name__ == '__main__':
    sys.exit(pytest.main(sys.argv[1:] + [__file__]))  # pragma: no cover
