"""Tests for lightsail_tools._internal.cli."""
import io
import sys
import tempfile
import unittest
from unittest import mock

import pytest

import lightsail_tools
from lightsail_tools._internal import cli

REQUIRED = ["--container-name", "svc", "--domain-name", "app.example.com"]


class ParseArgsTest(unittest.TestCase):
    """Tests for lightsail_tools._internal.cli.prepare_and_parse_args."""

    def setUp(self):
        # keep a config file in the user's home out of the tests
        mock.patch("lightsail_tools._internal.cli.flag_default",
                   side_effect=self._flag_default).start()
        self.addCleanup(mock.patch.stopall)

    @staticmethod
    def _flag_default(name):
        from lightsail_tools._internal.cli import cli_utils
        if name == "config_files":
            return []
        return cli_utils.flag_default(name)

    def test_defaults(self):
        args = cli.prepare_and_parse_args(REQUIRED)

        assert args.container_name == "svc"
        assert args.domain_name == "app.example.com"
        assert args.cert_name is None
        assert args.dns_zone is None
        assert args.region == "ca-central-1"
        assert args.dns_region == "us-east-1"
        assert args.profile is None
        assert args.aws_cli == "aws"
        assert args.merge_domains is False
        assert args.propagation_attempts == 10
        assert args.propagation_delay == 5.0
        assert args.verbose_count == 0
        assert args.quiet is False

    def test_short_options(self):
        args = cli.prepare_and_parse_args(
            REQUIRED + ["-c", "mine", "-z", "example.com", "-r", "eu-west-2", "-vv"])

        assert args.cert_name == "mine"
        assert args.dns_zone == "example.com"
        assert args.region == "eu-west-2"
        assert args.verbose_count == 2

    def test_long_options(self):
        args = cli.prepare_and_parse_args(
            REQUIRED + ["--cert-name", "mine", "--dns-zone", "example.com",
                        "--region", "eu-west-2", "--profile", "deploy",
                        "--merge-domains", "--propagation-attempts", "3",
                        "--propagation-delay", "0.5"])

        assert args.cert_name == "mine"
        assert args.profile == "deploy"
        assert args.merge_domains is True
        assert args.propagation_attempts == 3
        assert args.propagation_delay == 0.5

    @mock.patch("sys.stderr", new_callable=io.StringIO)
    def test_required(self, mock_stderr):
        for args in (["--container-name", "svc"], ["--domain-name", "app.example.com"]):
            with pytest.raises(SystemExit) as exc_info:
                cli.prepare_and_parse_args(args)
            assert exc_info.value.code == 1
        assert "required" in mock_stderr.getvalue()

    @mock.patch("sys.stderr", new_callable=io.StringIO)
    def test_bad_propagation_attempts(self, mock_stderr):
        for value in ("0", "-1", "many"):
            with pytest.raises(SystemExit) as exc_info:
                cli.prepare_and_parse_args(REQUIRED + ["--propagation-attempts", value])
            assert exc_info.value.code == 1
        assert "--propagation-attempts" in mock_stderr.getvalue()

    @mock.patch("sys.stderr", new_callable=io.StringIO)
    def test_bad_propagation_delay(self, unused_mock_stderr):
        for value in ("-1", "soon"):
            with pytest.raises(SystemExit):
                cli.prepare_and_parse_args(REQUIRED + ["--propagation-delay", value])

    @mock.patch("sys.stdout", new_callable=io.StringIO)
    def test_version(self, mock_stdout):
        with pytest.raises(SystemExit):
            cli.prepare_and_parse_args(["--version"])
        assert lightsail_tools.__version__ in mock_stdout.getvalue()

    @mock.patch("sys.stdout", new_callable=io.StringIO)
    def test_help(self, mock_stdout):
        with pytest.raises(SystemExit):
            cli.prepare_and_parse_args(["--help"])
        out = mock_stdout.getvalue()
        assert "--container-name" in out
        assert "AWS region of the container service." in out
        assert "--max-log-backups" not in out

    def test_config_file(self):
        with tempfile.NamedTemporaryFile("w", suffix=".ini") as config_file:
            config_file.write("region = eu-west-2\nprofile = deploy\nmerge-domains = true\n")
            config_file.flush()

            args = cli.prepare_and_parse_args(REQUIRED + ["--config", config_file.name])

        assert args.region == "eu-west-2"
        assert args.profile == "deploy"
        assert args.merge_domains is True

    def test_command_line_beats_config_file(self):
        with tempfile.NamedTemporaryFile("w", suffix=".ini") as config_file:
            config_file.write("region = eu-west-2\n")
            config_file.flush()

            args = cli.prepare_and_parse_args(
                REQUIRED + ["--config", config_file.name, "--region", "us-west-2"])

        assert args.region == "us-west-2"


if __name__ == '__main__':
    sys.exit(pytest.main(sys.argv[1:] + [__file__]))  # pragma: no cover
