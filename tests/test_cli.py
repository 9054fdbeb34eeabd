"""Tests for the loopia-dns command line entry point."""

import json
from unittest.mock import MagicMock, patch

from loopia_dns.cli import main
from loopia_dns.config import LoopiaConfig
from loopia_dns.exceptions import AuthenticationError, ConfigError
from loopia_dns.models import ZoneRecord

_CONFIG = LoopiaConfig(api_user="user@loopiaapi", api_password="secret")


def _provider_mock(mock_get_provider) -> MagicMock:
    provider = MagicMock()
    provider.__enter__.return_value = provider
    mock_get_provider.return_value = provider
    return provider


class TestPresent:
    @patch("loopia_dns.cli.get_dns_provider")
    @patch("loopia_dns.cli.load_config", return_value=_CONFIG)
    def test_creates_challenge_record(self, mock_config, mock_get_provider):
        provider = _provider_mock(mock_get_provider)

        assert main(["present", "example.com", "token123"]) == 0

        mock_get_provider.assert_called_once_with(_CONFIG)
        provider.create_txt_record.assert_called_once_with("example.com", "_acme-challenge", "token123")
        provider.__exit__.assert_called_once()

    @patch("loopia_dns.cli.get_dns_provider")
    @patch("loopia_dns.cli.load_config", return_value=_CONFIG)
    def test_handles_wildcard_domain(self, mock_config, mock_get_provider):
        provider = _provider_mock(mock_get_provider)

        main(["present", "*.example.com", "wc-token"])

        provider.create_txt_record.assert_called_once_with("example.com", "_acme-challenge", "wc-token")

    @patch("loopia_dns.cli.get_dns_provider")
    @patch("loopia_dns.cli.load_config", return_value=_CONFIG)
    def test_zone_override_for_subdomain_certificates(self, mock_config, mock_get_provider):
        provider = _provider_mock(mock_get_provider)

        main(["present", "sub.example.com", "token", "--zone", "example.com"])

        provider.create_txt_record.assert_called_once_with("example.com", "_acme-challenge.sub", "token")

    @patch("loopia_dns.cli.get_dns_provider")
    @patch("loopia_dns.cli.load_config", return_value=_CONFIG)
    def test_api_error_exits_non_zero(self, mock_config, mock_get_provider, capsys):
        provider = _provider_mock(mock_get_provider)
        provider.create_txt_record.side_effect = AuthenticationError()

        assert main(["present", "example.com", "token"]) == 1

        assert "Error: authentication error" in capsys.readouterr().err


class TestCleanup:
    @patch("loopia_dns.cli.get_dns_provider")
    @patch("loopia_dns.cli.load_config", return_value=_CONFIG)
    def test_deletes_challenge_record(self, mock_config, mock_get_provider):
        provider = _provider_mock(mock_get_provider)

        assert main(["cleanup", "example.com"]) == 0

        provider.delete_txt_record.assert_called_once_with("example.com", "_acme-challenge", None)

    @patch("loopia_dns.cli.get_dns_provider")
    @patch("loopia_dns.cli.load_config", return_value=_CONFIG)
    def test_deletes_only_matching_value(self, mock_config, mock_get_provider):
        provider = _provider_mock(mock_get_provider)

        assert main(["cleanup", "*.example.com", "wc-token"]) == 0

        provider.delete_txt_record.assert_called_once_with("example.com", "_acme-challenge", "wc-token")

    @patch("loopia_dns.cli.get_dns_provider")
    @patch("loopia_dns.cli.load_config", side_effect=ConfigError("Required environment variable LOOPIA_API_USER is not set"))
    def test_missing_configuration_exits_non_zero(self, mock_config, mock_get_provider, capsys):
        assert main(["cleanup", "example.com"]) == 1

        mock_get_provider.assert_not_called()
        assert "LOOPIA_API_USER" in capsys.readouterr().err


class TestList:
    @patch("loopia_dns.cli.LoopiaClient")
    @patch("loopia_dns.cli.load_config", return_value=_CONFIG)
    def test_prints_records_as_json_lines(self, mock_config, mock_client_cls, capsys):
        client = mock_client_cls.return_value.__enter__.return_value
        client.get_txt_records.return_value = [
            ZoneRecord(type="TXT", ttl=300, priority=0, rdata="token-a", record_id=1),
            ZoneRecord(type="TXT", ttl=300, priority=0, rdata="token-b", record_id=2),
        ]

        assert main(["list", "example.com"]) == 0

        mock_client_cls.assert_called_once_with(
            "user@loopiaapi",
            "secret",
            base_url="https://api.loopia.se/RPCSERV",
            timeout=10,
        )
        client.get_txt_records.assert_called_once_with("example.com", "_acme-challenge")
        lines = capsys.readouterr().out.splitlines()
        assert [json.loads(line)["rdata"] for line in lines] == ["token-a", "token-b"]

    @patch("loopia_dns.cli.LoopiaClient")
    @patch("loopia_dns.cli.load_config", return_value=_CONFIG)
    def test_subdomain_option(self, mock_config, mock_client_cls):
        client = mock_client_cls.return_value.__enter__.return_value
        client.get_txt_records.return_value = []

        main(["list", "example.com", "--subdomain", "www"])

        client.get_txt_records.assert_called_once_with("example.com", "www")
