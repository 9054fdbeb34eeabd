"""Command line entry point — present and clean up DNS-01 challenge records on Loopia."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from loopia_dns.client import LoopiaClient
from loopia_dns.config import LoopiaConfig, load_config
from loopia_dns.dns import get_dns_provider
from loopia_dns.dns.util import challenge_record_name, split_record_name
from loopia_dns.exceptions import LoopiaError

logger = logging.getLogger(__name__)


def _challenge_location(args: argparse.Namespace) -> tuple[str, str]:
    """Resolve the (zone, subdomain) holding the challenge record for ``args.domain``."""
    return split_record_name(challenge_record_name(args.domain), args.zone or args.domain)


def _present(config: LoopiaConfig, args: argparse.Namespace) -> None:
    zone, relative = _challenge_location(args)
    with get_dns_provider(config) as provider:
        provider.create_txt_record(zone, relative, args.value)


def _cleanup(config: LoopiaConfig, args: argparse.Namespace) -> None:
    zone, relative = _challenge_location(args)
    with get_dns_provider(config) as provider:
        provider.delete_txt_record(zone, relative, args.value)


def _list(config: LoopiaConfig, args: argparse.Namespace) -> None:
    with LoopiaClient(
        config.api_user,
        config.api_password,
        base_url=config.api_url,
        timeout=config.http_timeout,
    ) as client:
        records = client.get_txt_records(args.domain, args.subdomain)
    for record in records:
        print(json.dumps(record.to_dict()))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loopia-dns",
        description="Manage DNS-01 challenge TXT records through the Loopia API",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    present = subparsers.add_parser("present", help="Create the _acme-challenge TXT record for a domain")
    present.add_argument("domain", help="Domain being validated (wildcards allowed)")
    present.add_argument("value", help="TXT record value (the challenge validation string)")
    present.add_argument("--zone", help="Registered domain at Loopia, if different from DOMAIN")
    present.set_defaults(handler=_present)

    cleanup = subparsers.add_parser("cleanup", help="Delete the _acme-challenge TXT records for a domain")
    cleanup.add_argument("domain", help="Domain being validated (wildcards allowed)")
    cleanup.add_argument(
        "value",
        nargs="?",
        help="Only delete the record with this value (default: every TXT record under the name)",
    )
    cleanup.add_argument("--zone", help="Registered domain at Loopia, if different from DOMAIN")
    cleanup.set_defaults(handler=_cleanup)

    list_ = subparsers.add_parser("list", help="Print the zone records of a subdomain as JSON lines")
    list_.add_argument("domain", help="Registered domain at Loopia")
    list_.add_argument(
        "--subdomain",
        default="_acme-challenge",
        help="Subdomain to list (default: _acme-challenge)",
    )
    list_.set_defaults(handler=_list)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config()
        args.handler(config, args)
    except (LoopiaError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
