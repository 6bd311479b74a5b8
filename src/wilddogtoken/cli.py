"""CLI entry point for minting tokens."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import Any

from dotenv import load_dotenv

from wilddogtoken.auth_config import get_secret, get_token_format
from wilddogtoken.config import build_issuer, load_profile
from wilddogtoken.errors import TokenError
from wilddogtoken.issuer import TokenIssuer
from wilddogtoken.models import TokenFormat

logger = logging.getLogger(__name__)


def _parse_instant(text: str) -> int | datetime:
    """Epoch seconds or an ISO-8601 timestamp."""
    if text.lstrip("-").isdigit():
        return int(text)
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid instant '{text}': expected epoch seconds or ISO-8601"
        ) from None


def _parse_data(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise argparse.ArgumentTypeError(f"Invalid JSON for --data: {exc}") from None
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError("--data must be a JSON object")
    return data


def _build_issuer(args: argparse.Namespace) -> TokenIssuer:
    """Build an issuer from an optional profile, then apply CLI overrides."""
    secret = get_secret()
    if args.profile:
        profile = load_profile(args.profile)
        if args.format:
            profile = profile.model_copy(update={"format": TokenFormat.parse(args.format)})
        issuer = build_issuer(profile, secret)
    else:
        fmt = TokenFormat.parse(args.format) if args.format else get_token_format()
        issuer = TokenIssuer(secret, fmt)

    data = dict(issuer.data)
    if args.data:
        data.update(args.data)
    if args.uid is not None:
        data["uid"] = args.uid
    issuer.set_data(data)
    logger.debug("Minting %s token", issuer.token_format.name.lower())

    overrides: dict[str, Any] = {}
    if args.admin:
        overrides["admin"] = True
    if args.debug:
        overrides["debug"] = True
    if args.expires is not None:
        overrides["expires"] = args.expires
    if args.not_before is not None:
        overrides["notBefore"] = args.not_before
    return issuer.set_options(overrides)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="wilddog-token",
        description="Mint signed Wilddog authentication tokens",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument("--uid", help="Subject identifier for the token")
    parser.add_argument(
        "--data", type=_parse_data, help="Extra token data as a JSON object"
    )
    parser.add_argument(
        "--admin", action="store_true", help="Issue an admin token (uid not required)"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Set the debug flag in the token"
    )
    parser.add_argument(
        "--expires", type=_parse_instant,
        help="Expiry as epoch seconds or ISO-8601",
    )
    parser.add_argument(
        "--not-before", type=_parse_instant, dest="not_before",
        help="Earliest valid time as epoch seconds or ISO-8601",
    )
    parser.add_argument(
        "--format", choices=[f.name.lower() for f in TokenFormat],
        help="Token format (default: env WILDDOG_TOKEN_FORMAT or 'current')",
    )
    parser.add_argument(
        "--profile", help="YAML issuance profile with format, data and options"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        token = _build_issuer(args).create()
    except (TokenError, ValueError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
