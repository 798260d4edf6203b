#!/usr/bin/env python3
"""
Create or fetch a BTCPay payment request from the command line.

Examples:
    python scripts/run_payment_request.py create --amount 10.5 --currency USD --title "Invoice 1" --expiry-days 7
    python scripts/run_payment_request.py get <payment-request-id>

Connection settings come from config/btcpay_config.yml and BTCPAY_* env vars.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import httpx

# Add repo root to path so `btcpay.*` imports work when running from scripts/
sys.path.insert(0, str(Path(__file__).parent.parent))

from btcpay.clients.real_http import HTTPTransport, PaymentRequestsClient
from btcpay.contracts.payment_requests import PaymentRequest, PaymentRequestRequest
from btcpay.errors import BTCPayError
from btcpay.utils.config_loader import load_btcpay_config


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create or fetch BTCPay payment requests")
    parser.add_argument("--config", type=Path, default=None, help="Path to BTCPay config YAML (default: config/btcpay_config.yml)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Create a payment request")
    create.add_argument("--amount", type=float, required=True)
    create.add_argument("--currency", required=True, help="ISO 4217 code, e.g. USD or BTC")
    create.add_argument("--title", required=True)
    create.add_argument("--description", default=None)
    create.add_argument("--email", default=None)
    create.add_argument("--expiry-days", type=int, default=None)
    create.add_argument("--allow-custom-amounts", action="store_true")

    get = sub.add_parser("get", help="Fetch a payment request by id")
    get.add_argument("id")

    return parser


def request_from_args(args: argparse.Namespace) -> PaymentRequestRequest:
    request = PaymentRequestRequest(
        amount=args.amount,
        currency=args.currency,
        title=args.title,
        description=args.description,
        email=args.email,
        allow_custom_payment_amounts=True if args.allow_custom_amounts else None,
    )
    if args.expiry_days is not None:
        request.set_expiry_days(args.expiry_days)
    return request


async def run(args: argparse.Namespace) -> PaymentRequest:
    config = load_btcpay_config(args.config)
    async with HTTPTransport.from_config(config) as transport:
        client = PaymentRequestsClient(transport)
        if args.command == "create":
            return await client.create_payment_request(request_from_args(args))
        return await client.get_payment_request(args.id)


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        result = asyncio.run(run(args))
    except (BTCPayError, httpx.HTTPError, FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result.to_payload(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
