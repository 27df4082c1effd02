#!/usr/bin/env python3
"""
Exercise the Blockthrough adapter from the command line.

Usage:
    python run_adapter.py build samples/bidder_request.yaml
    python run_adapter.py interpret samples/bidder_request.yaml samples/response.json
    python run_adapter.py syncs --gdpr-applies --gdpr-consent CONSENT --usp 1YNN
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

from src.btbidder.adapter import BlockthroughAdapter
from src.btbidder.config import AdapterConfigError, load_adapter_config
from src.btbidder.models import BidderRequest, ServerResponse, SyncOptions
from src.btbidder.privacy import GDPRConsent, GPPConsent


def load_document(path: str) -> dict:
    """Load a YAML or JSON document (JSON is valid YAML)."""
    with open(Path(path)) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping")
    return data


def build_adapter(args: argparse.Namespace) -> BlockthroughAdapter:
    config = load_adapter_config(args.config)
    return BlockthroughAdapter(config)


def cmd_build(args: argparse.Namespace) -> int:
    adapter = build_adapter(args)
    bidder_request = BidderRequest.from_dict(load_document(args.bidder_request))

    valid = [bid for bid in bidder_request.bids if adapter.is_bid_request_valid(bid)]
    requests = adapter.build_requests(valid, bidder_request)

    print(json.dumps([request.to_dict() for request in requests], indent=2))
    return 0 if requests else 1


def cmd_interpret(args: argparse.Namespace) -> int:
    adapter = build_adapter(args)
    bidder_request = BidderRequest.from_dict(load_document(args.bidder_request))
    response = ServerResponse(body=load_document(args.response))

    valid = [bid for bid in bidder_request.bids if adapter.is_bid_request_valid(bid)]
    requests = adapter.build_requests(valid, bidder_request)
    request = requests[0] if requests else None

    bids = adapter.interpret_response(response, request)
    print(json.dumps([bid.to_dict() for bid in bids], indent=2))
    return 0


def cmd_syncs(args: argparse.Namespace) -> int:
    adapter = build_adapter(args)

    gdpr = None
    if args.gdpr_applies or args.gdpr_consent is not None:
        gdpr = GDPRConsent(gdpr_applies=args.gdpr_applies, consent_string=args.gdpr_consent)
    gpp = None
    if args.gpp is not None:
        gpp = GPPConsent(gpp_string=args.gpp, applicable_sections=tuple(args.gpp_sid or ()))

    syncs = adapter.get_user_syncs(
        SyncOptions(iframe_enabled=not args.no_iframe),
        [],
        gdpr_consent=gdpr,
        usp_consent=args.usp,
        gpp_consent=gpp,
    )
    print(json.dumps([sync.to_dict() for sync in syncs], indent=2))
    return 0


def main():
    parser = argparse.ArgumentParser(description="Run the Blockthrough bid adapter")
    parser.add_argument("--config", default=None, help="Adapter YAML config file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Build the OpenRTB request")
    build.add_argument("bidder_request", help="Bidder request YAML/JSON file")
    build.set_defaults(func=cmd_build)

    interpret = subparsers.add_parser("interpret", help="Interpret an OpenRTB response")
    interpret.add_argument("bidder_request", help="Bidder request YAML/JSON file")
    interpret.add_argument("response", help="OpenRTB response YAML/JSON file")
    interpret.set_defaults(func=cmd_interpret)

    syncs = subparsers.add_parser("syncs", help="Print user-sync URLs")
    syncs.add_argument("--no-iframe", action="store_true", help="Disable iframe syncing")
    syncs.add_argument("--gdpr-applies", action="store_true", help="GDPR applies")
    syncs.add_argument("--gdpr-consent", default=None, help="TCF consent string")
    syncs.add_argument("--usp", default=None, help="US Privacy string")
    syncs.add_argument("--gpp", default=None, help="GPP string")
    syncs.add_argument("--gpp-sid", type=int, nargs="*", help="Applicable GPP sections")
    syncs.set_defaults(func=cmd_syncs)

    args = parser.parse_args()

    try:
        sys.exit(args.func(args))
    except (AdapterConfigError, OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
