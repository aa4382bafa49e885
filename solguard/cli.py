"""
SolGuard - Command Line Runner

Usage:
    python -m solguard.cli --example > facts.json
    python -m solguard.cli assess --facts facts.json --output result.json
    python -m solguard.cli scan <MINT> [--force]
    python -m solguard.cli autofeed [--cycles N]
    python -m solguard.cli init-db
"""

import argparse
import json

from .models import ScanFacts
from .risk_engine import assess_risk


EXAMPLE_FACTS = {
    "inspection": {
        "mint_authority_active": False,
        "freeze_authority_active": False,
        "metadata_mutable": True,
        "liquidity_locked_pct": 35.0,
        "concentration_risk_signals": [
            {"name": "Top 10 holders high ownership", "description": "Top holders own 62% of supply", "level": "warn"},
            {"name": "Low Liquidity", "description": "Low amount of liquidity in the pool", "level": "warn"}
        ],
        "danger_signals": [],
        "age_seconds": 7200,
        "source_tag": "pump.fun"
    },
    "deployer_history": {
        "previous_rug_count": 0,
        "total_prior_token_count": 3,
        "funding_source": {"address": "FundingWallet1111111111111111111111111111111", "source_type": "unknown", "amount": 0.05}
    }
}


def print_assessment(assessment) -> None:
    """Print a human-readable assessment summary."""
    print("\n" + "=" * 60)
    print(f"RISK ASSESSMENT: {assessment.status.value} {assessment.score}/100 (profile: {assessment.profile})")
    print("=" * 60)

    print("\nBreakdown:")
    for factor, subscore in assessment.breakdown.items():
        print(f"  {factor:<15} {subscore:>3}")

    if assessment.kill_switch_flags:
        print("\nKill switches:")
        for flag in assessment.kill_switch_flags:
            print(f"  - {flag.value}")

    print("\nReasons:")
    for reason in assessment.reasons:
        print(f"  - {reason}")


def write_output(data, output_path: str = None) -> None:
    output_json = json.dumps(data, indent=2, default=str)

    if output_path:
        with open(output_path, "w") as f:
            f.write(output_json)
        print(f"\nResults written to: {output_path}")
    else:
        print("\n" + "=" * 60)
        print("FINAL JSON OUTPUT")
        print("=" * 60)
        print(output_json)


def cmd_assess(args) -> int:
    facts = ScanFacts.from_json_file(args.facts)
    assessment = assess_risk(facts.inspection, facts.deployer_history)

    print_assessment(assessment)
    write_output(assessment.to_dict(), args.output)
    return 0


def cmd_scan(args) -> int:
    from .monitoring.core.scanner import scan_token
    from .monitoring.core.alerts import maybe_alert

    result = scan_token(args.mint, force=args.force)
    if not result:
        print(f"No result for {args.mint} (already scanned or no data)")
        return 1

    result["alerted"] = maybe_alert(result)
    write_output(result, args.output)
    return 0


def cmd_autofeed(args) -> int:
    from .monitoring.core.autofeed import run_autofeed

    run_autofeed(max_cycles=args.cycles)
    return 0


def cmd_init_db(args) -> int:
    from .monitoring.core.db import init_schema

    init_schema()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SolGuard - Token Rug-Pull Risk Scanner")
    parser.add_argument("--example", action="store_true", help="Print example facts file and exit")

    subparsers = parser.add_subparsers(dest="command")

    assess = subparsers.add_parser("assess", help="Score a JSON facts file offline")
    assess.add_argument("--facts", "-f", type=str, required=True, help="Path to JSON facts file")
    assess.add_argument("--output", "-o", type=str, help="Path to output JSON file")
    assess.set_defaults(func=cmd_assess)

    scan = subparsers.add_parser("scan", help="Fetch, score and store one token")
    scan.add_argument("mint", type=str, help="Token mint address")
    scan.add_argument("--force", action="store_true", help="Rescan even if already stored")
    scan.add_argument("--output", "-o", type=str, help="Path to output JSON file")
    scan.set_defaults(func=cmd_scan)

    autofeed = subparsers.add_parser("autofeed", help="Poll DexScreener and scan new tokens")
    autofeed.add_argument("--cycles", type=int, default=None, help="Stop after N poll cycles")
    autofeed.set_defaults(func=cmd_autofeed)

    init_db = subparsers.add_parser("init-db", help="Create database tables")
    init_db.set_defaults(func=cmd_init_db)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.example:
        print(json.dumps(EXAMPLE_FACTS, indent=2))
        return 0

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
