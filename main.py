import argparse
import json
import logging
import sys
from datetime import date

from readiness.config_loader import load_config
from readiness.engine import compute_matches, compute_score
from readiness.exceptions import EngineException
from readiness.serialization import to_payload

logger = logging.getLogger(__name__)


def read_json(path):
    """Read a JSON input file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_payload(payload, output_path=None):
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        logger.info(f"Wrote report to {output_path}")
    else:
        print(text)


def run(args):
    config = load_config(args.config)

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format
    )

    profile = read_json(args.profile)
    verification = read_json(args.verification) if args.verification else None
    site_signals = read_json(args.site_signals) if args.site_signals else None
    as_of = date.fromisoformat(args.as_of) if args.as_of else None

    result = compute_score(profile, verification, site_signals, config=config, as_of=as_of)
    logger.info(f"Overall readiness {result.overall_score} ({result.confidence_level.value} confidence)")

    payload = {"scoring": to_payload(result)}

    if args.partners:
        partners = read_json(args.partners)
        recommendations = compute_matches(partners, profile, result, config=config)
        payload["partnerRecommendations"] = to_payload(recommendations)

    write_payload(payload, args.output)


def main():
    parser = argparse.ArgumentParser(description="UK market readiness scoring and partner matching")
    parser.add_argument('--profile', type=str, required=True,
                        help='Path to the business profile JSON')
    parser.add_argument('--verification', type=str,
                        help='Path to a company registry verification JSON')
    parser.add_argument('--site-signals', type=str,
                        help='Path to extracted website signals JSON')
    parser.add_argument('--partners', type=str,
                        help='Path to a JSON list of partner records')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config.yaml (default: READINESS_CONFIG or ./config.yaml)')
    parser.add_argument('--as-of', type=str, default=None,
                        help='Reference date (YYYY-MM-DD) for company age, default today')
    parser.add_argument('--output', type=str, default=None,
                        help='Write the JSON report here instead of stdout')
    args = parser.parse_args()

    try:
        run(args)
    except (EngineException, OSError, ValueError) as e:
        logger.error(f"Readiness run failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
