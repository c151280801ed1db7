"""Command-line entry point: rank grant programs for a business profile.

Usage:
    python -m grant_matcher.main PROFILE [--catalog PATH | --catalog-url URL]
                                         [--weights PATH] [--limit N] [--json]

The catalog source defaults to GRANT_MATCHER_CATALOG_PATH /
GRANT_MATCHER_CATALOG_URL and falls back to the built-in seed catalog.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .catalog import (
    BaseCatalogProvider,
    CatalogError,
    FileCatalogProvider,
    HttpCatalogProvider,
    InMemoryCatalogProvider,
)
from .config import Config, load_config
from .matcher import load_weights
from .models import BusinessProfile, MatchResult
from .service import MatchingService

# Configure logging (stderr, so stdout carries only match output)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)]
)
logger = logging.getLogger(__name__)


def build_provider(
    config: Config,
    catalog_path: Optional[str] = None,
    catalog_url: Optional[str] = None,
) -> BaseCatalogProvider:
    """Pick the catalog provider. CLI arguments win over configuration."""
    path = catalog_path or (None if catalog_url else config.catalog_path)
    url = catalog_url or (None if catalog_path else config.catalog_url)

    if path:
        return FileCatalogProvider(path)
    if url:
        return HttpCatalogProvider(url, timeout=config.request_timeout_seconds)
    logger.info("No catalog source configured, using seed catalog")
    return InMemoryCatalogProvider()


def load_profile(filepath: str) -> BusinessProfile:
    """Load a business profile from a JSON or YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the format is unsupported or the profile is invalid
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {filepath}")

    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix == '.json':
            data = json.load(f)
        elif path.suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported profile format: {path.suffix}. Use .json, .yaml, or .yml")

    return BusinessProfile.model_validate(data)


def format_results(results: List[MatchResult]) -> str:
    """Render ranked matches as plain text."""
    if not results:
        return "No matching programs found."

    lines = []
    for rank, match in enumerate(results, start=1):
        program = match.program
        lines.append(f"{rank}. {program.name or program.id} [{match.match_score}%]")
        details = [
            f"{label}: {value}"
            for label, value in (
                ("Provider", program.provider),
                ("Funding", program.funding_amount),
                ("Deadline", program.deadline),
            )
            if value
        ]
        if details:
            lines.append("   " + " | ".join(details))
        for reason in match.reasons:
            lines.append(f"   - {reason}")
    return "\n".join(lines)


async def run_matching(
    profile: BusinessProfile,
    provider: BaseCatalogProvider,
    weights_path: Optional[str] = None,
) -> List[MatchResult]:
    """Run one matching request end to end."""
    weights = load_weights(weights_path)
    service = MatchingService(provider, weights)
    return await service.find_matches(profile)


def non_negative_int(value: str) -> int:
    """argparse type for counts that may be zero but not negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="grant-matcher",
        description="Rank funding programs for a business profile.",
    )
    parser.add_argument("profile", help="Business profile file (.json, .yaml)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--catalog", dest="catalog_path", help="Catalog file (.json, .yaml)")
    source.add_argument("--catalog-url", dest="catalog_url", help="Catalog HTTP endpoint")
    parser.add_argument("--weights", dest="weights_path", help="Scoring weights file (.json, .yaml)")
    parser.add_argument("--limit", type=non_negative_int, default=None, help="Show only the top N matches")
    parser.add_argument("--json", action="store_true", help="Print matches as JSON")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    logging.getLogger().setLevel(config.log_level)

    try:
        profile = load_profile(args.profile)
        provider = build_provider(config, args.catalog_path, args.catalog_url)
        results = asyncio.run(
            run_matching(profile, provider, args.weights_path or config.weights_path)
        )
    except (CatalogError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Matching failed: {e}")
        return 1

    if args.limit is not None:
        results = results[:args.limit]

    if args.json:
        print(json.dumps([r.model_dump(mode="json") for r in results], indent=2))
    else:
        print(format_results(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
