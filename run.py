#!/usr/bin/env python3
"""
Kontent Source Connector — Entry Point.

Pulls content types, items (per language) and taxonomies from a Kentico
Kontent project, decorates them into graph nodes with resolved relations and
saves the nodes as JSON. Configuration is read from a .env file.

The pipeline (managed by KontentSourceOrchestrator) performs 4 steps:
  1. Fetch content types, items and taxonomies from the Delivery API
  2. Decorate nodes (language variants, type/item links, linked items,
     rich-text linked items)
  3. Create nodes in the node store
  4. Save nodes.json and source_results.json

Usage:
    python run.py                          # Fetch and save JSON
    python run.py --debug                  # Verbose output
    python run.py --preview                # Read from the Preview API
    python run.py --languages en-US,cs-CZ  # Override language codenames
    python run.py --version                # Show version
    python run.py --env /path              # Use alternate .env file
"""

import sys
import argparse
import logging
from pathlib import Path

from core import KontentSourceOrchestrator
from core.orchestrator import parse_language_codenames

VERSION_FILE = Path(__file__).resolve().parent / "VERSION"
VERSION = VERSION_FILE.read_text().strip() if VERSION_FILE.exists() else "unknown"


def main():
    """Parse CLI arguments and run the source pipeline."""
    parser = argparse.ArgumentParser(
        description="Kontent Source - Build graph nodes from Kentico Kontent content"
    )
    parser.add_argument("--env", "-e", default="./.env", help="Path to .env file")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--preview", action="store_true", help="Read from the Preview Delivery API")
    parser.add_argument("--languages", "-l", help="Comma-separated language codenames, default first")
    parser.add_argument("--version", "-v", action="store_true", help="Show version and exit")

    args = parser.parse_args()

    if args.version:
        print(f"kontent-source {VERSION}")
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(name)s - %(levelname)s - %(message)s'
    )

    orchestrator = KontentSourceOrchestrator(env_file=args.env)

    # CLI overrides on top of .env values
    if args.debug:
        orchestrator.debug = True
    if args.preview:
        orchestrator.use_preview = True
    if args.languages:
        orchestrator.language_codenames = parse_language_codenames(args.languages)

    print(f"\n{'='*60}")
    print(f"KONTENT SOURCE v{VERSION}")
    print("="*60)
    print(f"Project: {orchestrator.project_id}")
    print(f"Languages: {', '.join(orchestrator.language_codenames)}")
    print(f"Preview: {'Enabled' if orchestrator.use_preview else 'Disabled'}")

    if not orchestrator.validate_config():
        sys.exit(1)

    results = orchestrator.run()
    orchestrator.print_summary(results)

    if not results.get("success"):
        sys.exit(1)


if __name__ == "__main__":
    main()
