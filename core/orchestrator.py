"""
Kontent Source Orchestrator — Standalone run of the Kontent source pipeline.

Inside a host framework the connector is driven through
core.source_nodes.source_nodes(). This orchestrator runs the same pipeline
on its own, with NodeStore standing in for the host, and writes the
resulting nodes to disk:

  Step 1: FETCH CONTENT
      Content types, items for every configured language (default first)
      and taxonomies, each normalized into node records.

  Step 2: DECORATE NODES
      Language variants, type/item links, linked items elements and
      rich-text linked items, in that order.

  Step 3: CREATE NODES
      Every node is registered with the node store, batch by batch.

  Step 4: SAVE OUTPUT
      nodes.json in a timestamped output directory. source_results.json is
      written there even when an earlier step fails.

Configuration:
    All settings are loaded from environment variables (typically via .env).
    Required: KONTENT_PROJECT_ID. See config/settings.py for defaults.

Typical usage:
    orchestrator = KontentSourceOrchestrator(env_file="./.env")
    if orchestrator.validate_config():
        results = orchestrator.run()
        orchestrator.print_summary(results)
"""

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Any, List

from dotenv import load_dotenv

from kontent_source_shared import NodeStore, RunOutput

from config import DEFAULT_SETTINGS

from .exceptions import ConfigurationError
from .kontent_client import KontentDeliveryClient
from .source_nodes import SourceResult, decorate, emit, fetch_node_set
from .validation import validate_language_codenames


def _env_flag(name: str) -> bool:
    return os.getenv(name, str(DEFAULT_SETTINGS[name])).lower() == "true"


def parse_language_codenames(value: str) -> List[str]:
    """Split a comma-separated language list, dropping surrounding blanks."""
    return [codename.strip() for codename in value.split(",") if codename.strip()]


class KontentSourceOrchestrator:
    """Orchestrates a standalone Kontent source run.

    Attributes:
        project_id: Kontent project ID.
        secure_api_key: Secure-access Delivery API key (optional).
        preview_api_key: Preview Delivery API key (needed when use_preview).
        use_preview: Read unpublished content from the Preview API.
        language_codenames: Ordered language codenames, default language first.
        include_taxonomies: Whether to create taxonomy nodes.
        provider_name: Label used in output folder naming.
        save_json: Whether to write nodes.json.
        debug: Whether to enable verbose output.
        request_timeout: Per-request HTTP timeout in seconds.
        run_output: This run's timestamped output folder.
    """

    def __init__(self, env_file: str = "./.env"):
        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path)
            print(f"Loaded configuration from: {env_file}")
        else:
            print(f"Warning: {env_file} not found, using defaults/environment")

        self.project_id = os.getenv("KONTENT_PROJECT_ID", "")
        self.secure_api_key = os.getenv("KONTENT_SECURE_API_KEY", "")
        self.preview_api_key = os.getenv("KONTENT_PREVIEW_API_KEY", "")
        self.use_preview = _env_flag("KONTENT_USE_PREVIEW")
        self.include_taxonomies = _env_flag("KONTENT_INCLUDE_TAXONOMIES")
        self.language_codenames = parse_language_codenames(
            os.getenv("KONTENT_LANGUAGE_CODENAMES", DEFAULT_SETTINGS["KONTENT_LANGUAGE_CODENAMES"])
        )

        self.provider_name = os.getenv("PROVIDER_NAME", DEFAULT_SETTINGS["PROVIDER_NAME"])
        output_dir = os.getenv("OUTPUT_DIR", DEFAULT_SETTINGS["OUTPUT_DIR"])

        self.save_json = _env_flag("SAVE_JSON")
        self.debug = _env_flag("DEBUG")
        self.request_timeout = int(os.getenv("REQUEST_TIMEOUT", str(DEFAULT_SETTINGS["REQUEST_TIMEOUT"])))

        self.run_output = RunOutput(output_dir, self.provider_name)

    def validate_config(self) -> bool:
        """Validate that all required configuration values are present.

        Checks:
            - KONTENT_PROJECT_ID is set
            - KONTENT_LANGUAGE_CODENAMES is a non-empty list without duplicates
            - KONTENT_PREVIEW_API_KEY is set when preview mode is on

        Returns:
            True if the configuration is usable, False otherwise. Prints a
            message for each problem found.
        """
        errors = []
        if not self.project_id:
            errors.append("KONTENT_PROJECT_ID is required")

        try:
            validate_language_codenames(self.language_codenames)
        except ConfigurationError as e:
            errors.append(f"KONTENT_LANGUAGE_CODENAMES is invalid: {e}")

        if self.use_preview and not self.preview_api_key:
            errors.append("KONTENT_PREVIEW_API_KEY is required for preview mode")

        if errors:
            print("\nConfiguration Errors:")
            for err in errors:
                print(f"  - {err}")
            return False
        return True

    def build_client(self) -> KontentDeliveryClient:
        return KontentDeliveryClient(
            project_id=self.project_id,
            secure_api_key=self.secure_api_key,
            preview_api_key=self.preview_api_key,
            use_preview=self.use_preview,
            timeout=self.request_timeout,
            debug=self.debug,
        )

    def run(self) -> Dict[str, Any]:
        """Execute the full 4-step pipeline.

        Returns:
            A dict containing:
                - started_at/completed_at: ISO timestamps
                - connector: "kontent-source"
                - config: Project ID, languages, preview setting
                - success: True if all steps completed without error
                - summary: Node counts per kind and skipped item count
                - reports: Per-pass decoration reports
                - json_path: Path to saved nodes (if save_json=True)
                - error: Error message (if success=False)
        """
        results = {
            "started_at": datetime.now(timezone.utc).isoformat(),
            "connector": "kontent-source",
            "config": {
                "project_id": self.project_id,
                "language_codenames": self.language_codenames,
                "use_preview": self.use_preview,
                "include_taxonomies": self.include_taxonomies,
            },
            "success": False,
        }

        try:
            store = NodeStore()
            client = self.build_client()

            print(f"\n{'='*60}")
            print("STEP 1: FETCH CONTENT")
            print("="*60)
            node_set, reports = fetch_node_set(
                client, self.language_codenames, store.create_node_id, self.include_taxonomies
            )
            print(f"  Content types: {len(node_set.type_nodes)}")
            print(f"  Items ({node_set.default_language}): {len(node_set.default_items)}")
            for language, nodes in node_set.language_items.items():
                print(f"  Items ({language}): {len(nodes)}")
            print(f"  Taxonomies: {len(node_set.taxonomy_nodes)}")

            print(f"\n{'='*60}")
            print("STEP 2: DECORATE NODES")
            print("="*60)
            node_set, decoration_reports = decorate(node_set)
            reports.extend(decoration_reports)
            for report in decoration_reports:
                print(f"  {report.decorator}: {len(report.decorated)} decorated, "
                      f"{len(report.skipped)} skipped")

            print(f"\n{'='*60}")
            print("STEP 3: CREATE NODES")
            print("="*60)
            created = emit(node_set, store.create_node)
            print(f"  Nodes created: {len(store)}")

            source_result = SourceResult(node_set=node_set, reports=reports, created=created)

            print(f"\n{'='*60}")
            print("STEP 4: SAVE OUTPUT")
            print("="*60)
            if self.save_json:
                json_path = self.run_output.path("nodes.json")
                store.dump(json_path)
                results["json_path"] = json_path
                print(f"  Saved nodes: {json_path}")

            results["success"] = True
            results["summary"] = {
                "types": len(node_set.type_nodes),
                "items": len(node_set.all_items()),
                "taxonomies": len(node_set.taxonomy_nodes),
                "nodes_created": len(store),
                "skipped": source_result.skipped,
            }
            results.update(source_result.to_dict())

        except Exception as e:
            results["error"] = str(e)
            print(f"\n  ERROR: {e}")
            if self.debug:
                import traceback
                traceback.print_exc()

        results["completed_at"] = datetime.now(timezone.utc).isoformat()

        results_path = self.run_output.write_json("source_results.json", results)
        print(f"\n  Results saved to: {results_path}")

        return results

    def print_summary(self, results: Dict):
        """Print a human-readable execution summary."""
        print(f"\n{'='*60}")
        print("SOURCING COMPLETE")
        print("="*60)
        print(f"Status: {'SUCCESS' if results.get('success') else 'FAILED'}")

        summary = results.get("summary", {})
        if summary:
            print(f"Content types: {summary.get('types', 0)}")
            print(f"Items: {summary.get('items', 0)}")
            print(f"Taxonomies: {summary.get('taxonomies', 0)}")
            print(f"Nodes created: {summary.get('nodes_created', 0)}")
            print(f"Skipped: {summary.get('skipped', 0)}")

        if results.get("error"):
            print(f"Error: {results['error']}")
