"""Tests for core.orchestrator.KontentSourceOrchestrator."""

import json
import os
from unittest.mock import MagicMock, patch

from conftest import FakeDeliveryClient

_BASE_ENV = {
    "KONTENT_PROJECT_ID": "project-1",
    "KONTENT_LANGUAGE_CODENAMES": "default, cs",
    "KONTENT_SECURE_API_KEY": "",
    "KONTENT_PREVIEW_API_KEY": "",
    "KONTENT_USE_PREVIEW": "false",
    "SAVE_JSON": "true",
    "DEBUG": "false",
    "PROVIDER_NAME": "Kontent_Source",
}


def _make_orchestrator(env_overrides=None, output_dir="/tmp/kontent_test_output"):
    env = dict(_BASE_ENV, OUTPUT_DIR=str(output_dir))
    if env_overrides:
        env.update(env_overrides)

    with patch.dict(os.environ, env, clear=True):
        from core.orchestrator import KontentSourceOrchestrator
        orchestrator = KontentSourceOrchestrator(env_file="/nonexistent/.env")
    return orchestrator


def test_config_loaded_from_environment():
    orch = _make_orchestrator()
    assert orch.project_id == "project-1"
    assert orch.language_codenames == ["default", "cs"]
    assert orch.use_preview is False
    assert orch.include_taxonomies is True


def test_validate_config_valid():
    assert _make_orchestrator().validate_config() is True


def test_validate_config_missing_project_id():
    assert _make_orchestrator({"KONTENT_PROJECT_ID": ""}).validate_config() is False


def test_validate_config_bad_languages():
    assert _make_orchestrator({"KONTENT_LANGUAGE_CODENAMES": " , "}).validate_config() is False
    assert _make_orchestrator({"KONTENT_LANGUAGE_CODENAMES": "en,en"}).validate_config() is False


def test_validate_config_preview_needs_key():
    orch = _make_orchestrator({"KONTENT_USE_PREVIEW": "true"})
    assert orch.validate_config() is False
    orch = _make_orchestrator({"KONTENT_USE_PREVIEW": "true", "KONTENT_PREVIEW_API_KEY": "key"})
    assert orch.validate_config() is True


def test_run_writes_nodes_and_results(tmp_path):
    orch = _make_orchestrator(output_dir=tmp_path)

    with patch.object(orch, "build_client", return_value=FakeDeliveryClient()):
        results = orch.run()

    assert results["success"] is True
    assert results["summary"]["nodes_created"] == 11
    assert results["summary"]["skipped"] == 0

    with open(results["json_path"]) as f:
        nodes = json.load(f)
    assert len(nodes) == 11

    results_path = os.path.join(orch.run_output.run_dir, "source_results.json")
    assert os.path.exists(results_path)


def test_run_records_api_failure(tmp_path):
    from core.exceptions import DeliveryApiError

    client = MagicMock()
    client.get_types.side_effect = DeliveryApiError("401 Unauthorized", status_code=401)
    orch = _make_orchestrator(output_dir=tmp_path)

    with patch.object(orch, "build_client", return_value=client):
        results = orch.run()

    assert results["success"] is False
    assert "401" in results["error"]

    with open(os.path.join(orch.run_output.run_dir, "source_results.json")) as f:
        assert json.load(f)["error"] == results["error"]
    assert not os.path.exists(os.path.join(orch.run_output.run_dir, "nodes.json"))
    client.get_items.assert_not_called()
