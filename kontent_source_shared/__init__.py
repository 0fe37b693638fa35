"""
kontent-source-shared — Shared building blocks for the Kontent source connector.

This package provides the pieces that sit outside the decoration pipeline:

  run_output.py   Per-run output folder (YYYYMMDD_HHMM_<provider>) and JSON
                  file writing.
  node_store.py   Host-framework adapter: deterministic node ID generation
                  and an in-memory node registry that can be dumped to JSON.
"""

from .run_output import RunOutput
from .node_store import NodeStore, NodeRegistrationError, create_node_id
