"""
Core package — The Kontent source pipeline.

  kontent_client.py    HTTP access to the Delivery API
  rich_text.py         Rich-text HTML resolution and image lists
  elements.py          Typed element parsing at the fetch boundary
  normalize.py         Node construction and relation-field helpers
  validation.py        Configuration and item structure checks
  type_nodes.py        Content type nodes
  item_nodes.py        Content item nodes per language
  taxonomy_nodes.py    Taxonomy nodes
  node_set.py          ContentNodeSet snapshot and decoration reports
  decorators/          The four relation-building passes
  node_emitter.py      Node creation through the host API
  source_nodes.py      Host-facing entry point running the whole pipeline
  orchestrator.py      Standalone run with output files
"""

from .orchestrator import KontentSourceOrchestrator
from .kontent_client import KontentDeliveryClient
from .source_nodes import SourceResult, source_nodes
from .node_set import ContentNodeSet, DecorationReport, ItemOutcome
from .exceptions import (
    ConfigurationError,
    DeliveryApiError,
    ItemStructureError,
    KontentSourceError,
)
