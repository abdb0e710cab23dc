"""
Errors raised while turning financial records into a flow graph.

Every fatal condition stops graph construction; no partial graph is
returned. `OrphanNode` is the only recoverable condition and is a warning,
not an exception that is ever raised.
"""
from typing import Any, Mapping, Optional, Sequence

from finance_sankey.domain.graph import FlowLink
from finance_sankey.domain.models import FinancialRecord


class FlowGraphError(Exception):
    """Base class for every fatal flow-graph error"""


class DuplicateNodeId(FlowGraphError):
    """Two nodes would share the same id"""

    def __init__(self, node_id: str, records: Sequence[FinancialRecord] = ()):
        self.node_id = node_id
        self.records = tuple(records)
        message = f"Duplicate node id '{node_id}'"
        if self.records:
            names = ", ".join(repr(r) for r in self.records)
            message += f" (records: {names})"
        super().__init__(message)


class DanglingLinkReference(FlowGraphError):
    """A link points at a node id that does not exist"""

    def __init__(self, link: FlowLink, missing: str):
        self.link = link
        self.missing = missing
        super().__init__(
            f"Link {link.source} -> {link.target} references unknown node '{missing}'"
        )


class EmptyInput(FlowGraphError):
    """The classified input has no inflow or no outflow records"""

    def __init__(self, inflow_count: int, outflow_count: int):
        self.inflow_count = inflow_count
        self.outflow_count = outflow_count
        missing = []
        if inflow_count == 0:
            missing.append("inflow")
        if outflow_count == 0:
            missing.append("outflow")
        super().__init__(
            f"Cannot build a flow graph without {' and '.join(missing)} records "
            f"(inflow={inflow_count}, outflow={outflow_count})"
        )


class InvalidRecord(FlowGraphError, ValueError):
    """An input entry cannot be turned into a FinancialRecord"""

    def __init__(self, index: int, entry: Optional[Mapping[str, Any]], reason: str):
        self.index = index
        self.entry = entry
        self.reason = reason
        super().__init__(f"Invalid record at position {index}: {reason} ({entry!r})")


class OrphanNode(UserWarning):
    """A node with neither incoming nor outgoing links. Reported, not fatal."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' has no links")
