"""
Flow-graph models handed to the layout engine.

These are plain frozen values: built once per transform, never mutated.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

@dataclass(frozen=True)
class FlowNode:
    """A single node of the flow graph, identified by its `id`"""
    id: str
    value: Decimal
    label: str = ""
    group: Optional[str] = None

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"Node '{self.id}' has negative value {self.value}")
        if not self.label:
            # frozen dataclass, so bypass __setattr__
            object.__setattr__(self, "label", self.id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "value": float(self.value),
            "label": self.label,
            "group": self.group,
        }


@dataclass(frozen=True)
class FlowLink:
    """A directed, weighted edge between two node ids"""
    source: str
    target: str
    weight: Decimal

    def __post_init__(self):
        if self.weight < 0:
            raise ValueError(
                f"Link {self.source} -> {self.target} has negative weight {self.weight}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "value": float(self.weight),
        }

    def __repr__(self):
        return f"FlowLink({self.source} -> {self.target}, {self.weight})"


@dataclass(frozen=True)
class FlowGraph:
    """
    Validated nodes and links, ready for a layout engine.

    Only the Assembler creates these. Layout engines such as d3-sankey mutate
    the objects they are given, so hand them `to_dict()` rather than the
    graph itself.

    `orphans` lists node ids that have no links. They are kept in `nodes`
    but reported, and do not take part in equality.
    """
    nodes: Tuple[FlowNode, ...]
    links: Tuple[FlowLink, ...]
    orphans: Tuple[str, ...] = field(default=(), compare=False)

    def node(self, node_id: str) -> FlowNode:
        """
        Look up a node by id.

        Raises:
            KeyError: If no node has this id
        """
        for node in self.nodes:
            if node.id == node_id:
                return node
        raise KeyError(node_id)

    @property
    def node_ids(self) -> Tuple[str, ...]:
        return tuple(node.id for node in self.nodes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Build a fresh plain-data payload for the layout engine.

        Every call returns new dicts and lists, so the caller may mutate
        the result freely.
        """
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "links": [link.to_dict() for link in self.links],
        }

    def __repr__(self):
        return f"FlowGraph({len(self.nodes)} nodes, {len(self.links)} links)"
