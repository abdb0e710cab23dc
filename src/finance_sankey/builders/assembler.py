import logging
from typing import Iterable, List, Set

from finance_sankey.domain.errors import DanglingLinkReference, DuplicateNodeId, OrphanNode
from finance_sankey.domain.graph import FlowGraph, FlowLink, FlowNode

logger = logging.getLogger(__name__)


class FlowGraphAssembler:
    """
    Packages nodes and links into one validated FlowGraph.

    Checks, in order:
    1. Node ids are unique (DuplicateNodeId)
    2. Every link endpoint names an existing node (DanglingLinkReference)
    3. Every node has at least one link (OrphanNode, logged and kept)
    """

    def assemble(self, nodes: Iterable[FlowNode], links: Iterable[FlowLink]) -> FlowGraph:
        """
        Validate and freeze nodes and links.

        Args:
            nodes: Nodes in tier order
            links: Links in emission order

        Returns:
            The FlowGraph; node and link order is preserved

        Raises:
            DuplicateNodeId: If two nodes share an id
            DanglingLinkReference: If a link points at an unknown node
        """
        nodes = tuple(nodes)
        links = tuple(links)

        node_ids: Set[str] = set()
        for node in nodes:
            if node.id in node_ids:
                raise DuplicateNodeId(node.id)
            node_ids.add(node.id)

        connected: Set[str] = set()
        for link in links:
            for endpoint in (link.source, link.target):
                if endpoint not in node_ids:
                    raise DanglingLinkReference(link, endpoint)
            connected.add(link.source)
            connected.add(link.target)

        orphans = self.find_orphans(nodes, connected)
        for warning in orphans:
            logger.warning("%s; keeping it in the graph", warning)

        return FlowGraph(
            nodes=nodes,
            links=links,
            orphans=tuple(w.node_id for w in orphans),
        )

    @staticmethod
    def find_orphans(nodes: Iterable[FlowNode], connected: Set[str]) -> List[OrphanNode]:
        """Nodes whose id appears in no link, in node order"""
        return [OrphanNode(node.id) for node in nodes if node.id not in connected]
