import logging
from typing import Dict, List, Optional

from finance_sankey.classification.classifier import Classification
from finance_sankey.domain.errors import DuplicateNodeId
from finance_sankey.domain.graph import FlowNode
from finance_sankey.domain.models import FinancialRecord

logger = logging.getLogger(__name__)


class NodeBuilder:
    """
    Derives the five tiers of nodes from a classification.

    Tier order is fixed and drives the left-to-right reading of the layout:
    1. Inflow items
    2. Inflow categories (first-occurrence order)
    3. Hub
    4. Expense category
    5. Outflow items

    Node ids must be unique across all tiers. The first repeated id raises
    DuplicateNodeId instead of silently overwriting the earlier node.
    """

    def __init__(self, hub_name: str = "Institution", expense_category: str = "Operating Expense"):
        self.hub_name = hub_name
        self.expense_category = expense_category

    def build(self, classification: Classification) -> List[FlowNode]:
        """
        Build every node for the graph.

        Args:
            classification: Classified records

        Returns:
            Nodes in tier order

        Raises:
            DuplicateNodeId: If two nodes would share an id
        """
        nodes: List[FlowNode] = []
        # id -> record that introduced it (None for synthetic nodes)
        owners: Dict[str, Optional[FinancialRecord]] = {}

        def add(node: FlowNode, record: Optional[FinancialRecord] = None) -> None:
            if node.id in owners:
                clashing = [r for r in (owners[node.id], record) if r is not None]
                raise DuplicateNodeId(node.id, clashing)
            owners[node.id] = record
            nodes.append(node)

        for item in classification.inflow:
            add(FlowNode(id=item.name, value=item.magnitude, group=item.category), item.record)

        for category, total in classification.inflow_by_category().items():
            add(FlowNode(id=category, value=total, group=category))

        add(FlowNode(id=self.hub_name, value=classification.total_inflow))

        add(FlowNode(
            id=self.expense_category,
            value=classification.total_outflow,
            group=self.expense_category,
        ))

        for item in classification.outflow:
            add(FlowNode(id=item.name, value=item.magnitude, group=item.category), item.record)

        logger.debug("Built %d nodes", len(nodes))
        return nodes
