import logging
from typing import List

from finance_sankey.classification.classifier import Classification
from finance_sankey.domain.graph import FlowLink

logger = logging.getLogger(__name__)


class LinkBuilder:
    """
    Derives the weighted links between tiers.

    Inflow goes item -> category -> hub so category subtotals show up as
    their own checkpoint, then hub -> expense category -> item.

    Weights are the normalized magnitudes from classification, so each
    link into or out of a category, the hub or the expense category
    carries exactly that node's value.
    """

    def __init__(self, hub_name: str = "Institution", expense_category: str = "Operating Expense"):
        self.hub_name = hub_name
        self.expense_category = expense_category

    def build(self, classification: Classification) -> List[FlowLink]:
        """
        Build every link for the graph.

        Returns:
            Links in order: item -> category, category -> hub,
            hub -> expense category, expense category -> item
        """
        links: List[FlowLink] = [
            FlowLink(source=item.name, target=item.category, weight=item.magnitude)
            for item in classification.inflow
        ]

        for category, total in classification.inflow_by_category().items():
            links.append(FlowLink(source=category, target=self.hub_name, weight=total))

        links.append(FlowLink(
            source=self.hub_name,
            target=self.expense_category,
            weight=classification.total_outflow,
        ))

        links.extend(
            FlowLink(source=self.expense_category, target=item.name, weight=item.magnitude)
            for item in classification.outflow
        )

        logger.debug("Built %d links", len(links))
        return links
