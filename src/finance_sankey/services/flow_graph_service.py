import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple

from finance_sankey.builders.assembler import FlowGraphAssembler
from finance_sankey.builders.links import LinkBuilder
from finance_sankey.builders.nodes import NodeBuilder
from finance_sankey.classification import Classification, RecordClassifier
from finance_sankey.config.settings import TransformSettings
from finance_sankey.domain.errors import EmptyInput
from finance_sankey.domain.graph import FlowGraph
from finance_sankey.domain.models import FinancialRecord
from finance_sankey.parsers.factory import ParserFactory
from finance_sankey.services.models import FlowReport

logger = logging.getLogger(__name__)


def _transform(
    records: Iterable[FinancialRecord],
    hub_name: str,
    expense_category: str,
) -> Tuple[Classification, FlowGraph]:
    classification = RecordClassifier(expense_category).classify(records)

    if not classification.inflow or not classification.outflow:
        raise EmptyInput(len(classification.inflow), len(classification.outflow))

    nodes = NodeBuilder(hub_name, expense_category).build(classification)
    links = LinkBuilder(hub_name, expense_category).build(classification)

    graph = FlowGraphAssembler().assemble(nodes, links)
    return classification, graph


def build_flow_graph(
    records: Iterable[FinancialRecord],
    hub_name: str = "Institution",
    expense_category: str = "Operating Expense",
) -> FlowGraph:
    """
    Turn financial records into a validated flow graph.

    Runs classification, node and link building, then assembly. Pure: no
    state survives between calls, and identical input gives an equal graph.

    Args:
        records: Line items for one fiscal year, in report order
        hub_name: Id of the central node
        expense_category: Category that marks outflow records and names
            the expense-category node

    Returns:
        The assembled FlowGraph

    Raises:
        EmptyInput: If there are no inflow or no outflow records
        DuplicateNodeId: If two nodes would share an id
        DanglingLinkReference: If a link points at an unknown node

    Example:
        ```
        >>> graph = build_flow_graph([
        ...     FinancialRecord("Tuition", Decimal("100"), "Operating Revenue"),
        ...     FinancialRecord("Salaries", Decimal("-60"), "Operating Expense"),
        ... ], hub_name="Inst")
        >>> [n.id for n in graph.nodes]
        ['Tuition', 'Operating Revenue', 'Inst', 'Operating Expense', 'Salaries']
        ```
    """
    _, graph = _transform(records, hub_name, expense_category)
    return graph


class FlowGraphService:
    """Builds flow reports from records or report documents"""

    def __init__(self, settings: Optional[TransformSettings] = None):
        self.settings = settings or TransformSettings()

    def build(self, records: Iterable[FinancialRecord], source: str = "") -> FlowReport:
        """
        Build a flow report from records already in memory.

        Args:
            records: Line items for one fiscal year
            source: Where the records came from, for the summary

        Returns:
            A FlowReport wrapping the graph
        """
        classification, graph = _transform(
            records,
            hub_name=self.settings.hub_name,
            expense_category=self.settings.expense_category,
        )

        return FlowReport(
            graph=graph,
            hub_name=self.settings.hub_name,
            expense_category=self.settings.expense_category,
            inflow_count=len(classification.inflow),
            outflow_count=len(classification.outflow),
            excluded=classification.excluded,
            source=source,
        )

    def build_from_file(
        self,
        filepath: Path,
        report_format: Optional[str] = None,
    ) -> FlowReport:
        """
        Read a report document and build its flow report.

        Fetching the document and its I/O errors stay with the caller and
        the parser; this method adds no retries.

        Args:
            filepath: Path to the report document
            report_format: Registered parser format ('json', 'csv', 'excel').
                If None, picked from the file extension.

        Returns:
            A FlowReport
        """
        if report_format is None:
            report_format = ParserFactory.format_for_path(filepath)

        parser = ParserFactory.create_parser(report_format, self.settings)
        records = parser.parse(filepath)
        logger.info("Parsed %d records from %s", len(records), filepath)

        return self.build(records, source=str(filepath))
