"""
Service layer models - DTOs for service operations.

These models describe the result of a build, not the graph itself.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Tuple
from finance_sankey.domain.graph import FlowGraph
from finance_sankey.domain.models import FinancialRecord

@dataclass(frozen=True)
class FlowReport:
    """
    Result of turning one report into a flow graph.

    Provides feedback about what happened during the build:
    - How many records landed on each side of the hub
    - Which records were dropped for moving no money
    - Which nodes ended up without links
    """
    graph: FlowGraph
    hub_name: str
    expense_category: str
    inflow_count: int
    outflow_count: int

    excluded: Tuple[FinancialRecord, ...] = field(default_factory=tuple)
    source: str = ""

    @property
    def orphans(self) -> Tuple[str, ...]:
        return self.graph.orphans

    @property
    def total_inflow(self) -> Decimal:
        """Value of the hub node"""
        return self.graph.node(self.hub_name).value

    @property
    def total_outflow(self) -> Decimal:
        """Value of the expense-category node"""
        return self.graph.node(self.expense_category).value

    @property
    def net(self) -> Decimal:
        """Inflow minus outflow"""
        return self.total_inflow - self.total_outflow

    def __str__(self) -> str:
        "Human-readable summary"
        lines = [
            f"Flow graph for {self.source or 'records'}:",
            f"  Nodes: {len(self.graph.nodes)}, links: {len(self.graph.links)}",
            f"  Inflow:  {self.total_inflow:,.2f} ({self.inflow_count} items)",
            f"  Outflow: {self.total_outflow:,.2f} ({self.outflow_count} items)",
            f"  Net:     {self.net:,.2f}",
        ]

        if self.excluded:
            lines.append(f"  Excluded (zero amount): {len(self.excluded)}")

        if self.orphans:
            lines.append(f"  Orphan nodes: {', '.join(self.orphans)}")

        return "\n".join(lines)
