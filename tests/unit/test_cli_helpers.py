import pytest
from typing import List

from finance_sankey.cli import _outflow_ids
from finance_sankey.domain.models import FinancialRecord
from finance_sankey.services.flow_graph_service import build_flow_graph

@pytest.mark.unit
class TestOutflowIds:

    def test_includes_expense_category_and_its_items(self, sample_records: List[FinancialRecord]):
        graph = build_flow_graph(sample_records, hub_name="JMU")

        ids = _outflow_ids(graph, "Operating Expense")

        assert ids == {
            "Operating Expense",
            "Instruction",
            "Research",
            "Depreciation",
            "Interest on debt",
        }

    def test_excludes_hub_and_inflow_tiers(self, sample_records: List[FinancialRecord]):
        graph = build_flow_graph(sample_records, hub_name="JMU")

        ids = _outflow_ids(graph, "Operating Expense")

        assert ids.isdisjoint({"JMU", "Operating Revenue", "Tuition and fees"})
