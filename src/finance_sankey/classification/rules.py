from typing import Optional

from finance_sankey.classification.base import ClassificationRule
from finance_sankey.domain.enums import FlowDirection
from finance_sankey.domain.models import FinancialRecord


class ZeroAmountRule(ClassificationRule):
    """
    Excludes records that move no money.

    Zero-amount items would render as zero-width bands, so they get
    neither a node nor a link.
    """

    def _matches(self, record: FinancialRecord) -> bool:
        return record.amount == 0

    def _get_direction(self, record: FinancialRecord) -> Optional[FlowDirection]:
        return None


class ExpenseCategoryRule(ClassificationRule):
    """
    Sends every record tagged with the expense category to the outflow side.

    The tag wins over the sign: statements often store expenses as positive
    magnitudes under an expense heading.

    Example:
        ```
        rule = ExpenseCategoryRule("Operating Expense")
        ```
    """

    def __init__(self, expense_category: str):
        super().__init__()
        self.expense_category = expense_category

    def _matches(self, record: FinancialRecord) -> bool:
        return record.category == self.expense_category

    def _get_direction(self, record: FinancialRecord) -> Optional[FlowDirection]:
        return FlowDirection.OUTFLOW

    def __repr__(self):
        return f"ExpenseCategoryRule('{self.expense_category}')"


class NegativeAmountRule(ClassificationRule):
    """Records stored as negative quantities are outflows"""

    def _matches(self, record: FinancialRecord) -> bool:
        return record.amount < 0

    def _get_direction(self, record: FinancialRecord) -> Optional[FlowDirection]:
        return FlowDirection.OUTFLOW


class InflowRule(ClassificationRule):
    """
    Default rule - anything positive that reached here is revenue.

    Should be last in the chain.
    """

    def _matches(self, record: FinancialRecord) -> bool:
        return record.amount > 0

    def _get_direction(self, record: FinancialRecord) -> Optional[FlowDirection]:
        return FlowDirection.INFLOW
