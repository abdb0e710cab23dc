import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from finance_sankey.classification.base import ClassificationRule
from finance_sankey.classification.rules import (
    ZeroAmountRule,
    ExpenseCategoryRule,
    NegativeAmountRule,
    InflowRule,
)
from finance_sankey.domain.models import ClassifiedRecord, FinancialRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Classification:
    """
    Records split into the two sides of the hub.

    Each side keeps the input order. `excluded` holds records that
    produce no node and no link.
    """
    inflow: Tuple[ClassifiedRecord, ...]
    outflow: Tuple[ClassifiedRecord, ...]
    excluded: Tuple[FinancialRecord, ...] = ()

    @property
    def records(self) -> Tuple[ClassifiedRecord, ...]:
        """Inflow then outflow records"""
        return self.inflow + self.outflow

    @property
    def total_inflow(self) -> Decimal:
        return sum((item.magnitude for item in self.inflow), Decimal(0))

    @property
    def total_outflow(self) -> Decimal:
        return sum((item.magnitude for item in self.outflow), Decimal(0))

    def inflow_by_category(self) -> Dict[str, Decimal]:
        """
        Inflow totals per category.

        Keys are in first-occurrence order of the category in the input,
        which is the order category nodes and links are emitted in.
        """
        totals: Dict[str, Decimal] = {}
        for item in self.inflow:
            totals[item.category] = totals.get(item.category, Decimal(0)) + item.magnitude
        return totals


class RecordClassifier:
    """
    Partitions financial records into inflow and outflow.

    Builds a chain of rules in priority order:
    1. Zero amount (excluded)
    2. Expense category tag (outflow, whatever the sign)
    3. Negative amount (outflow)
    4. Positive amount (inflow)

    Usage:
        classifier = RecordClassifier("Operating Expense")
        classification = classifier.classify(records)
    """

    def __init__(self, expense_category: str = "Operating Expense"):
        self.expense_category = expense_category
        self._rule_chain: Optional[ClassificationRule] = None

        self._build_rule_chain()

    def _build_rule_chain(self) -> None:
        rules: List[ClassificationRule] = [
            ZeroAmountRule(),
            ExpenseCategoryRule(self.expense_category),
            NegativeAmountRule(),
            InflowRule(),
        ]

        self._rule_chain = rules[0]
        for i in range(len(rules) - 1):
            rules[i].set_next(rules[i + 1])

    def classify_record(self, record: FinancialRecord) -> Optional[ClassifiedRecord]:
        """
        Classify a single record.

        Returns:
            The classified record with a non-negative magnitude, or None
            if the record is excluded
        """
        direction = self._rule_chain.classify(record)
        if direction is None:
            return None

        return ClassifiedRecord(
            record=record,
            direction=direction,
            magnitude=abs(record.amount),
        )

    def classify(self, records: Iterable[FinancialRecord]) -> Classification:
        """
        Classify every record.

        Args:
            records: Records in report order

        Returns:
            A Classification; every nonzero record lands in exactly one side
        """
        inflow: List[ClassifiedRecord] = []
        outflow: List[ClassifiedRecord] = []
        excluded: List[FinancialRecord] = []

        for record in records:
            classified = self.classify_record(record)
            if classified is None:
                logger.debug("Excluding %r from the flow graph", record)
                excluded.append(record)
            elif classified.is_inflow:
                inflow.append(classified)
            else:
                outflow.append(classified)

        logger.debug(
            "Classified %d inflow, %d outflow, %d excluded records",
            len(inflow), len(outflow), len(excluded),
        )

        return Classification(
            inflow=tuple(inflow),
            outflow=tuple(outflow),
            excluded=tuple(excluded),
        )

    def get_rule_chain_info(self) -> str:
        """
        Get information about the current rule chain.

        Returns:
            String description of the current rule chain.
        """
        rules = []
        current = self._rule_chain
        priority = 1

        while current:
            rules.append(f"{priority}. {current}")
            current = current._next_rule
            priority += 1

        return "\n".join(rules)

    def __repr__(self) -> str:
        return f"RecordClassifier(expense_category='{self.expense_category}')"
