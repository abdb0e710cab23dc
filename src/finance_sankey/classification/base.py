from abc import ABC, abstractmethod
from typing import Optional

from finance_sankey.domain.enums import FlowDirection
from finance_sankey.domain.models import FinancialRecord

class ClassificationRule(ABC):
    """
    One link in the classification chain.

    A rule either decides a record's side of the hub or hands the record
    to the next rule. Deciding on None drops the record from the graph.

        zero = ZeroAmountRule()
        zero.set_next(ExpenseCategoryRule("Operating Expense")).set_next(InflowRule())
        direction = zero.classify(record)
    """

    def __init__(self):
        self._next_rule: Optional['ClassificationRule'] = None

    def set_next(self, rule: 'ClassificationRule') -> 'ClassificationRule':
        """Append `rule` after this one and return it, so calls can be chained"""
        self._next_rule = rule
        return rule

    @abstractmethod
    def _matches(self, record: FinancialRecord) -> bool:
        """Whether this rule gets to decide the record"""
        pass

    @abstractmethod
    def _get_direction(self, record: FinancialRecord) -> Optional[FlowDirection]:
        """Side of the hub for a matched record, or None to drop it"""
        pass

    def classify(self, record: FinancialRecord) -> Optional[FlowDirection]:
        """
        Walk the chain from this rule until one matches.

        Returns:
            The direction chosen by the first matching rule, or None when
            that rule drops the record or the chain runs out
        """
        if self._matches(record):
            return self._get_direction(record)

        if self._next_rule:
            return self._next_rule.classify(record)

        return None

    def __repr__(self):
        return f"{self.__class__.__name__}()"
