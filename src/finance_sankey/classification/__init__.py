"""
Record classification for the flow graph.

Splits report line items into the inflow side (revenue) and the outflow
side (expense) of the hub, using a chain of responsibility of rules.

Quick Start:
    >>> from finance_sankey.classification import RecordClassifier
    >>>
    >>> classifier = RecordClassifier("Operating Expense")
    >>> classification = classifier.classify(records)
    >>> print(len(classification.inflow), len(classification.outflow))
"""
from finance_sankey.classification.classifier import Classification, RecordClassifier
from finance_sankey.classification.base import ClassificationRule
from finance_sankey.classification.rules import (
    ZeroAmountRule,
    ExpenseCategoryRule,
    NegativeAmountRule,
    InflowRule,
)

__all__ = [
    "Classification",
    "RecordClassifier",
    "ClassificationRule",
    "ZeroAmountRule",
    "ExpenseCategoryRule",
    "NegativeAmountRule",
    "InflowRule",
]
