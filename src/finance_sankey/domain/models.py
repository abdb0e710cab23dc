from dataclasses import dataclass
from decimal import Decimal
from finance_sankey.domain.enums import FlowDirection

@dataclass(frozen=True)
class FinancialRecord:
    """Core domain model representing a single line item of the annual report"""
    name: str
    amount: Decimal
    category: str

    def __post_init__(self):
        amount = self.amount
        if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
            raise TypeError(f"Amount of '{self.name}' must be a number, got {amount!r}")
        if not isinstance(amount, Decimal):
            # frozen dataclass; str() keeps 100.5 as 100.5
            amount = Decimal(str(amount))
            object.__setattr__(self, "amount", amount)
        if not amount.is_finite():
            raise ValueError(f"Amount of '{self.name}' is not finite: {amount}")

    def __repr__(self):
        return f"FinancialRecord({self.name[:30]}, {self.category}, {self.amount})"


@dataclass(frozen=True)
class ClassifiedRecord:
    """
    A record after classification.

    The sign of the stored amount is resolved once: `magnitude` is always
    non-negative and `direction` says which side of the hub it sits on.
    """
    record: FinancialRecord
    direction: FlowDirection
    magnitude: Decimal

    def __post_init__(self):
        if self.magnitude < 0:
            raise ValueError(
                f"Magnitude must be non-negative, got {self.magnitude} for '{self.record.name}'"
            )

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def category(self) -> str:
        return self.record.category

    @property
    def is_inflow(self) -> bool:
        return self.direction == FlowDirection.INFLOW

    def __repr__(self):
        sign = "+" if self.is_inflow else "-"
        return f"ClassifiedRecord({self.name[:30]}, {sign}{self.magnitude})"
