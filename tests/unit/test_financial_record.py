import pytest
from decimal import Decimal

from finance_sankey.domain.models import FinancialRecord

@pytest.mark.unit
class TestFinancialRecordAmount:

    def test_float_amount_becomes_decimal(self):
        record = FinancialRecord("Tuition", 100.5, "Operating Revenue")

        assert record.amount == Decimal("100.5")
        assert isinstance(record.amount, Decimal)

    def test_int_amount_becomes_decimal(self):
        record = FinancialRecord("Salaries", -60, "Operating Expense")

        assert record.amount == Decimal("-60")
        assert isinstance(record.amount, Decimal)

    def test_decimal_amount_kept(self):
        amount = Decimal("7.25")

        assert FinancialRecord("Fees", amount, "Operating Revenue").amount is amount

    @pytest.mark.parametrize("amount", [Decimal("NaN"), Decimal("Infinity"), float("nan"), float("-inf")])
    def test_non_finite_amount_rejected(self, amount):
        with pytest.raises(ValueError, match="not finite"):
            FinancialRecord("Tuition", amount, "Operating Revenue")

    @pytest.mark.parametrize("amount", ["100", None, True])
    def test_non_numeric_amount_rejected(self, amount):
        with pytest.raises(TypeError, match="must be a number"):
            FinancialRecord("Tuition", amount, "Operating Revenue")
