import pytest
from decimal import Decimal

from finance_sankey.domain.errors import InvalidRecord
from finance_sankey.domain.models import FinancialRecord
from finance_sankey.parsers.records import parse_amount, records_from_mappings

@pytest.mark.unit
class TestParseAmount:

    @pytest.mark.parametrize("value, expected", [
        (100, Decimal("100")),
        (-60.25, Decimal("-60.25")),
        (0.1, Decimal("0.1")),
        ("$1,250.00", Decimal("1250.00")),
        ("-3,400", Decimal("-3400")),
        (" 42 ", Decimal("42")),
        (Decimal("7.5"), Decimal("7.5")),
    ])
    def test_valid_amounts(self, value, expected):
        assert parse_amount(value) == expected

    @pytest.mark.parametrize("value", [
        None, "", "   ", "n/a", True, "nan", float("inf"), Decimal("NaN"), Decimal("-Infinity")
    ])
    def test_invalid_amounts(self, value):
        with pytest.raises(ValueError):
            parse_amount(value)


@pytest.mark.unit
class TestRecordsFromMappings:

    def test_reads_only_the_configured_year(self):
        # Arrange
        entries = [
            {"name": "Tuition", "2022": 90, "2023": 100, "type": "Operating Revenue"},
            {"name": "Salaries", "2022": -50, "2023": -60, "type": "Operating Expense"},
        ]

        # Act
        records = records_from_mappings(entries, fiscal_year="2022")

        # Assert
        assert records == [
            FinancialRecord("Tuition", Decimal("90"), "Operating Revenue"),
            FinancialRecord("Salaries", Decimal("-50"), "Operating Expense"),
        ]

    def test_custom_field_names(self):
        entries = [{"item": "Tuition", "fy": "100", "category": "Operating Revenue"}]

        records = records_from_mappings(
            entries, fiscal_year="fy", name_field="item", category_field="category"
        )

        assert records[0].name == "Tuition"
        assert records[0].category == "Operating Revenue"

    def test_strips_whitespace(self):
        entries = [{"name": " Tuition ", "2023": 1, "type": "Operating Revenue "}]

        records = records_from_mappings(entries, fiscal_year="2023")

        assert records[0] == FinancialRecord("Tuition", Decimal("1"), "Operating Revenue")

    def test_missing_year_field(self):
        entries = [
            {"name": "Tuition", "2023": 100, "type": "Operating Revenue"},
            {"name": "Salaries", "2022": -60, "type": "Operating Expense"},
        ]

        with pytest.raises(InvalidRecord) as exc_info:
            records_from_mappings(entries, fiscal_year="2023")

        assert exc_info.value.index == 1
        assert exc_info.value.entry["name"] == "Salaries"
        assert "missing field '2023'" in str(exc_info.value)

    def test_blank_name(self):
        entries = [{"name": "  ", "2023": 100, "type": "Operating Revenue"}]

        with pytest.raises(InvalidRecord, match="blank 'name'"):
            records_from_mappings(entries, fiscal_year="2023")

    def test_bad_amount(self):
        entries = [{"name": "Tuition", "2023": "lots", "type": "Operating Revenue"}]

        with pytest.raises(InvalidRecord, match="bad '2023' amount"):
            records_from_mappings(entries, fiscal_year="2023")

    def test_nan_decimal_amount(self):
        entries = [{"name": "Tuition", "2023": Decimal("NaN"), "type": "Operating Revenue"}]

        with pytest.raises(InvalidRecord, match="not a finite number"):
            records_from_mappings(entries, fiscal_year="2023")

    def test_non_mapping_entry(self):
        with pytest.raises(InvalidRecord, match="expected a mapping"):
            records_from_mappings([["Tuition", 100]], fiscal_year="2023")

    def test_invalid_record_is_a_value_error(self):
        with pytest.raises(ValueError):
            records_from_mappings([{"name": "Tuition"}], fiscal_year="2023")
