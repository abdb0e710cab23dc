import pytest
import pandas as pd
from decimal import Decimal
from pathlib import Path

from finance_sankey.config.settings import TransformSettings
from finance_sankey.domain.errors import InvalidRecord
from finance_sankey.parsers.tabular_report import CsvReportParser, ExcelReportParser

@pytest.fixture
def csv_parser() -> CsvReportParser:
    return CsvReportParser()

@pytest.fixture
def sample_excel_report(tmp_path: Path) -> Path:
    """Excel copy of the sample report, with int year headers like real workbooks"""
    path = tmp_path / "sample_report.xlsx"
    df = pd.DataFrame({
        "name": ["Tuition and fees", "Instruction", "Research"],
        "type": ["Operating Revenue", "Operating Expense", "Operating Expense"],
        2023: [320.5, -210, 55],
    })
    df.to_excel(path, index=False)
    return path

@pytest.mark.integration
class TestCsvReportParser:

    def test_validate_file_correct(self, csv_parser: CsvReportParser, sample_csv_report: Path):
        csv_parser.validate_file(sample_csv_report)

    def test_validate_file_incorrect_extension(
        self,
        csv_parser: CsvReportParser,
        sample_json_report: Path
    ):
        with pytest.raises(ValueError, match="File must be .csv, got .json"):
            csv_parser.validate_file(sample_json_report)

    def test_validate_missing_year_column(self, sample_csv_report: Path):
        parser = CsvReportParser(TransformSettings(fiscal_year="2024"))

        with pytest.raises(ValueError, match="missing required columns: 2024"):
            parser.validate_file(sample_csv_report)

    def test_parse(self, csv_parser: CsvReportParser, sample_csv_report: Path):
        records = csv_parser.parse(sample_csv_report)

        assert len(records) == 9
        assert records[0].amount == Decimal("320.50")
        assert records[5].name == "Instruction"
        assert records[5].amount == Decimal("-210")
        assert records[8].category == "Non-operating Expense"

    def test_parse_blank_amount(self, csv_parser: CsvReportParser, tmp_path: Path):
        report = tmp_path / "report.csv"
        report.write_text(
            "name,type,2023\n"
            "Tuition,Operating Revenue,100\n"
            "Salaries,Operating Expense,\n"
        )

        with pytest.raises(InvalidRecord) as exc_info:
            csv_parser.parse(report)

        assert exc_info.value.index == 1

    def test_parse_skips_empty_rows(self, csv_parser: CsvReportParser, tmp_path: Path):
        report = tmp_path / "report.csv"
        report.write_text(
            "name,type,2023\n"
            "Tuition,Operating Revenue,100\n"
            ",,\n"
            "Salaries,Operating Expense,-60\n"
        )

        records = csv_parser.parse(report)

        assert [r.name for r in records] == ["Tuition", "Salaries"]


@pytest.mark.integration
class TestExcelReportParser:

    def test_parse(self, sample_excel_report: Path):
        parser = ExcelReportParser()

        records = parser.parse(sample_excel_report)

        assert [r.name for r in records] == ["Tuition and fees", "Instruction", "Research"]
        assert records[0].amount == Decimal("320.5")
        assert records[1].amount == Decimal("-210")

    def test_validate_file_incorrect_extension(self, sample_csv_report: Path):
        with pytest.raises(ValueError, match="File must be .xlsx or .xls, got .csv"):
            ExcelReportParser().validate_file(sample_csv_report)
