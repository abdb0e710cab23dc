import pytest
from decimal import Decimal
from pathlib import Path
from typing import List

from finance_sankey.domain.models import FinancialRecord
from finance_sankey.parsers.factory import ParserFactory

FIXTURES_DIR = Path(__file__).parent / "fixtures"

@pytest.fixture
def sample_records() -> List[FinancialRecord]:
    """FY2023 line items from the sample report"""
    return [
        FinancialRecord("Tuition and fees", Decimal("320.5"), "Operating Revenue"),
        FinancialRecord("Auxiliary enterprises", Decimal("160"), "Operating Revenue"),
        FinancialRecord("State appropriations", Decimal("110"), "Non-operating Revenue"),
        FinancialRecord("Gifts", Decimal("0"), "Non-operating Revenue"),
        FinancialRecord("Investment income", Decimal("15"), "Non-operating Revenue"),
        FinancialRecord("Instruction", Decimal("-210"), "Operating Expense"),
        FinancialRecord("Research", Decimal("55"), "Operating Expense"),
        FinancialRecord("Depreciation", Decimal("-45"), "Operating Expense"),
        FinancialRecord("Interest on debt", Decimal("-8"), "Non-operating Expense"),
    ]

@pytest.fixture
def sample_json_report() -> Path:
    """Provide a path to a sample JSON report"""
    return FIXTURES_DIR / "sample_report.json"

@pytest.fixture
def sample_csv_report() -> Path:
    """Provide a path to a sample CSV report"""
    return FIXTURES_DIR / "sample_report.csv"

@pytest.fixture
def missing_collection_report() -> Path:
    """Provide a path to a JSON report without the expected collection"""
    return FIXTURES_DIR / "missing_collection.json"

@pytest.fixture
def sample_wrong_extension_report() -> Path:
    """Provide a path to a report with an unsupported extension"""
    return FIXTURES_DIR / "sample_report.txt"

@pytest.fixture
def parser_registry():
    """Registry loaded from the bundled parsers.json, cleared afterwards"""
    ParserFactory._registry = {}
    ParserFactory._locked = False
    ParserFactory.load_parsers_from_config()
    yield ParserFactory
    ParserFactory._registry = {}
    ParserFactory._locked = False
