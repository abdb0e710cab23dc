import logging
from abc import abstractmethod
from pathlib import Path
from typing import List

import pandas as pd

from finance_sankey.domain.models import FinancialRecord
from finance_sankey.parsers.base import ReportParser
from finance_sankey.parsers.records import records_from_mappings

logger = logging.getLogger(__name__)


class TabularReportParser(ReportParser):
    """
    Base parser for spreadsheet-style reports.

    One row per line item, with a name column, a category column and one
    column per fiscal year:

        name,type,2022,2023
        Tuition and fees,Operating Revenue,"1,180.00","1,250.00"

    Cells are read as text so amounts keep their exact decimal value.
    Subclasses only say how to load the sheet.
    """

    @abstractmethod
    def _read_frame(self, path: Path) -> pd.DataFrame:
        """Load the raw sheet"""
        pass

    def validate_file(self, filepath):
        """
        Check the file exists, can be read, and has the required columns.
        """
        path = self._check_path(filepath)
        self._validate_columns(self._load(path))

    def parse(self, filepath: str) -> List[FinancialRecord]:
        path = self._check_path(filepath)
        df = self._load(path)
        self._validate_columns(df)

        # Blank cells come back as NaN; records_from_mappings wants None
        df = df.astype(object).where(pd.notna(df), None)

        records = records_from_mappings(
            df.to_dict(orient="records"),
            fiscal_year=self.settings.fiscal_year,
            name_field=self.settings.name_field,
            category_field=self.settings.category_field,
        )
        logger.debug("Read %d records from %s", len(records), filepath)
        return records

    def _load(self, path: Path) -> pd.DataFrame:
        try:
            df = self._read_frame(path)
        except Exception as e:
            raise ValueError(f"Failed to read {path.name}: {e}")

        # Excel hands back year headers as ints
        df.columns = [str(col).strip() for col in df.columns]
        return df.dropna(how="all")

    def _validate_columns(self, df: pd.DataFrame) -> None:
        required_columns = [
            self.settings.name_field,
            self.settings.category_field,
            self.settings.fiscal_year,
        ]
        missing = [col for col in required_columns if col not in df.columns]
        if missing:
            raise ValueError(f"Header is missing required columns: {', '.join(missing)}")


class CsvReportParser(TabularReportParser):
    """Parser for CSV exports of the annual report"""

    EXTENSIONS = (".csv",)

    def _read_frame(self, path: Path) -> pd.DataFrame:
        return pd.read_csv(path, dtype=str, skipinitialspace=True)


class ExcelReportParser(TabularReportParser):
    """Parser for the first sheet of an Excel workbook"""

    EXTENSIONS = (".xlsx", ".xls")

    def _read_frame(self, path: Path) -> pd.DataFrame:
        return pd.read_excel(path, dtype=str)
