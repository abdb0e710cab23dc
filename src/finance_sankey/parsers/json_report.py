import json
import logging
from typing import Any, Dict, List

from finance_sankey.domain.models import FinancialRecord
from finance_sankey.parsers.base import ReportParser
from finance_sankey.parsers.records import records_from_mappings

logger = logging.getLogger(__name__)


class JsonReportParser(ReportParser):
    """
    Parser for annual reports published as JSON.

    Expects an object holding a named collection of line items:

        {
            "jmu-revenues": [
                {"name": "Tuition and fees", "2023": 1250.0, "type": "Operating Revenue"},
                ...
            ]
        }

    The collection key and fiscal-year column come from the settings.
    """

    EXTENSIONS = (".json",)

    def validate_file(self, filepath):
        """
        Check the file exists, is JSON, and holds the configured collection.
        """
        self._check_path(filepath)
        self._load_collection(filepath)

    def parse(self, filepath: str) -> List[FinancialRecord]:
        self._check_path(filepath)
        entries = self._load_collection(filepath)

        records = records_from_mappings(
            entries,
            fiscal_year=self.settings.fiscal_year,
            name_field=self.settings.name_field,
            category_field=self.settings.category_field,
        )
        logger.debug("Read %d records from %s", len(records), filepath)
        return records

    def _load_collection(self, filepath) -> List[Dict[str, Any]]:
        try:
            with open(filepath, encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"File is not valid JSON: {e}")

        collection = self.settings.collection
        if not isinstance(document, dict) or collection not in document:
            raise ValueError(f"Document has no '{collection}' collection")

        entries = document[collection]
        if not isinstance(entries, list):
            raise ValueError(
                f"Collection '{collection}' must be a list, got {type(entries).__name__}"
            )

        return entries
