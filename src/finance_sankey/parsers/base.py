from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from finance_sankey.config.settings import TransformSettings
from finance_sankey.domain.models import FinancialRecord

class ReportParser(ABC):
    """
    Abstract base class for all report parsers.

    This implements the Strategy pattern - each document format gets its
    own concrete parser that implements this interface.
    """

    # File extensions this parser accepts, lowercase with the dot
    EXTENSIONS: tuple = ()

    def __init__(self, settings: Optional[TransformSettings] = None):
        self.settings = settings or TransformSettings()

    @abstractmethod
    def parse(self, filepath: str) -> List[FinancialRecord]:
        """
        Parse a report document and return its records for the configured fiscal year.

        Args:
            filepath: Path to the report document

        Returns:
            List of FinancialRecord objects in document order

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file format is invalid
        """
        pass

    @abstractmethod
    def validate_file(self, filepath: str):
        """
        Validate that the file matches the expected format.

        Args:
            filepath: Path to the report document

        Returns:
            Nothing if file is valid for this parser

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file format is invalid
        """
        pass

    def _check_path(self, filepath) -> Path:
        """Existence and extension checks shared by every parser"""
        path = Path(filepath)

        if not path.exists():
            raise FileNotFoundError(f"File does not exist on path {path}")

        if self.EXTENSIONS and path.suffix.lower() not in self.EXTENSIONS:
            raise ValueError(
                f"File must be {' or '.join(self.EXTENSIONS)}, got {path.suffix}"
            )

        return path
