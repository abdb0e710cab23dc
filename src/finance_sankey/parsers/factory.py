import importlib
from typing import Optional, Dict, Type, Any
from finance_sankey.config.settings import ConfigLoader, TransformSettings
from finance_sankey.parsers.base import ReportParser

class ParserFactory:
    """
    Registry of report parsers keyed by document format ('json', 'csv', 'excel').

    Parsers are normally registered once from `parsers.json`, after which
    the registry is locked.
    """

    _locked = False
    _registry: Dict[str, Type[ReportParser]] = {}

    @classmethod
    def register(cls, report_format: str, parser_class: Type[ReportParser]) -> None:
        """
        Add a parser class under a format name.

        Raises:
            RuntimeError: If the registry is locked
            ValueError: If the format already has a parser
            TypeError: If parser_class is not a ReportParser subclass
        """
        if cls._locked:
            raise RuntimeError("Registry is locked, cannot add more parsers")

        if report_format in cls._registry:
            raise ValueError(f"Parser for '{report_format}' is already registered")

        if not isinstance(parser_class, type) or not issubclass(parser_class, ReportParser):
            raise TypeError(f"{parser_class} must inherit from ReportParser")

        cls._registry[report_format] = parser_class

    @classmethod
    def lock_registry(cls):
        cls._locked = True

    @classmethod
    def is_locked(cls) -> bool:
        return cls._locked

    @classmethod
    def create_parser(
        cls,
        report_format: str,
        settings: Optional[TransformSettings] = None
    ) -> ReportParser:
        """
        Instantiate the parser for a format.

        `settings` supplies the fiscal year, JSON collection and column
        names; defaults apply when omitted.

        Raises:
            ValueError: If the format has no registered parser
        """
        if report_format not in cls._registry:
            available = ', '.join(cls._registry.keys())
            raise ValueError(
                f"No parser registered for '{report_format}'. "
                f"Available parsers: {available}"
            )

        return cls._registry[report_format](settings)

    @classmethod
    def get_available_formats(cls) -> list[str]:
        return list(cls._registry.keys())

    @classmethod
    def format_for_path(cls, filepath) -> str:
        """
        Pick the registered format whose parser accepts this file extension.

        Raises:
            ValueError: If no registered parser handles the extension
        """
        suffix = str(filepath).lower().rsplit(".", 1)[-1]
        for report_format, parser_class in cls._registry.items():
            if f".{suffix}" in parser_class.EXTENSIONS:
                return report_format

        raise ValueError(f"No parser registered for '.{suffix}' files")

    @classmethod
    def load_parsers_from_config(
        cls,
        config: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Register every parser listed in the config, then lock the registry.

        Each entry names a `format` and the dotted path of its parser
        `class`. Without a config dict, `parsers.json` is read through the
        ConfigLoader; tests pass a dict instead.
        """
        if config is None:
            config = ConfigLoader.load_parsers_config()

        for parser_config in config['parsers']:
            module_path, class_name = str(parser_config['class']).rsplit('.', 1)
            module = importlib.import_module(module_path)
            parser_class = getattr(module, class_name)

            cls.register(parser_config['format'], parser_class)

        cls.lock_registry()
