from dataclasses import dataclass, fields, replace
from pathlib import Path
import json
from typing import Dict, Any, Optional

# Package defaults (bundled with code)
PACKAGE_CONFIG_DIR = Path(__file__).parent / "defaults"

# User configs (in project root, gitignored)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
USER_CONFIG_DIR = PROJECT_ROOT / "config"

class ConfigLoader:
    """Load configuration with user overrides"""

    @staticmethod
    def load_config(config_name: str) -> Dict[str, Any]:
        """
        Load config with fallback: user config -> default config

        Args:
            config_name: Name of the config file (e.g., 'parsers.json')

        Raises:
            FileNotFoundError: If no config file was found

        Returns:
            Parsed JSON configuration
        """
        user_config_path = USER_CONFIG_DIR / config_name
        if user_config_path.exists():
            with open(user_config_path) as f:
                return json.load(f)

        default_config_path = PACKAGE_CONFIG_DIR / config_name
        if default_config_path.exists():
            with open(default_config_path) as f:
                return json.load(f)

        raise FileNotFoundError(
            f"Config file '{config_name}' not found in:\n"
            f" - {user_config_path}\n"
            f" - {default_config_path}"
        )

    @staticmethod
    def load_parsers_config():
        """Load parsers registry configuration"""
        return ConfigLoader.load_config('parsers.json')

    @staticmethod
    def load_transform_config():
        """Load transform defaults (hub name, expense category, fiscal year...)"""
        return ConfigLoader.load_config('transform.json')


@dataclass(frozen=True)
class TransformSettings:
    """
    Knobs for turning a report document into a flow graph.

    Defaults match the bundled `transform.json`.
    """
    hub_name: str = "Institution"
    expense_category: str = "Operating Expense"
    fiscal_year: str = "2023"
    collection: str = "jmu-revenues"
    name_field: str = "name"
    category_field: str = "type"

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None, **overrides) -> "TransformSettings":
        """
        Build settings from a config dict, then apply keyword overrides.

        Args:
            config: Optional config dict. If None, loads `transform.json`
                through the ConfigLoader. Unknown keys are ignored.
            **overrides: Values that win over the config. None values are
                skipped so CLI options can be passed straight through.

        Example:
            settings = TransformSettings.from_config(fiscal_year="2022")
        """
        if config is None:
            config = ConfigLoader.load_transform_config()

        known = {f.name for f in fields(cls)}
        settings = cls(**{k: str(v) for k, v in config.items() if k in known})

        changes = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown transform settings: {', '.join(sorted(unknown))}")

        return replace(settings, **changes)
