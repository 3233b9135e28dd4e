"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from ..models.settings import ProviderSettings
from .defaults import AdvisorParams, DefaultConfig, get_default_config
from .validation import ConfigValidator

PROVIDER_FILE = "provider.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_provider_config(self) -> dict[str, Any]:
        """Load provider overrides from the YAML file, if present."""
        provider_file = self.config_dir / PROVIDER_FILE

        if not provider_file.exists():
            return {}

        with open(provider_file) as f:
            provider_config = yaml.safe_load(f)

        return provider_config or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Provider file overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_provider_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_validated_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Merge configuration and raise ConfigurationError if any section is invalid."""
        config = self.merge_config(overrides)
        errors = ConfigValidator.validate_config(config)
        if errors:
            raise ConfigurationError(
                f"Invalid configuration in {self.config_dir}",
                errors=errors,
                context={"fields": [error.field for error in errors]},
            )
        return config

    def load_provider_settings(self, overrides: Optional[dict[str, Any]] = None) -> ProviderSettings:
        """Build validated provider settings from the merged configuration."""
        config = self.load_validated_config(overrides)
        return ProviderSettings.create(**config["provider"])

    def load_advisor_params(self, overrides: Optional[dict[str, Any]] = None) -> AdvisorParams:
        """Build advisor thresholds from the merged configuration."""
        config = self.load_validated_config(overrides)
        return AdvisorParams(**config["advisor"])

    def load_term_start(self, overrides: Optional[dict[str, Any]] = None) -> date:
        """Return the configured term start anchor."""
        config = self.load_validated_config(overrides)
        value = config["term"]["term_start"]
        if isinstance(value, date):
            return value
        return date.fromisoformat(str(value))

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
