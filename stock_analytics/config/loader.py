"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..errors import InvalidInputError
from .defaults import AnalyticsConfig, get_default_config
from .validation import ConfigValidator

ConfigInput = Union[AnalyticsConfig, dict[str, Any], None]


def _dataclass_to_dict(obj: Any) -> dict[str, Any]:
    """Convert nested dataclasses to dictionary."""
    if hasattr(obj, '__dataclass_fields__'):
        result = {}
        for field_name in obj.__dataclass_fields__:
            value = getattr(obj, field_name)
            if hasattr(value, '__dataclass_fields__'):
                result[field_name] = _dataclass_to_dict(value)
            else:
                result[field_name] = value
        return result
    return obj  # type: ignore[no-any-return]


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _dict_to_config(data: dict[str, Any]) -> AnalyticsConfig:
    """Rebuild the frozen config tree, rejecting unknown sections and fields."""
    sections = {}
    for section_field in fields(AnalyticsConfig):
        params_cls = section_field.type
        section = data.get(section_field.name, {})
        if not isinstance(section, dict):
            raise InvalidInputError(
                f"Configuration section '{section_field.name}' must be a mapping",
                field=section_field.name,
                value=section,
            )
        known = {f.name for f in fields(params_cls)}
        unknown = sorted(set(section) - known)
        if unknown:
            raise InvalidInputError(
                f"Unknown configuration fields in '{section_field.name}': {', '.join(unknown)}",
                field=section_field.name,
                value=unknown,
            )
        sections[section_field.name] = params_cls(**section)

    unknown_sections = sorted(set(data) - set(sections))
    if unknown_sections:
        raise InvalidInputError(
            f"Unknown configuration sections: {', '.join(unknown_sections)}",
            value=unknown_sections,
        )

    return AnalyticsConfig(**sections)


def build_config(overrides: Optional[dict[str, Any]] = None,
                 base: Optional[AnalyticsConfig] = None) -> AnalyticsConfig:
    """
    Build a validated configuration from partial overrides.

    Unspecified fields fall back to ``base`` (the documented defaults when omitted).

    Args:
        overrides: Nested mapping, e.g. ``{"rsi": {"period": 21}}``
        base: Configuration the overrides are applied to

    Returns:
        Frozen AnalyticsConfig

    Raises:
        InvalidInputError: If the merged configuration fails validation
    """
    if overrides is not None and not isinstance(overrides, dict):
        raise InvalidInputError(
            f"Configuration overrides must be a mapping, got {type(overrides).__name__}",
            value=overrides,
        )

    merged = _dataclass_to_dict(base or get_default_config())
    if overrides:
        merged = _deep_merge(merged, overrides)

    errors = ConfigValidator.validate_config(merged)
    if errors:
        error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
        raise InvalidInputError(
            f"Invalid configuration: {'; '.join(error_msgs)}",
            field=errors[0].field,
            value=errors[0].value,
            context={"errors": errors},
        )

    return _dict_to_config(merged)


def resolve_config(config: ConfigInput) -> AnalyticsConfig:
    """Accept a full config, a partial override dict, or None for defaults."""
    if config is None:
        return get_default_config()
    if isinstance(config, AnalyticsConfig):
        return config
    if not isinstance(config, dict):
        raise InvalidInputError(
            f"Configuration must be an AnalyticsConfig or a mapping, got {type(config).__name__}",
            value=config,
        )
    return build_config(config)


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: AnalyticsConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_symbol_config(self, symbol: str) -> dict[str, Any]:
        """Load symbol-specific configuration overrides."""
        symbols_file = self.config_dir / "symbols.yaml"

        if not symbols_file.exists():
            return {}

        with open(symbols_file) as f:
            symbols_config = yaml.safe_load(f) or {}

        return symbols_config.get("symbols", {}).get(symbol, {})  # type: ignore[no-any-return]

    def merge_config(
        self,
        symbol: str,
        call_overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Symbol-specific overrides
        3. Global defaults (lowest priority)
        """
        config = _dataclass_to_dict(self.defaults)

        symbol_config = self.load_symbol_config(symbol)
        config = _deep_merge(config, symbol_config)

        if call_overrides:
            config = _deep_merge(config, call_overrides)

        return config

    def load(self, symbol: str, call_overrides: Optional[dict[str, Any]] = None) -> AnalyticsConfig:
        """Merge and validate the configuration for a symbol."""
        return build_config(self.merge_config(symbol, call_overrides))
