"""
Configuration for code generation.

Settings are layered: built-in defaults for the target language, then an
optional JSON configuration file, then explicit overrides. Keys that are
not :class:`GeneratorConfig` fields are language-specific and end up in
``language_config``.
"""

import json
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field, fields, asdict

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


# Cases that yield valid identifiers; "kebab" does not
VALID_CASES = {"pascal", "camel", "snake", "screaming_snake"}

# Per-language defaults, applied before files and overrides
LANGUAGE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "csharp": {
        "type_case": "pascal",
        "field_case": "pascal",
        "namespace_case": "pascal",
        "language_config": {
            "nullable_context": True,
            "type_keyword": "record",
        },
    },
    "python": {
        "type_case": "pascal",
        "field_case": "snake",
        "namespace_case": "snake",
        "language_config": {
            "dataclass_slots": True,
            "metadata_key": "avro_name",
        },
    },
}


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Input settings
    schema_suffixes: List[str] = field(default_factory=lambda: [".avsc"])

    # Output settings
    output_dir: Optional[str] = None
    artifact_marker: str = "g"

    # Code style settings
    indent_size: int = 4
    line_ending: str = "\n"

    # Naming settings
    type_case: str = "pascal"
    field_case: str = "pascal"
    namespace_case: str = "pascal"

    add_comments: bool = True

    # Language-specific settings
    language_config: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("type_case", "field_case", "namespace_case"):
            value = getattr(self, name)
            if value not in VALID_CASES:
                raise ConfigError(
                    f"Invalid {name}: {value}. "
                    f"Expected one of: {', '.join(sorted(VALID_CASES))}"
                )

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "GeneratorConfig":
        """Build a config, moving unknown keys into ``language_config``."""
        known = {f.name for f in fields(cls)}
        language_config = dict(values.get("language_config") or {})
        config_args = {}

        for key, value in values.items():
            if key == "language_config":
                continue
            if key in known:
                config_args[key] = value
            else:
                language_config[key] = value

        return cls(language_config=language_config, **config_args)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def merge_settings(target: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge overrides into target in place; ``language_config`` is merged key by key."""
    for key, value in overrides.items():
        if key == "language_config" and isinstance(value, dict):
            target.setdefault("language_config", {}).update(value)
        else:
            target[key] = value
    return target


def read_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a JSON configuration file.

    Raises:
        ConfigError: If the file is missing, not JSON or not a JSON object
    """
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")
    if path.suffix.lower() != ".json":
        raise ConfigError(f"Configuration file must be JSON: {path}")

    try:
        settings = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read configuration file {path}: {e}") from e

    if not isinstance(settings, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {path}")
    return settings


class ConfigManager:
    """Layers language defaults, config files and overrides."""

    def __init__(self, defaults: Optional[Dict[str, Dict[str, Any]]] = None):
        self._defaults = json.loads(json.dumps(defaults or LANGUAGE_DEFAULTS))

    def get_config(
        self,
        language: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name (None for bare defaults)
            custom_config: Overrides applied last
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        # Deep copy so callers never mutate the defaults
        settings = json.loads(json.dumps(self._defaults.get(language or "", {})))

        if config_file:
            merge_settings(settings, read_config_file(config_file))
        if custom_config:
            merge_settings(settings, custom_config)

        config = GeneratorConfig.from_dict(settings)
        for warning in self.validate_config(config):
            logger.warning("%s configuration: %s", language or "default", warning)
        return config

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to a JSON file."""
        path = Path(output_path)
        try:
            path.write_text(
                json.dumps(config.to_dict(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> List[str]:
        """Languages that have built-in defaults."""
        return list(self._defaults)

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """Return a warning for every questionable setting."""
        warnings = []

        if not config.schema_suffixes:
            warnings.append("No schema suffixes configured; no files will be read")
        for suffix in config.schema_suffixes:
            if not suffix.startswith("."):
                warnings.append(f"Schema suffix should start with '.': {suffix}")

        if not config.artifact_marker or "/" in config.artifact_marker:
            warnings.append(f"Invalid artifact_marker: {config.artifact_marker!r}")

        return warnings


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """Load merged configuration through the global manager."""
    return get_config_manager().get_config(language, custom_config, config_file)
