"""
Registry of target languages.

Maps language names and aliases (``cs``, ``c#``, ``py``) to generator
classes and builds configured generator instances.
"""

from dataclasses import dataclass
from typing import Dict, Type, Optional, Any, List, Tuple, Union
from pathlib import Path

from ..logging_config import get_logger
from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, ConfigError, load_config

logger = get_logger(__name__)

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


@dataclass(frozen=True)
class LanguageEntry:
    """A registered target language."""

    name: str
    generator_class: Type[CodeGenerator]
    aliases: Tuple[str, ...] = ()


class GeneratorRegistry:
    """Registry for managing available code generators."""

    def __init__(self):
        self._languages: Dict[str, LanguageEntry] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a language.

        An existing registration is kept unless ``replace`` is set.

        Raises:
            RegistryError: If generator class is invalid or an alias is taken
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()
        if language_key in self._languages and not replace:
            logger.debug("Language %s already registered", language_key)
            return

        alias_keys = tuple(
            sorted({a.lower() for a in aliases or []} - {language_key})
        )
        for alias in alias_keys:
            if alias in self._languages:
                raise RegistryError(
                    f"Alias '{alias}' conflicts with existing primary language"
                )
            owner = self._aliases.get(alias)
            if owner is not None and owner != language_key and not replace:
                raise RegistryError(f"Alias '{alias}' already points to '{owner}'")

        if replace:
            self.unregister(language_key)

        self._languages[language_key] = LanguageEntry(
            language_key, generator_class, alias_keys
        )
        for alias in alias_keys:
            self._aliases[alias] = language_key

    def unregister(self, language: str):
        """Remove a language and its aliases."""
        entry = self._languages.pop(language.lower(), None)
        if entry is None:
            return
        for alias in entry.aliases:
            if self._aliases.get(alias) == entry.name:
                del self._aliases[alias]

    def resolve(self, language: str) -> str:
        """
        Resolve a language name or alias to its primary name.

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()
        if language_key in self._languages:
            return language_key
        if language_key in self._aliases:
            return self._aliases[language_key]

        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """Get generator class for a language name or alias."""
        return self._languages[self.resolve(language)].generator_class

    def create_generator(self, language: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Create a configured generator.

        Args:
            language: Language name or alias
            config: GeneratorConfig, dict of overrides, config file path or
                None for the language defaults

        Raises:
            RegistryError: If the language is unknown or the config is invalid
        """
        language_key = self.resolve(language)
        generator_class = self._languages[language_key].generator_class

        try:
            if isinstance(config, GeneratorConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(language_key, config_file=config)
            elif isinstance(config, dict) or config is None:
                final_config = load_config(language_key, custom_config=config)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")

            return generator_class(final_config)
        except ConfigError as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    def list_languages(self) -> List[str]:
        """Primary language names, sorted."""
        return sorted(self._languages)

    def get_aliases_for_language(self, language: str) -> List[str]:
        """Aliases of a primary language name."""
        entry = self._languages.get(language.lower())
        return list(entry.aliases) if entry else []

    def is_supported(self, language: str) -> bool:
        """True for registered names and aliases."""
        language_key = language.lower()
        return language_key in self._languages or language_key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a language with its default configuration.

        Raises:
            RegistryError: If language not found
        """
        language_key = self.resolve(language)
        generator = self.create_generator(language_key)

        return {
            "name": generator.language_name,
            "class": type(generator).__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(language_key),
            "module": type(generator).__module__,
            "templates": generator.template_engine.list_templates(),
            "config": generator.config,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_builtin_generators(_global_registry)
    return _global_registry


def _register_builtin_generators(registry: GeneratorRegistry):
    from .languages.csharp import CSharpGenerator
    from .languages.python import PythonGenerator

    registry.register("csharp", CSharpGenerator, aliases=["cs", "c#"])
    registry.register("python", PythonGenerator, aliases=["py"])


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    """Register a generator in the global registry."""
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Create a configured generator from the global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Information about every registered language."""
    return {
        language: get_language_info(language)
        for language in list_supported_languages()
    }
