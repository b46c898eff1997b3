"""
YAML loader for registry documents.
Provides a shared ruamel.yaml instance with proper type hints.
"""

from typing import Protocol, TextIO, Union, cast

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]

__all__ = [
    "ConfigDict",
    "ConfigValue",
    "YAMLError",
    "parse_yaml_text",
    "yaml",
]


class YAMLLoader(Protocol):
    """Protocol for a read-only YAML loader."""

    def load(self, stream: TextIO | str) -> ConfigValue:
        """Load YAML from stream or string."""
        ...


def _validate_yaml_loader(obj: object) -> None:
    """Runtime validation: Ensure YAML object has expected interface.

    Raises:
        AttributeError: If load is missing
        TypeError: If load is not callable
    """
    if not hasattr(obj, 'load'):
        raise AttributeError("YAML object missing required attribute: load")

    if not callable(obj.load):  # type: ignore[attr-defined]
        raise TypeError("YAML.load is not callable")


def _create_yaml_loader() -> YAMLLoader:
    """Create and validate YAML loader instance.

    Returns:
        Validated YAML loader
    """
    yaml_obj = YAML()

    _validate_yaml_loader(yaml_obj)

    return cast(YAMLLoader, yaml_obj)


# Create singleton validated YAML loader instance
yaml: YAMLLoader = _create_yaml_loader()


def parse_yaml_text(text: str) -> ConfigValue:
    """Parse YAML text.

    ruamel.yaml's load() is safe by default (unlike PyYAML's load()).
    It does not execute arbitrary Python code from YAML content.

    Raises:
        YAMLError: If the text is not valid YAML
    """
    return yaml.load(text)
