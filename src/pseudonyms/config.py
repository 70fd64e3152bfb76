"""Configuration management for pseudonyms."""

from pathlib import Path
from typing import Dict, List, Optional
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from pseudonyms.errors import ConfigError
from pseudonyms.namespaces import NamespaceCatalog
from pseudonyms.registry import AliasRegistry


class NamespaceConfig(BaseModel):
    """Identifiers a namespace starts out with."""

    exports: List[str] = Field(default_factory=list)
    internals: List[str] = Field(default_factory=list)


class PseudonymsConfig(BaseModel):
    """Main pseudonyms configuration."""

    marker: str = "$"
    separator: str = ":"
    enabled: bool = True
    current_namespace: str = "user"
    log_level: str = "WARNING"

    namespaces: Dict[str, NamespaceConfig] = Field(default_factory=dict)
    # scope -> alias -> namespace name
    aliases: Dict[str, Dict[str, str]] = Field(default_factory=dict)

    @field_validator("marker", "separator")
    @classmethod
    def single_character(cls, value: str) -> str:
        if len(value) != 1 or value.isspace() or value in "();":
            raise ValueError(f"must be a single non-whitespace, non-syntax character, got {value!r}")
        return value

    @model_validator(mode="after")
    def distinct_marker_and_separator(self) -> "PseudonymsConfig":
        if self.marker == self.separator:
            raise ValueError("separator must differ from marker")
        return self

    @field_validator("current_namespace")
    @classmethod
    def non_empty_namespace(cls, value: str) -> str:
        if not value:
            raise ValueError("current_namespace must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {value!r}")
        return value

    @classmethod
    def load_from_file(cls, config_path: Path) -> "PseudonymsConfig":
        """Load configuration from YAML file."""
        with open(config_path, "r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Could not parse {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at the top of {config_path}")
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    @classmethod
    def load_default(cls) -> "PseudonymsConfig":
        """Load default configuration."""
        return cls()

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        with open(config_path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)

    def build_catalog(self, catalog: Optional[NamespaceCatalog] = None) -> NamespaceCatalog:
        """Define the configured namespaces, plus the current one."""
        catalog = catalog or NamespaceCatalog()
        catalog.define_namespace(self.current_namespace)
        for name, ns_config in self.namespaces.items():
            catalog.define_namespace(name, exports=ns_config.exports, internals=ns_config.internals)
        return catalog

    def apply_aliases(self, registry: AliasRegistry) -> int:
        """Register the configured aliases. Returns how many were applied."""
        count = 0
        for scope, bindings in self.aliases.items():
            for alias, namespace_name in bindings.items():
                registry.register(scope, namespace_name, alias)
                count += 1
        return count


def load_config(config_path: Optional[str] = None) -> PseudonymsConfig:
    """Load configuration from file or defaults."""
    if config_path:
        return PseudonymsConfig.load_from_file(Path(config_path))

    # Try to find config in standard locations
    standard_paths = [
        Path("pseudonyms.yaml"),
        Path("config/pseudonyms.yaml"),
        Path.home() / ".pseudonyms" / "config.yaml"
    ]

    for path in standard_paths:
        if path.exists():
            return PseudonymsConfig.load_from_file(path)

    return PseudonymsConfig.load_default()
