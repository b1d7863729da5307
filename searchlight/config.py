"""Configuration management for SearchLight."""

import re
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from ruamel.yaml import YAML

from .search.candidates import DEFAULT_CANDIDATES
from .search.matcher import EmptyQueryPolicy

DEFAULT_CONFIG_PATH = Path.home() / ".config/searchlight/config.yaml"

OPEN_TAG_RE = re.compile(r"<[A-Za-z][\w:.-]*(\s[^<>]*)?>")
CLOSE_TAG_RE = re.compile(r"</[A-Za-z][\w:.-]*\s*>")


class SearchConfig(BaseModel):
    """Configuration for query matching."""

    regex_enabled: bool = Field(default=False, description="Interpret regex syntax in queries by default")
    empty_query: EmptyQueryPolicy = Field(
        default=EmptyQueryPolicy.MATCH_ALL,
        description="Whether an empty query matches every candidate ('all') or none ('none')"
    )
    keep_previous_on_error: bool = Field(
        default=False,
        description="Keep showing the previous results while the regex is invalid"
    )

    class Config:
        """Pydantic configuration."""

        use_enum_values = True


class HighlightConfig(BaseModel):
    """Configuration for match markup."""

    open_tag: str = Field(default="<b>", min_length=1, description="Markup inserted before a match")
    close_tag: str = Field(default="</b>", min_length=1, description="Markup inserted after a match")

    @field_validator("open_tag")
    @classmethod
    def check_open_tag(cls, value: str) -> str:
        if not OPEN_TAG_RE.fullmatch(value):
            raise ValueError(f"open_tag must be a markup start tag such as <b>, got {value!r}")
        return value

    @field_validator("close_tag")
    @classmethod
    def check_close_tag(cls, value: str) -> str:
        if not CLOSE_TAG_RE.fullmatch(value):
            raise ValueError(f"close_tag must be a markup end tag such as </b>, got {value!r}")
        return value


class SearchLightConfig(BaseModel):
    """Main configuration for SearchLight."""

    candidates: List[str] = Field(
        default_factory=lambda: list(DEFAULT_CANDIDATES),
        description="Candidate strings to search, in display order"
    )
    search: SearchConfig = Field(default_factory=SearchConfig)
    highlight: HighlightConfig = Field(default_factory=HighlightConfig)
    log_level: str = Field(default="INFO", description="Logging level")

    class Config:
        """Pydantic configuration."""

        validate_assignment = True
        use_enum_values = True


def load_config(config_path: Optional[Path] = None) -> SearchLightConfig:
    """Load configuration from file or create default."""

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if config_path.exists():
        yaml = YAML(typ="safe")
        with open(config_path, "r") as f:
            data = yaml.load(f) or {}
        return SearchLightConfig(**data)
    else:
        # Create default config
        config = SearchLightConfig()
        save_config(config, config_path)
        return config


def save_config(config: SearchLightConfig, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    config_path.parent.mkdir(parents=True, exist_ok=True)

    yaml = YAML()
    yaml.default_flow_style = False

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(mode="json"), f)


def get_config() -> SearchLightConfig:
    """Get the global configuration instance."""

    if not hasattr(get_config, "_config"):
        get_config._config = load_config()

    return get_config._config
