"""Configuration loading and management for Bacon Score.

Configuration sources are merged in priority order:
    1. Defaults (defined in ScoreConfig)
    2. Global config (~/.bacon-score.toml)
    3. Project config (./bacon-score.toml)
    4. Explicit config file (--config)
    5. Environment variables (BACON_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(reference_actor="John Lithgow")
    >>> config.reference_actor
    'John Lithgow'
    >>> config.encoding
    'utf-8'
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import BaconScoreError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

DEFAULT_REFERENCE_ACTOR = "Kevin Bacon"


@dataclass(frozen=True)
class ScoreConfig:
    """Configuration for a scoring session.

    Attributes:
        reference_actor: Actor every query is measured against
        encoding: Text encoding of the dataset file
        show_path: Print the chain of movies behind each score (-l)
        suggestions: Maximum "did you mean" hints for unknown actors (0 = off)
        verbosity: Logging verbosity level
    """

    reference_actor: str = DEFAULT_REFERENCE_ACTOR
    encoding: str = "utf-8"
    show_path: bool = False
    suggestions: int = 3
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.reference_actor:
            raise InvalidConfigError("reference_actor", self.reference_actor, "must not be empty")

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise InvalidConfigError("encoding", self.encoding, "unknown text encoding")

        if self.suggestions < 0:
            raise InvalidConfigError("suggestions", self.suggestions, "must be non-negative")

        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )


def load_config(config_file: Optional[Path] = None, **overrides) -> ScoreConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options don't mask file values.

    Returns:
        Validated ScoreConfig instance

    Raises:
        BaconScoreError: If a config file is invalid or missing
        InvalidConfigError: If a merged value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".bacon-score.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise BaconScoreError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "bacon-score.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise BaconScoreError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise BaconScoreError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise BaconScoreError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ScoreConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise BaconScoreError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from BACON_* environment variables.

    Supported environment variables:
        BACON_REFERENCE_ACTOR: str
        BACON_ENCODING: str
        BACON_SHOW_PATH: bool (true/false/1/0)
        BACON_SUGGESTIONS: int
        BACON_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(ScoreConfig)

    result: dict[str, Any] = {}

    for field_name in ScoreConfig.__dataclass_fields__:
        env_key = f"BACON_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict."""
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise BaconScoreError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
