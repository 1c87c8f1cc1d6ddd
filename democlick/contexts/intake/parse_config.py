"""
Parse configuration for the intake context.

Block layout and name heuristics live in a structured OmegaConf config so they
can be overridden from YAML without touching the parser. Defaults match the
raw log view layout:

    offset 0  timestamp line ("Jan 05 10:30:00")
    offset 3  event metadata JSON ({"customIDs": {"workspaceId": ...}})
    offset 4  booking page URL (https://calendly.com/<slug>/...)

Examples:
    >>> config = load_parse_config()
    >>> config.block_size
    6

    >>> config = load_parse_config(Path("configs/eu_export.yaml"))
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from democlick.contexts.intake.exceptions import ParseConfigError

load_dotenv()

PACKAGED_CONFIG_PATH = Path(__file__).parent / "parse_config.yaml"


@dataclass
class ParseConfig:
    """
    Layout of one event block and the extraction heuristics applied to it.

    Attributes:
        block_size: Lines consumed per event (timestamp line included)
        json_offset: Block offset of the metadata JSON line
        url_offset: Block offset of the booking URL line
        workspace_id_path: Key path to the workspace ID inside the JSON
        suffix_min_parts: Slugs with at least this many hyphen parts lose their
            last part (meeting-type suffix such as "demo")
        normalize_unicode: Replace non-breaking/zero-width characters before
            segmentation (rich-text pastes)
    """

    block_size: int = 6
    json_offset: int = 3
    url_offset: int = 4
    workspace_id_path: List[str] = field(default_factory=lambda: ["customIDs", "workspaceId"])
    suffix_min_parts: int = 3
    normalize_unicode: bool = False


def validate_parse_config(config: ParseConfig, config_path: Optional[Path] = None) -> ParseConfig:
    """
    Check that offsets fall inside the block and heuristics are usable.

    Args:
        config: Config to validate
        config_path: Source file, for error messages

    Returns:
        The same config, unchanged

    Raises:
        ParseConfigError: If any value is out of range
    """
    if config.block_size < 1:
        raise ParseConfigError(f"block_size must be >= 1, got {config.block_size}", config_path)

    for name in ("json_offset", "url_offset"):
        offset = getattr(config, name)
        if not 0 < offset < config.block_size:
            raise ParseConfigError(
                f"{name} must be between 1 and block_size - 1 ({config.block_size - 1}), "
                f"got {offset}",
                config_path,
            )

    if not config.workspace_id_path:
        raise ParseConfigError("workspace_id_path must name at least one key", config_path)

    if config.suffix_min_parts < 2:
        raise ParseConfigError(
            f"suffix_min_parts must be >= 2 (a single-part slug is never trimmed), "
            f"got {config.suffix_min_parts}",
            config_path,
        )

    return config


def load_parse_config(config_path: Optional[Path] = None) -> ParseConfig:
    """
    Load parse config from YAML, merged over the structured defaults.

    Resolution order for the YAML file:
    1. config_path argument
    2. PARSE_CONFIG_PATH environment variable
    3. Packaged parse_config.yaml

    Args:
        config_path: Optional YAML file with overrides (partial files are fine)

    Returns:
        Validated ParseConfig

    Raises:
        ParseConfigError: If the file is missing or unreadable, is not valid
            YAML, has unknown keys or wrong types, or has out-of-range values
    """
    if config_path is None:
        env_path = os.getenv("PARSE_CONFIG_PATH")
        config_path = Path(env_path) if env_path else PACKAGED_CONFIG_PATH

    config_path = Path(config_path)
    if not config_path.is_file():
        raise ParseConfigError("Parse config not found", config_path)

    schema = OmegaConf.structured(ParseConfig)
    try:
        overrides = OmegaConf.load(config_path)
        merged = OmegaConf.merge(schema, overrides)
        config = OmegaConf.to_object(merged)
    except (OmegaConfBaseException, yaml.YAMLError, OSError) as e:
        raise ParseConfigError("Invalid parse config", config_path, original_error=e) from e

    return validate_parse_config(config, config_path)
