"""Unit tests for parse config loading and validation."""

import pytest

from democlick.contexts.intake.exceptions import ParseConfigError
from democlick.contexts.intake.parse_config import (
    PACKAGED_CONFIG_PATH,
    ParseConfig,
    load_parse_config,
    validate_parse_config,
)


@pytest.mark.unit
def test_packaged_config_matches_defaults():
    """Test that the shipped YAML documents the structured defaults."""
    assert PACKAGED_CONFIG_PATH.exists()
    assert load_parse_config() == ParseConfig()
    assert ParseConfig().workspace_id_path == ["customIDs", "workspaceId"]


@pytest.mark.unit
def test_partial_override(tmp_path):
    """Test that a partial YAML file only overrides the keys it names."""
    config_path = tmp_path / "parse_config.yaml"
    config_path.write_text("suffix_min_parts: 4\nnormalize_unicode: true\n")

    config = load_parse_config(config_path)

    assert config.suffix_min_parts == 4
    assert config.normalize_unicode is True
    assert config.block_size == 6
    assert isinstance(config, ParseConfig)


@pytest.mark.unit
def test_env_config_path(tmp_path, monkeypatch):
    """Test that PARSE_CONFIG_PATH is used when no path is passed."""
    config_path = tmp_path / "env_config.yaml"
    config_path.write_text("workspace_id_path: [ids, org]\n")
    monkeypatch.setenv("PARSE_CONFIG_PATH", str(config_path))

    assert load_parse_config().workspace_id_path == ["ids", "org"]


@pytest.mark.unit
def test_missing_file(tmp_path):
    """Test error for a config path that does not exist."""
    with pytest.raises(ParseConfigError, match="Parse config not found"):
        load_parse_config(tmp_path / "missing.yaml")


@pytest.mark.unit
@pytest.mark.parametrize(
    "yaml_text",
    [
        "blocksize: 6\n",  # unknown key
        "block_size: many\n",  # wrong type
    ],
)
def test_invalid_yaml_values(tmp_path, yaml_text):
    """Test that unknown keys and wrong types raise ParseConfigError."""
    config_path = tmp_path / "bad.yaml"
    config_path.write_text(yaml_text)

    with pytest.raises(ParseConfigError, match="Invalid parse config") as exc_info:
        load_parse_config(config_path)

    assert exc_info.value.config_path == config_path
    assert exc_info.value.original_error is not None


@pytest.mark.unit
@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"block_size": 0}, "block_size"),
        ({"json_offset": 6}, "json_offset"),
        ({"url_offset": 0}, "url_offset"),
        ({"block_size": 4, "json_offset": 3, "url_offset": 4}, "url_offset"),
        ({"workspace_id_path": []}, "workspace_id_path"),
        ({"suffix_min_parts": 1}, "suffix_min_parts"),
    ],
)
def test_out_of_range_values(overrides, message):
    """Test that offsets outside the block and unusable heuristics are rejected."""
    with pytest.raises(ParseConfigError, match=message):
        validate_parse_config(ParseConfig(**overrides))


@pytest.mark.unit
def test_out_of_range_from_yaml(tmp_path):
    """Test that YAML values go through range validation."""
    config_path = tmp_path / "bad_offset.yaml"
    config_path.write_text("json_offset: 9\n")

    with pytest.raises(ParseConfigError, match="json_offset"):
        load_parse_config(config_path)


@pytest.mark.unit
def test_malformed_yaml(tmp_path):
    """Test that a YAML syntax error raises ParseConfigError."""
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("block_size: [6\n")

    with pytest.raises(ParseConfigError, match="Invalid parse config") as exc_info:
        load_parse_config(config_path)

    assert exc_info.value.config_path == config_path


@pytest.mark.unit
def test_env_config_path_is_directory(tmp_path, monkeypatch):
    """Test that a PARSE_CONFIG_PATH pointing at a directory is reported as not found."""
    monkeypatch.setenv("PARSE_CONFIG_PATH", str(tmp_path))

    with pytest.raises(ParseConfigError, match="Parse config not found"):
        load_parse_config()


@pytest.mark.unit
def test_loaded_configs_are_independent():
    """Test that changing one loaded config does not leak into later loads."""
    config = load_parse_config()
    config.suffix_min_parts = 9
    config.workspace_id_path.append("extra")

    assert load_parse_config() == ParseConfig()
    assert ParseConfig().workspace_id_path == ["customIDs", "workspaceId"]
