"""Integration tests for scripts/inspect_clicks.py."""

import pytest
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def cli(load_script):
    return load_script("inspect_clicks")


@pytest.mark.integration
def test_report(cli, raw_click_log_path):
    """Test summary counts, event listing, skipped lines and warnings."""
    result = runner.invoke(cli.app, [str(raw_click_log_path)])

    assert result.exit_code == 0, result.output
    assert "Non-empty lines: 20" in result.output
    assert "Events: 3" in result.output
    assert "Skipped lines: 2" in result.output
    assert "1. Jan 05 10:30:00 | w_123 | Jane Doe" in result.output
    assert "3. Jan 06 09:15:42 | (empty) | Sam Lee" in result.output
    assert "line 0: Raw Events" in result.output
    assert "! block 3: workspace_id: metadata has no customIDs" in result.output
    assert "Parsing successful" in result.output


@pytest.mark.integration
def test_normalize_flag(cli, tmp_path, raw_click_log):
    """Test that --normalize recovers a paste with zero-width characters."""
    input_path = tmp_path / "rich_paste.txt"
    input_path.write_text(raw_click_log.replace("Jan 0", "\u200bJan 0"), encoding="utf-8")

    plain = runner.invoke(cli.app, [str(input_path)])
    normalized = runner.invoke(cli.app, [str(input_path), "--normalize"])

    assert plain.exit_code == 1
    assert "No timestamp lines found" in plain.output
    assert normalized.exit_code == 0, normalized.output
    assert "Events: 3" in normalized.output


@pytest.mark.integration
def test_limit(cli, raw_click_log_path):
    """Test that --limit truncates the event listing."""
    result = runner.invoke(cli.app, [str(raw_click_log_path), "--limit", "1"])

    assert result.exit_code == 0, result.output
    assert "... and 2 more" in result.output
    assert "2. Jan 05 11:02:17" not in result.output


@pytest.mark.integration
def test_config_option(cli, raw_click_log_path, tmp_path):
    """Test that --config changes the listed names."""
    config_path = tmp_path / "parse_config.yaml"
    config_path.write_text("suffix_min_parts: 4\n")

    result = runner.invoke(cli.app, [str(raw_click_log_path), "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert "1. Jan 05 10:30:00 | w_123 | Jane Doe Demo" in result.output


@pytest.mark.integration
def test_env_config_matches_parse_clicks(cli, load_script, raw_click_log_path, tmp_path, monkeypatch):
    """Test that the report uses PARSE_CONFIG_PATH just like parse_clicks.py."""
    config_path = tmp_path / "env_config.yaml"
    config_path.write_text("suffix_min_parts: 5\n")
    monkeypatch.setenv("PARSE_CONFIG_PATH", str(config_path))

    report = runner.invoke(cli.app, [str(raw_click_log_path)])
    columns = runner.invoke(
        load_script("parse_clicks").app, [str(raw_click_log_path), "-c", "ae"]
    )

    assert report.exit_code == 0, report.output
    assert columns.exit_code == 0, columns.output
    assert "Jane Doe Demo\nJohn Q Public Demo\nSam Lee" in columns.output
    assert "| w_123 | Jane Doe Demo" in report.output
    assert "| w_456 | John Q Public Demo" in report.output


@pytest.mark.integration
def test_normalize_flag_overrides_config(cli, tmp_path, raw_click_log):
    """Test that --normalize applies on top of a loaded config."""
    input_path = tmp_path / "rich_paste.txt"
    input_path.write_text(raw_click_log.replace("Jan 0", "\u200bJan 0"), encoding="utf-8")
    config_path = tmp_path / "parse_config.yaml"
    config_path.write_text("suffix_min_parts: 4\nnormalize_unicode: false\n")

    result = runner.invoke(
        cli.app, [str(input_path), "--config", str(config_path), "--normalize"]
    )

    assert result.exit_code == 0, result.output
    assert "(Unicode normalization enabled)" in result.output
    assert "| w_123 | Jane Doe Demo" in result.output


@pytest.mark.integration
def test_invalid_config(cli, raw_click_log_path, tmp_path):
    """Test that a malformed config exits 1 before parsing."""
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("block_size: [6\n")

    result = runner.invoke(cli.app, [str(raw_click_log_path), "--config", str(config_path)])

    assert result.exit_code == 1
    assert "Invalid parse config" in result.output
    assert "=== Summary ===" not in result.output
