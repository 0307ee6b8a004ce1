import json

import pytest
from click.testing import CliRunner

from keysmith import __version__
from keysmith.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(cli, list(args), obj={})


def payload_of(result):
    """Decode the JSON document, skipping any log lines emitted before it."""
    lines = result.output.splitlines()
    start = next(i for i, line in enumerate(lines) if line in ("{", "["))
    return json.loads("\n".join(lines[start:]))


def test_version(runner):
    result = invoke(runner, "--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_quiet_password_prints_only_the_secret(runner):
    result = invoke(runner, "--quiet", "password", "--length", "20", "--no-symbols")
    assert result.exit_code == 0
    secret = result.output.strip()
    assert len(secret) == 20
    assert secret.isalnum()


def test_password_json_batch(runner):
    result = invoke(runner, "--output", "json", "password", "--count", "3", "--length", "12")
    assert result.exit_code == 0
    payload = payload_of(result)
    assert len(payload) == 3
    assert all(len(item["password"]) == 12 for item in payload)
    assert payload[0]["alphabet_size"] == 88


def test_password_console_shows_summary(runner):
    result = invoke(runner, "password")
    assert result.exit_code == 0
    assert "Entropy" in result.output
    assert "VERY STRONG" in result.output


def test_empty_alphabet_exits_with_error(runner):
    result = invoke(
        runner, "password", "--no-uppercase", "--no-lowercase", "--no-numbers", "--no-symbols"
    )
    assert result.exit_code == 1
    assert "Character pool is empty" in result.output


def test_passphrase_json(runner):
    result = invoke(
        runner, "-o", "json", "passphrase", "--words", "6",
        "--separator", "space", "--capitalize", "none", "--no-numbers",
    )
    assert result.exit_code == 0
    payload = payload_of(result)
    assert len(payload["password"].split(" ")) == 6
    assert payload["word_space_size"] == 384


def test_invalid_word_count_exits_with_error(runner):
    result = invoke(runner, "passphrase", "--words", "2")
    assert result.exit_code == 1
    assert "Word count must be between 4 and 8" in result.output


def test_errors_are_reported_once(runner):
    result = invoke(runner, "-q", "passphrase", "--words", "2")
    assert result.exit_code == 1
    assert result.output.count("between 4 and 8") == 1


def test_memorable(runner):
    result = invoke(runner, "-o", "json", "memorable", "long")
    assert result.exit_code == 0
    assert payload_of(result)["password"][-1].isdigit()


def test_memorable_rejects_unknown_tier(runner):
    assert invoke(runner, "memorable", "huge").exit_code == 2


def test_analyze_json(runner):
    result = invoke(runner, "-o", "json", "analyze", "")
    assert result.exit_code == 0
    payload = payload_of(result)
    assert payload["score"] == 0
    assert payload["strength"] == "weak"
    assert "Password is empty" in payload["weaknesses"]


def test_analyze_console_lists_weaknesses(runner):
    result = invoke(runner, "analyze", "password123")
    assert result.exit_code == 0
    assert "common pattern" in result.output
    assert "Suggestions" in result.output


def test_quick_and_requirements(runner):
    quick = payload_of(invoke(runner, "-o", "json", "quick", "pass"))
    assert quick["strength"] == "weak"

    reqs = payload_of(invoke(runner, "-o", "json", "requirements", "Abc1"))
    assert reqs["meets"] is False
    assert "At least 8 characters" in reqs["missing"]


def test_selftest_json(runner):
    result = invoke(runner, "-o", "json", "selftest", "--bound", "10", "--samples", "2000")
    payload = payload_of(result)
    assert payload["bound"] == 10
    assert payload["max_observed"] < 10
    assert result.exit_code == (0 if payload["passed"] else 1)


def test_selftest_rejects_too_few_samples(runner):
    assert invoke(runner, "selftest", "--bound", "384", "--samples", "100").exit_code == 2


def test_config_file_sets_option_defaults(runner, tmp_path):
    config = tmp_path / "keysmith.toml"
    config.write_text("[generator]\nlength = 12\ninclude_symbols = false\n", encoding="utf-8")
    result = invoke(runner, "--config", str(config), "-q", "password")
    assert result.exit_code == 0
    secret = result.output.strip()
    assert len(secret) == 12
    assert secret.isalnum()

    override = invoke(runner, "--config", str(config), "-q", "password", "--length", "30")
    assert len(override.output.strip()) == 30


def test_missing_corpus_file_is_reported(runner, tmp_path):
    config = tmp_path / "keysmith.toml"
    missing = tmp_path / "nowhere.json"
    config.write_text(f"[analyzer]\ncorpus_path = '{missing.as_posix()}'\n", encoding="utf-8")
    result = invoke(runner, "--config", str(config), "analyze", "hunter2")
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Cannot load pattern corpus" in result.output


def test_invalid_generator_settings_are_a_usage_error(runner, tmp_path):
    config = tmp_path / "keysmith.toml"
    config.write_text("[generator]\nseparator = 'comma'\n", encoding="utf-8")
    result = invoke(runner, "--config", str(config), "password")
    assert result.exit_code == 2
    assert "--config" in result.output
