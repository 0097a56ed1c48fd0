"""
Tests for the click command line.
"""
import json

from click.testing import CliRunner

from postsentiment.main import cli


def test_analyze_text_output():
    result = CliRunner().invoke(cli, ["analyze", "not good"], obj={})
    assert result.exit_code == 0
    assert "Sentiment: negative" in result.stdout
    assert "Confidence: 77.9% (Medium)" in result.stdout
    assert "Words: 2" in result.stdout
    assert "Found 1 negations affecting sentiment." in result.stdout


def test_analyze_json_output():
    result = CliRunner().invoke(cli, ["analyze", "--json", "I love it"], obj={})
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["sentiment"] == "positive"
    assert payload["wordCount"] == 3
    assert set(payload["scores"]) == {"positive", "negative", "neutral"}
    assert payload["explanation"].startswith("Analyzed 3 words.")
    assert payload["confidenceLevel"]


def test_run_command(tmp_path, posts_file):
    config_path = tmp_path / "config.yaml"
    output_path = tmp_path / "out.json"
    config_path.write_text(
        "\n".join([
            "data:",
            f"  input_path: \"{posts_file.as_posix()}\"",
            f"  output_path: \"{output_path.as_posix()}\"",
            "report:",
            f"  report_dir: \"{(tmp_path / 'report').as_posix()}\"",
            "logging:",
            "  level: \"WARNING\"",
        ]),
        encoding="utf-8",
    )

    result = CliRunner().invoke(cli, ["run", "--config", str(config_path)], obj={})
    assert result.exit_code == 0, result.output
    assert "Posts analysed: 6" in result.stdout
    assert "Dominant sentiment: negative" in result.stdout
    assert "Charts: 3" in result.stdout
    assert output_path.exists()


def test_run_command_input_override(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"report:\n  report_dir: \"{(tmp_path / 'report').as_posix()}\"\n", encoding="utf-8"
    )
    posts = tmp_path / "other.json"
    posts.write_text(json.dumps(["good", "bad", "fine"]), encoding="utf-8")
    output = tmp_path / "other_out.json"

    result = CliRunner().invoke(
        cli, ["run", "-c", str(config_path), "-i", str(posts), "-o", str(output)], obj={}
    )
    assert result.exit_code == 0, result.output
    assert "Posts analysed: 3" in result.stdout
    assert len(json.loads(output.read_text(encoding="utf-8"))) == 3


def test_run_command_missing_config(tmp_path):
    result = CliRunner().invoke(cli, ["run", "-c", str(tmp_path / "nope.yaml")], obj={})
    assert result.exit_code == 2


def test_run_command_invalid_config(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("report:\n  chart_format: \"gif\"\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["run", "-c", str(config_path)], obj={})
    assert result.exit_code == 1
    assert "Invalid report.chart_format" in result.output


def test_run_command_unknown_config_key(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("data:\n  inputpath: x.json\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["run", "-c", str(config_path)], obj={})
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Unknown config key(s): data.inputpath" in result.output


def test_run_command_missing_input(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"report:\n  report_dir: \"{(tmp_path / 'report').as_posix()}\"\n", encoding="utf-8"
    )
    missing = tmp_path / "nope.json"
    result = CliRunner().invoke(cli, ["run", "-c", str(config_path), "-i", str(missing)], obj={})
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "nope.json" in result.output


def test_run_command_malformed_input(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"report:\n  report_dir: \"{(tmp_path / 'report').as_posix()}\"\n", encoding="utf-8"
    )
    posts = tmp_path / "broken.json"
    posts.write_text("[{\"content\": ", encoding="utf-8")
    result = CliRunner().invoke(cli, ["run", "-c", str(config_path), "-i", str(posts)], obj={})
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error:" in result.output
