import json

from bookdigest.cli import main

from .utils import logger_to_stderr, write_config


def test_config_check_json_success(capsys, tmp_path):
    config_file = write_config(tmp_path)

    with logger_to_stderr():
        exit_code = main(["--config", str(config_file), "config", "check", "--format", "json"])

    assert exit_code == 0

    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert payload["status"] == "ok"
    assert payload["warnings"] == []
    assert payload["config_path"].endswith("config.toml")


def test_config_check_warns_without_readwise(capsys, tmp_path):
    config_file = write_config(
        tmp_path,
        readwise_token=None,
        extra='[registry.labels]\noverview = "Gist"',
    )

    with logger_to_stderr():
        exit_code = main(["--config", str(config_file), "config", "check", "--format", "json"])

    assert exit_code == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["warnings"] == [
        "Built-in field labels overridden: overview",
        "Readwise export is not configured; 'export readwise' will be unavailable",
    ]


def test_config_check_missing_file(capsys, tmp_path):
    missing_path = tmp_path / "absent.toml"

    with logger_to_stderr():
        exit_code = main(["--config", str(missing_path), "config", "check"])

    assert exit_code == 2

    captured = capsys.readouterr()
    assert "Configuration error (missing_file" in captured.err
    assert str(missing_path) in captured.err


def test_config_check_validation_error(capsys, tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text("unknown_field = 42\n")

    with logger_to_stderr():
        exit_code = main(["--config", str(config_file), "config", "check"])

    assert exit_code == 3

    captured = capsys.readouterr()
    assert "validation_error" in captured.err
    assert "Extra inputs are not permitted" in captured.err


def test_config_check_invalid_toml(capsys, tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text("logging_level = \n")

    with logger_to_stderr():
        exit_code = main(["--config", str(config_file), "config", "check"])

    assert exit_code == 1
    assert "invalid_format" in capsys.readouterr().err


def test_config_explain_text_output(capsys):
    with logger_to_stderr():
        exit_code = main(["config", "explain"])

    assert exit_code == 0

    captured = capsys.readouterr()
    assert "Configuration schema" in captured.err
    assert "registry.byline_brand" in captured.err
    assert "registry.styles{}.label" in captured.err
    assert "readwise.token" in captured.err


def test_config_explain_json_output(capsys):
    exit_code = main(["config", "explain", "--format", "json"])

    assert exit_code == 0

    fields = {field["name"]: field for field in json.loads(capsys.readouterr().out)["fields"]}
    assert fields["speech.preview_chars"]["default"] == 280
    assert fields["readwise"]["type"] == "Optional[ReadwiseConfig]"
