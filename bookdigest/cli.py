"""Command line interface for the bookdigest toolkit."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import typer
from loguru import logger

from .config import AppConfig, StyleId, load_config
from .config.inspector import check_config, explain_config
from .export import NothingToExportError, ReadwiseAuthError, ReadwiseClient, ReadwiseExportError
from .speech import NarrationChannel, RecordingSynthesizer, StreamSynthesizer
from .summary import OutputFormat, SummaryRecord, SummaryService, suggested_questions
from .summary.language import detect_language


@dataclass(slots=True)
class CLIState:
    """Holds shared state between Typer commands."""

    config_path: Path
    _config: AppConfig | None = None
    _service: SummaryService | None = None

    def ensure_config(self) -> AppConfig:
        if self._config is None:
            if self.config_path.exists():
                logger.debug("Loading configuration from {}", self.config_path)
                self._config = load_config(AppConfig, self.config_path)
            else:
                logger.warning("Configuration file {} not found; using defaults", self.config_path)
                self._config = AppConfig()
            _configure_logging(self._config.logging_level)
        return self._config

    def ensure_service(self) -> SummaryService:
        if self._service is None:
            self._service = SummaryService(self.ensure_config().registry)
        return self._service


app = typer.Typer(help="Render AI-generated book summaries to Markdown, HTML, speech and highlights")
config_app = typer.Typer(help="Validate and document configuration files")
app.add_typer(config_app, name="config")
export_app = typer.Typer(help="Export highlights to third-party services")
app.add_typer(export_app, name="export")

_stderr_sink_id: int | None = None


def _configure_logging(level: str) -> None:
    """Replace the default stderr sink with one at the configured level."""

    global _stderr_sink_id
    if _stderr_sink_id is not None:
        logger.remove(_stderr_sink_id)
    else:
        try:
            logger.remove(0)
        except ValueError:
            pass
    try:
        _stderr_sink_id = logger.add(sys.stderr, level=level.upper())
    except ValueError:
        _stderr_sink_id = logger.add(sys.stderr, level="INFO")
        logger.warning("Unknown logging level '{}'; using INFO", level)


def _default_config_path() -> Path:
    repo_root = Path(__file__).resolve().parents[1]
    return repo_root / "config" / "example.toml"


def _normalize_format(value: str) -> str:
    return value.lower()


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):  # pragma: no cover - defensive guard
        raise RuntimeError("CLI context is not initialised")
    return state


def _exit(code: int) -> None:
    raise typer.Exit(code)


def _read_record(path: Path, style: StyleId, file_name: str | None) -> SummaryRecord:
    content = path.read_text(encoding="utf-8")
    return SummaryRecord(style=style, content=content, file_name=file_name or path.stem)


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        print(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    logger.info("Wrote {}", output)


def _to_jsonable(value: Any) -> Any:
    if hasattr(value, "__dataclass_fields__"):
        return asdict(value)
    return value


_INPUT_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Summary JSON file")
_STYLE_OPTION = typer.Option(StyleId.EXECUTIVE, "--style", case_sensitive=False, help="Summary style")
_FILE_NAME_OPTION = typer.Option(None, "--file-name", help="Uploaded file name, used when the summary has no title")


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Path = typer.Option(
        _default_config_path(),
        help="Path to the TOML configuration file",
    ),
) -> None:
    """Initialise CLI state."""

    ctx.obj = CLIState(config_path=config.resolve())


@app.command(help="Render a summary into one output format")
def render(
    ctx: typer.Context,
    input: Path = _INPUT_ARGUMENT,  # noqa: A002 - match CLI argument name
    style: StyleId = _STYLE_OPTION,
    format: OutputFormat = typer.Option(  # noqa: A002 - match CLI option name
        OutputFormat.MARKDOWN,
        "--format",
        case_sensitive=False,
        help="Output format",
    ),
    file_name: str | None = _FILE_NAME_OPTION,
    output: Path | None = typer.Option(None, "--output", help="Write to this file instead of stdout"),
) -> None:
    state = _get_state(ctx)
    service = state.ensure_service()
    record = _read_record(input, style, file_name)

    outcome = service.render(record, format)
    if not outcome.ok:
        logger.error("{}; showing raw content instead", outcome.message)
        print(outcome.body)
        _exit(1)

    if outcome.message:
        logger.warning(outcome.message)

    if format in {OutputFormat.HIGHLIGHTS, OutputFormat.VIEW}:
        _emit(json.dumps(_to_jsonable(outcome.body), indent=2, ensure_ascii=False, default=str), output)
    else:
        if output is None and outcome.filename:
            logger.debug("Suggested download name: {}", outcome.filename)
        _emit(outcome.body, output)


@app.command("detect-language", help="Detect the language a summary was written in")
def detect_language_command(
    input: Path = _INPUT_ARGUMENT,  # noqa: A002 - match CLI argument name
    format: str = typer.Option(  # noqa: A002 - match CLI option name
        "text",
        "--format",
        case_sensitive=False,
        help="Output format",
        callback=_normalize_format,
    ),
) -> None:
    content = input.read_text(encoding="utf-8")
    language = detect_language(content)
    questions = suggested_questions(content)

    if format == "json":
        print(json.dumps({"language": language, "suggestions": list(questions)}, indent=2, ensure_ascii=False))
        return

    print(language)
    for question in questions:
        print(f"  - {question}")


@app.command(help="Narrate a summary through the speech channel (script goes to stdout unless --dry-run)")
def speak(
    ctx: typer.Context,
    input: Path = _INPUT_ARGUMENT,  # noqa: A002 - match CLI argument name
    style: StyleId = _STYLE_OPTION,
    file_name: str | None = _FILE_NAME_OPTION,
    dry_run: bool = typer.Option(False, "--dry-run", help="Log a preview without writing the script"),
) -> None:
    state = _get_state(ctx)
    config = state.ensure_config()
    service = state.ensure_service()
    record = _read_record(input, style, file_name)

    script = service.to_speech(record)
    preview_chars = config.speech.preview_chars
    preview = script if preview_chars == 0 else script[:preview_chars]
    logger.info("Narrating {} characters: {}", len(script), preview)

    synthesizer = RecordingSynthesizer() if dry_run else StreamSynthesizer(sys.stdout)
    channel = NarrationChannel(synthesizer)
    channel.start(script)


@export_app.command("readwise", help="Send a summary's highlights to Readwise")
def export_readwise(
    ctx: typer.Context,
    input: Path = _INPUT_ARGUMENT,  # noqa: A002 - match CLI argument name
    style: StyleId = _STYLE_OPTION,
    file_name: str | None = _FILE_NAME_OPTION,
) -> None:
    state = _get_state(ctx)
    config = state.ensure_config()
    if config.readwise is None or not config.readwise.enabled:
        logger.error("Readwise export is not configured")
        _exit(2)

    record = _read_record(input, style, file_name)
    client = ReadwiseClient(config.readwise)
    try:
        result = client.export_record(record, state.ensure_service())
    except NothingToExportError:
        logger.warning("No highlights to export")
        _exit(1)
    except EnvironmentError as exc:
        logger.error("Readwise token unavailable: {}", exc)
        _exit(2)
    except ReadwiseAuthError as exc:
        logger.error("{}; update the token and retry", exc)
        _exit(3)
    except ReadwiseExportError as exc:
        logger.error("{}", exc)
        _exit(4)

    logger.info("Exported {} highlights for '{}'", result.count, result.title)
    print(json.dumps({"count": result.count}))


@config_app.command(help="Validate the configuration file")
def check(
    ctx: typer.Context,
    format: str = typer.Option(  # noqa: A002 - match CLI option name
        "text",
        "--format",
        case_sensitive=False,
        help="Output format for validation results",
        callback=_normalize_format,
    ),
) -> None:
    state = _get_state(ctx)
    result, exit_code, _ = check_config(state.config_path)

    if format == "json":
        print(json.dumps(result, indent=2, ensure_ascii=False, default=str))
        _exit(exit_code)

    if result["status"] == "ok":
        logger.info("Configuration OK: {}", result["config_path"])
        for warning in result["warnings"]:
            logger.warning(warning)
    else:
        error: dict[str, Any] = result["error"]
        logger.error(
            "Configuration error ({}) for {}: {}",
            error["type"],
            result["config_path"],
            error["message"],
        )
        for detail in error.get("details", []):
            location = detail["loc"] or "<root>"
            logger.error("  - {}: {} ({})", location, detail["message"], detail["type"])

    _exit(exit_code)


@config_app.command(help="Describe available configuration fields")
def explain(
    format: str = typer.Option(  # noqa: A002 - match CLI option name
        "text",
        "--format",
        case_sensitive=False,
        help="Output format for configuration schema",
        callback=_normalize_format,
    ),
) -> None:
    fields = explain_config()

    if format == "json":
        print(json.dumps({"fields": fields}, indent=2, ensure_ascii=False, default=str))
        return

    logger.info("Configuration schema ({} fields):", len(fields))
    for field in fields:
        default_value = field["default"]
        if isinstance(default_value, (dict, list)):
            default_repr = json.dumps(default_value, ensure_ascii=False, default=str)
        elif default_value is None:
            default_repr = "None"
        else:
            default_repr = str(default_value)
        description = field["description"] or "(no description)"
        logger.info(
            "- {} ({}){}; default={} :: {}",
            field["name"],
            field["type"],
            " [required]" if field["required"] else "",
            default_repr,
            description,
        )


def main(argv: list[str] | None = None) -> int:
    """Entry point compatible with setuptools console scripts."""

    try:
        result = app(args=argv, standalone_mode=False)
    except typer.Exit as exc:  # pragma: no cover - Typer translates exit codes
        return exc.exit_code
    if isinstance(result, int):
        return result
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
