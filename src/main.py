"""Entry point — wires Config → DeepgramTranscriptionClient → BatchDriver."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from src.batch import BatchDriver, plan_inputs
from src.config import Config
from src.constants import MSG_CONFIG_ERROR, MSG_INPUT_ERROR, MSG_RUN_STARTING
from src.errors import ConfigError, InputError
from src.transcription.deepgram import DeepgramTranscriptionClient

app = typer.Typer(
    help="Send audio files to Deepgram and write sentence-per-line transcripts.",
    add_completion=False,
)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


@app.command()
def transcribe(
    input_dir: Path = typer.Option(
        ..., "--input-dir", "-d", help="Directory holding the audio files"
    ),
    output_dir: Path = typer.Option(
        ..., "--output-dir", "-o", help="Directory for .txt transcripts (created if missing)"
    ),
    file: Optional[str] = typer.Option(
        None, "--file", "-f", help="Only transcribe this file from the input directory"
    ),
    jobs: Optional[int] = typer.Option(
        None, "--jobs", "-j", min=1, help="Files transcribed concurrently (default: MAX_CONCURRENCY)"
    ),
    ignore_case: bool = typer.Option(
        False, "--ignore-case", help="Match audio extensions case-insensitively"
    ),
) -> None:
    """Transcribe one file (-f) or every .mp3/.wav file in the input directory."""
    try:
        config = Config.from_env()
    except ConfigError as exc:
        typer.echo(MSG_CONFIG_ERROR % exc, err=True)
        raise typer.Exit(code=1)

    _setup_logging(config.log_level)
    logger = logging.getLogger(__name__)

    try:
        inputs = plan_inputs(
            input_dir,
            file_name=file,
            extensions=config.audio_extensions,
            case_sensitive=config.case_sensitive_extensions and not ignore_case,
        )
        logger.info(MSG_RUN_STARTING, len(inputs), input_dir, output_dir)

        driver = BatchDriver(
            DeepgramTranscriptionClient(config),
            max_concurrency=jobs or config.max_concurrency,
        )
        report = asyncio.run(driver.run(inputs, output_dir))
    except InputError as exc:
        logger.error(MSG_INPUT_ERROR, exc)
        raise typer.Exit(code=1)

    match report.failed:
        case []:
            pass
        case _:
            raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
