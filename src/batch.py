"""BatchDriver — one audio file in, one sentence-per-line .txt out, failures isolated per file."""
import asyncio
import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from src.constants import (
    ERR_EMPTY_AUDIO,
    ERR_FILE_MISSING,
    ERR_INPUT_DIR_MISSING,
    ERR_NO_AUDIO_FILES,
    ERR_OUTPUT_DIR,
    ERR_READ_AUDIO,
    ERR_WRITE_OUTPUT,
    MSG_JOB_DONE,
    MSG_JOB_FAILED,
    MSG_JOB_START,
    MSG_RUN_SUMMARY,
    MSG_STEM_COLLISION,
    OUTPUT_ENCODING,
    OUTPUT_SUFFIX,
)
from src.errors import AudioReadError, InputError, OutputWriteError, TranscriptionError
from src.formatter import format_sentences
from src.transcription.client import TranscriptionClient

logger = logging.getLogger(__name__)

Formatter = Callable[[str], str | None]


class JobStatus(Enum):
    PENDING = "pending"
    TRANSCRIBING = "transcribing"
    FORMATTING = "formatting"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class BatchJob:
    input_path: Path
    output_path: Path

    @classmethod
    def for_input(cls, input_path: Path, output_dir: Path) -> "BatchJob":
        return cls(input_path, output_dir / f"{input_path.stem}{OUTPUT_SUFFIX}")


@dataclass(frozen=True)
class JobResult:
    job: BatchJob
    status: JobStatus
    failed_stage: JobStatus | None = None
    error: TranscriptionError | None = None

    @property
    def ok(self) -> bool:
        return self.status is JobStatus.DONE


@dataclass(frozen=True)
class BatchReport:
    results: tuple[JobResult, ...]

    @property
    def succeeded(self) -> list[JobResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> list[JobResult]:
        return [r for r in self.results if not r.ok]


# ── input discovery ───────────────────────────────────────────────────────────


def is_audio_file(name: str, extensions: Iterable[str], case_sensitive: bool = True) -> bool:
    match case_sensitive:
        case True:
            return any(name.endswith(ext) for ext in extensions)
        case False:
            lowered = name.lower()
            return any(lowered.endswith(ext.lower()) for ext in extensions)


def discover_audio_files(
    input_dir: Path,
    extensions: tuple[str, ...],
    case_sensitive: bool = True,
) -> list[Path]:
    """Direct children of input_dir with an audio extension, sorted by name."""
    return sorted(
        (
            entry
            for entry in input_dir.iterdir()
            if entry.is_file() and is_audio_file(entry.name, extensions, case_sensitive)
        ),
        key=lambda p: p.name,
    )


def plan_inputs(
    input_dir: Path,
    file_name: str | None = None,
    extensions: tuple[str, ...] = (".mp3", ".wav"),
    case_sensitive: bool = True,
) -> list[Path]:
    """Resolve the files a run will process. Raises InputError before any work starts."""
    if not input_dir.is_dir():
        raise InputError(ERR_INPUT_DIR_MISSING % input_dir)

    match file_name:
        case str() as name if name:
            target = input_dir / name
            if not target.is_file():
                raise InputError(ERR_FILE_MISSING % target)
            return [target]
        case _:
            found = discover_audio_files(input_dir, extensions, case_sensitive)
            match found:
                case []:
                    raise InputError(ERR_NO_AUDIO_FILES % (input_dir, ", ".join(extensions)))
                case _:
                    _warn_on_stem_collisions(found)
                    return found


def _warn_on_stem_collisions(paths: list[Path]) -> None:
    by_stem: dict[str, list[str]] = {}
    for path in paths:
        by_stem.setdefault(path.stem, []).append(path.name)
    for stem, names in by_stem.items():
        match names:
            case [_, _, *_]:
                logger.warning(MSG_STEM_COLLISION, ", ".join(names), f"{stem}{OUTPUT_SUFFIX}")
            case _:
                pass


# ── blocking file I/O (run via asyncio.to_thread) ─────────────────────────────


def _read_audio(path: Path) -> bytes:
    try:
        audio = path.read_bytes()
    except OSError as exc:
        raise AudioReadError(ERR_READ_AUDIO % exc) from exc
    match audio:
        case b"":
            raise AudioReadError(ERR_EMPTY_AUDIO)
        case _:
            return audio


def _write_transcript(path: Path, text: str) -> None:
    # encode first so an unencodable transcript leaves no partial file behind
    try:
        path.write_bytes(text.encode(OUTPUT_ENCODING))
    except (OSError, UnicodeError) as exc:
        raise OutputWriteError(ERR_WRITE_OUTPUT % exc) from exc


# ── driver ────────────────────────────────────────────────────────────────────


class BatchDriver:
    """Runs each BatchJob through transcribe → format → write, at most max_concurrency at a time."""

    def __init__(
        self,
        client: TranscriptionClient,
        max_concurrency: int = 1,
        formatter: Formatter = format_sentences,
    ) -> None:
        self._client = client
        self._max_concurrency = max(1, max_concurrency)
        self._formatter = formatter

    async def run(self, inputs: list[Path], output_dir: Path) -> BatchReport:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise InputError(ERR_OUTPUT_DIR % (output_dir, exc)) from exc

        jobs = [BatchJob.for_input(path, output_dir) for path in inputs]
        semaphore = asyncio.Semaphore(self._max_concurrency)
        total = len(jobs)

        async def bounded(index: int, job: BatchJob) -> JobResult:
            async with semaphore:
                logger.info(MSG_JOB_START, index, total, job.input_path.name)
                return await self.process(job)

        results = await asyncio.gather(
            *(bounded(i, job) for i, job in enumerate(jobs, start=1))
        )
        report = BatchReport(tuple(results))
        logger.info(MSG_RUN_SUMMARY, total, len(report.succeeded), len(report.failed))
        return report

    async def process(self, job: BatchJob) -> JobResult:
        stage = JobStatus.TRANSCRIBING
        start = time.monotonic()
        try:
            audio = await asyncio.to_thread(_read_audio, job.input_path)
            transcript = await self._client.transcribe(audio)

            stage = JobStatus.FORMATTING
            text = self._formatter(transcript) or ""

            stage = JobStatus.WRITING
            await asyncio.to_thread(_write_transcript, job.output_path, text)
        except TranscriptionError as exc:
            logger.error(MSG_JOB_FAILED, job.input_path.name, exc)
            return JobResult(job, JobStatus.FAILED, failed_stage=stage, error=exc)

        logger.info(MSG_JOB_DONE, job.output_path, time.monotonic() - start)
        return JobResult(job, JobStatus.DONE)
