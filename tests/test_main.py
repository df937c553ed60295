"""CLI wiring: flags, exit codes, and end-to-end runs with a fake transcriber."""
from pathlib import Path

import pytest
from typer.testing import CliRunner

from src.errors import TransportError
from src.main import app
from src.transcription.client import TranscriptionClient

runner = CliRunner()


class FakeTranscriber(TranscriptionClient):

    def __init__(self, replies: dict[bytes, object]) -> None:
        self._replies = replies

    async def transcribe(self, audio: bytes) -> str:
        match self._replies[audio]:
            case Exception() as exc:
                raise exc
            case text:
                return text


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    monkeypatch.setattr("src.config.load_dotenv", lambda **_: None)
    monkeypatch.setattr("src.main._setup_logging", lambda level: None)
    monkeypatch.setenv("DEEPGRAM_API_KEY", "dg-secret")
    monkeypatch.delenv("MAX_CONCURRENCY", raising=False)
    monkeypatch.delenv("AUDIO_EXTENSIONS", raising=False)
    monkeypatch.delenv("AUDIO_EXTENSIONS_CASE_SENSITIVE", raising=False)


@pytest.fixture
def fake_client(monkeypatch):
    def install(replies: dict[bytes, object]) -> list:
        configs = []

        def factory(config):
            configs.append(config)
            return FakeTranscriber(replies)

        monkeypatch.setattr("src.main.DeepgramTranscriptionClient", factory)
        return configs

    return install


def make_input_dir(tmp_path: Path) -> Path:
    input_dir = tmp_path / "in"
    input_dir.mkdir()
    (input_dir / "a.mp3").write_bytes(b"A")
    (input_dir / "b.wav").write_bytes(b"B")
    (input_dir / "c.txt").write_bytes(b"C")
    return input_dir


# ── argument handling ─────────────────────────────────────────────────────────


def test_missing_input_dir_prints_usage(tmp_path):
    result = runner.invoke(app, ["-o", str(tmp_path / "out")])

    assert result.exit_code == 2
    assert "Usage" in result.output
    assert not (tmp_path / "out").exists()


def test_missing_output_dir_prints_usage(tmp_path):
    result = runner.invoke(app, ["-d", str(tmp_path)])

    assert result.exit_code == 2
    assert "Usage" in result.output


def test_unknown_flag_prints_usage(tmp_path):
    result = runner.invoke(app, ["-d", str(tmp_path), "-o", str(tmp_path), "-x"])

    assert result.exit_code == 2
    assert "Usage" in result.output


def test_missing_api_key_aborts_before_processing(tmp_path, monkeypatch, fake_client):
    monkeypatch.delenv("DEEPGRAM_API_KEY", raising=False)
    configs = fake_client({})
    input_dir = make_input_dir(tmp_path)

    result = runner.invoke(app, ["-d", str(input_dir), "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "DEEPGRAM_API_KEY" in result.output
    assert configs == []
    assert not (tmp_path / "out").exists()


# ── runs ──────────────────────────────────────────────────────────────────────


def test_directory_mode_writes_transcripts(tmp_path, fake_client):
    fake_client({b"A": "Hello world. How are you?", b"B": "Bye!"})
    input_dir = make_input_dir(tmp_path)
    out_dir = tmp_path / "out"

    result = runner.invoke(app, ["-d", str(input_dir), "-o", str(out_dir)])

    assert result.exit_code == 0
    assert sorted(p.name for p in out_dir.iterdir()) == ["a.txt", "b.txt"]
    assert (out_dir / "a.txt").read_text(encoding="utf-8") == "Hello world.\nHow are you."


def test_single_file_mode_only_processes_named_file(tmp_path, fake_client):
    fake_client({b"B": "Only me"})
    input_dir = make_input_dir(tmp_path)
    out_dir = tmp_path / "out"

    result = runner.invoke(app, ["-d", str(input_dir), "-o", str(out_dir), "-f", "b.wav"])

    assert result.exit_code == 0
    assert [p.name for p in out_dir.iterdir()] == ["b.txt"]


def test_missing_single_file_aborts_with_no_output(tmp_path, fake_client):
    configs = fake_client({})
    input_dir = make_input_dir(tmp_path)
    out_dir = tmp_path / "out"

    result = runner.invoke(app, ["-d", str(input_dir), "-o", str(out_dir), "-f", "missing.mp3"])

    assert result.exit_code == 1
    assert configs == []
    assert not out_dir.exists()


def test_missing_input_dir_is_input_error(tmp_path, fake_client):
    fake_client({})

    result = runner.invoke(app, ["-d", str(tmp_path / "nope"), "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert not (tmp_path / "out").exists()


def test_per_file_failure_sets_exit_code_but_keeps_others(tmp_path, fake_client):
    fake_client({b"A": "Made it.", b"B": TransportError("connection refused")})
    input_dir = make_input_dir(tmp_path)
    out_dir = tmp_path / "out"

    result = runner.invoke(app, ["-d", str(input_dir), "-o", str(out_dir)])

    assert result.exit_code == 1
    assert (out_dir / "a.txt").read_text(encoding="utf-8") == "Made it."
    assert not (out_dir / "b.txt").exists()


def test_ignore_case_flag_matches_uppercase_extensions(tmp_path, fake_client):
    fake_client({b"L": "Loud"})
    input_dir = tmp_path / "in"
    input_dir.mkdir()
    (input_dir / "LOUD.MP3").write_bytes(b"L")
    out_dir = tmp_path / "out"

    strict = runner.invoke(app, ["-d", str(input_dir), "-o", str(out_dir)])
    relaxed = runner.invoke(app, ["-d", str(input_dir), "-o", str(out_dir), "--ignore-case"])

    assert strict.exit_code == 1
    assert relaxed.exit_code == 0
    assert (out_dir / "LOUD.txt").read_text(encoding="utf-8") == "Loud."
