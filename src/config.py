from dataclasses import dataclass
import os
from dotenv import load_dotenv

from src.constants import (
    DEEPGRAM_API_URL,
    DEFAULT_AUDIO_EXTENSIONS,
    DEFAULT_AUTH_SCHEME,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_CONCURRENCY,
    DEFAULT_PUNCTUATE,
    DEFAULT_REQUEST_TIMEOUT,
)
from src.errors import ConfigError

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Config:
    deepgram_api_key: str
    deepgram_api_url: str
    auth_scheme: str
    language: str
    punctuate: bool
    keywords: dict[str, str]
    content_type: str
    audio_extensions: tuple[str, ...]
    case_sensitive_extensions: bool
    max_concurrency: int
    request_timeout: float
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("DEEPGRAM_API_KEY")
        api_url = os.getenv("DEEPGRAM_API_URL", DEEPGRAM_API_URL)
        auth_scheme = os.getenv("DEEPGRAM_AUTH_SCHEME", DEFAULT_AUTH_SCHEME)
        language = os.getenv("DEEPGRAM_LANGUAGE", DEFAULT_LANGUAGE)
        raw_punctuate = os.getenv("DEEPGRAM_PUNCTUATE", DEFAULT_PUNCTUATE)
        raw_keywords = os.getenv("DEEPGRAM_KEYWORDS", "")
        content_type = os.getenv("AUDIO_CONTENT_TYPE", DEFAULT_CONTENT_TYPE)
        raw_extensions = os.getenv("AUDIO_EXTENSIONS", DEFAULT_AUDIO_EXTENSIONS)
        raw_case = os.getenv("AUDIO_EXTENSIONS_CASE_SENSITIVE", "true")
        raw_concurrency = os.getenv("MAX_CONCURRENCY", DEFAULT_MAX_CONCURRENCY)
        raw_timeout = os.getenv("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
        log_level = os.getenv("LOG_LEVEL", "INFO")

        keywords = dict(
            tuple(part.strip() for part in pair.split(":", 1))
            for pair in raw_keywords.split(",")
            if ":" in pair
        )
        extensions = tuple(
            e if e.startswith(".") else f".{e}"
            for e in (raw.strip() for raw in raw_extensions.split(","))
            if e
        )

        try:
            max_concurrency = int(raw_concurrency)
            request_timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigError(f"MAX_CONCURRENCY / REQUEST_TIMEOUT must be numeric: {exc}") from exc

        return cls._validate(
            deepgram_api_key=api_key,
            deepgram_api_url=api_url,
            auth_scheme=auth_scheme,
            language=language,
            punctuate=raw_punctuate.strip().lower() in _TRUTHY,
            keywords=keywords,
            content_type=content_type,
            audio_extensions=extensions,
            case_sensitive_extensions=raw_case.strip().lower() in _TRUTHY,
            max_concurrency=max_concurrency,
            request_timeout=request_timeout,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        deepgram_api_key: str | None,
        deepgram_api_url: str,
        auth_scheme: str,
        language: str,
        punctuate: bool,
        keywords: dict[str, str],
        content_type: str,
        audio_extensions: tuple[str, ...],
        case_sensitive_extensions: bool,
        max_concurrency: int,
        request_timeout: float,
        log_level: str,
    ) -> "Config":
        match deepgram_api_key:
            case None | "":
                raise ConfigError("DEEPGRAM_API_KEY must be set in .env")
            case _:
                pass

        match audio_extensions:
            case ():
                raise ConfigError("AUDIO_EXTENSIONS must list at least one extension")
            case _:
                pass

        match (max_concurrency, request_timeout):
            case (n, _) if n < 1:
                raise ConfigError("MAX_CONCURRENCY must be at least 1")
            case (_, t) if t <= 0:
                raise ConfigError("REQUEST_TIMEOUT must be positive")
            case _:
                pass

        return Config(
            deepgram_api_key=deepgram_api_key,
            deepgram_api_url=deepgram_api_url,
            auth_scheme=auth_scheme,
            language=language,
            punctuate=punctuate,
            keywords=keywords,
            content_type=content_type,
            audio_extensions=audio_extensions,
            case_sensitive_extensions=case_sensitive_extensions,
            max_concurrency=max_concurrency,
            request_timeout=request_timeout,
            log_level=log_level,
        )
