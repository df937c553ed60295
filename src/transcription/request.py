"""TranscriptionRequest — one immutable outbound request per audio file."""
from dataclasses import dataclass

from src.constants import PARAM_KEYWORDS, PARAM_LANGUAGE, PARAM_PUNCTUATE


def build_query_params(
    language: str,
    punctuate: bool,
    keywords: dict[str, str] | None = None,
) -> tuple[tuple[str, str], ...]:
    """Ordered (name, value) pairs; keywords only appear when a boost list is set."""
    params = [
        (PARAM_LANGUAGE, language),
        (PARAM_PUNCTUATE, "true" if punctuate else "false"),
    ]
    match keywords:
        case dict() as boost if boost:
            params.append(
                (PARAM_KEYWORDS, ",".join(f"{term}:{weight}" for term, weight in boost.items()))
            )
        case _:
            pass
    return tuple(params)


@dataclass(frozen=True)
class TranscriptionRequest:
    audio: bytes
    content_type: str
    params: tuple[tuple[str, str], ...]
