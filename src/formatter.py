"""Reflow a flat transcript into one sentence per line."""
import re

from src.constants import LINE_SEPARATOR, SENTENCE_DELIMITERS, SENTENCE_TERMINATOR

_SENTENCE_SPLIT = re.compile(f"[{re.escape(SENTENCE_DELIMITERS)}]")


def format_sentences(text: str | None) -> str | None:
    """Split on . ! ? and rejoin as trimmed, period-terminated lines.

    Empty fragments (e.g. after a trailing delimiter) are dropped, so the
    output never contains a bare "." line. None and "" pass through as-is.
    """
    match text:
        case None | "":
            return text
        case _:
            fragments = map(str.strip, _SENTENCE_SPLIT.split(text))
            return LINE_SEPARATOR.join(
                f"{fragment}{SENTENCE_TERMINATOR}" for fragment in fragments if fragment
            )
