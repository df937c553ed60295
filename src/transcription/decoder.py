"""Pull the best transcript out of a Deepgram /listen response body."""
import json

from src.constants import ERR_DECODE, NO_TRANSCRIPTION
from src.errors import DecodeError


def decode_transcript(body: str) -> str:
    """Return results.channels[0].alternatives[0].transcript.

    Any missing, null or empty level yields NO_TRANSCRIPTION. A body that is
    not JSON at all raises DecodeError instead.
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, TypeError) as exc:
        raise DecodeError(ERR_DECODE % exc) from exc

    match payload:
        case {"results": {"channels": [{"alternatives": [{"transcript": str() as transcript}, *_]}, *_]}}:
            return transcript
        case _:
            return NO_TRANSCRIPTION
