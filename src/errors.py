"""Error taxonomy.

ConfigError and InputError end the whole run. Everything deriving from
TranscriptionError belongs to a single file and is caught at the job boundary.
"""
from src.constants import ERR_API_FAILED


class ConfigError(ValueError):
    """Required setting missing or invalid."""


class InputError(Exception):
    """Input directory, named file, or audio discovery problem."""


class TranscriptionError(Exception):
    """Base for every per-file failure."""


class TransportError(TranscriptionError):
    """Network-level failure reaching the remote service."""


class ApiError(TranscriptionError):

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(ERR_API_FAILED % (status_code, reason))
        self.status_code = status_code
        self.reason = reason


class DecodeError(TranscriptionError):
    """Response body could not be parsed at all."""


class AudioReadError(TranscriptionError):
    pass


class OutputWriteError(TranscriptionError):
    pass
