"""All magic values live here — no inline literals anywhere else."""

# Deepgram endpoint + request defaults
DEEPGRAM_API_URL = "https://api.deepgram.com/v1/listen"
DEFAULT_AUTH_SCHEME = "Token"
DEFAULT_LANGUAGE = "en"
DEFAULT_PUNCTUATE = "true"
DEFAULT_CONTENT_TYPE = "audio/mp3"
DEFAULT_REQUEST_TIMEOUT = "300"
DEFAULT_MAX_CONCURRENCY = "1"

# Query parameter names, in the order they are sent
PARAM_LANGUAGE = "language"
PARAM_PUNCTUATE = "punctuate"
PARAM_KEYWORDS = "keywords"

# Audio discovery
DEFAULT_AUDIO_EXTENSIONS = ".mp3,.wav"
OUTPUT_SUFFIX = ".txt"
OUTPUT_ENCODING = "utf-8"

# Response decoding
NO_TRANSCRIPTION = "No transcription available."

# Sentence formatting
SENTENCE_DELIMITERS = ".!?"
SENTENCE_TERMINATOR = "."
LINE_SEPARATOR = "\n"

# Log / user-facing messages
MSG_RUN_STARTING = "Transcribing %d file(s) from %s → %s"
MSG_JOB_START = "[%d/%d] Transcribing %s"
MSG_JOB_DONE = "✓ Wrote %s (%.1fs)"
MSG_JOB_FAILED = "✗ Failed %s: %s"
MSG_RUN_SUMMARY = "Processed %d file(s): %d succeeded, %d failed"
MSG_STEM_COLLISION = "%s all write %s; only one transcript will survive"
MSG_CONFIG_ERROR = "Configuration error: %s"
MSG_INPUT_ERROR = "Input error: %s"

# Error messages
ERR_API_FAILED = "API request failed with status code %d: %s"
ERR_TRANSPORT = "Could not reach transcription service: %s"
ERR_DECODE = "Response body is not valid JSON: %s"
ERR_EMPTY_AUDIO = "Audio file is empty"
ERR_READ_AUDIO = "Could not read audio file: %s"
ERR_WRITE_OUTPUT = "Could not write transcript: %s"
ERR_INPUT_DIR_MISSING = "Input directory not found: %s"
ERR_FILE_MISSING = "Audio file not found: %s"
ERR_NO_AUDIO_FILES = "No audio files found in %s (extensions: %s)"
ERR_OUTPUT_DIR = "Could not create output directory %s: %s"
