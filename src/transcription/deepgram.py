"""DeepgramTranscriptionClient — pre-recorded audio over the Deepgram /listen endpoint."""
import logging

import httpx

from src.config import Config
from src.constants import ERR_EMPTY_AUDIO, ERR_TRANSPORT
from src.errors import ApiError, AudioReadError, TransportError
from src.transcription.client import TranscriptionClient
from src.transcription.decoder import decode_transcript
from src.transcription.request import TranscriptionRequest, build_query_params

logger = logging.getLogger(__name__)


class DeepgramTranscriptionClient(TranscriptionClient):

    def __init__(
        self,
        config: Config,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = config.deepgram_api_url
        self._authorization = f"{config.auth_scheme} {config.deepgram_api_key}"
        self._content_type = config.content_type
        self._params = build_query_params(config.language, config.punctuate, config.keywords)
        self._timeout = config.request_timeout
        self._transport = transport

    def build_request(self, audio: bytes) -> TranscriptionRequest:
        match audio:
            case b"" | None:
                raise AudioReadError(ERR_EMPTY_AUDIO)
            case _:
                return TranscriptionRequest(
                    audio=audio,
                    content_type=self._content_type,
                    params=self._params,
                )

    async def send(self, request: TranscriptionRequest) -> str:
        """POST the audio and return the raw response body on 2xx."""
        headers = {
            "Authorization": self._authorization,
            "Content-Type": request.content_type,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._url,
                    params=list(request.params),
                    content=request.audio,
                    headers=headers,
                )
        except httpx.RequestError as exc:
            raise TransportError(ERR_TRANSPORT % exc) from exc

        match response.is_success:
            case True:
                logger.debug("Deepgram responded %d (%d bytes)", response.status_code, len(response.content))
                return response.text
            case False:
                raise ApiError(response.status_code, response.reason_phrase)

    async def transcribe(self, audio: bytes) -> str:
        body = await self.send(self.build_request(audio))
        return decode_transcript(body)
