"""
Text-to-speech resource.

Four independent calls over the synthesis endpoints: JSON with base64 audio
inline, a complete audio file, a raw audio byte stream, and a stream of JSON
chunks. The streaming calls accept an optional callback for push-style delivery;
without one they return the ResponseStream for the caller to iterate.
"""

import logging
from typing import IO, Any, Callable, Optional, Sequence

from hume_voice.config.constants import (
    LOGGER_NAME,
    TTS_FILE_PATH,
    TTS_JSON_PATH,
    TTS_STREAM_FILE_PATH,
    TTS_STREAM_JSON_PATH,
)
from hume_voice.models.tts_schemas import (
    FormatInput,
    SynthesisRequest,
    SynthesisResult,
    TTSChunk,
    UtteranceInput,
    build_synthesis_request,
)
from hume_voice.services.http_client import HttpTransport
from hume_voice.services.streaming import STREAM_MODE_BYTES, STREAM_MODE_JSON, ResponseStream

logger = logging.getLogger(LOGGER_NAME)


class TTS:
    """Synthesis calls bound to one transport; no state is kept between calls."""

    def __init__(self, transport: HttpTransport):
        self.transport = transport

    def _request(
        self,
        utterances: Sequence[UtteranceInput],
        format: FormatInput,
        options: dict,
    ) -> SynthesisRequest:
        request = build_synthesis_request(utterances, format, **options)
        logger.debug(
            f"Synthesis request: {len(request.utterances)} utterance(s), "
            f"format {request.format.type.value}"
        )
        return request

    def synthesize_json(
        self,
        utterances: Sequence[UtteranceInput],
        format: FormatInput = None,
        **options: Any,
    ) -> SynthesisResult:
        """
        Synthesize speech and return the generations with base64 audio inline.

        Args:
            utterances: Utterance models or dicts to speak, in order
            format: Output format (mp3 by default)
            **options: num_generations, context, split_utterances, strip_headers, instant_mode

        Returns:
            SynthesisResult: One or more generations
        """
        request = self._request(utterances, format, options)
        data = self.transport.request_json("POST", TTS_JSON_PATH, json=request.payload())
        result = SynthesisResult.model_validate(data)
        logger.info(f"Synthesized {len(result.generations)} generation(s)")
        return result

    def synthesize_file(
        self,
        utterances: Sequence[UtteranceInput],
        format: FormatInput = None,
        **options: Any,
    ) -> IO[bytes]:
        """
        Synthesize speech into a temporary file.

        Returns:
            An open temporary file holding the complete audio, positioned at the start
        """
        request = self._request(utterances, format, options)
        handle = self.transport.request_file(
            "POST",
            TTS_FILE_PATH,
            json=request.payload(),
            suffix=f".{request.format.type.value}",
        )
        logger.info(f"Synthesized audio file {handle.name}")
        return handle

    def stream_file(
        self,
        utterances: Sequence[UtteranceInput],
        format: FormatInput = None,
        chunk_callback: Optional[Callable[[bytes], Any]] = None,
        **options: Any,
    ) -> Optional[ResponseStream]:
        """
        Stream raw audio bytes as they are generated.

        Args:
            utterances: Utterance models or dicts to speak, in order
            format: Output format (mp3 by default)
            chunk_callback: Called with each received chunk; when given, the call
                returns once the stream ends
            **options: Extra synthesis options

        Returns:
            None when a callback was given, otherwise the ResponseStream of bytes
        """
        request = self._request(utterances, format, options)
        stream = self.transport.request_stream(
            "POST", TTS_STREAM_FILE_PATH, json=request.payload(), mode=STREAM_MODE_BYTES
        )
        return self._deliver(stream, chunk_callback)

    def stream_json(
        self,
        utterances: Sequence[UtteranceInput],
        format: FormatInput = None,
        chunk_callback: Optional[Callable[[TTSChunk], Any]] = None,
        **options: Any,
    ) -> Optional[ResponseStream]:
        """
        Stream structured audio chunks as they are generated.

        Each chunk is a TTSChunk; decoding its base64 audio is up to the caller
        (TTSChunk.decode_audio).

        Returns:
            None when a callback was given, otherwise the ResponseStream of TTSChunk
        """
        request = self._request(utterances, format, options)
        stream = self.transport.request_stream(
            "POST",
            TTS_STREAM_JSON_PATH,
            json=request.payload(),
            mode=STREAM_MODE_JSON,
            decoder=TTSChunk.model_validate,
        )
        return self._deliver(stream, chunk_callback)

    @staticmethod
    def _deliver(
        stream: ResponseStream, chunk_callback: Optional[Callable[[Any], Any]]
    ) -> Optional[ResponseStream]:
        if chunk_callback is None:
            return stream
        with stream:
            delivered = stream.for_each(chunk_callback)
        logger.info(f"Delivered {delivered} streamed chunk(s)")
        return None
