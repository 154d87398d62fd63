import json
import math

from dataproc_client.client.base import BaseProcessingClient
from dataproc_client.encoding.encoder import Encoder
from dataproc_client.encoding.exceptions import FileReadError
from dataproc_client.logging.logger import Log
from dataproc_client.submission.exceptions import (
    FileProcessingError,
    InvalidInputFormatError,
)
from dataproc_client.submission.models import SubmissionPayload
from dataproc_client.submission.pipeline import (
    SubmissionContext,
    SubmissionState,
    SubmissionStep,
)
from dataproc_client.submission.validator import validate_and_build


def _reject_constant(name: str) -> float:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


class ValidateInputStep(SubmissionStep):
    state = SubmissionState.VALIDATING

    async def run(self, context: SubmissionContext) -> SubmissionContext:
        try:
            parsed = json.loads(
                context.raw_input,
                parse_float=_parse_finite_float,
                parse_constant=_reject_constant,
            )
        except ValueError as exc:
            raise InvalidInputFormatError(detail=str(exc)) from exc
        if not isinstance(parsed, dict):
            raise InvalidInputFormatError(
                detail=f"Expected a JSON object, got {type(parsed).__name__}"
            )
        context.parsed_input = parsed
        Log.debug(f"Parsed input with {len(parsed)} top-level keys")
        return context


class EncodeFileStep(SubmissionStep):
    state = SubmissionState.ENCODING

    def __init__(self, encoder: Encoder) -> None:
        self._encoder = encoder

    def applies(self, context: SubmissionContext) -> bool:
        return context.attachment is not None

    async def run(self, context: SubmissionContext) -> SubmissionContext:
        if context.attachment is None:
            raise ValueError("SubmissionContext.attachment must be set before encoding")
        try:
            context.encoded_file = await self._encoder.encode(context.attachment)
        except FileReadError as exc:
            raise FileProcessingError(detail=str(exc)) from exc
        Log.info(
            f"Encoded '{context.attachment.name}' ({context.attachment.size_bytes} bytes) "
            f"to {len(context.encoded_file)} base64 chars"
        )
        return context


class BuildPayloadStep(SubmissionStep):
    state = SubmissionState.DISPATCHING

    async def run(self, context: SubmissionContext) -> SubmissionContext:
        payload = SubmissionPayload(context.parsed_input, context.encoded_file)
        if payload.replaced_file_field:
            Log.warning(
                f"Input already defines '{SubmissionPayload.FILE_FIELD}'; "
                "it is replaced by the attached file"
            )
        context.payload = payload
        return context


class DispatchStep(SubmissionStep):
    state = SubmissionState.DISPATCHING

    def __init__(self, client: BaseProcessingClient) -> None:
        self._client = client

    async def run(self, context: SubmissionContext) -> SubmissionContext:
        if context.payload is None:
            raise ValueError("SubmissionContext.payload must be set before dispatch")
        if not context.token:
            Log.warning("No bearer token available; sending unauthenticated request")
        context.response_body = await self._client.process(
            context.payload, token=context.token
        )
        context.result = validate_and_build(context.response_body)
        return context
