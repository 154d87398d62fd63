from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from dataproc_client.encoding.models import FileAttachment
from dataproc_client.submission.models import ProcessedResult, SubmissionPayload


class SubmissionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    ENCODING = "encoding"
    DISPATCHING = "dispatching"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(slots=True)
class SubmissionContext:
    raw_input: str
    attachment: FileAttachment | None = None
    token: str | None = None
    parsed_input: dict[str, Any] = field(default_factory=dict)
    encoded_file: str = ""
    payload: SubmissionPayload | None = None
    response_body: Any = None
    result: ProcessedResult | None = None


class SubmissionStep(ABC):
    state: ClassVar[SubmissionState]

    def applies(self, context: SubmissionContext) -> bool:
        return True

    @abstractmethod
    async def run(self, context: SubmissionContext) -> SubmissionContext:
        raise NotImplementedError
