from collections.abc import Sequence

from dataproc_client.client.base import BaseProcessingClient
from dataproc_client.encoding.encoder import Encoder
from dataproc_client.encoding.models import FileAttachment
from dataproc_client.logging.logger import Log
from dataproc_client.submission.exceptions import SubmissionError
from dataproc_client.submission.models import SubmissionOutcome
from dataproc_client.submission.pipeline import (
    SubmissionContext,
    SubmissionState,
    SubmissionStep,
)
from dataproc_client.submission.steps import (
    BuildPayloadStep,
    DispatchStep,
    EncodeFileStep,
    ValidateInputStep,
)


class SubmissionPipeline:
    """Orchestrates one submission attempt.

    Pipeline: validate -> encode (only with an attachment) -> build payload
    -> dispatch. Every attempt ends in exactly one SubmissionOutcome and
    leaves the pipeline IDLE again. Only SubmissionError is turned into a
    failed outcome; anything else propagates.
    """

    def __init__(self, steps: Sequence[SubmissionStep]) -> None:
        self._steps = list(steps)
        self._state = SubmissionState.IDLE

    @property
    def state(self) -> SubmissionState:
        return self._state

    async def submit(
        self,
        raw_input: str,
        attachment: FileAttachment | None = None,
        *,
        token: str | None = None,
    ) -> SubmissionOutcome:
        """Run one submission with the given bearer token."""
        context = SubmissionContext(raw_input=raw_input, attachment=attachment, token=token)
        try:
            for step in self._steps:
                if not step.applies(context):
                    continue
                self._transition(step.state)
                context = await step.run(context)
            if context.result is None:
                raise RuntimeError("Submission steps finished without a result")
            self._transition(SubmissionState.SUCCEEDED)
            Log.info(f"Submission succeeded for user {context.result.user_id}")
            return SubmissionOutcome(result=context.result)
        except SubmissionError as exc:
            self._transition(SubmissionState.FAILED)
            suffix = f": {exc.detail}" if exc.detail else ""
            Log.error(f"Submission failed ({exc.kind}) {exc.message}{suffix}")
            return SubmissionOutcome(error=exc)
        finally:
            self._transition(SubmissionState.IDLE)

    def _transition(self, new_state: SubmissionState) -> None:
        if new_state is self._state:
            return
        Log.debug(f"Submission state {self._state.value} -> {new_state.value}")
        self._state = new_state


def build_pipeline(
    client: BaseProcessingClient,
    encoder: Encoder | None = None,
) -> SubmissionPipeline:
    """Build a SubmissionPipeline with the standard steps."""
    return SubmissionPipeline(
        steps=[
            ValidateInputStep(),
            EncodeFileStep(encoder or Encoder()),
            BuildPayloadStep(),
            DispatchStep(client),
        ]
    )
