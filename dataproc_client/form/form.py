from dataproc_client.encoding.models import FileAttachment
from dataproc_client.logging.logger import Log
from dataproc_client.notification.base import BaseNotifier
from dataproc_client.session.session import Session
from dataproc_client.submission.models import ProcessedResult, SubmissionOutcome
from dataproc_client.submission.submitter import SubmissionPipeline

SUCCESS_MESSAGE = "Data processed successfully!"


class SubmissionForm:
    """State behind the submission form: input, file, last result, in-flight flag.

    Only one submission runs at a time. ``submit()`` while another is in
    flight is rejected rather than queued.
    """

    def __init__(
        self,
        pipeline: SubmissionPipeline,
        session: Session,
        notifier: BaseNotifier,
        *,
        clear_result_on_failure: bool = False,
    ) -> None:
        self._pipeline = pipeline
        self._session = session
        self._notifier = notifier
        self._clear_result_on_failure = clear_result_on_failure
        self._json_input = ""
        self._selected_file: FileAttachment | None = None
        self._processed_result: ProcessedResult | None = None
        self._is_loading = False

    @property
    def json_input(self) -> str:
        return self._json_input

    @property
    def selected_file(self) -> FileAttachment | None:
        return self._selected_file

    @property
    def processed_result(self) -> ProcessedResult | None:
        return self._processed_result

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def can_submit(self) -> bool:
        return not self._is_loading

    def set_input(self, text: str) -> None:
        self._json_input = text

    def select_file(self, attachment: FileAttachment) -> None:
        self._selected_file = attachment
        Log.debug(f"Selected file '{attachment.name}' ({attachment.mime_type})")

    def clear_file(self) -> None:
        self._selected_file = None

    async def submit(self) -> SubmissionOutcome | None:
        """Run one submission with the current input, file and token.

        Returns None without sending anything if a submission is already
        in flight.
        """
        if not self.can_submit:
            Log.warning("Submission already in progress; ignoring submit")
            return None
        self._is_loading = True
        try:
            outcome = await self._pipeline.submit(
                self._json_input,
                self._selected_file,
                token=self._session.token,
            )
            self._apply(outcome)
            return outcome
        finally:
            self._is_loading = False

    def _apply(self, outcome: SubmissionOutcome) -> None:
        if outcome.result is not None:
            self._processed_result = outcome.result
            self._notifier.success(SUCCESS_MESSAGE)
            return
        if self._clear_result_on_failure:
            self._processed_result = None
        if outcome.error is not None:
            self._notifier.error(outcome.error.message)
