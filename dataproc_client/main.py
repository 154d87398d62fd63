import argparse
import asyncio
import sys
from pathlib import Path

from dataproc_client.client.factory import ProcessingClientFactory
from dataproc_client.config.settings import Settings
from dataproc_client.display.renderer import render_result
from dataproc_client.encoding.models import FileAttachment
from dataproc_client.form.form import SubmissionForm
from dataproc_client.logging.logger import Log
from dataproc_client.notification.log_notifier import LogNotifier
from dataproc_client.session.session import Session
from dataproc_client.submission.exceptions import SubmissionError
from dataproc_client.submission.submitter import build_pipeline


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dataproc-client",
        description="Submit JSON data and an optional file to the processing service.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--json", dest="json_text", help="JSON object to submit")
    source.add_argument("--json-file", type=Path, help="read the JSON object from a file")
    parser.add_argument("--file", type=Path, help="file to attach")
    parser.add_argument("--token", help="bearer token (overrides API_TOKEN)")
    parser.add_argument(
        "--operation-code",
        action="store_true",
        help="fetch the service operation code instead of submitting",
    )
    return parser.parse_args(argv)


def read_raw_input(args: argparse.Namespace) -> str:
    """Return the JSON text from --json, --json-file or stdin."""
    if args.json_text is not None:
        return args.json_text
    if args.json_file is not None:
        return args.json_file.read_text(encoding="utf-8")
    return sys.stdin.read()


async def run(settings: Settings, args: argparse.Namespace) -> int:
    """Build dependencies, run one command, return the exit status."""
    client = ProcessingClientFactory.create(settings)
    session = Session(args.token or settings.api_token)
    try:
        if args.operation_code:
            try:
                code = await client.get_operation_code(token=session.token)
            except SubmissionError as exc:
                Log.error(f"Failed to fetch operation code: {exc.message}")
                return 1
            print(f"Operation code: {code}")
            return 0

        form = SubmissionForm(
            build_pipeline(client),
            session,
            LogNotifier(),
            clear_result_on_failure=settings.clear_result_on_failure,
        )
        try:
            form.set_input(read_raw_input(args))
        except (OSError, UnicodeDecodeError) as exc:
            Log.error(f"Failed to read JSON input: {exc}")
            return 1
        if args.file is not None:
            try:
                form.select_file(FileAttachment.from_path(args.file))
            except OSError as exc:
                Log.error(str(exc))
                return 1

        outcome = await form.submit()
        if form.processed_result is not None:
            print(render_result(form.processed_result), end="")
        return 0 if outcome is not None and outcome.succeeded else 1
    finally:
        await client.aclose()


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> run one command."""
    settings = Settings()
    Log.configure(settings.log_level)
    args = parse_args(argv)
    return asyncio.run(run(settings, args))


if __name__ == "__main__":
    sys.exit(main())
