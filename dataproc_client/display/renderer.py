"""Plain-text rendering of a ProcessedResult."""

import json

from dataproc_client.submission.models import ProcessedResult


def render_result(result: ProcessedResult | None) -> str:
    """Render the result sections, or an empty string when there is none.

    The file section is shown only when the service reported a valid file
    or a MIME type.
    """
    if result is None:
        return ""

    lines = [
        "Response",
        "",
        "User Info",
        f"  User ID: {result.user_id}",
        f"  Email: {result.email}",
        f"  Roll Number: {result.roll_number}",
        "",
        "Processing Results",
        f"  Status: {'Success' if result.is_success else 'Failed'}",
        f"  Prime Found: {_yes_no(result.is_prime_found)}",
        "",
        *_render_list("Numbers", result.numbers),
        *_render_list("Alphabets", result.alphabets),
        *_render_list("Highest Lowercase", result.highest_lowercase_alphabet),
    ]
    if result.has_file_info:
        lines.extend(_render_file_info(result))
    return "\n".join(lines).rstrip() + "\n"


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def _render_list(title: str, values: list[str]) -> list[str]:
    body = json.dumps(values, indent=2)
    return [title, *(f"  {line}" for line in body.splitlines()), ""]


def _render_file_info(result: ProcessedResult) -> list[str]:
    lines = ["File Information"]
    if result.file_valid is not None:
        lines.append(f"  Valid: {_yes_no(result.file_valid)}")
    if result.file_mime_type:
        lines.append(f"  Type: {result.file_mime_type}")
    if result.file_size_kb:
        lines.append(f"  Size: {result.file_size_kb} KB")
    return lines
