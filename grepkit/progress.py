"""Status texts and visibility for a running search, replace or rename."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProgressStatus:
    """What the progress display should show.

    A field left as ``None`` means the display keeps its current state for it.
    """

    message: Optional[str] = None
    detail: Optional[str] = None
    message_visible: Optional[bool] = None
    detail_visible: Optional[bool] = None
    bar_visible: Optional[bool] = None
    cancel_visible: Optional[bool] = None
    maximum: Optional[int] = None
    value: Optional[int] = None


def started_status() -> ProgressStatus:
    """Status shown while the list of paths is being built."""
    return ProgressStatus(message="Building path list", detail="", message_visible=True)


def progress_status(processed: int, total: int, filtered: int, path: str) -> ProgressStatus:
    """Status after ``processed`` of ``total`` files, ``filtered`` of them skipped.

    A negative ``processed`` updates only the message and the cancel button.
    """
    message = f"Processed {processed} files out of {total} ({filtered} filtered out)"
    running = processed != total
    if processed < 0:
        return ProgressStatus(message=message, cancel_visible=running)
    detail = f"Last file: {path}" if running else ""
    return ProgressStatus(
        message=message,
        detail=detail,
        detail_visible=bool(detail),
        bar_visible=running,
        cancel_visible=running,
        maximum=total,
        value=processed,
    )


def aborted_status() -> ProgressStatus:
    """Status after the search was cancelled."""
    return ProgressStatus(
        message="Search aborted",
        detail="",
        detail_visible=False,
        bar_visible=False,
        cancel_visible=False,
    )


def replaced_status(files: int, lines: int) -> ProgressStatus:
    """Status after ``lines`` lines were replaced in ``files`` files."""
    line_suffix = "" if lines == 1 else "s"
    file_suffix = "" if files == 1 else "s"
    message = f"{lines} line{line_suffix} replaced in {files} file{file_suffix}"
    return ProgressStatus(message=message, detail="", detail_visible=False)


def renamed_status(successful: int, failed: int) -> ProgressStatus:
    """Status after renaming; only the successful renames are reported."""
    suffix = "" if successful == 1 else "s"
    message = f"{successful} file{suffix} renamed"
    return ProgressStatus(message=message, detail="", detail_visible=False)