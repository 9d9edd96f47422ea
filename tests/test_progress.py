from grepkit.progress import (
    ProgressStatus,
    aborted_status,
    progress_status,
    renamed_status,
    replaced_status,
    started_status,
)


def test_started_status():
    status = started_status()
    assert status.message == "Building path list"
    assert status.detail == ""
    assert status.message_visible is True
    assert status.bar_visible is None


def test_progress_running_shows_last_file():
    status = progress_status(3, 10, 2, "a/b.txt")
    assert status.message == "Processed 3 files out of 10 (2 filtered out)"
    assert status.detail == "Last file: a/b.txt"
    assert status.detail_visible is True
    assert status.bar_visible is True
    assert status.cancel_visible is True
    assert (status.value, status.maximum) == (3, 10)


def test_progress_finished_hides_detail_and_bar():
    status = progress_status(10, 10, 0, "x.txt")
    assert status.detail == ""
    assert status.detail_visible is False
    assert status.bar_visible is False
    assert status.cancel_visible is False


def test_progress_negative_only_updates_message():
    status = progress_status(-1, 5, 0, "x.txt")
    assert status.detail is None
    assert status.bar_visible is None
    assert status.value is None
    assert status.cancel_visible is True
    assert "-1" in status.message


def test_aborted_status():
    status = aborted_status()
    assert status.message == "Search aborted"
    assert status.bar_visible is False
    assert status.cancel_visible is False
    assert status.detail_visible is False


def test_replaced_plural_and_singular():
    assert replaced_status(1, 1).message == "1 line replaced in 1 file"
    assert replaced_status(2, 5).message.startswith("5 lines replaced in 2 file")
    assert replaced_status(2, 5).message.endswith("files")
    assert replaced_status(0, 0).detail_visible is False


def test_renamed_status_counts_successful():
    assert renamed_status(1, 3).message == "1 file renamed"
    assert renamed_status(4, 0).message.startswith("4 files")
    assert renamed_status(4, 0).detail == ""


def test_status_is_comparable_value():
    assert started_status() == started_status()
    assert aborted_status() == ProgressStatus(
        message="Search aborted",
        detail="",
        detail_visible=False,
        bar_visible=False,
        cancel_visible=False,
    )