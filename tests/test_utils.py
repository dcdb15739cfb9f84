from unittest import mock

from keuangan.utils import clear_screen, file_kosong


def test_missing_file_is_empty(tmp_path):
    assert file_kosong(tmp_path / "nope.txt") is True


def test_empty_file_is_empty(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert file_kosong(path) is True


def test_file_with_content_is_not_empty(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("Makan|10.000000\n")
    assert file_kosong(str(path)) is False


def test_directory_counts_as_empty(tmp_path):
    assert file_kosong(tmp_path) is True


def test_clear_screen_runs_clear_command():
    with mock.patch("keuangan.utils.subprocess.run") as run:
        result = clear_screen()
    assert result is None
    assert run.call_count == 1
    command = run.call_args.args[0]
    assert command in ("cls", ["clear"])


def test_clear_screen_tolerates_missing_command():
    with mock.patch(
        "keuangan.utils.subprocess.run", side_effect=FileNotFoundError
    ) as run:
        result = clear_screen()
    assert result is None
    assert run.call_count == 1
    assert run.call_args.args[0] in ("cls", ["clear"])