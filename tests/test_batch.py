from pathlib import Path

from synlint.pipeline import BATCH_COMMANDS, Command, collect_source_files, scan_paths
from tests._shared_cases import HELLO_WORLD


def test_scan_paths_uses_one_sink_per_file(tmp_path: Path) -> None:
    good = tmp_path / "good.c"
    good.write_text(HELLO_WORLD, encoding="ascii")
    bad = tmp_path / "bad.c"
    bad.write_text("}\n", encoding="ascii")

    result = scan_paths([good, bad])

    # the quotes in the format strings leave the block check open
    assert [d.code for d in result.files[good]] == ["BLOCK_UNBALANCED"]
    assert [d.code for d in result.files[bad]] == [
        "BLOCK_UNBALANCED",
        "SYNTAX_MISSING_INCLUDE",
        "SYNTAX_MISSING_MAIN",
        "EXPRESSION_MISSING_PRINTF",
        "EXPRESSION_MISSING_SCANF",
    ]
    assert result.total_diagnostics == 6
    assert result.clean_files == ()


def test_scan_paths_reports_unreadable_file_once(tmp_path: Path) -> None:
    missing = tmp_path / "missing.c"

    result = scan_paths([missing])

    assert [d.code for d in result.files[missing]] == ["SOURCE_UNAVAILABLE"]


def test_scan_paths_with_selected_commands(tmp_path: Path) -> None:
    path = tmp_path / "blocks.c"
    path.write_text("{ }", encoding="ascii")

    result = scan_paths([str(path)], commands=(Command.CHECK_BLOCKS,), show_progress=True)

    assert result.clean_files == (path,)
    assert result.total_diagnostics == 0


def test_batch_commands_cover_every_check() -> None:
    assert {command for command in Command if command.needs_source} == set(BATCH_COMMANDS)


def test_collect_source_files_is_sorted_and_filtered(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.c").write_text("", encoding="ascii")
    (tmp_path / "a.h").write_text("", encoding="ascii")
    (tmp_path / "notes.txt").write_text("", encoding="ascii")

    files = collect_source_files(tmp_path)

    assert files == [tmp_path / "a.h", tmp_path / "sub" / "b.c"]
