from pathlib import Path

import pytest

from synlint.diagnostics import DiagnosticSink
from synlint.errors import SourceUnavailableError, SynlintError
from synlint.options import CheckerOptions
from synlint.source import load_source, read_source


def test_read_source_returns_whole_file(tmp_path: Path) -> None:
    path = tmp_path / "prog.c"
    path.write_text("int main() {\n    return 0;\n}\n", encoding="ascii")

    assert read_source(path) == "int main() {\n    return 0;\n}\n"


def test_read_source_decodes_every_byte_by_default(tmp_path: Path) -> None:
    path = tmp_path / "bytes.c"
    path.write_bytes(b"/* \xe9\xff */ {}")

    text = read_source(path)

    assert text == "/* \xe9\xff */ {}"


def test_read_source_raises_for_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.c"

    with pytest.raises(SourceUnavailableError) as excinfo:
        read_source(missing)

    assert excinfo.value.path == missing
    assert isinstance(excinfo.value, SynlintError)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_read_source_raises_for_directory(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailableError):
        read_source(tmp_path)


def test_read_source_raises_for_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "bad.c"
    path.write_bytes(b"\xff\xfe{")

    with pytest.raises(SourceUnavailableError):
        read_source(path, encoding="ascii")


def test_read_source_leaves_unknown_codec_to_the_caller(tmp_path: Path) -> None:
    path = tmp_path / "prog.c"
    path.write_bytes(b"{}")

    with pytest.raises(LookupError):
        read_source(path, encoding="no-such-codec")


def test_load_source_records_diagnostic_instead_of_raising(tmp_path: Path) -> None:
    sink = DiagnosticSink()

    text = load_source(tmp_path / "nope.c", sink)

    assert text is None
    assert [d.code for d in sink.list()] == ["SOURCE_UNAVAILABLE"]
    assert sink.messages() == ("Cannot open file.",)


def test_load_source_uses_configured_encoding(tmp_path: Path) -> None:
    path = tmp_path / "utf8.c"
    path.write_text("// café\n", encoding="utf-8")
    sink = DiagnosticSink()

    text = load_source(path, sink, options=CheckerOptions(encoding="utf-8"))

    assert text == "// café\n"
    assert len(sink) == 0
