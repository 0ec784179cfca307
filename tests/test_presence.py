from synlint.checks import check_expressions, check_required_markers, check_syntax, is_reserved_word
from synlint.diagnostics import DiagnosticSink
from synlint.diagnostics.codes import DiagnosticSpec
from synlint.markers import EXPRESSION_MARKERS, RESERVED_WORDS, SYNTAX_MARKERS, RequiredMarker
from synlint.options import CheckerOptions
from tests._shared_cases import HELLO_WORLD


def test_complete_program_passes_syntax_and_expression_checks() -> None:
    sink = DiagnosticSink()

    check_syntax(HELLO_WORLD, sink)
    check_expressions(HELLO_WORLD, sink)

    assert sink.list() == ()


def test_syntax_check_reports_each_missing_marker_in_order() -> None:
    sink = DiagnosticSink()

    added = check_syntax("void helper(void) {}\n", sink)

    assert [d.code for d in added] == ["SYNTAX_MISSING_INCLUDE", "SYNTAX_MISSING_MAIN"]


def test_syntax_check_requires_int_main_literally() -> None:
    sink = DiagnosticSink()

    check_syntax("#include <stdio.h>\nvoid main() {}\n", sink)

    assert [d.code for d in sink.list()] == ["SYNTAX_MISSING_MAIN"]


def test_expression_check_reports_missing_calls() -> None:
    sink = DiagnosticSink()

    added = check_expressions('printf("hi");\n', sink)

    assert [d.code for d in added] == ["EXPRESSION_MISSING_SCANF"]
    assert added[0].message == "Missing `scanf` call."


def test_presence_is_plain_substring_search() -> None:
    sink = DiagnosticSink()

    # markers inside comments and longer identifiers still count
    check_expressions("/* printf */ int my_scanf_wrapper;", sink)

    assert len(sink) == 0


def test_custom_markers_from_options() -> None:
    missing_return = DiagnosticSpec(code="SYNTAX_MISSING_RETURN", message="Missing `return`.", category="syntax")
    options = CheckerOptions(syntax_markers=(RequiredMarker("return", missing_return),))
    sink = DiagnosticSink()

    check_syntax("int main() {}", sink, options=options)

    assert sink.messages() == ("Missing `return`.",)


def test_check_required_markers_with_no_markers_is_clean() -> None:
    sink = DiagnosticSink()

    assert check_required_markers("", (), sink) == ()


def test_reserved_words() -> None:
    assert is_reserved_word("while")
    assert is_reserved_word("include")
    assert not is_reserved_word("While")
    assert not is_reserved_word("return")


def test_reserved_words_table_is_not_a_required_marker() -> None:
    needles = {marker.needle for marker in (*SYNTAX_MARKERS, *EXPRESSION_MARKERS)}

    assert RESERVED_WORDS >= {"printf", "scanf", "main"}
    assert "#include" in needles
    assert "#include" not in RESERVED_WORDS
