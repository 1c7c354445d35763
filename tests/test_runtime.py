"""
End-to-end tests for the lexer -> parser -> executor pipeline.
"""
import pytest
from pathlib import Path

from atomiclang import Interpreter, InterpreterConfig, run_script
from atomiclang.errors import ArgumentMismatch, Overflow, UnknownCommand, UnterminatedString


def test_print_scenario():
    assert run_script('print "Hello, Atomic!"') == ["Hello, Atomic!"]


def test_add_scenario():
    assert run_script("add 42 8") == ["42 + 8 = 50"]


def test_multiply_scenario():
    assert run_script("multiply 6 7") == ["6 * 7 = 42"]


def test_non_integer_argument_scenario(sink):
    with pytest.raises(ArgumentMismatch) as exc:
        run_script("add 5 x", sink=sink.append)
    assert exc.value.line == 1
    assert sink == []


def test_multi_line_scenario(sample_script):
    assert run_script(sample_script) == ["a", "1 + 2 = 3", "3 * 3 = 9"]


def test_unknown_keyword_scenario():
    with pytest.raises(UnknownCommand) as exc:
        run_script("foo 1 2")
    assert exc.value.line == 1
    assert str(exc.value).startswith("UnknownCommand on line 1:")


def test_blank_script_produces_nothing():
    assert run_script("") == []
    assert run_script(" \n\t\n  ") == []


def test_running_twice_is_identical(interpreter, sample_script):
    assert interpreter.run(sample_script) == interpreter.run(sample_script)


def test_nth_output_matches_nth_statement():
    lines = [f"add {i} {i}" if i % 2 else f'print "line {i}"' for i in range(10)]
    out = run_script("\n".join(lines))
    assert len(out) == 10
    for i, text in enumerate(out):
        assert text == (f"{i} + {i} = {2 * i}" if i % 2 else f"line {i}")


def test_parse_errors_stop_before_any_output(sink):
    with pytest.raises(UnterminatedString):
        run_script('print "a"\nprint "b', sink=sink.append)
    assert sink == []


def test_exec_error_keeps_earlier_output(sink):
    interp = Interpreter(InterpreterConfig.create(int_bits=32), sink=sink.append)
    with pytest.raises(Overflow) as exc:
        interp.run('print "before"\nmultiply 65536 65536\nprint "after"')
    assert exc.value.line == 2
    assert sink == ["before"]
    assert interp.executor.console == ["before"]


def test_check_does_not_execute(sink):
    interp = Interpreter(sink=sink.append)
    program = interp.check('print "a"\nadd 1 2')
    assert len(program) == 2
    assert sink == []


def test_debug_dumps():
    dumps = []
    cfg = InterpreterConfig.create(show_tokens=True, show_ast=True)
    out = Interpreter(cfg, diagnostics=dumps.append).run("add 1 2")
    assert out == ["1 + 2 = 3"]
    assert dumps == [
        "Tokens: [Keyword('add'), Int(1), Int(2), EndOfLine, EndOfInput]",
        "AST: [Add(lhs=1, rhs=2, line=1)]",
    ]


def test_run_example_script():
    src = Path(__file__).resolve().parents[1] / "examples" / "hello.atomic"
    out = run_script(src.read_text(encoding="utf-8"))
    assert out == ["Hello, Atomic!", "42 + 8 = 50", "6 * 7 = 42"]


def test_form_feed_inside_string_is_printed_verbatim():
    assert run_script('print "a\x0cb"\nadd 1 2') == ["a\x0cb", "1 + 2 = 3"]
