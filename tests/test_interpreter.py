import pytest

from draca import errors
from draca.interpreter import Interpreter, run_file, standard_environment
from draca.repl import Completer, main, read_form_text, repl
from draca.types.nil import Nil
from draca.types.symbol import Symbol


def scripted(lines):
    """A read_line stand-in that replays `lines`, then signals end of input."""
    pending = list(lines)

    def read_line(prompt):
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read_line


def test_definitions_persist_across_calls():
    itp = Interpreter()
    itp.eval("(define (inc x) (+ x 1))")
    assert itp.eval("(inc 41)") == 42.0


def test_eval_returns_last_result():
    itp = Interpreter(prelude=None)
    assert itp.eval("1 2 3") == 3.0
    assert itp.eval("") is Nil
    assert itp.eval("; only a comment") is Nil


def test_eval_all_returns_every_result():
    itp = Interpreter(prelude=None)
    assert itp.eval_all("(define x 2) (* x 3) 'x") == [Symbol("x"), 6.0, itp.eval("'x")]


def test_custom_prelude():
    itp = Interpreter(prelude="(define answer 42)")
    assert itp.eval("answer") == 42.0
    with pytest.raises(errors.DracaUndefinedFunction):
        itp.eval("(square 2)")


def test_unqualified_fallback_option():
    itp = Interpreter(prelude=None, unqualified_fallback=True)
    itp.eval("(define/in-namespace hidden::ns (define secret 7))")
    assert itp.eval("secret") == 7.0


def test_unqualified_fallback_from_environment_variable(monkeypatch):
    monkeypatch.setenv("DRACA_UNQUALIFIED_FALLBACK", "1")
    itp = Interpreter(prelude=None)
    itp.eval("(define/in-namespace hidden::ns (define secret 7))")
    assert itp.eval("secret") == 7.0


def test_fresh_environments_are_independent():
    first = standard_environment()
    second = standard_environment()
    first.insert("only-here", True)
    assert second.get("only-here") is None
    assert first.get("square") is not None


def test_run_file(tmp_path, capsys):
    program = tmp_path / "hello.dr"
    program.write_text('(define (greet who) (println "hello {0}" who))\n(greet "draca")\n', encoding="utf-8")
    run_file(program)
    assert capsys.readouterr().out == "hello draca\n"


def test_run_file_stops_at_first_error(tmp_path, capsys):
    program = tmp_path / "bad.dr"
    program.write_text('(println "before")\n(nope)\n(println "after")\n', encoding="utf-8")
    with pytest.raises(errors.DracaUndefinedFunction):
        run_file(program)
    assert capsys.readouterr().out == "before\n"


def test_run_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_file(tmp_path / "missing.dr")


# --- command line ---

def test_main_runs_a_file(tmp_path, capsys):
    program = tmp_path / "ok.dr"
    program.write_text("(println (square 4))", encoding="utf-8")
    assert main([str(program)]) == 0
    assert capsys.readouterr().out == "16\n"


def test_main_reports_errors(tmp_path, capsys):
    program = tmp_path / "bad.dr"
    program.write_text("(frobnicate 1 2)", encoding="utf-8")
    assert main([str(program)]) == 1
    assert capsys.readouterr().err == "==> Error: Undefined function: frobnicate\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.dr")]) == 1
    assert capsys.readouterr().err.startswith("==> Error: ")


def test_main_panic_exits_101(tmp_path, capsys):
    program = tmp_path / "panic.dr"
    program.write_text('(panic "giving up")', encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main([str(program)])
    assert excinfo.value.code == 101
    assert "giving up" in capsys.readouterr().err


# --- REPL ---

def test_read_form_text_continues_incomplete_input():
    prompts = []
    lines = scripted(["(define (f x)", "  (* x 2))"])

    def read_line(prompt):
        prompts.append(prompt)
        return lines(prompt)

    assert read_form_text(read_line) == "(define (f x)\n  (* x 2))"
    assert prompts == ["\\> ", "... "]


def test_repl_session(capsys):
    repl(Interpreter(), read_line=scripted(["(square 5)", "(define x 3)", "(nope)", "x", "(list 1 \"a\")"]))
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "Draca REPL 0.3.0.",
        "To exit, type `(std::sys::exit)` or press `^D`.",
        "25",
        "x",
        "3",
        '(1 "a")',
    ]
    assert "==> Error: Undefined function: nope" in captured.err
    assert captured.err.endswith("^D\n")


def test_repl_reports_parse_errors(capsys):
    repl(Interpreter(prelude=None), read_line=scripted([")"]))
    assert "==> Error: Unexpected ')'" in capsys.readouterr().err


def test_completer():
    completer = Completer(standard_environment())
    assert completer.complete("squ", 0) == "square"
    assert completer.complete("squ", 1) is None
    assert completer.complete("define/", 0) == "define/in-namespace"
    assert "std::math::consts::pi" in completer.candidates()
