import pytest

from typedset.compiler.cli import main


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("NO_UNICODE", "1")


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_runs_script(tmp_path, capsys):
    path = write(tmp_path, "demo.tset", 'let s = Set<MyString>("b", "a")\nprint s\n')
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out == "a, b\n"
    assert captured.err == ""


def test_check_only_does_not_run(tmp_path, capsys):
    path = write(tmp_path, "demo.tset", 'print "hi"\n')
    assert main(["--check", str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_errors_exit_2_with_diagnostic(tmp_path, capsys):
    path = write(tmp_path, "bad.tset", "let s = Set<int>()\n")
    assert main([str(path)]) == 2
    err = capsys.readouterr().err
    assert "error [CE4006]" in err
    assert "bad.tset:1:13" in err


def test_warnings_exit_1(tmp_path, capsys):
    path = write(tmp_path, "warn.tset", 'print "x"')
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "x\n"
    assert "warning [CW0001]" in captured.err


def test_relative_path_uses_typedset_cwd(tmp_path, capsys, monkeypatch):
    write(tmp_path, "rel.tset", "print 7\n")
    monkeypatch.setenv("TYPEDSET_CWD", str(tmp_path))
    assert main(["rel.tset"]) == 0
    assert capsys.readouterr().out == "7\n"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.tset")]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_source_required(capsys):
    assert main([]) == 2
    assert "source file required" in capsys.readouterr().err


def test_parse_error(tmp_path, capsys):
    path = write(tmp_path, "broken.tset", "let = 3\n")
    assert main([str(path)]) == 2
    assert "Parse error" in capsys.readouterr().err


def test_dump_ast(tmp_path, capsys):
    path = write(tmp_path, "demo.tset", "print 1\n")
    assert main(["--dump-ast", str(path)]) == 0
    assert "Program(" in capsys.readouterr().out


def test_version(capsys):
    assert main(["--version"]) == 0
    out = capsys.readouterr().out
    assert "typedset" in out
    assert "lark" in out


def test_dump_parse_goes_to_stdout(tmp_path, capsys):
    path = write(tmp_path, "demo.tset", "print 1\n")
    assert main(["--dump-parse", str(path)]) == 0
    captured = capsys.readouterr()
    assert "print_stmt" in captured.out
    assert "print_stmt" not in captured.err
