import io

from langsniff.cli import main


def test_reports_language(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Мой дядя самых честных правил\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Please enter a text:"
    assert lines[1] == "Language: Русский"
    assert lines[2].startswith("Info: Info(")
    assert "Cyrillic" in lines[2]


def test_unrecognised_text(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1234567890-,;!\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Cannot recognize a language :(" in out
    assert "Language:" not in out


def test_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Cannot recognize a language :("


def test_reads_only_first_line(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("123\nМой дядя\n"))
    main([])
    assert "Cannot recognize a language :(" in capsys.readouterr().out