import io
import sys

from feynterm.grader_cli import main


def _run(monkeypatch, tmp_path, text):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main([])


def test_default_scale_grades_half_correct(monkeypatch, tmp_path, capsys):
    (tmp_path / "key.csv").write_text("Paris\nLondon\nRome\nBerlin\n")
    (tmp_path / "user.csv").write_text("paris\nrome\nmadrid\noslo\n")

    code = _run(monkeypatch, tmp_path, "1\nkey.csv\nuser.csv\n")
    out = capsys.readouterr().out

    assert code == 0
    assert "Correct answers: 2/4" in out
    assert "Percentage: 50%" in out
    assert "Grade: D" in out


def test_custom_scale_letters_used(monkeypatch, tmp_path, capsys):
    (tmp_path / "key.csv").write_text("one\ntwo\n")
    (tmp_path / "user.csv").write_text("one\ntwo\n")
    answers = "2\nz\n90\na\n80\nb\n70\nc\n60\nd\n50\nf\nkey.csv\nuser.csv\n"

    code = _run(monkeypatch, tmp_path, answers)
    out = capsys.readouterr().out

    assert code == 0
    assert "Grade: Z" in out
    assert "Percentage: 100%" in out


def test_missing_files_reported(monkeypatch, tmp_path, capsys):
    code = _run(monkeypatch, tmp_path, "1\nnope.csv\nnada.csv\n")
    out = capsys.readouterr().out

    assert code == 0
    assert "Error reading files!" in out
    assert "Results:" not in out


def test_empty_user_file_is_count_error(monkeypatch, tmp_path, capsys):
    (tmp_path / "key.csv").write_text("one\n")
    (tmp_path / "user.csv").write_text("")

    _run(monkeypatch, tmp_path, "1\nkey.csv\nuser.csv\n")
    out = capsys.readouterr().out

    assert "Error: Answer counts don't match!" in out