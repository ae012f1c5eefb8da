import pytest

from feynterm.template_matching import (
    cleanup,
    extract_points,
    load_templates,
    match_letter,
    modified_hausdorff,
    template_matching,
)


def _grid(black):
    return [[0 if (x, y) in black else 255 for x in range(20)] for y in range(20)]


def _write_grid(path, black):
    rows = _grid(black)
    body = "\n".join(" ".join(str(v) for v in row) for row in rows)
    path.write_text(f"P2\n20 20\n255\n{body}\n")


VERTICAL = {(5, y) for y in range(2, 18)}
HORIZONTAL = {(x, 10) for x in range(2, 18)}


def test_extract_points_row_major():
    assert extract_points([[255, 0], [0, 255]]) == [(1, 0), (0, 1)]


def test_modified_hausdorff_identical_is_zero():
    pts = sorted(VERTICAL)
    assert modified_hausdorff(pts, pts) == 0.0


def test_modified_hausdorff_single_points():
    assert modified_hausdorff([(0, 0)], [(3, 4)]) == pytest.approx(5.0)


def test_modified_hausdorff_symmetric():
    a = sorted(VERTICAL)
    b = sorted(HORIZONTAL)
    assert modified_hausdorff(a, b) == pytest.approx(modified_hausdorff(b, a))


def test_modified_hausdorff_empty_raises():
    with pytest.raises(ValueError):
        modified_hausdorff([], [(1, 1)])


def test_load_templates_reads_present_files(tmp_path):
    _write_grid(tmp_path / "template_ord65.pgm", VERTICAL)
    _write_grid(tmp_path / "template_ord66.pgm", HORIZONTAL)

    templates = load_templates(tmp_path)

    assert list(templates) == ["A", "B"]
    assert set(templates["A"]) == VERTICAL


def test_load_templates_missing_dir_gives_nothing(tmp_path):
    assert load_templates(tmp_path / "absent") == {}


def test_match_letter_picks_closest():
    templates = {"A": sorted(VERTICAL), "B": sorted(HORIZONTAL)}
    assert match_letter(sorted(HORIZONTAL), templates) == "B"


def test_match_letter_too_far_is_unknown():
    templates = {"A": [(19, y) for y in range(20)]}
    assert match_letter([(0, 0)], templates) == "?"


def test_match_letter_no_points_is_unknown():
    assert match_letter([], {"A": sorted(VERTICAL)}) == "?"


def test_template_matching_writes_words(tmp_path):
    letters = []
    for n in range(1, 4):
        path = tmp_path / f"letter_{n}.pgm"
        _write_grid(path, VERTICAL)
        letters.append(path)
    output = tmp_path / "output.txt"
    output.write_text("")

    text = template_matching(
        letters, [2, 1], {"A": sorted(VERTICAL)}, output, tmp_path / "dump.txt"
    )

    assert text == "AA A "
    assert output.read_text() == text


def test_template_matching_missing_letter_is_question_mark(tmp_path):
    first = tmp_path / "letter_1.pgm"
    _write_grid(first, VERTICAL)
    output = tmp_path / "output.txt"
    output.write_text("")

    text = template_matching(
        [tmp_path / "letter_0.pgm", first], [1], {"A": sorted(VERTICAL)}, output, tmp_path / "x"
    )

    assert text == "?A "


def test_template_matching_falls_back_to_text_dump(tmp_path):
    dump = tmp_path / "dump.txt"
    dump.write_text("extracted text")
    output = tmp_path / "output.txt"

    result = template_matching([], [], {}, output, dump)

    assert result is None
    assert output.read_text() == "extracted text"
    assert not dump.exists()


def test_cleanup_removes_intermediate_files(tmp_path):
    for name in ("output_1.png", "output_1.pgm", "tmp_resources.txt", "keep.txt"):
        (tmp_path / name).write_text("x")
    for name in ("Letters", "Lines", "Words"):
        (tmp_path / name).mkdir()
        (tmp_path / name / "a.pgm").write_text("x")

    removed = cleanup(tmp_path)

    assert len(removed) == 6
    assert sorted(p.name for p in tmp_path.iterdir()) == ["keep.txt"]