from feynterm.grading import (
    GradeBoundary,
    calculate_grade,
    configure_grading_scale,
    default_grading_scale,
)


def _asker(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_default_scale_values():
    scale = default_grading_scale()
    assert [b.grade for b in scale] == ["S", "A", "B", "C", "D", "F"]
    assert [b.min_percentage for b in scale] == [90, 80, 70, 60, 50, 0]


def test_default_scale_is_a_copy():
    first = default_grading_scale()
    first.clear()
    assert len(default_grading_scale()) == 6


def test_zero_total_gives_question_mark():
    assert calculate_grade(0, 0, default_grading_scale()) == "?"


def test_grade_boundaries():
    scale = default_grading_scale()
    assert calculate_grade(90, 100, scale) == "S"
    assert calculate_grade(89, 100, scale) == "A"
    assert calculate_grade(50, 100, scale) == "D"
    assert calculate_grade(49, 100, scale) == "F"


def test_percentage_truncates():
    scale = default_grading_scale()
    # 8/9 is 88.8%, which truncates below 90
    assert calculate_grade(8, 9, scale) == "A"


def test_falls_back_to_last_grade():
    scale = [GradeBoundary("P", 60), GradeBoundary("X", 40)]
    assert calculate_grade(1, 10, scale) == "X"


def test_configure_relabels_and_moves_bounds(capsys):
    answers = ["e", "85", "g", "70", "o", "55", "p", "45", "w", "30", "u"]
    scale = configure_grading_scale(default_grading_scale(), _asker(*answers))
    assert [b.grade for b in scale] == ["E", "G", "O", "P", "W", "U"]
    assert [b.min_percentage for b in scale] == [90, 85, 70, 55, 45, 30]
    assert "Configure Grading Scale" in capsys.readouterr().out


def test_configure_non_numeric_bound_is_zero():
    scale = configure_grading_scale(
        [GradeBoundary("A", 50), GradeBoundary("B", 20)], _asker("x", "abc", "y")
    )
    assert scale == [GradeBoundary("X", 50), GradeBoundary("Y", 0)]


def test_configure_does_not_mutate_input():
    original = default_grading_scale()
    answers = ["e", "85", "g", "70", "o", "55", "p", "45", "w", "30", "u"]
    configure_grading_scale(original, _asker(*answers))
    assert original == default_grading_scale()


def test_configured_scale_used_for_grading():
    scale = configure_grading_scale(
        [GradeBoundary("A", 50), GradeBoundary("B", 20)], _asker("p", "30", "f")
    )
    assert calculate_grade(40, 100, scale) == "F"
    assert calculate_grade(60, 100, scale) == "P"