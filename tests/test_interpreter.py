import pytest

from turtlekit.interpreter import (
    MAX_LINES,
    execute,
    main,
    parse_value,
    run_file,
    run_lines,
)
from turtlekit.turtle_graphics import Turtle


def _state(turtle):
    return (turtle.x, turtle.y, turtle.angle, turtle.pen_is_down)


def _fresh():
    return Turtle(500, 500, None)


@pytest.mark.parametrize(
    "text, expected",
    [(" 90", 90), ("-5", -5), ("+7", 7), (" 12abc", 12), ("abc", 0), ("", 0)],
)
def test_parse_value(text, expected):
    assert parse_value(text) == expected


def test_execute_forward_moves_along_heading():
    turtle = _fresh()
    execute(turtle, "forward 10")
    assert (turtle.x, turtle.y) == (10, 0)


def test_execute_rotations_match_turtle_methods():
    turtle = _fresh()
    reference = _fresh()
    execute(turtle, "left 45")
    execute(turtle, "right 135")
    reference.rotate_left(45)
    reference.rotate_right(135)
    assert turtle.angle == reference.angle


def test_execute_pen_commands():
    turtle = _fresh()
    execute(turtle, "pen up")
    assert turtle.pen_is_down is False
    execute(turtle, "pen down")
    assert turtle.pen_is_down is True
    execute(turtle, "pen sideways")
    assert turtle.pen_is_down is False


def test_execute_ignores_unknown_commands():
    turtle = _fresh()
    before = _state(turtle)
    execute(turtle, "jump 10")
    execute(turtle, "{")
    execute(turtle, "repeat 3")
    assert _state(turtle) == before


@pytest.mark.parametrize("line", ["forward", "left", "right", "pen"])
def test_execute_missing_argument_raises(line):
    with pytest.raises(ValueError):
        execute(_fresh(), line)


def test_repeat_equals_expanded_commands():
    looped = _fresh()
    run_lines(looped, ["repeat 4", "{", "forward 10", "left 33", "}"])
    expanded = _fresh()
    run_lines(expanded, ["forward 10", "left 33"] * 4)
    assert _state(looped) == _state(expanded)


def test_nested_repeat_equals_expanded_commands():
    program = [
        "repeat 3",
        "{",
        "forward 7",
        "repeat 2",
        "{",
        "left 20",
        "forward 3",
        "}",
        "right 10",
        "}",
        "forward 1",
    ]
    looped = _fresh()
    run_lines(looped, program)
    expanded = _fresh()
    body = ["forward 7"] + ["left 20", "forward 3"] * 2 + ["right 10"]
    run_lines(expanded, body * 3 + ["forward 1"])
    assert _state(looped) == _state(expanded)


def test_repeat_zero_runs_nothing_but_continues():
    turtle = _fresh()
    run_lines(turtle, ["repeat 0", "{", "forward 10", "}", "left 90"])
    reference = _fresh()
    reference.rotate_left(90)
    assert _state(turtle) == _state(reference)


def test_repeat_count_wraps_at_one_byte():
    turtle = _fresh()
    before = _state(turtle)
    run_lines(turtle, ["repeat 256", "{", "forward 10", "}"])
    assert _state(turtle) == before


def test_unterminated_repeat_is_not_run():
    turtle = _fresh()
    before = _state(turtle)
    run_lines(turtle, ["repeat 2", "{", "forward 10"])
    assert _state(turtle) == before


def test_run_file_writes_svg(tmp_path):
    source = tmp_path / "star.txt"
    source.write_text(
        "pen down\nrepeat 5\n{\nforward 50\nright 144\n}\n", encoding="latin-1"
    )
    output = run_file(source)
    assert output == str(source) + ".svg"
    content = (tmp_path / "star.txt.svg").read_text(encoding="iso-8859-1")
    assert content.count("<line ") == 5
    assert content.endswith("</svg>\n")
    assert content.count("</svg>") == 1


def test_run_file_pen_up_draws_nothing(tmp_path):
    source = tmp_path / "up.txt"
    source.write_text("pen up\nforward 50\n", encoding="latin-1")
    content = open(run_file(source), encoding="iso-8859-1").read()
    assert "<line " not in content


def test_run_file_drops_unterminated_last_line(tmp_path):
    source = tmp_path / "tail.txt"
    source.write_text("forward 10\nforward 10", encoding="latin-1")
    content = open(run_file(source), encoding="iso-8859-1").read()
    assert content.count("<line ") == 1


def test_run_file_reads_at_most_max_lines(tmp_path):
    source = tmp_path / "long.txt"
    source.write_text("forward 1\n" * (MAX_LINES + 1), encoding="latin-1")
    content = open(run_file(source), encoding="iso-8859-1").read()
    assert content.count("<line ") == 5000


def test_run_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        run_file(tmp_path / "missing.txt")


def test_main_reports_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")
    assert main([missing]) == 0
    out = capsys.readouterr().out
    assert f"Can't open: {missing}" in out
    assert "Invalid file." in out


def test_main_uses_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "ex1.txt").write_text("forward 10\n", encoding="latin-1")
    assert main([]) == 0
    content = (tmp_path / "ex1.txt.svg").read_text(encoding="iso-8859-1")
    assert content.count("<line ") == 1


def test_main_with_too_many_arguments_uses_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "ex1.txt").write_text("pen up\n", encoding="latin-1")
    assert main(["a.txt", "b.txt"]) == 0
    assert (tmp_path / "ex1.txt.svg").exists()
    assert not (tmp_path / "a.txt.svg").exists()