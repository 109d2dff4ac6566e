import pytest

from advent_puzzles.cli import main, read_lines


def _write(tmp_path, lines):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


def test_read_lines_round_trip(tmp_path):
    lines = ["199", "200", "", "208"]
    assert read_lines(_write(tmp_path, lines)) == lines


def test_sonar_sweep(tmp_path, capsys):
    depths = ["199", "200", "208", "210", "200", "207", "240", "269", "260", "263"]
    status = main(["2021", "1", _write(tmp_path, depths)])
    out = capsys.readouterr().out.splitlines()
    assert status == 0
    assert out == ["increased singles: 7", "increased triples: 5"]


def test_tuning_trouble(tmp_path, capsys):
    status = main(["2022", "6", _write(tmp_path, ["mjqjpqmgbljsphdztnvjfqwrcgsmlb"])])
    out = capsys.readouterr().out.splitlines()
    assert status == 0
    assert out == ["puzzle 1: 7", "puzzle 2: 19"]


def test_supply_stacks(tmp_path, capsys):
    lines = [
        "    [D]    ",
        "[N] [C]    ",
        "[Z] [M] [P]",
        " 1   2   3",
        "",
        "move 1 from 2 to 1",
        "move 3 from 1 to 3",
        "move 2 from 2 to 1",
        "move 1 from 1 to 2",
    ]
    main(["2022", "5", _write(tmp_path, lines)])
    assert capsys.readouterr().out.splitlines() == ["puzzle1: CMZ", "puzzle2: MCD"]


def test_missing_input_file(tmp_path, capsys):
    missing = str(tmp_path / "absent.txt")
    assert main(["2021", "1", missing]) == 1
    assert "absent.txt" in capsys.readouterr().err


def test_unknown_day():
    with pytest.raises(SystemExit) as excinfo:
        main(["2021", "16", "input.txt"])
    assert excinfo.value.code == 2