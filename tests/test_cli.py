import json

from cli import main


def test_prints_one_number_per_line(capsys):
    assert main(["--lower", "1", "--upper", "5", "--count", "5", "--seed", "8"]) == 0

    out = capsys.readouterr().out
    assert sorted(int(line) for line in out.splitlines()) == [1, 2, 3, 4, 5]


def test_json_output_with_stats(capsys):
    assert main(["--list", "10;20;30", "--count", "3", "--seed", "8", "--json", "--stats"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert sorted(payload["numbers"]) == [10, 20, 30]
    assert payload["stats"]["sum"] == 60
    assert payload["stats"]["count"] == 3


def test_duplicates_flag(capsys):
    assert main(["--lower", "0", "--upper", "1", "--count", "10", "--allow-duplicates", "--seed", "3"]) == 0

    numbers = [int(line) for line in capsys.readouterr().out.splitlines()]
    assert len(numbers) == 10
    assert set(numbers) <= {0, 1}


def test_save_writes_file(tmp_path, capsys):
    path = tmp_path / "numbers.txt"

    assert main(["--lower", "4", "--upper", "4", "--save", str(path)]) == 0

    assert path.read_text(encoding="utf-8") == "4"
    assert capsys.readouterr().out.strip() == "4"


def test_engine_error_exits_with_status_2(capsys):
    assert main(["--lower", "1", "--upper", "5", "--count", "6"]) == 2

    assert "cannot draw 6 unique numbers" in capsys.readouterr().err


def test_bad_list_exits_with_status_2(capsys):
    assert main(["--list", "1,2,x"]) == 2

    assert "'x'" in capsys.readouterr().err


def test_list_mode_ignores_range_flags(capsys):
    assert main(["--list", "1,2", "--lower", "5", "--upper", "1", "--count", "2", "--seed", "4"]) == 0

    assert sorted(int(line) for line in capsys.readouterr().out.splitlines()) == [1, 2]
