import pytest

from brickout.records import Record, format_line, get_records, parse_line, update_records


def test_parse_line_fields():
    assert parse_line("3;bob;42") == Record(3, "bob", 42)


def test_parse_line_ignores_trailing_text():
    assert parse_line("1;amy;50;extra") == Record(1, "amy", 50)
    assert parse_line("2;kim;7\r").score == 7


@pytest.mark.parametrize("line", ["x;bob;1", "1;bob", "", "1;bob;"])
def test_parse_line_errors(line):
    with pytest.raises(ValueError):
        parse_line(line)


def test_format_parse_round_trip():
    record = Record(5, "zed", 1234)
    assert parse_line(format_line(record)) == record
    assert format_line(record) == "5;zed;1234"


def test_update_creates_sorted_table(tmp_path):
    path = tmp_path / "records.txt"
    update_records(path, "amy", 10)
    update_records(path, "bob", 30)
    update_records(path, "cat", 20)
    records = get_records(path, 10)
    assert [r.name for r in records] == ["bob", "cat", "amy"]
    assert [r.place for r in records] == [1, 2, 3]
    assert [r.score for r in records] == sorted((r.score for r in records), reverse=True)


def test_update_ignores_lower_score_for_same_name(tmp_path):
    path = tmp_path / "records.txt"
    update_records(path, "amy", 10)
    before = path.read_text(encoding="utf-8")
    update_records(path, "amy", 10)
    update_records(path, "amy", 5)
    assert path.read_text(encoding="utf-8") == before


def test_update_replaces_higher_score_for_same_name(tmp_path):
    path = tmp_path / "records.txt"
    update_records(path, "amy", 10)
    update_records(path, "bob", 20)
    update_records(path, "amy", 30)
    records = get_records(path, 10)
    assert records == [Record(1, "amy", 30), Record(2, "bob", 20)]


def test_update_truncates_long_names(tmp_path):
    path = tmp_path / "records.txt"
    update_records(path, "abcdefghijklmn", 1)
    assert get_records(path, 10)[0].name == "abcdefghij"


def test_update_skips_blank_lines(tmp_path):
    path = tmp_path / "records.txt"
    path.write_text("1;amy;10\n\n2;bob;5\n", encoding="utf-8")
    update_records(path, "cat", 7)
    assert [r.name for r in get_records(path, 10)] == ["amy", "cat", "bob"]


def test_get_records_limit_and_missing_file(tmp_path):
    path = tmp_path / "records.txt"
    for index, name in enumerate(["a", "b", "c", "d"]):
        update_records(path, name, index)
    assert len(get_records(path, 2)) == 2
    assert get_records(path, 0) == []
    assert get_records(tmp_path / "missing.txt", 10) == []