import pytest

from stellargen.catalog import CatalogError, SubtypeData, load_categories, load_subtypes
from stellargen.logger import LogLevel, Logger

_KNOWN = {"Rock": "rock", "Ice": "ice"}


def parse(text):
    try:
        return _KNOWN[text]
    except KeyError:
        raise ValueError(f"unknown category: {text}") from None


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "catalog.log"


@pytest.fixture
def logger(log_path):
    instance = Logger(log_path, 0xFF & ~int(LogLevel.DISP_CMD))
    yield instance
    instance.close()


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_categories_in_file_order(tmp_path, logger):
    path = write(tmp_path, "cat.csv", "Category,Weight\nRock,2\n\nIce,0.5\n")
    entries = load_categories(path, parse, logger)
    assert [(e.value, e.weight) for e in entries] == [("rock", 2.0), ("ice", 0.5)]


def test_bad_category_rows_are_skipped_and_logged(tmp_path, logger, log_path):
    path = write(tmp_path, "cat.csv", "Category,Weight\nLava,1\nRock,abc\nIce,2.5abc\n")
    entries = load_categories(path, parse, logger)
    assert [(e.value, e.weight) for e in entries] == [("ice", 2.5)]
    text = log_path.read_text(encoding="utf-8")
    assert "unknown category: Lava" in text
    assert "Failed to parse probability for Rock: abc" in text


def test_missing_category_file_raises(tmp_path, logger):
    with pytest.raises(CatalogError):
        load_categories(tmp_path / "absent.csv", parse, logger)


def test_subtypes_parsed_and_trimmed(tmp_path, logger):
    path = write(
        tmp_path,
        "sub.csv",
        "Subtype, Category ,Weight, Low ,High\n Basalt ,Rock, 1 , 2 , 3,\nFrost,Ice,4,5,6\n",
    )
    entries, database = load_subtypes(path, parse, logger)
    assert [(e.value, e.weight) for e in entries["rock"]] == [("Basalt", 1.0)]
    assert [(e.value, e.weight) for e in entries["ice"]] == [("Frost", 4.0)]
    assert database["Basalt"] == SubtypeData("rock", "Basalt", 1.0, {"Low": 2.0, "High": 3.0})
    assert database["Frost"].data == {"Low": 5.0, "High": 6.0}


def test_bad_header_raises(tmp_path, logger):
    path = write(tmp_path, "sub.csv", "Name,Category,Weight\nBasalt,Rock,1\n")
    with pytest.raises(CatalogError):
        load_subtypes(path, parse, logger)


def test_unknown_subtype_category_raises(tmp_path, logger):
    path = write(tmp_path, "sub.csv", "Subtype,Category,Weight\nBasalt,Lava,1\n")
    with pytest.raises(CatalogError):
        load_subtypes(path, parse, logger)


def test_missing_parameter_raises(tmp_path, logger):
    path = write(tmp_path, "sub.csv", "Subtype,Category,Weight,Low,High\nBasalt,Rock,1,2\n")
    with pytest.raises(CatalogError):
        load_subtypes(path, parse, logger)


def test_unreadable_values_skip_the_row(tmp_path, logger, log_path):
    path = write(
        tmp_path,
        "sub.csv",
        "Subtype,Category,Weight,Low\nBasalt,Rock,x,1\nGranite,Rock,1,y\nFrost,Ice,3,4\n",
    )
    entries, database = load_subtypes(path, parse, logger)
    assert list(database) == ["Frost"]
    assert "rock" not in entries
    text = log_path.read_text(encoding="utf-8")
    assert "Can not read weight of subtype: Basalt" in text
    assert "Can not read subtype parameter: Low = y" in text


def test_duplicate_subtype_keeps_both_entries_and_last_data(tmp_path, logger):
    path = write(
        tmp_path, "sub.csv", "Subtype,Category,Weight,Low\nBasalt,Rock,1,2\nBasalt,Ice,3,4\n"
    )
    entries, database = load_subtypes(path, parse, logger)
    assert [e.weight for e in entries["rock"]] == [1.0]
    assert [e.weight for e in entries["ice"]] == [3.0]
    assert database["Basalt"].category == "ice"
    assert database["Basalt"].data == {"Low": 4.0}


def test_missing_subtype_file_raises(tmp_path, logger):
    with pytest.raises(CatalogError):
        load_subtypes(tmp_path / "absent.csv", parse, logger)