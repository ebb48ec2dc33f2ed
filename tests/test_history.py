import pytest

from rustrepl.history import NEW_HISTORY_MARK, History


@pytest.fixture
def history(tmp_path):
    hist = History.load(tmp_path / "history")
    for entry in ["let a = 1;", "fn f() {}", "let b = 2;"]:
        hist.push(entry)
    return hist


def test_load_creates_empty_file(tmp_path):
    path = tmp_path / "sub" / "history"
    hist = History.load(path)
    assert path.exists()
    assert hist.entries == []


def test_load_old_format(tmp_path):
    path = tmp_path / "history"
    path.write_text("one\ntwo\n", encoding="utf-8")
    assert History.load(path).entries == ["one", "two"]


def test_load_new_format(tmp_path):
    path = tmp_path / "history"
    path.write_text(NEW_HISTORY_MARK + "fn a() {\n}\n//\nlet x = 1;", encoding="utf-8")
    assert History.load(path).entries == ["fn a() {\n}", "let x = 1;"]


def test_save_load_round_trip(history):
    history.push("fn g() {\n    1\n}")
    history.save()
    assert History.load(history.path).entries == history.entries


def test_save_strips_comments(tmp_path):
    hist = History.load(tmp_path / "history")
    hist.push("// note\nlet c = 3;")
    hist.save()
    assert History.load(hist.path).entries == ["let c = 3;"]


def test_push_skips_empty_and_repeats(history):
    before = list(history.entries)
    history.push("")
    history.push(before[-1])
    assert history.entries == before


def test_up_returns_newest_match(history):
    assert history.up("") == "let b = 2;"


def test_up_filters_by_buffer(history):
    assert history.up("fn") == "fn f() {}"


def test_locked_up_moves_to_older(history):
    history.up("")
    history.lock()
    assert history.up("") == "fn f() {}"


def test_down_unlocked_returns_buffer(history):
    assert history.down("typed") == "typed"


def test_down_after_up_restores_input(history):
    history.up("let")
    history.lock()
    assert history.down("ignored") == "let"


def test_reverse_find_nth(history):
    assert history.reverse_find_nth("let", 0) == "let b = 2;"
    assert history.reverse_find_nth("let", 1) == "let a = 1;"
    assert history.reverse_find_nth("let", 2) is None


def test_lock_unlock(history):
    history.lock()
    assert history.locked is True
    history.unlock()
    assert history.locked is False