from passgauge.analyzer import COMMON_PASSWORDS
from passgauge.wordlist import build_analyzer, load_wordlist


def test_load_wordlist(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("  CorrectHorse \n\nsummer2024\n", encoding="utf-8")
    assert load_wordlist(str(p)) == frozenset({"correcthorse", "summer2024"})


def test_missing_wordlist_warns(tmp_path, caplog):
    assert load_wordlist(str(tmp_path / "missing.txt")) == frozenset()
    assert "not found" in caplog.text


def test_build_analyzer_merges(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("summer2024\n", encoding="utf-8")
    a = build_analyzer(str(p))
    assert COMMON_PASSWORDS <= a.common_passwords
    assert not a.analyze("Summer2024!!xyz").checks["notCommon"]
    assert not a.analyze("password").checks["notCommon"]


def test_build_analyzer_default():
    assert build_analyzer(None).common_passwords == COMMON_PASSWORDS


def test_undecodable_wordlist_warns(tmp_path, caplog):
    p = tmp_path / "words.bin"
    p.write_bytes(b"good\n\xff\xfe bad\n")
    assert load_wordlist(str(p)) == frozenset()
    assert "Could not read wordlist" in caplog.text


def test_undecodable_wordlist_falls_back_to_builtin(tmp_path):
    p = tmp_path / "words.bin"
    p.write_bytes(b"\xff\xfe")
    assert build_analyzer(str(p)).common_passwords == COMMON_PASSWORDS


def test_non_string_wordlist_path_ignored(caplog):
    assert build_analyzer(True).common_passwords == COMMON_PASSWORDS
    assert build_analyzer(3).common_passwords == COMMON_PASSWORDS
    assert "Ignoring wordlist_path" in caplog.text
