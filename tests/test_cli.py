import json

import pytest

from passgauge import cli


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    monkeypatch.setenv("PASSGAUGE_CONFIG", str(tmp_path / "config.json"))


def test_score_json(capsys):
    assert cli.main(["score", "password", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["score"] == 2
    assert out["strength"] == "weak"
    assert out["checks"]["notCommon"] is False


def test_score_rendered(capsys):
    cli.main(["score", "Tr0ub4dor&3XyZ"])
    out = capsys.readouterr().out
    assert "Very Strong" in out
    assert "Suggestions" not in out
    assert "Tr0ub4dor" not in out


def test_score_rendered_with_suggestions(capsys):
    cli.main(["score", "abc"])
    out = capsys.readouterr().out
    assert "Weak" in out
    assert "Password is too short - very weak security" in out


def test_prompt_when_no_argument(capsys, monkeypatch):
    monkeypatch.setattr(cli, "getpass", lambda prompt="": "")
    cli.main(["score"])
    assert "Enter a password" in capsys.readouterr().out


def test_wordlist_option(tmp_path, capsys):
    p = tmp_path / "words.txt"
    p.write_text("correcthorse\n", encoding="utf-8")
    cli.main(["score", "CorrectHorse!9Battery", "--json", "-w", str(p)])
    out = json.loads(capsys.readouterr().out)
    assert out["checks"]["notCommon"] is False


def test_undecodable_wordlist_does_not_crash(tmp_path, capsys):
    p = tmp_path / "words.bin"
    p.write_bytes(b"good\n\xff\xfe bad\n")
    assert cli.main(["score", "Abc!12345xyz", "--json", "-w", str(p)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["score"] == 7


def test_non_string_wordlist_in_config_ignored(tmp_path, monkeypatch, capsys):
    cfg = tmp_path / "config.json"
    cfg.write_text('{"wordlist_path": true}', encoding="utf-8")
    monkeypatch.setenv("PASSGAUGE_CONFIG", str(cfg))
    assert cli.main(["score", "password", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["score"] == 2
