import json
from pathlib import Path

import pytest

from qnamatch.__main__ import main

ROWS = [
    {"question": "What is the capital of France", "variant": "Paris"},
    {"question": "What is the capital of france?", "variant": "Paris"},
    {"question": "Who wrote Hamlet", "variant": "Shakespeare"},
]


def _seed(tmp: Path) -> str:
    p = tmp / "qna.json"
    p.write_text(json.dumps(ROWS), encoding="utf-8")
    return str(p)


@pytest.mark.e2e
def test_cli_single_query_table(tmp_path: Path, capsys):
    assert main(["--corpus", _seed(tmp_path), "--q", "what is the capital of France"]) == 0
    out = capsys.readouterr().out
    assert "Paris" in out
    assert out.count("Paris") == 1
    assert "Shakespeare" not in out


@pytest.mark.e2e
def test_cli_json_output(tmp_path: Path, capsys):
    main(["--corpus", _seed(tmp_path), "--q", "who wrote hamlet", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data == {"answer": ["Shakespeare"], "originalText": "who wrote hamlet"}


@pytest.mark.e2e
def test_cli_best_and_no_match(tmp_path: Path, capsys):
    path = _seed(tmp_path)
    main(["--corpus", path, "--q", "Who wrote Hamlet?", "--best"])
    assert capsys.readouterr().out.strip() == "Shakespeare"
    main(["--corpus", path, "--q", "nothing relevant here", "--best"])
    assert capsys.readouterr().out.strip() == "(no matches)"


@pytest.mark.e2e
def test_cli_missing_corpus_still_answers(tmp_path: Path, capsys):
    assert main(["--corpus", str(tmp_path / "missing.json"), "--q", "who wrote hamlet"]) == 0
    assert "(no matches)" in capsys.readouterr().out


@pytest.mark.e2e
def test_cli_rejects_bad_threshold(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["--corpus", _seed(tmp_path), "--threshold", "150", "--q", "x"])


@pytest.mark.e2e
def test_cli_repl_reads_until_blank_line(tmp_path: Path, capsys, monkeypatch):
    lines = iter(["who wrote hamlet", ""])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))
    assert main(["--corpus", _seed(tmp_path), "--repl", "--echo"]) == 0
    out = capsys.readouterr().out
    assert "Shakespeare" in out
    assert "[query] ['hamlet', 'who', 'wrote']" in out
