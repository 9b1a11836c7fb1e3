import json
from pathlib import Path

import pytest
from babble_ui.__main__ import main

LOG = (
    "--- Log opened Sun Mar 27 15:04:05 2016\n"
    "15:05 <@alice> the cat sat on the mat\n"
    "15:07 <+bob> the cat ran away\n"
)


def _corpus(tmp: Path, text: str = "the cat sat on the mat the cat ran") -> str:
    p = tmp / "corpus.txt"
    p.write_text(text, encoding="utf-8")
    return str(p)


def _log(tmp: Path, text: str = LOG) -> str:
    p = tmp / "chan.log"
    p.write_text(text, encoding="utf-8")
    return str(p)


@pytest.mark.parametrize("argv", [
    [],
    ["--generate"],
    ["--generate", "--extract", "--file", "x"],
    ["--generate", "--file", "x", "--sentence-length", "0"],
    ["--generate", "--file", "x", "-k", "0"],
    ["--generate", "--file", "x", "--count", "0"],
    ["--extract", "--log-file", "x"],
    ["--parse"],
    ["--parse", "--log-file", "x", "--line-limit", "-1"],
    ["--parse", "--log-file", "x", "--location", ""],
    ["--parse", "--log-file", "x", "--location", "Not/AZone"],
])
def test_bad_arguments_exit_with_usage_error(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


@pytest.mark.e2e
def test_generate_prints_one_line(tmp_path: Path, capsys):
    path = _corpus(tmp_path)
    assert main(["--generate", "--file", path, "--sentence-length", "5", "--seed", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert len(lines[0].split(" ")) >= 5


def test_generate_json_rows(tmp_path: Path, capsys):
    path = _corpus(tmp_path)
    rc = main(["--generate", "--file", path, "--sentence-length", "3", "--count", "2",
               "--seed", "1", "--json"])
    assert rc == 0
    rows = json.loads(capsys.readouterr().out)
    assert len(rows) == 2
    assert all(len(r["phrases"]) == 3 for r in rows)


def test_generate_is_reproducible(tmp_path: Path, capsys):
    path = _corpus(tmp_path)
    main(["--generate", "--file", path, "--seed", "9"])
    first = capsys.readouterr().out
    main(["--generate", "--file", path, "--seed", "9"])
    assert capsys.readouterr().out == first


def test_missing_corpus_file_fails(tmp_path: Path):
    assert main(["--generate", "--file", str(tmp_path / "missing.txt")]) == 1


def test_empty_corpus_fails(tmp_path: Path):
    path = _corpus(tmp_path, "   \n")
    assert main(["--generate", "--file", path]) == 1


@pytest.mark.e2e
def test_extract_then_generate(tmp_path: Path, capsys):
    log_path = _log(tmp_path)
    out = tmp_path / "out" / "corpus.txt"
    assert main(["--extract", "--log-file", log_path, "--out-file", str(out),
                 "--location", "UTC"]) == 0
    assert out.read_text(encoding="utf-8") == "the cat sat on the mat the cat ran away"

    assert main(["--generate", "--file", str(out), "--seed", "2"]) == 0
    assert capsys.readouterr().out.strip()


def test_parse_reports_entry_count(tmp_path: Path, capsys):
    log_path = _log(tmp_path)
    assert main(["--parse", "--log-file", log_path, "--location", "UTC"]) == 0
    assert "Parsed 3 entries." in capsys.readouterr().out


def test_parse_bad_log_fails(tmp_path: Path):
    log_path = _log(tmp_path, LOG + "this is not irssi\n")
    assert main(["--parse", "--log-file", log_path, "--location", "UTC"]) == 1
