import json
import subprocess
import sys
from pathlib import Path

import pytest

from phrasehunter.cli import main

ROOT = Path(__file__).resolve().parents[1]


def _run_cli(args):
    exe = [sys.executable, "-m", "phrasehunter.cli"]
    cp = subprocess.run(exe + args, cwd=str(ROOT), capture_output=True, text=True)
    return cp.returncode, cp.stdout, cp.stderr


def test_smoke_cli(write_doc):
    path = write_doc(["@[static#Home] is great.", "Click Home to continue."])
    code, out, err = _run_cli([str(path)])
    assert code == 0
    assert "Home" in out
    assert "Pass 1" in out


def test_cli_missing_argument():
    code, out, err = _run_cli([])
    assert code != 0
    assert "usage" in err.lower()


def test_main_missing_argument_exits():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code != 0


def test_main_missing_file(tmp_path, capsys):
    code = main([str(tmp_path / "nope.txt")])
    captured = capsys.readouterr()
    assert code == 1
    assert "ERROR" in captured.err
    assert "Pass 1" not in captured.out


def test_main_directory_is_not_a_file(tmp_path):
    assert main([str(tmp_path)]) == 1


def test_main_decode_failure(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"@[static#A]\n\xc3\x28 A\n")
    assert main([str(path)]) == 1


def test_main_json(write_doc, capsys):
    path = write_doc([
        "@[static#Home] is great.",
        "Click Home to continue.",
        '<a href="Home">Home</a> link',
    ])
    assert main(["--json", str(path)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["occurrences"] == {"Home": [2, 3]}
    assert data["summary"]["lines"] == 3


def test_main_json_is_repeatable(write_doc, capsys):
    path = write_doc(["@[static#Home]", "Home"])
    main(["--json", str(path)])
    first = capsys.readouterr().out
    main(["--json", str(path)])
    second = capsys.readouterr().out
    assert first == second


def test_main_no_annotations(write_doc, capsys):
    path = write_doc(["just text"])
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "No unwrapped instances of known phrases found." in out


def test_main_output_file(write_doc, tmp_path):
    path = write_doc(["@[static#Home]", "Home"])
    report = tmp_path / "report.json"
    assert main(["--output", str(report), str(path)]) == 0
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["occurrences"] == {"Home": [2]}


def test_main_output_without_file_name(write_doc, tmp_path, capsys):
    path = write_doc(["@[static#Home]", "Home"])
    assert main(["--output", ".", str(path)]) == 1
    assert main(["--output", str(tmp_path), str(path)]) == 1
    assert "ERROR" in capsys.readouterr().err
    assert sorted(p.name for p in tmp_path.iterdir()) == ["doc.txt"]


def test_main_fail_on_unwrapped(write_doc):
    found = write_doc(["@[static#Home]", "Home"], name="found.txt")
    clean = write_doc(["@[static#Home]", "nothing"], name="clean.txt")
    assert main(["--fail-on-unwrapped", str(found)]) == 1
    assert main(["--fail-on-unwrapped", str(clean)]) == 0


def test_main_keep_tags(write_doc, capsys):
    path = write_doc(["@[static#cat]", '<div title="cat"></div>'])
    main(["--json", str(path)])
    assert json.loads(capsys.readouterr().out)["occurrences"] == {}
    main(["--json", "--keep-tags", str(path)])
    assert json.loads(capsys.readouterr().out)["occurrences"] == {"cat": [2]}
