import io
import json

import pytest

from debug import debug
from main import main


@pytest.fixture(autouse=True)
def quiet_debug():
    yield
    debug.disable(*debug.components)


def test_message_with_default_settings(capsys):
    assert main(["-m", "AAAAA"]) == 0
    assert capsys.readouterr().out == "BDZGO\n"


def test_reciprocal_round_trip_through_the_cli(capsys):
    args = ["--positions", "1 2 3", "--rings", "2 4 6", "--plugs", "AB CD"]
    main(["-m", "SECRET", *args])
    cipher = capsys.readouterr().out.rstrip("\n")
    main(["-m", cipher, *args])
    assert capsys.readouterr().out == "SECRET\n"


def test_lines_from_stdin_share_one_machine(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("AAA\nA a\nA\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "BDZ\nG a\nO\n"


def test_input_and_output_files(tmp_path):
    src = tmp_path / "plain.txt"
    dst = tmp_path / "cipher.txt"
    src.write_text("AAA 123\nAA\n", encoding="utf-8")
    assert main(["--input", str(src), "--output", str(dst)]) == 0
    assert dst.read_text(encoding="utf-8") == "BDZ 123\nGO\n"


def test_config_file_with_overrides(tmp_path, capsys):
    cfg = tmp_path / "key.json"
    cfg.write_text(
        json.dumps({"rotors": ["I", "II", "III"], "positions": [5, 5, 5], "rings": [0, 0, 0], "plugs": []}),
        encoding="utf-8",
    )
    main(["--config", str(cfg), "--positions", "AAA", "-m", "AAAAA"])
    assert capsys.readouterr().out == "BDZGO\n"


def test_save_config(tmp_path, capsys):
    out = tmp_path / "saved.json"
    main(["--rotors", "III II I", "--positions", "XYZ", "--save-config", str(out), "-m", ""])
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["rotors"] == ["III", "II", "I"]
    assert data["positions"] == [23, 24, 25]


@pytest.mark.parametrize(
    "args",
    [
        ["--rotors", "I II"],
        ["--positions", "0 0 99"],
        ["--plugs", "AB BC"],
        ["--config", "does-not-exist.json"],
    ],
)
def test_bad_configuration_exits_with_status_2(args, capsys):
    assert main([*args, "-m", "HELLO"]) == 2
    captured = capsys.readouterr()
    assert captured.err.startswith("error:")
    assert captured.out == ""


def test_missing_input_file(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "nope.txt")]) == 2
    assert "error:" in capsys.readouterr().err


def test_debug_flag_logs_components(caplog, capsys):
    caplog.set_level("DEBUG", logger="ENIGMA")
    main(["--debug", "stepping", "-m", "A"])
    assert "[STEPPING] positions [0, 0, 1]" in caplog.text


def test_unknown_debug_component_is_rejected():
    with pytest.raises(SystemExit):
        main(["--debug", "keyboard", "-m", "A"])


def test_debug_output_to_log_file(tmp_path, capsys):
    log = tmp_path / "enigma.log"
    assert main(["--debug", "encipher", "--log-file", str(log), "-m", "A"]) == 0
    assert capsys.readouterr().out == "B\n"
    assert "[ENCIPHER] A->B window=AAB" in log.read_text(encoding="utf-8")
    assert not debug.status()["encipher"]


def test_unwritable_log_file(tmp_path, capsys):
    bad = tmp_path / "missing_dir" / "enigma.log"
    assert main(["--debug", "stepping", "--log-file", str(bad), "-m", "A"]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_output_into_missing_directory(tmp_path, capsys):
    dst = tmp_path / "missing_dir" / "out.txt"
    assert main(["-m", "A", "--output", str(dst)]) == 2
    captured = capsys.readouterr()
    assert captured.err.startswith("error:")
    assert captured.out == ""


def test_save_config_into_missing_directory(tmp_path, capsys):
    dst = tmp_path / "missing_dir" / "key.json"
    assert main(["-m", "A", "--save-config", str(dst)]) == 2
    captured = capsys.readouterr()
    assert captured.err.startswith("error:")
    assert captured.out == ""


def test_message_and_input_are_exclusive(tmp_path, capsys):
    src = tmp_path / "plain.txt"
    src.write_text("AAA\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["-m", "A", "--input", str(src)])
    assert exc.value.code == 2
    assert "not allowed with" in capsys.readouterr().err
