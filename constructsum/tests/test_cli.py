# -*- coding: utf-8 -*-
"""
Command-line subcommands: checksum, add, planes.
"""
import json

import matplotlib
matplotlib.use("Agg")
import pytest

from constructsum.main import main

RUN_YAML = """
constructions:
  - name: c1
    layers:
      - { conductivity: 10.0, density: 1000.0, specific_heat: 3990.0 }
      - { conductivity: 20.0, density: 990.0, specific_heat: 3990.0 }
  - name: c1_copy
    layers:
      - { conductivity: 10.0, density: 1000.0, specific_heat: 3990.0 }
      - { conductivity: 20.0, density: 990.0, specific_heat: 3990.0 }
  - name: c3
    resistance: 5000
"""


def test_add(capsys):
    main(["add", "1", "2", "--precision", "1"])
    assert capsys.readouterr().out.strip() == "0" * 62 + "11"


def test_checksum_command(tmp_path, capsys):
    cfg = tmp_path / "run.yaml"
    cfg.write_text(RUN_YAML)
    main(["checksum", str(cfg), "--out", str(tmp_path / "out")])
    captured = capsys.readouterr()
    lines = captured.out.strip().splitlines()
    assert lines[0] == "c1\t0000000000010111010100111000000101111000011000110011100000000000"
    assert "Unique values: 2" in lines
    assert "collisions among: c1, c1_copy" in captured.err
    payload = json.loads((tmp_path / "out" / "checksums.json").read_text())
    assert set(payload["checksums"]) == {"c1", "c1_copy", "c3"}


def test_planes_command(tmp_path):
    png = tmp_path / "planes.png"
    main(["planes", "100", "200", "300", "--width", "16", "--png", str(png)])
    assert png.exists()


def test_no_command_is_an_error():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_checksum_debug_output(tmp_path, capsys):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("constructions:\n  - {name: roof, resistance: 5000}\n")
    main(["checksum", str(cfg), "--debug"])
    captured = capsys.readouterr()
    assert "DEBUG: 1 constructions" in captured.err
    assert "[diag] construction kind=resistance" in captured.out
    main(["checksum", str(cfg)])
    assert "DEBUG" not in capsys.readouterr().err


@pytest.mark.parametrize("body,msg", [
    ("constructions:\n  - {name: roof, resistance: null}\n", "resistance must be a number"),
    ("constructions:\n  - {name: wall, layers: [{material: unobtainium}]}\n", "unknown material 'unobtainium'"),
])
def test_checksum_bad_run_file_reports_error(tmp_path, capsys, body, msg):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(body)
    with pytest.raises(SystemExit) as exc:
        main(["checksum", str(cfg)])
    assert exc.value.code == 1
    err = capsys.readouterr().err
    assert "ERROR: checksum:" in err
    assert msg in err
    assert "Traceback" not in err


def test_add_strict_overflow_reports_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["add", "1e20", "--strict"])
    assert exc.value.code == 1
    assert "ERROR: add:" in capsys.readouterr().err
