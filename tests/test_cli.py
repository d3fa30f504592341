from __future__ import annotations
import subprocess

import numpy as np
import pytest

from _utils import check_cli_or_skip, parse_rows
from geologm.cli import geo_dist, geo_interp, mat_expm, mat_logm
from geologm.cli.main import main as glm_main

ROT90 = "0 -1; 1 0"


@pytest.mark.parametrize("strategy", ["general", "schur", "schur-complex"])
def test_mat_logm_rotation(strategy: str, capsys):
    assert mat_logm.main(["--M", ROT90, "--strategy", strategy]) == 0
    L = parse_rows(capsys.readouterr().out)
    assert np.allclose(L, [[0.0, -np.pi / 2], [np.pi / 2, 0.0]], atol=1e-10)


def test_mat_logm_complex_output(capsys):
    mat_logm.main(["--M", "-1 0; 0 1", "--strategy", "schur", "--complex", "--precision", "6"])
    out = capsys.readouterr().out.strip()
    assert "3.14159j" in out


def test_mat_logm_reads_file_and_writes_file(tmp_path_cwd):
    (tmp_path_cwd / "m.txt").write_text("2 0\n0 2\n", encoding="utf-8")
    mat_logm.main(["-i", "m.txt", "-o", "log.txt"])
    L = parse_rows((tmp_path_cwd / "log.txt").read_text(encoding="utf-8"))
    assert np.allclose(L, np.log(2.0) * np.eye(2), atol=1e-10)


def test_mat_logm_reads_stdin(monkeypatch, capsys):
    import io
    monkeypatch.setattr("sys.stdin", io.StringIO("1 0 0; 0 1 0; 0 0 1"))
    mat_logm.main(["-i", "-"])
    assert np.allclose(parse_rows(capsys.readouterr().out), 0.0)


@pytest.mark.parametrize("method", ["taylor", "pade"])
def test_mat_expm(method: str, capsys):
    theta = np.pi / 2
    mat_expm.main(["--M", f"0 {-theta!r}; {theta!r} 0", "--method", method])
    E = parse_rows(capsys.readouterr().out)
    assert np.allclose(E, [[0.0, -1.0], [1.0, 0.0]], atol=1e-6)


def test_geo_dist(capsys):
    geo_dist.main(["--R", "1 0; 0 1", "--T", ROT90])
    d = float(capsys.readouterr().out)
    assert d == pytest.approx(np.pi / 2 * np.sqrt(2.0), rel=1e-9)


def test_geo_interp_multiple_t(capsys):
    geo_interp.main(["--A", "1 0; 0 1", "--B", ROT90, "-t", "0,0.5,1", "--strategy", "schur"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3

    c, s = np.cos(np.pi / 4), np.sin(np.pi / 4)
    assert np.allclose(parse_rows(lines[0]), np.eye(2), atol=1e-12)
    assert np.allclose(parse_rows(lines[1]), [[c, -s], [s, c]], atol=1e-6)
    assert np.allclose(parse_rows(lines[2]), [[0.0, -1.0], [1.0, 0.0]], atol=1e-6)


def test_geo_interp_rejects_bad_t():
    with pytest.raises(SystemExit):
        geo_interp.main(["--A", "1 0; 0 1", "--B", ROT90, "-t", "a,b"])


def test_main_dispatches_to_leaf(capsys):
    assert glm_main(["mat", "expm", "--M", "0 0; 0 0"]) == 0
    assert parse_rows(capsys.readouterr().out).tolist() == [[1.0, 0.0], [0.0, 1.0]]


def test_main_rejects_unknown_group():
    with pytest.raises(SystemExit):
        glm_main(["nope"])


def test_glm_subprocess(tmp_path):
    cli = ["glm", "geo", "dist"]
    check_cli_or_skip(cli)
    res = subprocess.run(
        cli + ["--R", "1 0; 0 1", "--T", "1 0; 0 1"],
        cwd=tmp_path,
        capture_output=True,
        text=True,
    )
    assert res.returncode == 0, res.stderr
    assert float(res.stdout) == pytest.approx(0.0, abs=1e-12)
