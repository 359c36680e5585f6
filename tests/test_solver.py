import math

import numpy as np
import pytest

from advect1d.solver import initial_condition, l2_norm, main, run, write_to_file


def test_initial_condition_spans_unit_interval():
    x, u = initial_condition(80, 2.0)
    assert len(x) == 80
    assert x[0] == 0.0
    assert x[-1] == pytest.approx(1.0)
    assert u[0] == 0.0
    assert u[-1] == pytest.approx(0.0, abs=1e-12)


def test_initial_condition_is_sine_of_mesh():
    x, u = initial_condition(33, 3.0)
    np.testing.assert_allclose(u, np.sin(3.0 * 2.0 * math.pi * x))


def test_initial_condition_rejects_single_point():
    with pytest.raises(ValueError):
        initial_condition(1, 1.0)


def test_l2_norm_of_identical_arrays_is_zero():
    values = np.array([0.3, -1.2, 4.0])
    assert l2_norm(values, values.copy()) == 0.0


def test_l2_norm_value():
    assert l2_norm([3.0, 0.0], [0.0, 4.0]) == pytest.approx(5.0)


def test_l2_norm_is_symmetric():
    a = np.array([1.0, 2.0, 3.0])
    b = np.array([0.5, -1.0, 7.0])
    assert l2_norm(a, b) == pytest.approx(l2_norm(b, a))


def test_l2_norm_shape_mismatch_raises():
    with pytest.raises(ValueError):
        l2_norm([1.0, 2.0], [1.0])


def test_write_to_file_format(tmp_path):
    path = tmp_path / "out.csv"
    write_to_file([0.0, 0.5], [1.0, -2.0], path)
    assert path.read_text() == "0 ,1\n0.5 ,-2\n"


def test_write_to_file_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        write_to_file([0.0], [0.0], tmp_path / "missing" / "out.csv")


def test_run_writes_both_files(tmp_path):
    result = run(40, 1.0, tmp_path)
    initial = (tmp_path / "initialCondition.csv").read_text().splitlines()
    final = (tmp_path / "final.csv").read_text().splitlines()
    assert len(initial) == 40
    assert len(final) == 40
    assert float(initial[5].split(",")[1]) == pytest.approx(result.u_initial[5], rel=1e-5)


def test_run_keeps_periodic_endpoints(tmp_path):
    result = run(50, 1.0, tmp_path)
    assert result.u_final[-1] == pytest.approx(result.u_final[0], abs=1e-10)


def test_run_error_shrinks_with_refinement(tmp_path):
    coarse = run(40, 1.0, tmp_path)
    fine = run(160, 1.0, tmp_path)
    assert fine.error < coarse.error
    assert fine.error < 1.0


def test_run_reports_kdx(tmp_path):
    result = run(41, 2.0, tmp_path)
    assert result.kdx == pytest.approx(2.0 * result.x[1] * 2.0 * math.pi)


def test_main_wrong_argument_count(capsys):
    assert main(["80"]) == 1
    out = capsys.readouterr().out
    assert "Wrong number of arguments" in out


def test_main_bad_number(capsys):
    assert main(["eighty", "2"]) == 1


def test_main_runs_in_current_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["40", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Comp. time:")
    assert "Error:" in out
    assert (tmp_path / "final.csv").exists()