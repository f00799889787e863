"""
Tests for configuration, solution tables, pipeline runner and CLI.
"""

import numpy as np
import pytest
import yaml
from numpy.testing import assert_allclose

from catena.core.config import SolverConfig, DEFAULT_TOL, DEFAULT_ACCEPT_TOL
from catena.core.solver import CatenaryParameters, solve_catenary
from catena.pipeline.config_parser import (
    load_config,
    parse_config,
    parse_point,
    parse_samples,
    _parse_query_table,
)
from catena.pipeline.runner import run_pipeline
from catena.io.table_io import save_solution, load_solution, list_solutions
from catena.cli.main import main


def write_config(path, output, solver=None):
    """Write a two-query config: one solvable, one too short."""
    table = (
        "Name | P1  | P2   | Arc length | Samples | Output | Method\n"
        "---- | --- | ---- | ---------- | ------- | ------ | ------\n"
        f"sag  | 0,0 | 10,0 | 12         | 20      | {output} | newton\n"
        f"fast | 0,0 | 10,5 | 15         | auto    | {output} | closed_form\n"
        f"taut | 0,0 | 10,0 | 5          | auto    | {output} | newton\n"
    )
    raw = {"queries": table}
    if solver:
        raw["solver"] = solver
    path.write_text(yaml.safe_dump(raw))
    return path


class TestSolverConfig:
    
    def test_defaults(self):
        config = SolverConfig()
        assert config.tol == DEFAULT_TOL == 1e-10
        assert config.accept_tol == DEFAULT_ACCEPT_TOL == 1e-6
        assert config.max_iter == 100
        assert config.max_halvings == 10
        assert config.a_factors == (0.5, 1.0, 1.5, 2.0, 3.0)
    
    def test_from_dict(self):
        """YAML may hand over scientific notation as strings."""
        config = SolverConfig.from_dict({"tol": "1e-8", "max_iter": "50", "b_offsets": [0, 0.2]})
        assert config.tol == 1e-8
        assert config.max_iter == 50
        assert config.b_offsets == (0.0, 0.2)
    
    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown"):
            SolverConfig.from_dict({"tolerance": 1e-8})
    
    @pytest.mark.parametrize("kwargs", [{"tol": 0.0}, {"max_iter": 0}, {"a_factors": ()}])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            SolverConfig(**kwargs)


class TestConfigParser:
    
    def test_query_table(self):
        """Headers are case-insensitive, separators skipped, short rows use defaults."""
        entries = _parse_query_table(
            "p1 | P2 | LENGTH | Samples\n"
            "---|----|--------|--------\n"
            "0,0 | 4,3 | 6 | 12\n"
            "1,1 | 2,2 | 3\n"
        )
        
        assert len(entries) == 2
        assert entries[0].name == "query_0"
        assert entries[0].p2 == (4.0, 3.0)
        assert entries[0].arc_length == 6.0
        assert entries[0].samples == 12
        assert entries[1].samples is None
        assert entries[1].output == ""
        assert entries[1].method == "newton"
    
    def test_query_table_columns(self):
        with pytest.raises(ValueError, match="Unknown query column"):
            _parse_query_table("P1 | P2 | Arc length | Colour\n0,0 | 1,0 | 2 | red\n")
        with pytest.raises(ValueError, match="missing columns"):
            _parse_query_table("P1 | P2\n0,0 | 1,0\n")
        assert _parse_query_table("P1 | P2 | Arc length\n---|---|---\n") == []
    
    def test_parse_point(self):
        assert parse_point("0,0") == (0.0, 0.0)
        assert parse_point("(1.5, -2)") == (1.5, -2.0)
        with pytest.raises(ValueError):
            parse_point("1")
    
    def test_parse_samples(self):
        assert parse_samples("auto") is None
        assert parse_samples("") is None
        assert parse_samples("25") == 25
        with pytest.raises(ValueError):
            parse_samples("0")
    
    def test_load_config(self, tmp_path):
        path = write_config(tmp_path / "q.yaml", "out.h5", solver={"accept_tol": 1e-7})
        
        config = load_config(str(path))
        
        assert config.solver.accept_tol == 1e-7
        assert [q.name for q in config.queries] == ["sag", "fast", "taut"]
        assert config.queries[0].p2 == (10.0, 0.0)
        assert config.queries[0].samples == 20
        assert config.queries[1].samples is None
        assert config.queries[1].method == "closed_form"
    
    def test_unknown_method(self):
        raw = {"queries": "Name | P1 | P2 | Arc length | Method\nx | 0,0 | 1,0 | 2 | magic\n"}
        with pytest.raises(ValueError, match="Unknown method"):
            parse_config(raw)


class TestTableIO:
    
    def test_save_load(self, tmp_path):
        path = str(tmp_path / "curves.h5")
        params = CatenaryParameters(2.0, 5.0, -3.0)
        samples = np.array([[0.0, 1.0], [1.0, 0.5]])
        
        save_solution(path, "q", params, ((0.0, 1.0), (10.0, 1.0)), 12.0,
                      samples=samples, residual_norm=1e-12, metadata={"seed": 0})
        data = load_solution(path, "q")
        
        assert data["params"] == params
        assert_allclose(data["samples"], samples)
        assert_allclose(data["points"], [[0.0, 1.0], [10.0, 1.0]])
        assert data["arc_length"] == 12.0
        assert data["metadata"] == {"seed": 0}
        assert data["solver"] == "catena"
    
    def test_no_overwrite(self, tmp_path):
        path = str(tmp_path / "curves.h5")
        params = CatenaryParameters(1.0, 0.0, 0.0)
        points = ((0.0, 1.0), (1.0, 1.5))
        
        save_solution(path, "q", params, points, 2.0)
        with pytest.raises(ValueError, match="already exists"):
            save_solution(path, "q", params, points, 2.0)
        save_solution(path, "q", params, points, 3.0, overwrite=True)
        
        assert load_solution(path, "q")["arc_length"] == 3.0
    
    def test_missing(self, tmp_path):
        path = str(tmp_path / "curves.h5")
        assert list_solutions(path) == []
        
        save_solution(path, "q", CatenaryParameters(1.0, 0.0, 0.0), ((0, 1), (1, 1.5)), 2.0)
        with pytest.raises(KeyError):
            load_solution(path, "other")


class TestRunner:
    
    def test_run_pipeline(self, tmp_path):
        output = tmp_path / "curves.h5"
        path = write_config(tmp_path / "q.yaml", str(output))
        
        outcomes = run_pipeline(str(path), verbose=False)
        
        assert [o.ok for o in outcomes] == [True, True, False]
        assert "less than minimum" in outcomes[2].error
        assert outcomes[0].samples.shape == (21, 2)
        assert_allclose(outcomes[0].params.b, 5.0, atol=1e-6)
        
        assert sorted(list_solutions(str(output))) == ["fast", "sag"]
        
        stored = load_solution(str(output), "fast")
        expected = solve_catenary(((0.0, 0.0), (10.0, 5.0)), 15.0)
        assert_allclose(stored["params"].as_array(), expected.as_array(), rtol=1e-6, atol=1e-6)
        assert stored["metadata"]["method"] == "closed_form"


class TestCLI:
    
    def test_solve(self, capsys):
        main(["solve", "0", "0", "10", "0", "12"])
        out = capsys.readouterr().out
        
        values = dict(line.split(" = ") for line in out.strip().splitlines())
        assert set(values) == {"a", "b", "c"}
        assert_allclose(float(values["b"]), 5.0, atol=1e-6)
    
    def test_solve_samples(self, capsys):
        main(["solve", "0", "0", "10", "0", "12", "--samples", "4", "--closed-form"])
        lines = capsys.readouterr().out.strip().splitlines()
        
        assert len(lines) == 3 + 5
        assert lines[3].split()[0] == "0.000000"
    
    def test_solve_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["solve", "0", "0", "10", "0", "5"])
        
        assert exc_info.value.code == 1
        assert "ERROR" in capsys.readouterr().err
    
    @pytest.mark.parametrize("option", [["--tol", "0"], ["--max-iter", "0"]])
    def test_solve_bad_settings(self, option, capsys):
        """Invalid solver settings are reported like any other input error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["solve", "0", "0", "10", "0", "12"] + option)
        
        assert exc_info.value.code == 1
        assert "ERROR" in capsys.readouterr().err
    
    def test_run_and_info(self, tmp_path, capsys):
        output = tmp_path / "curves.h5"
        path = write_config(tmp_path / "q.yaml", str(output))
        
        with pytest.raises(SystemExit) as exc_info:
            main(["run", str(path)])
        assert exc_info.value.code == 2
        assert "taut: FAILED" in capsys.readouterr().out
        
        main(["info", str(output)])
        out = capsys.readouterr().out
        assert "sag:" in out
        assert "fast:" in out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
