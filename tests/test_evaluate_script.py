"""Tests for scripts/01_evaluate_warping_cost.py."""

import importlib.util
import json
import math
from pathlib import Path

import pytest

from simple_dtw.dtw_core import DTWEvaluator
from simple_dtw.distances import euclidean_distance

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "01_evaluate_warping_cost.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("evaluate_warping_cost", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def batch_file(tmp_path):
    path = tmp_path / "pairs.json"
    path.write_text(
        json.dumps(
            {
                "pairs": [
                    {"id": "warped", "sequence_1": [[0], [1], [2]], "sequence_2": [[0], [1], [1], [2]]},
                    {"sequence_1": [[0]], "sequence_2": [[5]]},
                    {"id": "empty", "sequence_1": [], "sequence_2": [[1]]},
                ]
            }
        )
    )
    return path


class TestLoadPairs:

    def test_batch(self, script, batch_file):
        pairs = script.load_pairs(batch_file)
        assert [p["id"] for p in pairs] == ["warped", 1, "empty"]

    def test_single_pair(self, script, tmp_path):
        path = tmp_path / "single.json"
        path.write_text(json.dumps({"sequence_1": [[0]], "sequence_2": [[1]]}))
        pairs = script.load_pairs(path)
        assert len(pairs) == 1
        assert pairs[0]["id"] == 0

    def test_missing_sequence(self, script, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"pairs": [{"sequence_1": [[0]]}]}))
        with pytest.raises(ValueError, match="index 0"):
            script.load_pairs(path)


class TestEvaluatePairs:

    def test_shared_evaluator(self, script, batch_file):
        evaluator = DTWEvaluator(euclidean_distance)
        results = script.evaluate_pairs(script.load_pairs(batch_file), evaluator, show_progress=False)
        assert [r["cost"] for r in results] == [0.0, 5.0, math.inf]
        # Matrix grown for the first pair is reused for the second
        assert (evaluator.x_dim, evaluator.y_dim) == (4, 5)


class TestMain:

    def test_writes_output_file(self, script, batch_file, tmp_path):
        output = tmp_path / "out" / "costs.json"
        status = script.main(
            ["--input", str(batch_file), "--output", str(output), "--no_progress"]
        )
        assert status == 0

        data = json.loads(output.read_text())
        assert data["metric"] == "euclidean"
        assert data["results"][1] == {"id": 1, "cost": 5.0}
        assert math.isinf(data["results"][2]["cost"])

    def test_prints_to_stdout(self, script, batch_file, capsys):
        status = script.main(["--input", str(batch_file), "--metric", "sqeuclidean", "--no_progress"])
        assert status == 0
        data = json.loads(capsys.readouterr().out)
        assert data["metric"] == "sqeuclidean"
        assert data["results"][1]["cost"] == 25.0

    def test_dimension_mismatch_returns_error_status(self, script, tmp_path):
        path = tmp_path / "mismatch.json"
        path.write_text(json.dumps({"sequence_1": [[0, 0]], "sequence_2": [[0]]}))
        assert script.main(["--input", str(path), "--no_progress"]) == 1

    def test_presize_requires_both_sizes(self, script, batch_file):
        with pytest.raises(SystemExit):
            script.main(["--input", str(batch_file), "--x_size", "4"])
