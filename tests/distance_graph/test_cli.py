import json

import pytest

from distance_graph.cli import main


def test_demo_run_prints_matrix_listing_and_query(capsys):
    rc = main([])
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Adjacency matrix:"
    assert out[1] == "0.0 5.0 3.0 INF"
    assert "Shortest distances between all pairs:" in out
    assert "Shortest distance from 0 to 3: 10.0" in out
    assert "Shortest distance from 3 to 0: unreachable" in out
    assert out[-1] == "Shortest distance from 0 to 3: 10.0"


def test_start_end_override_scenario_query(capsys):
    assert main(["--start", "3", "--end", "0", "--log-level", "WARNING"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "No path from 3 to 0"


def test_config_file_and_csv_output(tmp_path, capsys):
    cfg = tmp_path / "g.json"
    cfg.write_text(
        json.dumps({"scenario_id": "cli", "vertices": 2, "edges": [[0, 1, 2.5], [1, 0, 1]]}),
        encoding="utf-8",
    )
    csv_path = tmp_path / "out.csv"
    rc = main(["--config", str(cfg), "--csv", str(csv_path)])
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert "Shortest distance from 1 to 0: 1.0" in out
    # No query in scenario, so the listing is the last block
    assert out[-1] == "Shortest distance from 1 to 1: 0.0"
    rows = csv_path.read_text(encoding="utf-8").splitlines()
    assert rows == [
        "source,target,distance",
        "0,0,0.000000",
        "0,1,2.500000",
        "1,0,1.000000",
        "1,1,0.000000",
    ]


def test_bad_config_exits_with_usage_error(tmp_path):
    cfg = tmp_path / "bad.json"
    cfg.write_text(json.dumps({"edges": []}), encoding="utf-8")
    with pytest.raises(SystemExit) as ei:
        main(["--config", str(cfg)])
    assert ei.value.code == 2


def test_start_without_end_is_rejected():
    with pytest.raises(SystemExit) as ei:
        main(["--start", "0"])
    assert ei.value.code == 2
