from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from backend.app.main import app
from conftest import PREDICTORS, make_samples

client = TestClient(app)


@pytest.fixture
def csv_path(tmp_path: Path) -> str:
    path = tmp_path / "samples.csv"
    make_samples(n_per_cluster=15).to_csv(path, index=False)
    return str(path)


def _data(path: str) -> dict:
    return {"path": path, "target": "soc", "predictors": PREDICTORS}


def test_health_endpoints() -> None:
    assert client.get("/healthz").json() == {"ok": True}
    assert client.get("/api/v1/ping").json() == {"ok": True}


def test_strategies_endpoint() -> None:
    body = client.get("/api/v1/crossval/strategies").json()

    assert body["strategies"] == ["environmental", "random", "spatial"]
    assert "rfreg" in body["models"]


def test_crossval_endpoint(csv_path: str) -> None:
    resp = client.post(
        "/api/v1/crossval",
        json={
            "data": _data(csv_path),
            "grouping": {"strategy": "spatial", "n_groups": 4, "columns": ["x", "y"]},
            "model": {"algo": "linreg"},
            "eval": {"seed": 0, "progress_id": "run-1"},
        },
    )

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert [f["fold_id"] for f in body["report"]["folds"]] == [1, 2, 3, 4]
    assert body["summary"]["n_folds"] == 4

    progress = client.get("/api/v1/progress/run-1").json()
    assert progress["done"] is True
    assert progress["percent"] == 100.0


def test_compare_endpoint(csv_path: str) -> None:
    resp = client.post(
        "/api/v1/crossval/compare",
        json={
            "data": _data(csv_path),
            "groupings": [
                {"strategy": "random", "n_groups": 3},
                {"strategy": "environmental", "n_groups": 3, "columns": ["elevation", "annual_precip"]},
            ],
            "model": {"algo": "ridgereg", "alpha": 0.5},
        },
    )

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert [s["strategy"] for s in body["summaries"]] == ["random", "environmental"]
    assert len(body["comparison"]["reports"]) == 2


def test_bad_requests_map_to_400(csv_path: str, tmp_path: Path) -> None:
    missing = client.post(
        "/api/v1/crossval",
        json={"data": _data(str(tmp_path / "nope.csv"))},
    )
    assert missing.status_code == 400
    assert "Data load failed" in missing.json()["detail"]

    one_group = client.post(
        "/api/v1/crossval",
        json={"data": _data(csv_path), "grouping": {"n_groups": 1}, "eval": {"progress_id": "run-bad"}},
    )
    assert one_group.status_code == 400
    assert "at least 2 groups" in one_group.json()["detail"]

    failed = client.get("/api/v1/progress/run-bad").json()
    assert failed["done"] is True
    assert failed["error"]


def test_unknown_progress_id() -> None:
    assert client.get("/api/v1/progress/never-started").status_code == 404
