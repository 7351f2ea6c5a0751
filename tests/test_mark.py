import time

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_mark_correct():
    r = client.post("/mark", json={"id": "gd1", "x": "2.4", "y": "-3.2"})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True and body["correct"] is True and body["score"] == 2
    assert body["expected"] == "(2.4, -3.2)"


def test_mark_expression_answer():
    r = client.post("/mark", json={"id": "gd1", "x": "3 - 0.1*6", "y": "-16/5"})
    b = r.json()
    assert b["ok"] and b["correct"]


def test_mark_one_coordinate_wrong():
    b = client.post("/mark", json={"id": "gd1", "x": "2.4", "y": "3.2"}).json()
    assert b["ok"] is True and b["correct"] is False
    assert b["score"] == 1
    assert b["x_correct"] is True and b["y_correct"] is False
    assert "y₁" in b["feedback"]


def test_mark_accepts_displayed_rounding():
    b = client.post("/mark", json={"id": "gd8", "x": "0.8919", "y": "2.1819"}).json()
    assert b["ok"] and b["correct"]


def test_mark_rejects_coarse_rounding():
    b = client.post("/mark", json={"id": "gd8", "x": "0.89", "y": "2.18"}).json()
    assert b["ok"] and not b["correct"] and b["score"] == 0


def test_mark_invalid_chars():
    b = client.post("/mark", json={"id": "gd1", "x": "abc", "y": "1"}).json()
    assert b["ok"] is False and b["score"] == 0
    assert "allowed" in b["feedback"].lower()


def test_mark_empty_answer():
    b = client.post("/mark", json={"id": "gd1", "x": "2.4", "y": " "}).json()
    assert b["ok"] is False
    assert "required" in b["feedback"].lower()


def test_mark_division_by_zero():
    b = client.post("/mark", json={"id": "gd1", "x": "2.4", "y": "1/0"}).json()
    assert b["ok"] is False
    assert "finite" in b["feedback"].lower()


def test_mark_unknown_id():
    b = client.post("/mark", json={"id": "nope", "x": "1", "y": "1"}).json()
    assert b["ok"] is False and b["score"] == 0


def test_mark_power_answer():
    b = client.post("/mark", json={"id": "gd2", "x": "-1/5", "y": "2^0"}).json()
    assert b["ok"] and b["correct"]


def test_mark_huge_power_rejected_quickly():
    t0 = time.perf_counter()
    b = client.post("/mark", json={"id": "gd1", "x": "9^9^9", "y": "1"}).json()
    assert time.perf_counter() - t0 < 5
    assert b["ok"] is False and b["score"] == 0
    assert "complex" in b["feedback"].lower()


def test_mark_large_base_power_rejected():
    b = client.post("/mark", json={"id": "gd1", "x": "(10^150)^2", "y": "1"}).json()
    assert b["ok"] is False
    assert "complex" in b["feedback"].lower()
