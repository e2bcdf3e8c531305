"""Tests for batch book pricing."""

import csv
import json
import logging

import pytest
from bsfuncs import CALLPRICE, PUTPRICE, OPTIONDELTA, OPTIONVEGA
from bsfuncs.book import read_book, price_rows, write_results

HEADER = "id,price,strike,volatility,interest,dividend,days,type\n"


def _row(rid, S, K, sigma, r, q, days, kind):
    return {"id": rid, "price": str(S), "strike": str(K), "volatility": str(sigma),
            "interest": str(r), "dividend": str(q), "days": str(days), "type": kind}


class TestPriceRows:
    def test_valid_rows(self):
        rows = [
            _row("1", 100, 110, 0.2, 0.05, 0.0, 182, "Call"),
            _row("2", 100, 95, 0.25, 0.05, 0.01, 365, "Put"),
        ]
        results = price_rows(rows)
        assert results[0]["price"] == pytest.approx(CALLPRICE(100, 110, 0.2, 0.05, 0.0, 182), abs=1e-10)
        assert results[1]["price"] == pytest.approx(PUTPRICE(100, 95, 0.25, 0.05, 0.01, 365), abs=1e-10)
        assert all(r["error"] is None for r in results)

    def test_greeks_columns(self):
        rows = [_row("a", 100, 100, 0.2, 0.05, 0.0, 365, "Put")]
        res = price_rows(rows, greeks=True)[0]
        assert res["delta"] == pytest.approx(OPTIONDELTA(100, 100, 0.2, 0.05, 0.0, 365, "Put"), abs=1e-10)
        assert res["vega"] == pytest.approx(OPTIONVEGA(100, 100, 0.2, 0.05, 0.0, 365, "Put"), abs=1e-10)
        assert {"gamma", "theta", "rho"} <= set(res)

    def test_dividend_optional(self):
        row = _row("1", 100, 100, 0.2, 0.05, 0.0, 365, "Call")
        del row["dividend"]
        assert price_rows([row])[0]["price"] == pytest.approx(10.4506, abs=1e-3)

    def test_bad_rows_reported_and_others_priced(self, caplog):
        rows = [
            _row("ok", 100, 100, 0.2, 0.05, 0.0, 365, "Call"),
            _row("novol", 100, 100, 0.0, 0.05, 0.0, 365, "Call"),
            _row("badtype", 100, 100, 0.2, 0.05, 0.0, 365, "Swap"),
            _row("text", "abc", 100, 0.2, 0.05, 0.0, 365, "Call"),
            {"id": "short", "price": "100"},
        ]
        with caplog.at_level(logging.WARNING, logger="bsfuncs.book"):
            results = price_rows(rows)
        assert [r["id"] for r in results] == ["ok", "novol", "badtype", "text", "short"]
        assert results[0]["price"] == pytest.approx(10.4506, abs=1e-3)
        for r in results[1:]:
            assert r["price"] is None
            assert r["error"]
        assert "volatility" in results[1]["error"]
        assert "missing column" in results[4]["error"]
        assert "novol" in caplog.text

    def test_empty_book(self):
        assert price_rows([]) == []


class TestIO:
    def test_read_book(self, tmp_path):
        path = tmp_path / "book.csv"
        path.write_text(HEADER + "1,100,110,0.2,0.05,0.0,182,Call\n")
        rows = read_book(path)
        assert rows == [_row("1", 100, 110, 0.2, 0.05, 0.0, 182, "Call")]

    def test_write_json(self, tmp_path):
        results = price_rows([_row("1", 100, 100, 0.2, 0.05, 0.0, 365, "Call")])
        out = tmp_path / "out.json"
        write_results(results, out)
        data = json.loads(out.read_text())
        assert data[0]["id"] == "1"
        assert data[0]["price"] == pytest.approx(10.4506, abs=1e-3)

    def test_write_csv_union_of_columns(self, tmp_path):
        results = [
            {"id": "1", "price": 1.5, "error": None, "delta": 0.5},
            {"id": "2", "price": None, "error": "bad"},
        ]
        out = tmp_path / "out.csv"
        write_results(results, out)
        with open(out, newline="") as f:
            rows = list(csv.DictReader(f))
        assert list(rows[0]) == ["id", "price", "error", "delta"]
        assert rows[1]["error"] == "bad"
        assert rows[1]["delta"] == ""
