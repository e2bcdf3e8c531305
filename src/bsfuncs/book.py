"""Batch pricing of an option book.

Input CSV format
----------------
    id,price,strike,volatility,interest,dividend,days,type
    1,100,110,0.20,0.05,0.0,182,Call
    2,100,95,0.25,0.05,0.01,365,Put

``dividend`` may be omitted (defaults to 0).

Output
------
    CSV or JSON with columns: id, price, error and, with Greeks,
    delta, gamma, vega, theta, rho
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path

import numpy as np

from .black_scholes_vec import bs_greeks_vec, bs_price_vec
from .core import check_domain, parse_option_type

__all__ = ["read_book", "price_rows", "write_results"]

logger = logging.getLogger(__name__)

GREEK_KEYS = ("delta", "gamma", "vega", "theta", "rho")


def read_book(path) -> list[dict]:
    """Read a CSV book into a list of row dicts."""
    with open(path, newline="") as f:
        return list(csv.DictReader(f))


def _parse_row(row: dict) -> tuple:
    """Convert one CSV row to pricer arguments, validating on the way."""
    S = float(row["price"])
    K = float(row["strike"])
    sigma = float(row["volatility"])
    r = float(row["interest"])
    q = float(row.get("dividend") or 0.0)
    days = float(row["days"])
    kind = parse_option_type(row["type"])
    check_domain(S, K, sigma, r, q, days)
    return S, K, sigma, r, q, days, kind


def price_rows(rows: list[dict], greeks: bool = False) -> list[dict]:
    """Price every row of a book.

    Valid rows are priced together with the vectorised pricer.  Rows that
    fail to parse or validate come back as ``{"id", "price": None, "error"}``.
    """
    results: list[dict] = []
    parsed: list[tuple] = []
    slots: list[int] = []

    for i, row in enumerate(rows):
        rid = row.get("id", "")
        try:
            args = _parse_row(row)
        except (KeyError, TypeError, ValueError) as e:
            msg = f"missing column {e}" if isinstance(e, KeyError) else str(e)
            logger.warning("Row %d (id=%s) rejected: %s", i, rid or "?", msg)
            results.append({"id": rid, "price": None, "error": msg})
            continue
        results.append({"id": rid, "price": None, "error": None})
        parsed.append(args)
        slots.append(i)

    if parsed:
        S, K, sigma, r, q, days, kind = (np.array(col) for col in zip(*parsed))
        prices = bs_price_vec(S, K, sigma, r, q, days, kind)
        g = bs_greeks_vec(S, K, sigma, r, q, days, kind) if greeks else None
        for j, i in enumerate(slots):
            results[i]["price"] = float(prices[j])
            if g is not None:
                for key in GREEK_KEYS:
                    results[i][key] = float(g[key][j])

    logger.info("Priced %d of %d rows", len(parsed), len(rows))
    return results


def write_results(results: list[dict], path) -> None:
    """Write results as JSON (``.json`` suffix) or CSV (anything else)."""
    output_path = Path(path)
    if output_path.suffix == ".json":
        with open(output_path, "w") as f:
            json.dump(results, f, indent=2, default=str)
        return

    fieldnames: list[str] = []
    for r in results:
        for k in r:
            if k not in fieldnames:
                fieldnames.append(k)
    with open(output_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(results)
