"""Tests for the risk helpers."""

import numpy as np
from bsfuncs import OptionSpec, CALL, PUT, bs_greeks
from bsfuncs.black_scholes import theta as bs_theta, vega as bs_vega
from bsfuncs.black_scholes_vec import bs_price_vec
from bsfuncs.risk import numerical_greeks, scenario_grid

OPT = OptionSpec(S0=100, K=100, sigma=0.2, r=0.05, days=365)


def _bs_pricer(S, K, sigma, r, q, days, kind):
    """Simple wrapper around vectorized BS for the risk engine."""
    return float(bs_price_vec(S, K, sigma, r, q, days, kind))


class TestNumericalGreeks:
    def test_vs_analytical_bs(self):
        ng = numerical_greeks(_bs_pricer, 100, 100, 0.2, 0.05, 0.0, 365, "Call")
        ag = bs_greeks(OPT, CALL)
        assert abs(ng["delta"] - ag["delta"]) < 0.005
        assert abs(ng["gamma"] - ag["gamma"]) < 0.002
        assert abs(ng["vega"] - ag["vega"]) < 0.5
        assert abs(ng["theta"] - ag["theta"]) < 0.1
        assert abs(ng["rho"] - ag["rho"]) < 0.5

    def test_put_vs_analytical_bs(self):
        ng = numerical_greeks(_bs_pricer, 100, 100, 0.2, 0.05, 0.0, 365, "Put")
        ag = bs_greeks(OPT, PUT)
        for key in ("delta", "gamma"):
            assert abs(ng[key] - ag[key]) < 0.005
        for key in ("vega", "theta", "rho"):
            assert abs(ng[key] - ag[key]) < 0.5

    def test_all_keys(self):
        ng = numerical_greeks(_bs_pricer, 100, 100, 0.2, 0.05, 0.0, 365, "Call")
        assert set(ng.keys()) == {"delta", "gamma", "vega", "theta", "rho"}

    def test_put_delta_negative(self):
        ng = numerical_greeks(_bs_pricer, 100, 100, 0.2, 0.05, 0.0, 365, "Put")
        assert ng["delta"] < 0

    def test_theta_one_day_to_expiry(self):
        for kind in ("Call", "Put"):
            ng = numerical_greeks(_bs_pricer, 100, 100, 0.2, 0.05, 0.0, 1, kind)
            analytic = bs_theta(100, 100, 0.2, 0.05, 0.0, 1, kind)
            assert ng["theta"] != 0.0
            assert np.sign(ng["theta"]) == np.sign(analytic)

    def test_theta_zero_inside_last_day(self):
        ng = numerical_greeks(_bs_pricer, 100, 100, 0.2, 0.05, 0.0, 0.5, "Call")
        assert ng["theta"] == 0.0

    def test_vega_with_clamped_down_bump(self):
        # sigma below the vol bump: the down leg is floored at 1e-6
        ng = numerical_greeks(_bs_pricer, 100, 100, 5e-5, 0.0, 0.0, 365, "Call")
        analytic = bs_vega(100, 100, 5e-5, 0.0, 0.0, 365, "Call")
        assert abs(ng["vega"] - analytic) < 0.5


class TestScenarioGrid:
    def test_output_shape(self):
        spots = np.array([90.0, 100.0, 110.0])
        vols = np.array([0.15, 0.20, 0.25])
        result = scenario_grid(_bs_pricer, 100, 100, 0.2, 0.05, 0.0, 365,
                               "Call", spots, vols)
        assert result["prices"].shape == (3, 3)

    def test_call_monotone_in_spot(self):
        spots = np.linspace(80, 120, 5)
        vols = np.array([0.2])
        result = scenario_grid(_bs_pricer, 100, 100, 0.2, 0.05, 0.0, 365,
                               "Call", spots, vols)
        prices = result["prices"][:, 0]
        assert np.all(np.diff(prices) > 0)

    def test_prices_increase_with_vol(self):
        vols = np.array([0.1, 0.2, 0.3])
        result = scenario_grid(_bs_pricer, 100, 100, 0.2, 0.05, 0.0, 365,
                               "Put", np.array([100.0]), vols)
        assert np.all(np.diff(result["prices"][0, :]) > 0)
