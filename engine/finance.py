"""
Financial primitives — stateless numeric functions.

  pmt: fixed-payment loan installment (negative = outflow)
  npv: net present value, period 0 undiscounted
  irr: internal rate of return via Newton-Raphson, no bracketing fallback

irr() may return a non-finite rate (or a non-economic root for unusual sign
patterns). Callers treat a non-finite result as "no solution".
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

IRR_DEFAULT_GUESS = 0.15
IRR_MAX_ITERATIONS = 100
IRR_TOLERANCE = 1e-8


def pmt(rate: float, periods: float, present_value: float) -> float:
    """
    Fixed installment that amortizes ``present_value`` over ``periods`` at ``rate``.

    Returned as a negative number. With rate == 0 this is straight-line
    repayment. periods must be >= 1; a zero-period loan is handled by the caller.
    Out-of-range rates give inf/nan rather than raising.
    """
    if rate == 0:
        return -(present_value / periods)
    with np.errstate(all="ignore"):
        factor = np.power(np.float64(1.0 + rate), -periods)
        return float(-(np.float64(present_value) * rate) / (1.0 - factor))


def npv(discount_rate: float, cashflows: Sequence[float]) -> float:
    """Σ cashflows[t] / (1 + discount_rate)^t for t = 0..n-1."""
    cf = np.asarray(cashflows, dtype=float)
    if cf.size == 0:
        return 0.0
    t = np.arange(cf.size)
    with np.errstate(all="ignore"):
        return float(np.sum(cf / np.power(1.0 + discount_rate, t)))


def irr(cashflows: Sequence[float], guess: float = IRR_DEFAULT_GUESS) -> float:
    """
    Newton-Raphson IRR.

    Iterates rate -= f(rate) / f'(rate) at most IRR_MAX_ITERATIONS times, with
    f the NPV function and f' = Σ_{t>0} -t * cf[t] / (1 + rate)^(t + 1).
    Stops once |step| < IRR_TOLERANCE or the rate is no longer finite.
    """
    cf = np.asarray(cashflows, dtype=float)
    t = np.arange(cf.size)
    rate = np.float64(guess)

    with np.errstate(all="ignore"):
        for _ in range(IRR_MAX_ITERATIONS):
            f = np.sum(cf / np.power(1.0 + rate, t))
            df = np.sum(-t[1:] * cf[1:] / np.power(1.0 + rate, t[1:] + 1))
            step = f / df
            rate = rate - step
            if not np.isfinite(rate) or abs(step) < IRR_TOLERANCE:
                break

    return float(rate)
