"""
Calculates saturation vapor pressure using Numba.

Equation:
- Simplified Clausius-Clapeyron

Kernels are compiled with error_model="numpy" so that overflow and
underflow propagate as IEEE values instead of raising.
"""

import numpy as np
import numpy.typing as npt
from numba import njit, prange


@njit(error_model="numpy")
def _clausius_clapeyron_scalar(temp_c: float, P_ref: float, beta: float) -> float:
    """
    Calculate saturation vapor pressure with the simplified Clausius-Clapeyron relation.

    Args:
        temp_c: Temperature in degrees Celsius
        P_ref: Reference pressure in Pa
        beta: Exponential slope in 1/°C

    Returns:
        Saturation vapor pressure in Pa
    """
    return P_ref * np.exp(beta * temp_c)


@njit(parallel=True, error_model="numpy")
def _clausius_clapeyron_vectorised(
    temp_c: npt.ArrayLike, P_ref: float, beta: float
) -> npt.NDArray[np.float64]:
    """
    Calculates saturation vapor pressure arrays with the simplified Clausius-Clapeyron relation.

    Args:
        temp_c: Flat array of temperatures in degrees Celsius
        P_ref: Reference pressure in Pa
        beta: Exponential slope in 1/°C

    Returns:
        Saturation vapor pressure in Pa
    """
    n = len(temp_c)
    result = np.empty(n, dtype=np.float64)

    for i in prange(n):
        result[i] = _clausius_clapeyron_scalar(temp_c[i], P_ref, beta)
    return result
