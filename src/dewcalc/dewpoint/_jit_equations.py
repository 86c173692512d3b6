"""
Jit equations for dewpoint calculation.

fastmath is left off for these kernels: it lets LLVM assume finite
values, and log(0) = -inf must propagate to the result.
"""

import numpy as np
import numpy.typing as npt
from numba import njit, prange

from dewcalc.humidity._jit_equations import _relative_humidity_scalar


@njit(error_model="numpy")
def _magnus_equation_scalar(temp_c: float, rh: float, A: float, B: float) -> float:
    """
    Scalar August-Roche-Magnus formula for dew point calculation.

    Parameters
    ----------
    temp_c : float
        Air temperature in °C
    rh : float
        Relative humidity as fraction (0-1, not percentage)
    A : float
        Magnus equation coefficient A
    B : float
        Magnus equation coefficient B in Celsius

    Returns
    -------
    float
        Dew point temperature in °C

    See Also
    --------
    _magnus_equation_vectorised : Parallel version for arrays
    MagnusDewpointEquation : High-level interface
    """
    gamma = (A * temp_c) / (B + temp_c) + np.log(rh)

    return (B * gamma) / (A - gamma)


@njit(error_model="numpy")
def _specific_humidity_dewpoint_scalar(
    specific_humidity: float,
    pressure: float,
    temp_c: float,
    dry_air: float,
    water: float,
    P_ref: float,
    beta: float,
    A: float,
    B: float,
) -> float:
    """
    Scalar dew point from specific humidity, pressure and temperature.

    Parameters
    ----------
    specific_humidity : float
        Specific humidity in g/g
    pressure : float
        Air pressure in Pa
    temp_c : float
        Air temperature in °C
    dry_air, water : float
        Molar masses in g/mol
    P_ref, beta : float
        Clausius-Clapeyron constants
    A, B : float
        Magnus constants

    Returns
    -------
    float
        Dew point temperature in °C
    """
    rh = _relative_humidity_scalar(
        specific_humidity, pressure, temp_c, dry_air, water, P_ref, beta
    )

    return _magnus_equation_scalar(temp_c, rh, A, B)


@njit(parallel=True, error_model="numpy")
def _magnus_equation_vectorised(
    temp_c: npt.ArrayLike, rh: npt.ArrayLike, A: float, B: float
) -> npt.NDArray:
    """
    Vectorized Magnus formula for dew point calculation with parallel processing.

    Parameters
    ----------
    temp_c : ndarray
        Air temperature(s) in °C, shape (n,)
    rh : ndarray
        Relative humidity(ies) as fraction (0-1), shape (n,)
    A : float
        Magnus equation coefficient A
    B : float
        Magnus equation coefficient B (Celsius)

    Returns
    -------
    ndarray
        Dew point temperature(s) in °C, shape (n,)
    """
    n = len(temp_c)
    results = np.empty(n, dtype=np.float64)

    for i in prange(n):
        results[i] = _magnus_equation_scalar(temp_c[i], rh[i], A, B)
    return results


@njit(parallel=True, error_model="numpy")
def _specific_humidity_dewpoint_vectorised(
    specific_humidity: npt.ArrayLike,
    pressure: npt.ArrayLike,
    temp_c: npt.ArrayLike,
    dry_air: float,
    water: float,
    P_ref: float,
    beta: float,
    A: float,
    B: float,
) -> npt.NDArray:
    n = len(specific_humidity)
    results = np.empty(n, dtype=np.float64)

    for i in prange(n):
        results[i] = _specific_humidity_dewpoint_scalar(
            specific_humidity[i], pressure[i], temp_c[i], dry_air, water, P_ref, beta, A, B
        )
    return results
