"""
Jit equations for humidity conversions.

Equation:
- Mole fraction
- Partial pressure
- Relative humidity
"""

import numpy as np
import numpy.typing as npt
from numba import njit, prange

from dewcalc.vapor._jit_equations import _clausius_clapeyron_scalar


@njit(error_model="numpy")
def _mole_fraction_scalar(specific_humidity: float, dry_air: float, water: float) -> float:
    """
    Convert specific humidity to a mole-fraction-equivalent ratio.

    Parameters
    ----------
    specific_humidity : float
        Specific humidity in g/g
    dry_air : float
        Molar mass of dry air in g/mol
    water : float
        Molar mass of water in g/mol

    Returns
    -------
    float
        Mole fraction (dimensionless)
    """
    return specific_humidity * (dry_air / water)


@njit(error_model="numpy")
def _partial_pressure_scalar(
    specific_humidity: float, pressure: float, dry_air: float, water: float
) -> float:
    """
    Water vapor partial pressure in Pa from specific humidity and pressure.
    """
    return _mole_fraction_scalar(specific_humidity, dry_air, water) * pressure


@njit(error_model="numpy")
def _relative_humidity_scalar(
    specific_humidity: float,
    pressure: float,
    temp_c: float,
    dry_air: float,
    water: float,
    P_ref: float,
    beta: float,
) -> float:
    """
    Relative humidity as a fraction (not percentage).

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

    Returns
    -------
    float
        Partial pressure over saturation vapor pressure
    """
    partial_pressure = _partial_pressure_scalar(specific_humidity, pressure, dry_air, water)
    saturation_pressure = _clausius_clapeyron_scalar(temp_c, P_ref, beta)

    return partial_pressure / saturation_pressure


@njit(parallel=True, error_model="numpy")
def _mole_fraction_vectorised(
    specific_humidity: npt.ArrayLike, dry_air: float, water: float
) -> npt.NDArray:
    n = len(specific_humidity)
    results = np.empty(n, dtype=np.float64)

    for i in prange(n):
        results[i] = _mole_fraction_scalar(specific_humidity[i], dry_air, water)
    return results


@njit(parallel=True, error_model="numpy")
def _partial_pressure_vectorised(
    specific_humidity: npt.ArrayLike, pressure: npt.ArrayLike, dry_air: float, water: float
) -> npt.NDArray:
    n = len(specific_humidity)
    results = np.empty(n, dtype=np.float64)

    for i in prange(n):
        results[i] = _partial_pressure_scalar(specific_humidity[i], pressure[i], dry_air, water)
    return results


@njit(parallel=True, error_model="numpy")
def _relative_humidity_vectorised(
    specific_humidity: npt.ArrayLike,
    pressure: npt.ArrayLike,
    temp_c: npt.ArrayLike,
    dry_air: float,
    water: float,
    P_ref: float,
    beta: float,
) -> npt.NDArray:
    """
    Vectorised relative humidity with parallel processing.

    See Also
    --------
    _relative_humidity_scalar : Scalar version
    """
    n = len(specific_humidity)
    results = np.empty(n, dtype=np.float64)

    for i in prange(n):
        results[i] = _relative_humidity_scalar(
            specific_humidity[i], pressure[i], temp_c[i], dry_air, water, P_ref, beta
        )
    return results
