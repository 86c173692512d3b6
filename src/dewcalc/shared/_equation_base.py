"""
Abstract base for elementwise equations.

Implements:
 - Input conversion and scalar expansion
 - Scalar or vectorised kernel dispatch
 - Valid range warnings and domain checks
"""

import warnings
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, NamedTuple, Sequence, Tuple, Union

import numpy as np
import numpy.typing as npt

from dewcalc.shared._enum_tools import parse_enum
from dewcalc.shared._shared_enums import ValidationMode


class ElementwiseEquation(ABC):
    """
    Abstract base class for equations evaluated element by element.

    Holds the plumbing every equation in the package shares: inputs are
    converted to float64 arrays, 0-d inputs are expanded to the shape of
    the array inputs, and the calculation is routed to a JIT-compiled
    scalar kernel or to its vectorised counterpart.

    Attributes
    ----------
    name : Enum
        Identifier of the concrete equation (set by subclass)
    input_names : tuple[str, ...]
        Names of the positional inputs, used in error messages
    validation : ValidationMode
        How inputs are checked against their physical domain
    wrapper_depth : int
        Number of wrapper functions between user code and ``calculate``.
        Warnings are attributed to the frame that called the outermost
        wrapper, or to the caller of ``calculate`` when this is 0.

    Methods
    -------
    calculate(*inputs)
        Evaluate the equation (abstract, must implement)
    _validate_input(*inputs)
        Convert inputs to float64 arrays and broadcast them
    _broadcast_input(*inputs)
        Expand 0-d inputs to the common array shape
    _dispatch_scalar_or_vector(inputs, scalar_func, vector_func, equation_constants)
        Route to scalar or vectorised kernel
    _check_bounds(values, bounds, label)
        Warn when values leave a documented range
    _check_positive(values, label)
        Warn or raise when values are not strictly positive

    See Also
    --------
    ClausiusClapeyronEquation : Saturation vapour pressure
    RelativeHumidityEquation : Relative humidity from specific humidity
    SpecificHumidityDewpointEquation : Full dewpoint chain
    """

    name: Enum
    input_names: Tuple[str, ...]
    validation: ValidationMode
    wrapper_depth: int

    def __init__(
        self,
        validation: Union[str, ValidationMode] = ValidationMode.NONE,
        wrapper_depth: int = 0,
    ):
        self.validation = parse_enum(value=validation, enum_class=ValidationMode)
        self.wrapper_depth = wrapper_depth

    def _validate_input(
        self, *inputs: Union[float, npt.ArrayLike]
    ) -> Tuple[npt.NDArray, ...]:
        """
        Convert inputs to float64 arrays with a common shape.

        Parameters
        ----------
        *inputs : float or array-like
            Equation inputs in the order given by ``input_names``.
            Scalars, lists, tuples and numpy arrays are accepted.

        Returns
        -------
        tuple of ndarray
            Float64 arrays, all 0-d or all with the same shape.

        Raises
        ------
        ValueError
            If two array inputs have different shapes.
        """
        arrays = tuple(np.asarray(value, dtype=np.float64) for value in inputs)

        return self._broadcast_input(*arrays)

    def _broadcast_input(self, *inputs: npt.NDArray) -> Tuple[npt.NDArray, ...]:
        """
        Expand 0-d inputs to match the shape of the array inputs.

        Only scalar expansion is supported. Array inputs must already share
        one shape; numpy's general broadcasting between arrays of different
        shapes is deliberately not applied.

        Parameters
        ----------
        *inputs : ndarray
            Float64 arrays produced by ``_validate_input``.

        Returns
        -------
        tuple of ndarray
            Inputs with every 0-d array expanded, if any input is an array.

        Raises
        ------
        ValueError
            If array inputs have different shapes.
        """
        array_shapes = {value.shape for value in inputs if value.ndim > 0}

        if not array_shapes:
            return inputs

        if len(array_shapes) > 1:
            shapes = ", ".join(
                f"{label}.shape={value.shape}"
                for label, value in zip(self.input_names, inputs)
            )
            raise ValueError(
                f"Input arrays must have the same shape or be scalar. Got {shapes}"
            )

        (shape,) = array_shapes

        return tuple(
            np.full(shape, value, dtype=np.float64) if value.ndim == 0 else value
            for value in inputs
        )

    def _dispatch_scalar_or_vector(
        self,
        inputs: Sequence[npt.NDArray],
        scalar_func: Callable[..., float],
        vector_func: Callable[..., npt.NDArray],
        equation_constants: Sequence[NamedTuple] = (),
    ) -> Union[float, npt.NDArray]:
        """
        Dispatch to scalar or vector kernel based on input dimensions.

        Parameters
        ----------
        inputs : sequence of ndarray
            Validated inputs, all 0-d or all with the same shape.
        scalar_func : callable
            JIT-compiled scalar kernel.
            Signature: f(*scalars, *constants) -> float
        vector_func : callable
            JIT-compiled kernel over flat float64 arrays.
            Signature: f(*arrays, *constants) -> ndarray
        equation_constants : sequence of NamedTuple, optional
            Constant records whose fields are appended, in order, to the
            kernel arguments.

        Returns
        -------
        float or ndarray
            Python float for 0-d inputs, otherwise an array with the
            input shape.
        """
        constants = [value for record in equation_constants for value in record]

        if all(value.ndim == 0 for value in inputs):
            scalars = [float(value.item()) for value in inputs]

            return scalar_func(*scalars, *constants)

        original_shape = inputs[0].shape
        flattened = [value.flatten() for value in inputs]

        result = vector_func(*flattened, *constants)

        return result.reshape(original_shape)

    def _check_bounds(
        self,
        values: npt.NDArray,
        bounds: Tuple[float, float],
        label: str,
        unit: str = "",
        stacklevel: int = 3,
    ) -> None:
        """
        Warn if any value is outside ``bounds``.

        NaN values never trigger the warning.

        Parameters
        ----------
        values : ndarray
            Values to check
        bounds : tuple[float, float]
            Inclusive (min, max) range
        label : str
            Name of the quantity, used in the message
        unit : str, optional
            Unit suffix shown after the bounds
        stacklevel : int, default 3
            Frames from this method up to the caller of ``calculate``
            (3 when called directly from ``calculate``). ``wrapper_depth``
            is added before passing it to ``warnings.warn``.
        """
        min_bound, max_bound = bounds

        if np.any(values < min_bound) or np.any(values > max_bound):
            warnings.warn(
                f"{label} outside valid range [{min_bound}{unit}, {max_bound}{unit}] "
                f"for {self.name.value} equation. Results may be inaccurate.",
                UserWarning,
                stacklevel=stacklevel + self.wrapper_depth,
            )

    def _check_positive(
        self, values: npt.NDArray, label: str, stacklevel: int = 3
    ) -> None:
        """
        Check that every value of a physical quantity is strictly positive.

        Does nothing when ``validation`` is NONE. In WARN mode a
        ``UserWarning`` is emitted, in STRICT mode a ``ValueError`` is raised.

        Parameters
        ----------
        values : ndarray
            Values to check
        label : str
            Name of the quantity, used in the message
        stacklevel : int, default 3
            Frames from this method up to the caller of ``calculate``,
            before ``wrapper_depth`` is added

        Raises
        ------
        ValueError
            If ``validation`` is STRICT and any value is zero or negative.
        """
        if self.validation == ValidationMode.NONE:
            return

        non_positive = values <= 0

        if not np.any(non_positive):
            return

        message = (
            f"{label} must be positive for {self.name.value} equation. "
            f"Got minimum {np.min(values[non_positive])}"
        )

        if self.validation == ValidationMode.STRICT:
            raise ValueError(message)

        warnings.warn(
            f"{message}. Results will be non-finite or meaningless.",
            UserWarning,
            stacklevel=stacklevel + self.wrapper_depth,
        )

    @abstractmethod
    def calculate(
        self, *inputs: Union[float, npt.ArrayLike]
    ) -> Union[float, npt.NDArray]:
        """
        Evaluate the equation.

        Parameters
        ----------
        *inputs : float or array-like
            Equation inputs in the order given by ``input_names``.

        Returns
        -------
        float or ndarray
            Python float if all inputs are scalar, otherwise an array with
            the common input shape.
        """
        pass
