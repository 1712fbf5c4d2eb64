import numpy as np
import warnings

# Cross products with absolute value at or below this are treated as colinear.
COLINEAR_TOLERANCE = 0.0


class defaults:
    def __init__(self, precision, tolerance=COLINEAR_TOLERANCE):
        self._set_precision(precision)
        self._set_tolerance(tolerance)
        self.settable = True

    def _set_precision(self, precision):
        if not isinstance(precision, int) or isinstance(precision, bool):
            raise TypeError("'precision' must be an int (32 or 64)")
        if precision == 32:
            self.float = np.float32
            self.int = np.int32
        elif precision == 64:
            self.float = np.float64
            self.int = np.int64
        else:
            raise ValueError("'precision' must be 32 or 64")
        self.precision = precision

    def _set_tolerance(self, tolerance):
        if isinstance(tolerance, bool) or not isinstance(tolerance, (int, float)):
            raise TypeError("'tolerance' must be a float")
        if not np.isfinite(tolerance) or tolerance < 0:
            raise ValueError(f"'tolerance' must be finite and non-negative. Got: {tolerance}")
        self.tolerance = float(tolerance)

    def update_precision(self, precision):
        if not self.settable:
            warnings.warn("Set precision must be called *before* importing other hullsim modules "
                          "to ensure precision is set correctly.", UserWarning)
        self._set_precision(precision)

    def update_tolerance(self, tolerance=COLINEAR_TOLERANCE):
        """
        The tolerance is read at call time so it may be changed at any point.
        """
        self._set_tolerance(tolerance)

    def __iter__(self):
        self.settable = False
        return iter((self.int, self.float))

    def __repr__(self):
        return (f"Default data types int and float of precision {self.precision}, "
                f"colinear tolerance {self.tolerance}")


DEFAULTS = defaults(64)
