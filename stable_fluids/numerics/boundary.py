"""
Ghost-border boundary conditions for the padded grid
"""

from enum import IntEnum

import numpy as np


class FieldType(IntEnum):
    """
    Boundary convention of a field.

    SCALAR fields (density, pressure) copy their interior neighbour into the
    ghost border. Velocity components are negated across the wall they cross.
    """
    SCALAR = 0
    X_VELOCITY = 1
    Y_VELOCITY = 2


class BoundaryEnforcer:
    """
    Fills the one-cell ghost border of a field from its interior.

    Walls are reflecting for velocity: the component normal to a wall is
    negated across it so nothing flows through. Scalars use a zero-gradient
    (Neumann) condition and are copied unchanged.
    """

    def __init__(self, n: int):
        """
        Args:
            n: Number of interior cells per side
        """
        self.n = n

    def enforce(self, field_type: int, field: np.ndarray) -> np.ndarray:
        """
        Recompute ghost cells of field in place

        Args:
            field_type: FieldType (or its integer value 0, 1, 2)
            field: (N+2, N+2) array

        Returns:
            The same array, for chaining
        """
        n = self.n
        field_type = FieldType(field_type)

        x_sign = -1.0 if field_type == FieldType.X_VELOCITY else 1.0
        y_sign = -1.0 if field_type == FieldType.Y_VELOCITY else 1.0

        # Left/right ghost columns
        field[0, 1:n + 1] = x_sign * field[1, 1:n + 1]
        field[n + 1, 1:n + 1] = x_sign * field[n, 1:n + 1]

        # Bottom/top ghost rows
        field[1:n + 1, 0] = y_sign * field[1:n + 1, 1]
        field[1:n + 1, n + 1] = y_sign * field[1:n + 1, n]

        # Corners average their two ghost neighbours
        field[0, 0] = 0.5 * (field[1, 0] + field[0, 1])
        field[0, n + 1] = 0.5 * (field[1, n + 1] + field[0, n])
        field[n + 1, 0] = 0.5 * (field[n, 0] + field[n + 1, 1])
        field[n + 1, n + 1] = 0.5 * (field[n, n + 1] + field[n + 1, n])

        return field
