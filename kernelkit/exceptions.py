"""Exception types for kernelkit."""


class DimensionMismatchError(ValueError):
    """Raised when two operands of a distance or kernel have different shapes."""

    def __init__(self, shape_a, shape_b):
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)
        super().__init__(
            f"Operands must have the same shape, got {self.shape_a} and {self.shape_b}"
        )
