
class PreconditionError(ValueError):
    """An argument violates a precondition of the operation, such as an
    empty quadrature rule passed to `integrate` or an order less than 1."""


class DataIntegrityError(ValueError):
    """Coefficient data or rule arrays have inconsistent shapes."""
