class HullError(Exception):
    """Base class for hull construction and query errors."""


class CapacityExceeded(HullError):
    """A fixed capacity would be exceeded. Raised before anything is written."""


class StackUnderflow(HullError):
    """Pop or peek below the bottom of a scratch stack."""


class InsufficientPoints(HullError):
    """Fewer than 3 usable points remain to build a hull from."""


class DegenerateInput(InsufficientPoints):
    """Every point collapsed onto a single line or location during dedup."""


class PreconditionViolation(HullError):
    """A boundary-dependent query on a dirty hull, or a mis-sized scratch stack."""
