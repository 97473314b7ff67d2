"""Exception hierarchy for Polyshaper."""


class PolyshaperError(Exception):
    """Base exception for all Polyshaper errors."""

    pass


class GeometryError(PolyshaperError):
    """Errors in geometric calculations."""

    pass


class InvalidPolygonError(GeometryError):
    """A vertex list does not describe a simple, non-degenerate polygon."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid polygon: {reason}")


class InvalidParametersError(PolyshaperError):
    """Shape parameters violate the constraints of the requested shape."""

    def __init__(self, shape: str, reason: str) -> None:
        self.shape = shape
        self.reason = reason
        super().__init__(f"Invalid parameters for {shape}: {reason}")
