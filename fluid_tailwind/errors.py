from __future__ import annotations


class FluidError(Exception):
    pass


class FluidConfigError(FluidError):
    """Raised while building a context from an unusable theme."""


class FluidValueError(FluidError):
    def __init__(self, category: str, message: str):
        super().__init__(f"{category}: {message}")
        self.category = category
        self.message = message
