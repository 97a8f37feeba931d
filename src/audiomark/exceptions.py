"""Exception hierarchy for Audiomark."""


class AudiomarkError(Exception):
    """Base exception for all Audiomark errors."""

    pass


class ConfigurationError(AudiomarkError):
    """Caller supplied geometry or symbol data that cannot be rendered.

    These are programming errors: they are raised at the call site before
    any draw command reaches the canvas.
    """

    pass


class UnmappedSymbolError(ConfigurationError):
    """Symbol has no entry in the symbol catalog."""

    def __init__(self, symbol: object) -> None:
        self.symbol = symbol
        super().__init__(f"Symbol '{symbol}' has no render strategy in the catalog")


class RadiusTooLargeError(ConfigurationError):
    """Corner radius exceeds half of the smaller rectangle dimension."""

    def __init__(self, radius: float, width: float, height: float) -> None:
        self.radius = radius
        self.width = width
        self.height = height
        super().__init__(
            f"Corner radius {radius} exceeds half of min({width}, {height})"
        )


class NonPositiveSizeError(ConfigurationError):
    """A size parameter that must be positive was zero or negative."""

    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(f"'{name}' must be positive, got {value}")


class FontError(AudiomarkError):
    """Errors related to font loading or lookup."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class UnknownFontError(FontError):
    """Font handle was never registered with the canvas."""

    def __init__(self, font: str) -> None:
        self.font = font
        super().__init__(f"Font '{font}' is not registered")


class CanvasError(AudiomarkError):
    """Errors raised by a canvas backend."""

    pass


class CanvasSaveError(CanvasError):
    """Error writing the rendered document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save document '{path}': {reason}")
