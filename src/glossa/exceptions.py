"""Exception hierarchy for glossa."""


class GlossaError(Exception):
    """Base exception for all glossa errors."""


class DeserializationError(GlossaError, ValueError):
    """The deserializer rejected the input document."""

    def __init__(self, message: str, *, source: str = "<bytes>") -> None:
        self.source = source
        super().__init__(message)


class GlossaConfigError(GlossaError):
    """Invalid ``[tool.glossa]`` configuration."""
