class AsciiSpinError(Exception):
    """Base class for all errors raised by asciispin."""


class ImageLoadError(AsciiSpinError):
    """The image file is missing or cannot be decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not load image '{path}': {reason}")
        self.path = path
        self.reason = reason
