class ImageDecodeError(ValueError):
    """The source could not be turned into an RGBA pixel buffer."""


class ConversionCancelled(RuntimeError):
    pass
