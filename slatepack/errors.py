class SlatepackError(Exception):
    """Base class for slatepack armor errors."""


# Framing
class InvalidFraming(SlatepackError):
    pass


class InvalidHeader(InvalidFraming):
    pass


class InvalidFooter(InvalidFraming):
    pass


class MalformedArmor(SlatepackError):
    pass


# Payload
class InvalidEncoding(SlatepackError):
    pass


class ChecksumMismatch(SlatepackError):
    pass


class TextEncodingError(SlatepackError):
    pass
