# file: src/module1_bitstring/errors.py

"""
Codec exception hierarchy.

All exceptions inherit from LinkCodecError for unified handling.
"""


class LinkCodecError(Exception):
    """Base exception for all link-layer codec errors."""
    pass


class BitStringError(LinkCodecError):
    """Raised when an input is not a usable bit-string."""
    pass


class NonBinaryCharacter(BitStringError):
    """Raised when a bit-string contains a character other than '0' or '1'."""

    def __init__(self, message: str, position: int = None, character: str = None):
        super().__init__(message)
        self.position = position
        self.character = character


class EmptyDataword(BitStringError):
    """Raised when an operation needs at least one data bit."""
    pass


class MalformedStuffingError(BitStringError):
    """Raised when a stuffed stream breaks the stuffing rule."""

    def __init__(self, message: str, position: int = None):
        super().__init__(message)
        self.position = position


class CodecOverflowError(LinkCodecError):
    """Raised when an input exceeds the configured capacity."""

    def __init__(self, message: str, length: int = None, limit: int = None):
        super().__init__(message)
        self.length = length
        self.limit = limit


class InvalidGeneratorError(LinkCodecError):
    """Raised when a CRC generator polynomial cannot be used."""
    pass


class InvalidGeneratorLength(InvalidGeneratorError):
    """Raised when a CRC generator is shorter than one bit."""
    pass


class ChecksumMismatchError(LinkCodecError):
    """Raised when a received CRC codeword leaves a non-zero remainder."""

    def __init__(self, message: str, syndrome: str = None):
        super().__init__(message)
        self.syndrome = syndrome


class CodecConfigurationError(LinkCodecError):
    """Raised when codec configuration is invalid."""
    pass
