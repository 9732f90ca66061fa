# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for bmpcodec

Every failure of the codec is surfaced as one of the classes below.
None of them are downgraded to warnings and none of them end the process;
that decision belongs to the calling application.

Copyright 2025 DNAi inc.
"""


class BMPError(Exception):
    """
    Base exception for all bmpcodec errors.

    All bmpcodec exceptions inherit from this class, allowing
    catch-all error handling for any codec-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class BMPFileNotFoundError(BMPError, FileNotFoundError):
    """
    Raised when a BMP file path cannot be opened.

    This exception is raised when:
    - The path does not exist
    - The path is a directory
    - File permissions prevent reading or writing
    """
    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        message = f"Unable to open {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class BMPFormatError(BMPError):
    """
    Raised when the byte stream is not a BMP file the codec accepts.

    This exception is raised when:
    - The signature is not "BM"
    - A 32-bit image has no color mask header
    - Color masks or color space differ from the canonical BGRA/sRGB set
    - Header fields contradict each other (planes, offsets, width)
    """
    pass


class UnsupportedFormatError(BMPError):
    """
    Raised when the file is a valid BMP variant the codec does not handle.

    This exception is raised when:
    - Bit depth is anything other than 24 or 32
    - Rows are stored top-down (negative height)
    - Pixel data is compressed (RLE, JPEG, PNG)
    - The DIB header is older than BITMAPINFOHEADER
    """
    pass


class TruncatedDataError(BMPError):
    """
    Raised when fewer bytes are available than the headers declare.
    """
    def __init__(self, what: str, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Truncated {what}: need {required} bytes, have {available} bytes"
        )


class InvalidArgumentError(BMPError, ValueError):
    """
    Raised when a caller passes arguments the codec cannot encode.

    This exception is raised when:
    - Channel count is not 3 or 4
    - Width or height is not a positive integer
    - Buffer length does not match width * height * channels
    """
    pass
