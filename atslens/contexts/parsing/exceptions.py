"""Custom exceptions for the parsing context."""

from typing import Optional


class PdfParseError(Exception):
    """
    Exception raised when a PDF cannot be loaded into pages.

    Attributes:
        message: Error description suitable for showing to the uploader
        code: Machine-readable reason (INVALID_TYPE, FILE_TOO_LARGE,
            PASSWORD_PROTECTED, INVALID_PDF, PARSE_ERROR)
        original_error: The underlying pdfplumber/pdfminer error, if any
    """

    def __init__(self, message: str, code: str, original_error: Optional[Exception] = None):
        self.message = message
        self.code = code
        self.original_error = original_error

        parts = [message]
        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
