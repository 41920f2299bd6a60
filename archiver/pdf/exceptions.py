class PdfExtractionError(Exception):
    """Raised when the text of a PDF cannot be read."""
