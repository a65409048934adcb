class PdfRenderError(Exception):
    """Raised when a PDF cannot be turned into page images."""
