from collections.abc import Iterable, Iterator
from contextlib import contextmanager

import pymupdf

from gooddata_mcp.logging.logger import Log
from gooddata_mcp.pdf.base import BasePdfRasterizer
from gooddata_mcp.pdf.models import RawRaster


class MuPdfSession:
    """Library handle for one rasterization run.

    Releasing it empties the MuPDF resource store so cached fonts and
    images from the rendered document do not outlive the run.
    """

    def __init__(self) -> None:
        self.closed = False

    def close(self) -> None:
        if self.closed:
            return
        pymupdf.TOOLS.store_shrink(100)
        self.closed = True


class PyMuPdfRasterizer(BasePdfRasterizer):
    """Renders PDF pages to PNG using PyMuPDF."""

    @contextmanager
    def _open_library(self) -> Iterator[MuPdfSession]:
        session = MuPdfSession()
        Log.debug(f"MuPDF session opened (PyMuPDF {pymupdf.VersionBind})")
        try:
            yield session
        finally:
            session.close()

    @contextmanager
    def _open_document(
        self, library: MuPdfSession, pdf_bytes: bytes
    ) -> Iterator[pymupdf.Document]:
        document = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        try:
            yield document
        finally:
            document.close()

    def _iter_pages(self, document: pymupdf.Document) -> Iterable[pymupdf.Page]:
        return iter(document)

    def _render_page(self, page: pymupdf.Page, scale: float) -> RawRaster:
        pixmap = page.get_pixmap(matrix=pymupdf.Matrix(scale, scale), alpha=True)
        return RawRaster(
            width=pixmap.width,
            height=pixmap.height,
            channels=pixmap.n,
            samples=bytes(pixmap.samples),
        )

    def _encode(self, raster: RawRaster) -> bytes:
        alpha = raster.channels in (2, 4)
        colorspace = pymupdf.csGRAY if raster.channels <= 2 else pymupdf.csRGB
        pixmap = pymupdf.Pixmap(
            colorspace, raster.width, raster.height, raster.samples, alpha
        )
        return pixmap.tobytes(self.encoding)
