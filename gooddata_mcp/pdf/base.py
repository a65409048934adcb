from abc import ABC, abstractmethod
from collections.abc import Iterable
from contextlib import AbstractContextManager, ExitStack
from typing import Any

from gooddata_mcp.logging.logger import Log
from gooddata_mcp.pdf.exceptions import PdfRenderError
from gooddata_mcp.pdf.models import RawRaster, RenderedPage


class BasePdfRasterizer(ABC):
    """Renders every page of a PDF into an encoded image.

    Adapters supply the library specific hooks. The library handle and the
    opened document are scoped to a single ``rasterize`` call and released
    in reverse order of acquisition on every exit path.
    """

    encoding = "png"

    def __init__(self, scale: float = 3.0) -> None:
        if scale <= 0:
            raise ValueError("scale must be positive")
        self._scale = scale

    @property
    def scale(self) -> float:
        return self._scale

    def rasterize(self, pdf_bytes: bytes) -> list[RenderedPage]:
        """Render all pages of ``pdf_bytes`` in document order.

        Raises:
            PdfRenderError: if the library, the document or any page fails.
        """
        try:
            with ExitStack() as stack:
                library = stack.enter_context(self._open_library())
                document = stack.enter_context(self._open_document(library, pdf_bytes))
                pages = [
                    RenderedPage(
                        page_index=index,
                        image_bytes=self._encode(self._render_page(page, self._scale)),
                        encoding=self.encoding,
                    )
                    for index, page in enumerate(self._iter_pages(document))
                ]
        except PdfRenderError:
            raise
        except Exception as exc:
            raise PdfRenderError(f"PDF rasterization failed: {exc}") from exc

        Log.info(f"Rasterized {len(pages)} pages at scale {self._scale}")
        return pages

    @abstractmethod
    def _open_library(self) -> AbstractContextManager[Any]:
        """Acquire the rendering library handle."""

    @abstractmethod
    def _open_document(
        self, library: Any, pdf_bytes: bytes
    ) -> AbstractContextManager[Any]:
        """Open ``pdf_bytes`` as a document owned by ``library``."""

    @abstractmethod
    def _iter_pages(self, document: Any) -> Iterable[Any]:
        """Yield pages in document order."""

    @abstractmethod
    def _render_page(self, page: Any, scale: float) -> RawRaster:
        """Render one page into raw pixels."""

    @abstractmethod
    def _encode(self, raster: RawRaster) -> bytes:
        """Encode raw pixels into ``self.encoding``."""
