from dataclasses import dataclass


@dataclass(frozen=True)
class RawRaster:
    """Uncompressed pixels produced by rendering one page."""

    width: int
    height: int
    channels: int
    samples: bytes


@dataclass(frozen=True)
class RenderedPage:
    """One document page encoded as an image."""

    page_index: int
    image_bytes: bytes
    encoding: str = "png"

    @property
    def mime_type(self) -> str:
        return f"image/{self.encoding}"
