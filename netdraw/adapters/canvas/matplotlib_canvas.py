"""Matplotlib canvas adapter.

Primitives are collected per page and turned into LineCollections when
the page is finished, one collection per run of primitives sharing the
same color and width, so the draw order survives. PDF output is a single
multi-page document; PNG and SVG output write one file per page, the
first one at the requested path and page n at ``<stem>-<n><suffix>``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure

from ...domain.errors import ConfigurationError, RenderingError
from ...domain.models import Point, Rectangle
from ...viz.palette import KIT_BLACK, Color, LineWidth

CM_PER_INCH = 2.54
SUPPORTED_FORMATS = ("PDF", "PNG", "SVG")

RGBA = Tuple[float, float, float, float]


@dataclass
class _Batch:
    color: RGBA
    width: float
    paths: List[List[Tuple[float, float]]] = field(default_factory=list)


class MatplotlibCanvas:
    """Canvas drawing into a matplotlib figure clipped to a bounding box.

    Attributes:
        output_path: Where the (first page of the) graphic is written
        fmt: One of PDF, PNG, SVG
        width_cm: Width of the graphic in centimeters
        height_cm: Height of the graphic in centimeters
    """

    def __init__(
        self,
        output_path: Union[str, Path],
        fmt: str,
        width_cm: float,
        height_cm: float,
        bounding_box: Rectangle,
        dpi: int = 300,
    ) -> None:
        fmt = fmt.upper()
        if fmt not in SUPPORTED_FORMATS:
            raise ConfigurationError(
                f"unrecognized file format -- '{fmt}'",
                setting_name="format",
                expected_type=" | ".join(SUPPORTED_FORMATS),
            )
        if bounding_box.is_empty:
            raise RenderingError(
                "cannot draw an empty bounding box",
                output_path=str(output_path),
                renderer_type="matplotlib",
            )

        self.output_path = Path(output_path)
        self.fmt = fmt
        self.width_cm = width_cm
        self.height_cm = height_cm
        self.dpi = dpi
        self._box = bounding_box
        self._logger = logging.getLogger(__name__)

        self._color: RGBA = KIT_BLACK.to_rgba()
        self._width = LineWidth.THIN
        self._batches: List[_Batch] = []
        self._page = 1
        self._closed = False

        self._pdf: Optional[PdfPages] = None
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            if fmt == "PDF":
                self._pdf = PdfPages(str(self.output_path))
        except OSError as e:
            raise self._error("cannot open output file", e)

    def __enter__(self) -> MatplotlibCanvas:
        return self

    def __exit__(self, exc_type: object, *exc_info: object) -> None:
        if exc_type is None:
            self.close()
        else:
            self.discard()

    @property
    def page(self) -> int:
        return self._page

    def page_path(self, page: int) -> Path:
        """Return the file a PNG or SVG page is written to."""
        if page == 1:
            return self.output_path
        return self.output_path.with_name(
            f"{self.output_path.stem}-{page}{self.output_path.suffix}"
        )

    def _error(self, message: str, cause: Exception) -> RenderingError:
        return RenderingError(
            message,
            output_path=str(self.output_path),
            renderer_type=f"matplotlib/{self.fmt}",
            cause=cause,
        )

    def set_color(self, color: Color) -> None:
        self._color = color.to_rgba()

    def set_line_width(self, width: float) -> None:
        self._width = width

    def _current_batch(self) -> _Batch:
        if (
            not self._batches
            or self._batches[-1].color != self._color
            or self._batches[-1].width != self._width
        ):
            self._batches.append(_Batch(self._color, self._width))
        return self._batches[-1]

    def draw_line(self, src: Point, dst: Point) -> None:
        self._current_batch().paths.append([(src.x, src.y), (dst.x, dst.y)])

    def draw_polyline(self, points: Sequence[Point]) -> None:
        if len(points) < 2:
            return
        self._current_batch().paths.append([(p.x, p.y) for p in points])

    def draw_polygon(self, points: Sequence[Point]) -> None:
        if len(points) < 2:
            return
        ring = [(p.x, p.y) for p in points]
        if ring[0] != ring[-1]:
            ring.append(ring[0])
        self._current_batch().paths.append(ring)

    def _build_figure(self) -> Figure:
        fig = Figure(figsize=(self.width_cm / CM_PER_INCH, self.height_cm / CM_PER_INCH))
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_axis_off()

        assert self._box.south_west is not None and self._box.north_east is not None
        sw, ne = self._box.south_west, self._box.north_east
        pad_x = (ne.x - sw.x) * 0.01 or 1.0
        pad_y = (ne.y - sw.y) * 0.01 or 1.0
        ax.set_xlim(sw.x - pad_x, ne.x + pad_x)
        ax.set_ylim(sw.y - pad_y, ne.y + pad_y)
        ax.set_aspect("equal", adjustable="datalim")

        for zorder, batch in enumerate(self._batches, start=1):
            if not batch.paths:
                continue
            ax.add_collection(
                LineCollection(
                    batch.paths,
                    colors=[batch.color],
                    linewidths=batch.width,
                    capstyle="round",
                    joinstyle="round",
                    zorder=zorder,
                )
            )
        return fig

    def _finish_page(self) -> None:
        fig = self._build_figure()
        try:
            if self._pdf is not None:
                self._pdf.savefig(fig)
                target = self.output_path
            else:
                target = self.page_path(self._page)
                fig.savefig(str(target), format=self.fmt.lower(), dpi=self.dpi)
        except (OSError, ValueError) as e:
            raise self._error(f"cannot write page {self._page}", e)
        self._logger.debug(
            "Page written",
            extra={"page": self._page, "path": str(target), "batches": len(self._batches)},
        )
        self._batches = []

    def new_page(self) -> None:
        self._finish_page()
        self._page += 1

    def close(self) -> None:
        """Write the last page and release the output file. Idempotent.

        If the last page cannot be written, every page written so far is
        removed as by discard().
        """
        if self._closed:
            return
        try:
            self._finish_page()
        except BaseException:
            self.discard()
            raise
        self._closed = True
        if self._pdf is not None:
            self._pdf.close()
        self._logger.info(
            "Graphic written",
            extra={"path": str(self.output_path), "format": self.fmt, "pages": self._page},
        )

    def discard(self) -> None:
        """Drop the unfinished page and remove every page written so far."""
        if self._closed:
            return
        self._closed = True
        self._batches = []
        try:
            if self._pdf is not None:
                self._pdf.close()
        finally:
            self._remove_written_pages()

    def _remove_written_pages(self) -> None:
        if self._pdf is not None:
            paths = [self.output_path]
        else:
            paths = [self.page_path(page) for page in range(1, self._page + 1)]
        for path in paths:
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                self._logger.warning(
                    "Cannot remove partial output", extra={"path": str(path), "error": str(e)}
                )
        self._logger.info(
            "Graphic discarded", extra={"path": str(self.output_path), "pages": self._page}
        )
