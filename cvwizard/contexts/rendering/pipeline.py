"""
Render pipeline contract.

Rasterizing the preview and paginating it into a PDF is done by an external
renderer. This module defines what the core hands over and the single-page
placement policy the renderer applies:

- A4 portrait page (446.46 x 631.4 px), uniform 40 px margins
- The captured image fills the printable width
- If that makes it taller than the printable height, it is scaled down
  uniformly until it fits one page

Export never changes the document. Renderer failures are logged and swallowed.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Protocol

from cvwizard.contexts.composing.preview import PreviewRenderer, render_preview
from cvwizard.contexts.rendering.logger import log_render_failed, log_render_finished, log_render_start

A4_WIDTH_PX = 446.46
A4_HEIGHT_PX = 631.4
PAGE_MARGIN_PX = 40.0
DEFAULT_OUTPUT_NAME = "resume.pdf"


@dataclass(frozen=True)
class PagePlacement:
    """
    Where the captured image goes on the page.

    Attributes:
        x, y: Top-left corner (the margins)
        width, height: Drawn size of the image
        scale: Extra downscale applied to fit the page height (1.0 when none)
    """

    x: float
    y: float
    width: float
    height: float
    scale: float = 1.0


def fit_to_page(
    content_width: float,
    content_height: float,
    page_width: float = A4_WIDTH_PX,
    page_height: float = A4_HEIGHT_PX,
    margin: float = PAGE_MARGIN_PX,
) -> PagePlacement:
    """
    Place captured content on a single page.

    Args:
        content_width, content_height: Pixel size of the captured preview
        page_width, page_height: Page size
        margin: Uniform margin on all four sides

    Returns:
        PagePlacement keeping the content's aspect ratio

    Raises:
        ValueError: If the content or printable area has no size
    """
    if content_width <= 0 or content_height <= 0:
        raise ValueError(f"Content size must be positive, got {content_width}x{content_height}")

    printable_width = page_width - 2 * margin
    printable_height = page_height - 2 * margin
    if printable_width <= 0 or printable_height <= 0:
        raise ValueError("Margins leave no printable area")

    width = printable_width
    height = content_height * width / content_width
    scale = 1.0

    if height > printable_height:
        scale = printable_height / height
        width *= scale
        height = printable_height

    return PagePlacement(x=margin, y=margin, width=width, height=height, scale=scale)


PlacementFn = Callable[[float, float], PagePlacement]


class RenderPipeline(Protocol):
    """
    External renderer: turns preview markdown into a single-page PDF file.

    The renderer captures the preview, then calls `placement(width, height)`
    with the captured pixel size to learn where to draw it on the page.
    """

    def render(self, markdown: str, output_path: Path, placement: PlacementFn) -> Path:
        ...


def export_pdf(
    session,
    pipeline: RenderPipeline,
    output_path: Path = Path(DEFAULT_OUTPUT_NAME),
    renderer: PreviewRenderer = None,
) -> Optional[Path]:
    """
    Hand the current preview to the external render pipeline.

    Args:
        session: AuthoringSession to export (read only)
        pipeline: External renderer
        output_path: Destination PDF
        renderer: Optional preview renderer (defaults to PreviewRenderer())

    Returns:
        Path reported by the pipeline, or None if rendering failed
    """
    output_path = Path(output_path)
    log_render_start(output_path)

    try:
        markdown = render_preview(session, renderer)
        result = pipeline.render(markdown, output_path, fit_to_page)
    except Exception as e:
        log_render_failed(output_path, e)
        return None

    log_render_finished(result)
    return result
