"""Unit tests for single-page placement and the render pipeline hand-off."""

from pathlib import Path

import pytest

from cvwizard.contexts.rendering.pipeline import (
    A4_HEIGHT_PX,
    A4_WIDTH_PX,
    PAGE_MARGIN_PX,
    export_pdf,
    fit_to_page,
)

PRINTABLE_WIDTH = A4_WIDTH_PX - 2 * PAGE_MARGIN_PX
PRINTABLE_HEIGHT = A4_HEIGHT_PX - 2 * PAGE_MARGIN_PX


class RecordingPipeline:
    def __init__(self):
        self.calls = []

    def render(self, markdown, output_path, placement):
        self.calls.append((markdown, output_path, placement(1200, 600)))
        return output_path


class BrokenPipeline:
    def render(self, markdown, output_path, placement):
        raise RuntimeError("renderer crashed")


@pytest.mark.unit
class TestFitToPage:
    def test_short_content_fills_width(self):
        placement = fit_to_page(800, 400)
        assert placement.x == PAGE_MARGIN_PX
        assert placement.y == PAGE_MARGIN_PX
        assert placement.width == pytest.approx(PRINTABLE_WIDTH)
        assert placement.height == pytest.approx(PRINTABLE_WIDTH / 2)
        assert placement.scale == 1.0

    def test_tall_content_scaled_to_one_page(self):
        placement = fit_to_page(800, 4000)
        assert placement.height == pytest.approx(PRINTABLE_HEIGHT)
        assert placement.width < PRINTABLE_WIDTH
        assert placement.scale < 1.0

    def test_aspect_ratio_kept(self):
        placement = fit_to_page(600, 3000)
        assert placement.height / placement.width == pytest.approx(5.0)

    @pytest.mark.parametrize("size", [(0, 100), (100, 0), (-5, 10)])
    def test_empty_content_rejected(self, size):
        with pytest.raises(ValueError):
            fit_to_page(*size)

    def test_margins_too_large(self):
        with pytest.raises(ValueError, match="printable"):
            fit_to_page(100, 100, margin=300)


@pytest.mark.unit
class TestExportPdf:
    def test_hands_preview_to_pipeline(self, filled_session, tmp_path):
        pipeline = RecordingPipeline()
        result = export_pdf(filled_session, pipeline, tmp_path / "cv.pdf")

        assert result == tmp_path / "cv.pdf"
        markdown, output_path, _ = pipeline.calls[0]
        assert "# Jane Doe" in markdown
        assert output_path == Path(tmp_path / "cv.pdf")

    def test_pipeline_places_capture_on_one_page(self, filled_session, tmp_path):
        pipeline = RecordingPipeline()
        export_pdf(filled_session, pipeline, tmp_path / "cv.pdf")

        placement = pipeline.calls[0][2]
        assert placement == fit_to_page(1200, 600)
        assert placement.width == pytest.approx(PRINTABLE_WIDTH)

    def test_failure_swallowed_and_document_unchanged(self, filled_session, tmp_path):
        document = filled_session.document
        assert export_pdf(filled_session, BrokenPipeline(), tmp_path / "cv.pdf") is None
        assert filled_session.document is document
