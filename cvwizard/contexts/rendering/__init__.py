"""
Rendering Context

Responsibilities:
- Hands the composed preview to the external PDF render pipeline
- Defines the single-page placement policy the pipeline applies

Owns: Render pipeline contract, page placement geometry
Never: Modifies the document
"""

from cvwizard.contexts.rendering.pipeline import (
    PagePlacement,
    PlacementFn,
    RenderPipeline,
    export_pdf,
    fit_to_page,
)

__all__ = ["PagePlacement", "PlacementFn", "RenderPipeline", "export_pdf", "fit_to_page"]
