"""
CVWIZARD - Step-by-step resume authoring engine

Collects structured resume data across sequential steps, keeps a live structured
document, composes ordered/visible sections for rendering, checks resume text
against a job description, and persists the authoring state as JSON.

Architecture:
- Authoring Context: Document model, validators, entry lists, step gate
- Composing Context: Section ordering/visibility and preview markdown
- Targeting Context: Keyword gap analysis against job descriptions
- Persistence Context: Snapshots, autosave, export/import
- Rendering Context: Contract with the external PDF render pipeline
"""

__version__ = "0.1.0"
