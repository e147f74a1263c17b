"""
Authoring Context

Responsibilities:
- Owns the resume document aggregate and its entry record types
- Validates scalar fields as they are typed
- Provides the generic entry list engine (add/update/remove/move/add_unique)
- Gates wizard progression on per-step completeness

Owns: ResumeDocument, AuthoringSession, validation error map, step state
Never: Renders, analyzes keywords, or touches storage
"""

from cvwizard.contexts.authoring.document import SECTION_IDS, ResumeDocument, Template
from cvwizard.contexts.authoring.session import AuthoringSession
from cvwizard.contexts.authoring.step_gate import Step, StepGate
from cvwizard.contexts.authoring.validators import validate

__all__ = [
    "AuthoringSession",
    "ResumeDocument",
    "SECTION_IDS",
    "Step",
    "StepGate",
    "Template",
    "validate",
]
