"""
Step Gate

Six-step linear progression for the authoring wizard. Forward navigation is
allowed only when the current step's completeness predicate holds against the
current document and validation error map. The gate holds no state other than
the step index.
"""

from enum import IntEnum
from typing import Dict, List, Tuple

from cvwizard.contexts.authoring.document import ResumeDocument
from cvwizard.contexts.authoring.logger import log_step_blocked, log_step_change


class Step(IntEnum):
    PERSONAL = 0
    SUMMARY = 1
    EDUCATION = 2
    EXPERIENCE = 3
    SKILLS = 4
    PREVIEW = 5


STEP_LABELS = {
    Step.PERSONAL: "Personal",
    Step.SUMMARY: "Summary",
    Step.EDUCATION: "Education",
    Step.EXPERIENCE: "Experience",
    Step.SKILLS: "Skills",
    Step.PREVIEW: "Preview",
}

FIRST_STEP = Step.PERSONAL
LAST_STEP = Step.PREVIEW

# Fields that must be filled in on the personal step
PERSONAL_REQUIRED_FIELDS = ("first_name", "last_name", "title", "email", "phone")

# Fields whose validation errors block the personal step
PERSONAL_VALIDATED_FIELDS = ("first_name", "last_name", "email", "phone")


def blocking_reason(step: Step, document: ResumeDocument, errors: Dict[str, str]) -> str:
    """
    Explain why `step` cannot be completed, or return "" when it can.

    Args:
        step: Step to evaluate
        document: Current document snapshot
        errors: Validation error map (field name -> message)

    Returns:
        Human-readable reason, empty when the completeness predicate holds
    """
    if step == Step.PERSONAL:
        missing = [name for name in PERSONAL_REQUIRED_FIELDS if not getattr(document, name)]
        if missing:
            return f"missing {', '.join(missing)}"
        invalid = [name for name in PERSONAL_VALIDATED_FIELDS if errors.get(name)]
        if invalid:
            return f"invalid {', '.join(invalid)}"
        return ""
    if step == Step.SUMMARY:
        return "" if document.summary else "summary is empty"
    if step == Step.EDUCATION:
        return "" if document.education else "no education entries"
    if step == Step.EXPERIENCE:
        return "" if document.experience else "no experience entries"
    if step == Step.SKILLS:
        return "" if document.skills else "no skills"
    return "preview is the last step"


def is_complete(step: Step, document: ResumeDocument, errors: Dict[str, str]) -> bool:
    """Completeness predicate for a step. The preview step is terminal and never complete."""
    return not blocking_reason(step, document, errors)


class StepGate:
    """
    Linear step state machine.

    Attributes:
        step: Current step (0-5)
    """

    def __init__(self, step: int = FIRST_STEP):
        self.step = Step(max(FIRST_STEP, min(int(step), LAST_STEP)))

    def can_advance(self, document: ResumeDocument, errors: Dict[str, str]) -> bool:
        """Whether `next` is permitted from the current step."""
        return is_complete(self.step, document, errors)

    def is_blocked(self, document: ResumeDocument, errors: Dict[str, str]) -> bool:
        """Whether `next` is refused from the current step."""
        return not self.can_advance(document, errors)

    def can_go_back(self) -> bool:
        return self.step > FIRST_STEP

    def next(self, document: ResumeDocument, errors: Dict[str, str]) -> bool:
        """
        Advance one step if the completeness predicate holds.

        Returns:
            True if the step changed, False if blocked
        """
        reason = blocking_reason(self.step, document, errors)
        if reason:
            log_step_blocked(int(self.step), reason)
            return False

        old = self.step
        self.step = Step(min(self.step + 1, LAST_STEP))
        log_step_change(int(old), int(self.step))
        return True

    def back(self) -> bool:
        """
        Go back one step, clamped at the first step.

        Returns:
            True if the step changed, False when already at the first step
        """
        if not self.can_go_back():
            return False

        old = self.step
        self.step = Step(self.step - 1)
        log_step_change(int(old), int(self.step))
        return True

    def reset(self) -> None:
        self.step = FIRST_STEP

    def progress(self) -> List[Tuple[str, str]]:
        """
        Progress indicator entries.

        Returns:
            List of (label, state) with state in "complete", "active", "upcoming"
        """
        indicator = []
        for step in Step:
            if step == self.step:
                state = "active"
            elif step < self.step:
                state = "complete"
            else:
                state = "upcoming"
            indicator.append((STEP_LABELS[step], state))
        return indicator
