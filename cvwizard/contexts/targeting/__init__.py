"""
Targeting Context

Responsibilities:
- Compares resume text against a target job description
- Reports significant job description terms missing from the resume

Owns: Keyword extraction and gap analysis
Never: Edits resume content
"""

from cvwizard.contexts.targeting.keyword_gap import (
    KeywordGapAnalyzer,
    build_resume_text,
    extract_keywords,
    find_missing_keywords,
)

__all__ = [
    "KeywordGapAnalyzer",
    "build_resume_text",
    "extract_keywords",
    "find_missing_keywords",
]
