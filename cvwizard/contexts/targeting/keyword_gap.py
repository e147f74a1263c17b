"""
Keyword Gap Analyzer

Finds significant job description terms that do not appear anywhere in the
resume text.

Pipeline:
1. Lowercase; in the job description replace everything outside [a-z0-9] and
   whitespace with a space
2. Split on whitespace, drop short tokens and stop words
3. Deduplicate, keeping first-occurrence order
4. Keep tokens that are not a substring of the lowercased resume text

Presence is a substring check, not a token match: "java" counts as present in a
resume mentioning "javascript". Keep it that way; switching to exact token
matching changes which keywords are reported.

Usage:
    from cvwizard.contexts.targeting.keyword_gap import find_missing_keywords

    find_missing_keywords("Looking for a Python developer with AWS experience", "python")
    # ['looking', 'developer', 'aws', 'experience']
"""

import re
from functools import lru_cache
from typing import Callable, FrozenSet, List, Optional

import nltk
from nltk.corpus import stopwords

from cvwizard.contexts.authoring.document import ResumeDocument
from cvwizard.contexts.targeting.logger import log_keyword_analysis

# Tokens shorter than this are never keywords
MIN_TOKEN_LENGTH = 3

NON_ALPHANUMERIC = re.compile(r"[^a-z0-9\s]")

# Filler common in job postings that NLTK's English list does not cover
EXTRA_STOPWORDS = frozenset(
    {"also", "could", "etc", "however", "may", "might", "must", "per", "upon", "via", "within", "without", "would", "yet"}
)


@lru_cache(maxsize=None)
def load_stopwords() -> FrozenSet[str]:
    """NLTK English stopwords plus EXTRA_STOPWORDS, downloading the corpus if necessary."""
    try:
        words = stopwords.words("english")
    except LookupError:
        nltk.download("stopwords", quiet=True)
        words = stopwords.words("english")
    return frozenset(words) | EXTRA_STOPWORDS


def normalize_job_description(job_description: str) -> str:
    """Lowercase and replace every character outside [a-z0-9] and whitespace with a space."""
    return NON_ALPHANUMERIC.sub(" ", job_description.lower())


def extract_keywords(job_description: str, min_token_length: int = MIN_TOKEN_LENGTH) -> List[str]:
    """
    Significant terms of a job description, deduplicated in first-occurrence order.

    Args:
        job_description: Free text job description
        min_token_length: Tokens shorter than this are dropped

    Returns:
        List of unique lowercase tokens that are neither short nor stop words
    """
    stop = load_stopwords()
    keywords = {}
    for token in normalize_job_description(job_description).split():
        if len(token) < min_token_length or token in stop:
            continue
        keywords.setdefault(token, None)
    return list(keywords)


def build_resume_text(document: ResumeDocument) -> str:
    """
    Assemble the text searched for keywords.

    Includes the summary, every skill and hobby, role/company/description of each
    experience entry and degree/institution of each education entry.
    """
    parts = [document.summary]
    parts.extend(document.skills)
    parts.extend(document.hobbies)
    for entry in document.experience:
        parts.extend((entry.role, entry.company, entry.description))
    for entry in document.education:
        parts.extend((entry.degree, entry.institution))
    return " ".join(part for part in parts if part)


def find_missing_keywords(
    job_description: str, resume_text: str, min_token_length: int = MIN_TOKEN_LENGTH
) -> List[str]:
    """
    Job description keywords that do not occur in the resume text.

    Args:
        job_description: Free text job description; blank means no analysis
        resume_text: Text to search (see build_resume_text)
        min_token_length: Minimum keyword length

    Returns:
        Missing keywords in first-occurrence order (empty for a blank job description)
    """
    if not job_description or not job_description.strip():
        return []

    haystack = (resume_text or "").lower()
    keywords = extract_keywords(job_description, min_token_length)
    missing = [keyword for keyword in keywords if keyword not in haystack]

    log_keyword_analysis(len(keywords), len(missing))
    return missing


class KeywordGapAnalyzer:
    """
    Keeps the missing-keyword result of a session up to date.

    The analyzer subscribes to an AuthoringSession and recomputes whenever the
    resume text or the job description changes. Results are cached so repeated
    reads are free.

    Attributes:
        job_description: Current job description text
        missing_keywords: Last computed result
    """

    def __init__(self, job_description: str = "", min_token_length: int = MIN_TOKEN_LENGTH):
        self.job_description = job_description
        self.min_token_length = min_token_length
        self.missing_keywords: List[str] = []
        self._resume_text = ""
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._recompute()

    def attach(self, session) -> "KeywordGapAnalyzer":
        """Start following a session's document."""
        self.detach()
        self._unsubscribe = session.subscribe(self._on_session_change)
        self._on_session_change(session)
        return self

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def set_job_description(self, job_description: str) -> List[str]:
        """Replace the job description and recompute."""
        if job_description != self.job_description:
            self.job_description = job_description
            self._recompute()
        return self.missing_keywords

    def update_resume_text(self, resume_text: str) -> List[str]:
        """Replace the resume text and recompute when it changed."""
        if resume_text != self._resume_text:
            self._resume_text = resume_text
            self._recompute()
        return self.missing_keywords

    def _on_session_change(self, session) -> None:
        self.update_resume_text(build_resume_text(session.document))

    def _recompute(self) -> None:
        self.missing_keywords = find_missing_keywords(
            self.job_description, self._resume_text, self.min_token_length
        )
