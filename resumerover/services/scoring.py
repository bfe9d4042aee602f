"""
ResumeRover - Keyword matching and score aggregation.
"""
from typing import List, NamedTuple, Optional, Sequence, Tuple

from ..config import EngineSettings, settings
from ..schemas import KeywordTerm, Priority, SkillCategory
from .tokenizer import TokenSet


class ScoreCard(NamedTuple):
    ats_score: int
    keyword_score: int
    skills_score: int


def round_score(value: float) -> int:
    """Round half up and clamp to [0, 100]."""
    return max(0, min(100, int(value + 0.5)))


def priority_weight(priority: Priority, config: Optional[EngineSettings] = None) -> int:
    config = config or settings.engine
    return {
        Priority.HIGH: config.high_weight,
        Priority.MEDIUM: config.medium_weight,
        Priority.LOW: config.low_weight,
    }[priority]


def match(resume: TokenSet, job_keywords: Sequence[KeywordTerm]) -> Tuple[List[KeywordTerm], List[KeywordTerm]]:
    """
    Split job keywords into (matched, missing).

    A keyword matches when the term, or a stemmed variant of it, occurs in the
    resume. Matched entries carry the resume's occurrence count; missing
    entries are returned unchanged. Job order is preserved in both lists.
    """
    matched = []
    missing = []
    seen = set()
    for keyword in job_keywords:
        if keyword.term in seen:
            continue
        seen.add(keyword.term)
        occurrences = resume.match_count(keyword.term)
        if occurrences:
            matched.append(KeywordTerm(term=keyword.term, count=occurrences, priority=keyword.priority))
        else:
            missing.append(keyword)
    return matched, missing


def keyword_score(
    matched: Sequence[KeywordTerm],
    missing: Sequence[KeywordTerm],
    config: Optional[EngineSettings] = None,
) -> int:
    """Priority-weighted share of job keywords found; 100 when the job has none."""
    matched_weight = sum(priority_weight(k.priority, config) for k in matched)
    total_weight = matched_weight + sum(priority_weight(k.priority, config) for k in missing)
    if total_weight == 0:
        return 100
    return round_score(matched_weight / total_weight * 100)


def skills_score(skills: Sequence[SkillCategory]) -> Optional[int]:
    """Mean coverage of categories with job-relevant terms, or None if there are none."""
    scored = [s.score for s in skills if s.matched_terms or s.missing_terms]
    if not scored:
        return None
    return round_score(sum(scored) / len(scored))


def score(
    matched: Sequence[KeywordTerm],
    missing: Sequence[KeywordTerm],
    skills: Sequence[SkillCategory],
    config: Optional[EngineSettings] = None,
) -> ScoreCard:
    """
    Aggregate sub-scores into the headline ATS score.

    When the job names no taxonomy skills at all, skillsScore cannot be
    measured and mirrors keywordScore, so atsScore rests on keywords alone.
    """
    config = config or settings.engine
    keywords = keyword_score(matched, missing, config)
    skills_value = skills_score(skills)
    if skills_value is None:
        skills_value = keywords

    total_weight = config.keyword_weight + config.skills_weight
    if total_weight <= 0:
        ats = keywords
    else:
        ats = round_score(
            (keywords * config.keyword_weight + skills_value * config.skills_weight) / total_weight
        )
    return ScoreCard(ats_score=ats, keyword_score=keywords, skills_score=skills_value)
