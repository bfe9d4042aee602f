"""
ResumeRover - Keyword and skill extraction.

Job descriptions are the "requirements" side: their terms are ranked into
prioritized KeywordTerms. Resumes are the "evidence" side: their coverage of
each skill category the job cares about becomes a SkillCategory score.
"""
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..config import EngineSettings, settings
from ..schemas import KeywordTerm, Priority, SkillCategory
from .scoring import round_score
from .taxonomy import CATEGORY_LABELS, SKILL_TERMS, TITLE_FILLER
from .tokenizer import TokenSet, normalize_term, stem


def _load_taxonomy() -> Tuple[Mapping[str, Tuple[str, ...]], Mapping[str, str]]:
    """Normalize taxonomy terms once; variants sharing a stem are kept once per category."""
    categories: Dict[str, Tuple[str, ...]] = {}
    index: Dict[str, str] = {}
    for category, terms in SKILL_TERMS.items():
        seen = set()
        normalized = []
        for term in terms:
            value = normalize_term(term)
            if not value or stem(value) in seen:
                continue
            seen.add(stem(value))
            normalized.append(value)
            index.setdefault(value, category)
        categories[category] = tuple(normalized)
    return MappingProxyType(categories), MappingProxyType(index)


SKILL_CATEGORIES, SKILL_INDEX = _load_taxonomy()


def is_skill(term: str) -> bool:
    return term in SKILL_INDEX


def _priority(term: str, count: int, in_title: bool) -> Priority:
    if is_skill(term) or in_title or count >= 3:
        return Priority.HIGH
    if count == 2 or ' ' in term:
        return Priority.MEDIUM
    return Priority.LOW


def _candidates(job: TokenSet, config: EngineSettings) -> List[str]:
    terms = [term for term in dict.fromkeys(job.tokens) if term not in TITLE_FILLER]
    for phrase in dict.fromkeys(job.phrases):
        if is_skill(phrase) or job.count(phrase) >= config.phrase_min_count:
            terms.append(phrase)

    # A term that only ever occurs inside a longer candidate is carried by it
    containing: Dict[str, int] = {}
    for term in terms:
        words = term.split(' ')
        occurrences = job.count(term)
        for n in range(1, len(words)):
            for i in range(len(words) - n + 1):
                part = ' '.join(words[i:i + n])
                containing[part] = max(containing.get(part, 0), occurrences)

    return [
        term for term in terms
        if is_skill(term) or containing.get(term, 0) < job.count(term)
    ]


def extract_keywords(
    job: TokenSet,
    title: Optional[TokenSet] = None,
    config: Optional[EngineSettings] = None,
) -> List[KeywordTerm]:
    """
    Rank job description terms into prioritized keywords.

    Rank = occurrences + position boost (term in the job title or within the
    first ``title_window`` tokens) + skill boost (taxonomy term). Ties break
    on occurrences, then alphabetically, so the output is deterministic.
    """
    config = config or settings.engine
    ranked = []
    for term in _candidates(job, config):
        count = job.count(term)
        in_title = job.positions[term] < config.title_window or (
            title is not None and title.count(term) > 0
        )
        rank = float(count)
        if in_title:
            rank += config.position_boost
        if is_skill(term):
            rank += config.skill_boost
        ranked.append((rank, count, term, in_title))

    ranked.sort(key=lambda item: (-item[0], -item[1], item[2]))

    return [
        KeywordTerm(term=term, count=count, priority=_priority(term, count, in_title))
        for _, count, term, in_title in ranked[:config.max_keywords]
    ]


def extract_skills(resume: TokenSet, job: TokenSet) -> List[SkillCategory]:
    """
    Score resume coverage for each skill category the job mentions.

    Only taxonomy terms present in the job description count; categories the
    job never touches are left out rather than reported as 0 or 100.
    """
    results = []
    for category, terms in SKILL_CATEGORIES.items():
        relevant = [term for term in terms if job.match_count(term) > 0]
        if not relevant:
            continue
        matched = tuple(term for term in relevant if resume.match_count(term) > 0)
        missing = tuple(term for term in relevant if term not in matched)
        results.append(SkillCategory(
            category=CATEGORY_LABELS[category],
            score=round_score(len(matched) / len(relevant) * 100),
            matched_terms=matched,
            missing_terms=missing,
        ))
    return results
