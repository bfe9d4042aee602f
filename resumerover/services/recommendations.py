"""
ResumeRover - Recommendation generator.

Turns the gaps found by the matcher into an ordered list of suggestions:

1. missing high-priority keywords
2. skill categories with low coverage
3. remaining missing keywords, grouped into one suggestion
4. general ATS formatting advice, only when neither 1 nor 2 applies

Output depends only on the inputs, so equal inputs give equal lists.
"""
from typing import List, Optional, Sequence

from ..config import EngineSettings, settings
from ..schemas import KeywordTerm, Priority, SkillCategory

GENERAL_ADVICE = (
    "Use clear section headings like 'Experience', 'Education', and 'Skills' so ATS parsers can find your content.",
    "Add quantifiable achievements (percentages, dollar amounts, team sizes) to your experience bullets.",
    "Use a single-column layout without tables, text boxes, or images for reliable ATS parsing.",
    "Start bullet points with strong action verbs such as 'Led', 'Developed', 'Implemented', or 'Improved'.",
    "Mirror the exact job title and key phrases from the posting in your summary.",
)


def _keyword_tip(keyword: KeywordTerm) -> str:
    if keyword.count > 1:
        return (
            f"Add \"{keyword.term}\" to your resume. The job description mentions it "
            f"{keyword.count} times and treats it as a high-priority requirement."
        )
    return f"Add \"{keyword.term}\" to your resume; it is a high-priority keyword for this role."


def _skill_tip(skill: SkillCategory) -> str:
    tip = f"Strengthen your {skill.category} coverage ({skill.score}% of the skills this job asks for)"
    if skill.missing_terms:
        return f"{tip}: mention {', '.join(skill.missing_terms[:3])} if you have hands-on experience."
    return f"{tip}."


def recommend(
    missing: Sequence[KeywordTerm],
    skills: Sequence[SkillCategory],
    config: Optional[EngineSettings] = None,
) -> List[str]:
    config = config or settings.engine
    recommendations = []

    high = [k for k in missing if k.priority == Priority.HIGH]
    recommendations.extend(_keyword_tip(k) for k in high)

    weak_skills = [s for s in skills if s.score < config.low_coverage_threshold]
    recommendations.extend(_skill_tip(s) for s in weak_skills)

    others = [k.term for k in missing if k.priority != Priority.HIGH]
    if others:
        recommendations.append(
            f"Consider working these job keywords into your experience bullets: {', '.join(others[:5])}."
        )

    if not high and not weak_skills:
        recommendations.extend(GENERAL_ADVICE)

    return recommendations[:config.max_recommendations]
