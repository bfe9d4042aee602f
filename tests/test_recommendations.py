from resumerover.config import EngineSettings
from resumerover.schemas import KeywordTerm, Priority, SkillCategory
from resumerover.services.recommendations import GENERAL_ADVICE, recommend


def kw(term, priority=Priority.HIGH, count=1):
    return KeywordTerm(term=term, count=count, priority=priority)


CLOUD_GAP = SkillCategory(category="Cloud Platforms", score=0, missing_terms=("aws",))
LANGUAGES_OK = SkillCategory(category="Programming Languages", score=100, matched_terms=("python",))


def test_high_priority_then_weak_skills_then_others():
    recs = recommend([kw("aws", count=2), kw("docker", Priority.LOW)], [LANGUAGES_OK, CLOUD_GAP])

    assert len(recs) == 3
    assert '"aws"' in recs[0] and "2 times" in recs[0]
    assert "Cloud Platforms" in recs[1] and "aws" in recs[1]
    assert "docker" in recs[2]
    assert not set(recs) & set(GENERAL_ADVICE)


def test_general_advice_when_nothing_important_is_missing():
    assert recommend([], [LANGUAGES_OK]) == list(GENERAL_ADVICE)


def test_low_priority_gaps_are_grouped():
    missing = [kw(term, Priority.LOW) for term in ("a1", "b2", "c3", "d4", "e5", "f6")]
    recs = recommend(missing, [])
    assert recs[0] == "Consider working these job keywords into your experience bullets: a1, b2, c3, d4, e5."
    assert recs[1:] == list(GENERAL_ADVICE)


def test_recommendations_are_capped():
    missing = [kw(f"term{i}") for i in range(15)]
    assert len(recommend(missing, [])) == 10
    assert len(recommend(missing, [], EngineSettings(max_recommendations=3))) == 3


def test_threshold_is_configurable():
    half = SkillCategory(category="Databases", score=50, missing_terms=("redis",))
    assert recommend([], [half]) == list(GENERAL_ADVICE)
    recs = recommend([], [half], EngineSettings(low_coverage_threshold=60))
    assert len(recs) == 1 and "Databases" in recs[0]


def test_recommend_is_deterministic():
    missing = [kw("aws"), kw("kafka", Priority.MEDIUM)]
    assert recommend(missing, [CLOUD_GAP]) == recommend(missing, [CLOUD_GAP])
