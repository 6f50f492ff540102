import math
import re
from datetime import date
from typing import Dict, List, Optional
from models.resume_models import (
    ContentScore,
    OptimizationScore,
    ResumeAnalysis,
    ResumeInsights,
    ResumeScore,
    StructureScore,
)
from services.advice_rules import (
    ADVICE_RULES,
    CRITICAL_ISSUE_RULES,
    STRENGTH_RULES,
    evaluate_rules,
)
from services.keyword_catalog import DEFAULT_CATALOG, KeywordCatalog
import logging

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ('experience', 'education', 'skills', 'contact')
OPTIONAL_SECTIONS = ('summary', 'projects', 'certifications', 'awards')
CORE_SECTIONS = ('experience', 'education', 'skills')

WORDS_PER_PAGE = 250
EARLIEST_YEAR = 1990

# Category weights for the overall score
CONTENT_WEIGHT = 0.4
STRUCTURE_WEIGHT = 0.35
OPTIMIZATION_WEIGHT = 0.25


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (Python's round() is banker's)."""
    return int(math.floor(round(value, 9) + 0.5))


def clamp(value: float, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, round_half_up(value)))


def count_terms(text: str, terms) -> int:
    """Number of distinct terms that occur as substrings of text."""
    return sum(1 for term in terms if term in text)


class ATSScorer:
    """
    Deterministic, rule-based resume scorer.

    All methods are pure functions of the text passed in; the scorer keeps
    no state between analyses besides its catalog and reference year.
    """

    def __init__(self, catalog: KeywordCatalog = DEFAULT_CATALOG,
                 current_year: Optional[int] = None):
        self.catalog = catalog
        self.current_year = current_year or date.today().year
        self.quantified_patterns = [
            re.compile(pattern) for pattern in catalog.quantified_patterns
        ]
        self.phone_pattern = re.compile(catalog.phone_pattern)

    def analyze_resume(self, text: str) -> ResumeAnalysis:
        """
        Analyze resume text and return the full scored report
        """
        insights = self.extract_insights(text)
        score = self.calculate_score(insights, text)

        advice = evaluate_rules(ADVICE_RULES, score, insights)
        strengths = evaluate_rules(STRENGTH_RULES, score, insights)
        critical_issues = evaluate_rules(CRITICAL_ISSUE_RULES, score, insights)
        industry_match = self.calculate_industry_match(score.optimization)

        logger.info(f"Analyzed resume: {insights.word_count} words, overall score {score.overall}")

        return ResumeAnalysis(
            score=score,
            advice=advice,
            insights=insights,
            strengths=strengths,
            critical_issues=critical_issues,
            industry_match=industry_match,
        )

    # ------------------------------------------------------------------
    # Insights
    # ------------------------------------------------------------------

    def extract_insights(self, text: str) -> ResumeInsights:
        """
        Derive the structural facts every calculator works from
        """
        text_lower = text.lower()
        word_count = len(text_lower.split())

        return ResumeInsights(
            word_count=word_count,
            page_estimate=math.ceil(word_count / WORDS_PER_PAGE),
            experience_years=self.estimate_experience_years(text_lower),
            skills_count=count_terms(text_lower, self.catalog.skill_terms),
            quantified_achievements=self.count_quantified_achievements(text_lower),
            action_verbs_used=count_terms(text_lower, self.catalog.action_verbs),
            contact_info_complete=self.has_contact_info(text_lower),
            sections_found=self.detect_sections(text_lower),
        )

    def find_years(self, text: str) -> List[int]:
        """Every 4-digit run that falls within 1990..current year."""
        return [
            int(match) for match in re.findall(r'\d{4}', text)
            if EARLIEST_YEAR <= int(match) <= self.current_year
        ]

    def estimate_experience_years(self, text: str) -> int:
        """Span between the earliest and latest plausible year mentioned."""
        years = self.find_years(text)
        if len(years) < 2:
            return 0
        return max(years) - min(years)

    def count_quantified_achievements(self, text: str) -> int:
        return sum(len(pattern.findall(text)) for pattern in self.quantified_patterns)

    def has_contact_info(self, text: str) -> bool:
        return '@' in text and self.phone_pattern.search(text) is not None

    def detect_sections(self, text: str) -> List[str]:
        return [
            section for section, synonyms in self.catalog.section_synonyms.items()
            if any(synonym in text for synonym in synonyms)
        ]

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def score_experience(self, insights: ResumeInsights, text: str) -> int:
        """Score depth of work history"""
        text_lower = text.lower()
        years = insights.experience_years
        if years >= 10:
            score = 40
        elif years >= 5:
            score = 35
        elif years >= 3:
            score = 25
        elif years >= 1:
            score = 15
        else:
            score = 5

        title_count = count_terms(text_lower, self.catalog.job_titles)
        verb_count = count_terms(text_lower, self.catalog.responsibility_verbs)
        score += min(title_count * 6, 30)
        score += min(verb_count * 3, 30)

        return clamp(score)

    def score_skills(self, insights: ResumeInsights, text: str) -> int:
        """Score breadth of technical and soft skills"""
        score = min(insights.skills_count * 4, 50)
        if 'skills' in insights.sections_found:
            score += 25
        soft_count = count_terms(text.lower(), self.catalog.soft_skills)
        score += min(soft_count * 5, 25)
        return clamp(score)

    def score_education(self, insights: ResumeInsights, text: str) -> int:
        """Score education; only the highest degree tier counts"""
        text_lower = text.lower()
        score = 30

        if count_terms(text_lower, self.catalog.doctorate_terms):
            score += 40
        elif count_terms(text_lower, self.catalog.master_terms):
            score += 35
        elif count_terms(text_lower, self.catalog.bachelor_terms):
            score += 25
        elif count_terms(text_lower, self.catalog.education_terms):
            score += 15

        cert_count = count_terms(text_lower, self.catalog.certification_terms)
        score += min(cert_count * 10, 30)
        return clamp(score)

    def score_achievements(self, insights: ResumeInsights, text: str) -> int:
        score = min(insights.quantified_achievements * 12, 60)
        word_count = count_terms(text.lower(), self.catalog.achievement_words)
        score += min(word_count * 5, 40)
        return clamp(score)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def score_formatting(self, insights: ResumeInsights, text: str) -> int:
        """Analyze resume format and structure"""
        score = 30 if insights.contact_info_complete else 10

        core_found = len([s for s in CORE_SECTIONS if s in insights.sections_found])
        score += core_found / len(CORE_SECTIONS) * 35

        if self.find_years(text):
            score += 15
        if len(insights.sections_found) >= 3:
            score += 20

        return clamp(score)

    def score_sections(self, insights: ResumeInsights, text: str) -> int:
        required = len([s for s in REQUIRED_SECTIONS if s in insights.sections_found])
        optional = len([s for s in OPTIONAL_SECTIONS if s in insights.sections_found])
        score = required / len(REQUIRED_SECTIONS) * 70 + min(optional * 7.5, 30)
        return clamp(score)

    def score_length(self, insights: ResumeInsights, text: str) -> int:
        """Score text length (not too short, not too long)"""
        words = insights.word_count
        if 400 <= words <= 800:
            return 100
        if 300 <= words <= 1000:
            return 85
        if 200 <= words <= 1200:
            return 70
        if words < 200:
            return 30
        return 50

    def score_readability(self, insights: ResumeInsights, text: str) -> int:
        """Score line density and use of bullet points"""
        score = 50

        lines = [line for line in text.split('\n') if line.strip()]
        if lines:
            words_per_line = sum(len(line.split()) for line in lines) / len(lines)
            if 8 <= words_per_line <= 15:
                score += 25

        # Glyphs are matched on the original text, before lowercasing
        bullets = sum(text.count(glyph) for glyph in self.catalog.bullet_glyphs)
        score += min(bullets * 2, 25)

        return clamp(score)

    # ------------------------------------------------------------------
    # Optimization
    # ------------------------------------------------------------------

    def score_keywords(self, insights: ResumeInsights, text: str) -> int:
        hits = count_terms(text.lower(), self.catalog.industry_keywords)
        return clamp(min(hits * 5, 100))

    def score_action_verbs(self, insights: ResumeInsights, text: str) -> int:
        return clamp(min(insights.action_verbs_used * 8, 100))

    def score_quantification(self, insights: ResumeInsights, text: str) -> int:
        numbers = len(re.findall(r'\d+', text))
        percents = len(re.findall(r'\d+%', text))
        amounts = len(re.findall(r'\$\d+', text))
        return clamp(min((numbers + percents * 2 + amounts * 2) * 3, 100))

    def score_relevance(self, insights: ResumeInsights, text: str,
                        keywords_score: Optional[int] = None) -> int:
        """Score how current and on-target the resume reads"""
        if keywords_score is None:
            keywords_score = self.score_keywords(insights, text)

        score = 60
        if keywords_score > 30:
            score += 25
        recent_years = range(self.current_year - 4, self.current_year + 1)
        if any(str(year) in text for year in recent_years):
            score += 15
        return clamp(score)

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    def calculate_score(self, insights: ResumeInsights, text: str) -> ResumeScore:
        keywords = self.score_keywords(insights, text)

        content = ContentScore(
            experience=self.score_experience(insights, text),
            skills=self.score_skills(insights, text),
            education=self.score_education(insights, text),
            achievements=self.score_achievements(insights, text),
        )
        structure = StructureScore(
            formatting=self.score_formatting(insights, text),
            sections=self.score_sections(insights, text),
            length=self.score_length(insights, text),
            readability=self.score_readability(insights, text),
        )
        optimization = OptimizationScore(
            keywords=keywords,
            action_verbs=self.score_action_verbs(insights, text),
            quantification=self.score_quantification(insights, text),
            relevance=self.score_relevance(insights, text, keywords),
        )

        logger.debug(
            f"Sub-scores: content={content.model_dump()} "
            f"structure={structure.model_dump()} optimization={optimization.model_dump()}"
        )
        return self.aggregate(content, structure, optimization)

    def aggregate(self, content: ContentScore, structure: StructureScore,
                  optimization: OptimizationScore) -> ResumeScore:
        """Combine category averages into the weighted overall score"""
        overall = round_half_up(
            self.category_average(content) * CONTENT_WEIGHT +
            self.category_average(structure) * STRUCTURE_WEIGHT +
            self.category_average(optimization) * OPTIMIZATION_WEIGHT
        )
        return ResumeScore(
            overall=overall,
            content=content,
            structure=structure,
            optimization=optimization,
        )

    @staticmethod
    def category_average(category) -> float:
        values: Dict[str, int] = category.model_dump()
        return sum(values.values()) / len(values)

    def calculate_industry_match(self, optimization: OptimizationScore) -> int:
        return round_half_up(min(optimization.keywords + optimization.relevance, 100) / 2)
