from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Annotated, List, Literal, Optional


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


SubScore = Annotated[int, Field(ge=0, le=100)]


class ContentScore(CamelModel):
    experience: SubScore
    skills: SubScore
    education: SubScore
    achievements: SubScore


class StructureScore(CamelModel):
    formatting: SubScore
    sections: SubScore
    length: SubScore
    readability: SubScore


class OptimizationScore(CamelModel):
    keywords: SubScore
    action_verbs: SubScore
    quantification: SubScore
    relevance: SubScore


class ResumeScore(CamelModel):
    overall: SubScore
    content: ContentScore
    structure: StructureScore
    optimization: OptimizationScore


class AdviceItem(CamelModel):
    category: str
    issue: str
    suggestion: str
    impact: Literal["critical", "high", "medium", "low"]
    examples: Optional[List[str]] = None


class ResumeInsights(CamelModel):
    word_count: int
    page_estimate: int
    experience_years: int
    skills_count: int
    quantified_achievements: int
    action_verbs_used: int
    contact_info_complete: bool
    sections_found: List[str]


class ResumeAnalysis(CamelModel):
    score: ResumeScore
    advice: List[AdviceItem]
    insights: ResumeInsights
    strengths: List[str]
    critical_issues: List[str]
    industry_match: SubScore


class TextAnalysisRequest(CamelModel):
    text: str
    backend: Optional[str] = None  # "heuristic" or "ai"


class ResumeReport(CamelModel):
    filename: Optional[str] = None
    backend: str
    rating: str
    analysis: ResumeAnalysis


def rating_for(overall: int) -> str:
    """Human-readable band for an overall score."""
    if overall >= 90:
        return "Exceptional"
    if overall >= 80:
        return "Excellent"
    if overall >= 70:
        return "Good"
    if overall >= 60:
        return "Average"
    if overall >= 50:
        return "Below Average"
    return "Needs Improvement"
