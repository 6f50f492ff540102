"""
Keyword and pattern tables used by the resume scorer.

Every list the scorer matches against lives here, grouped in one frozen
record so a scorer can be built against a different catalog (tests use
small fixture catalogs) without touching the scoring code.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

CATALOG_VERSION = "2024.1"

# Canonical section order; sectionsFound is always reported in this order.
SECTION_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    'experience': ('experience', 'employment', 'work history', 'professional background'),
    'education': ('education', 'academic', 'university', 'college', 'degree'),
    'skills': ('skills', 'technical skills', 'competencies', 'technologies'),
    'contact': ('contact', 'email', 'phone', 'linkedin', '@'),
    'summary': ('summary', 'objective', 'profile', 'about me'),
    'projects': ('projects', 'portfolio'),
    'certifications': ('certifications', 'certificates', 'licenses'),
    'awards': ('awards', 'honors', 'achievements', 'recognition'),
}

SKILL_TERMS: Tuple[str, ...] = (
    # languages
    'javascript', 'typescript', 'python', 'java', 'c++', 'c#', 'ruby',
    'php', 'swift', 'kotlin', 'rust', 'scala',
    # frameworks
    'react', 'angular', 'vue', 'node', 'django', 'flask', 'spring',
    'express', '.net',
    # data
    'sql', 'mysql', 'postgresql', 'mongodb', 'redis', 'graphql',
    # platforms and tooling
    'aws', 'azure', 'gcp', 'docker', 'kubernetes', 'git', 'linux',
    'html', 'css', 'rest api',
    # soft skills
    'leadership', 'communication', 'teamwork', 'problem solving',
    'project management', 'time management', 'critical thinking',
)

SOFT_SKILLS: Tuple[str, ...] = (
    'leadership', 'communication', 'teamwork', 'problem solving', 'analytical',
    'creative', 'adaptable', 'organized', 'collaboration',
)

ACTION_VERBS: Tuple[str, ...] = (
    'managed', 'led', 'developed', 'created', 'implemented', 'designed',
    'coordinated', 'supervised', 'achieved', 'improved', 'increased',
    'reduced', 'launched', 'built', 'optimized', 'streamlined',
    'delivered', 'established', 'negotiated', 'spearheaded',
)

RESPONSIBILITY_VERBS: Tuple[str, ...] = (
    'managed', 'led', 'developed', 'created', 'implemented', 'designed',
    'coordinated', 'supervised', 'built', 'launched', 'delivered',
)

JOB_TITLES: Tuple[str, ...] = (
    'engineer', 'developer', 'manager', 'analyst', 'designer', 'consultant',
    'director', 'architect', 'specialist', 'coordinator', 'administrator',
    'lead', 'intern', 'associate', 'scientist', 'officer',
)

DOCTORATE_TERMS: Tuple[str, ...] = ('phd', 'ph.d', 'doctorate')
MASTER_TERMS: Tuple[str, ...] = ('master', 'mba', 'm.s.', 'msc')
BACHELOR_TERMS: Tuple[str, ...] = ('bachelor', 'b.s.', 'b.a.', 'bsc', 'b.tech')
EDUCATION_TERMS: Tuple[str, ...] = (
    'university', 'college', 'degree', 'diploma', 'graduate', 'school',
    'course', 'training',
)
CERTIFICATION_TERMS: Tuple[str, ...] = (
    'certified', 'certification', 'certificate', 'license', 'accredited',
)

ACHIEVEMENT_WORDS: Tuple[str, ...] = (
    'increased', 'improved', 'reduced', 'achieved', 'awarded', 'recognized',
    'promoted', 'saved', 'generated', 'won', 'exceeded', 'grew',
)

INDUSTRY_KEYWORDS: Tuple[str, ...] = (
    # technical
    'agile', 'scrum', 'devops', 'ci/cd', 'microservices', 'api', 'database',
    'frontend', 'backend', 'full stack', 'cloud', 'mobile',
    'machine learning', 'data analysis', 'automation', 'testing',
    # business
    'stakeholder', 'strategy', 'budget', 'revenue', 'roi', 'kpi',
    'operations', 'process improvement',
    # professional
    'cross-functional', 'leadership', 'mentoring', 'collaboration',
    'client', 'compliance',
)

QUANTIFIED_PATTERNS: Tuple[str, ...] = (
    r'\d+%',
    r'\$\d+',
    r'\d+\s*(?:million|thousand|k)',
    r'\d+\s*(?:years?|months?)',
    r'\d+\s*(?:people|team|members)',
    r'\d+\s*(?:projects?|clients?|customers?)',
)

PHONE_PATTERN = r'\d{3}[-.\s]?\d{3}[-.\s]?\d{4}'
BULLET_GLYPHS = '•·▪▫‣⁃'


@dataclass(frozen=True)
class KeywordCatalog:
    version: str = CATALOG_VERSION
    section_synonyms: Dict[str, Tuple[str, ...]] = field(
        default_factory=lambda: dict(SECTION_SYNONYMS))
    skill_terms: Tuple[str, ...] = SKILL_TERMS
    soft_skills: Tuple[str, ...] = SOFT_SKILLS
    action_verbs: Tuple[str, ...] = ACTION_VERBS
    responsibility_verbs: Tuple[str, ...] = RESPONSIBILITY_VERBS
    job_titles: Tuple[str, ...] = JOB_TITLES
    doctorate_terms: Tuple[str, ...] = DOCTORATE_TERMS
    master_terms: Tuple[str, ...] = MASTER_TERMS
    bachelor_terms: Tuple[str, ...] = BACHELOR_TERMS
    education_terms: Tuple[str, ...] = EDUCATION_TERMS
    certification_terms: Tuple[str, ...] = CERTIFICATION_TERMS
    achievement_words: Tuple[str, ...] = ACHIEVEMENT_WORDS
    industry_keywords: Tuple[str, ...] = INDUSTRY_KEYWORDS
    quantified_patterns: Tuple[str, ...] = QUANTIFIED_PATTERNS
    phone_pattern: str = PHONE_PATTERN
    bullet_glyphs: str = BULLET_GLYPHS


DEFAULT_CATALOG = KeywordCatalog()
