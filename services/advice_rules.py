from dataclasses import dataclass
from typing import Any, Callable, List
from models.resume_models import AdviceItem, ResumeInsights, ResumeScore


@dataclass(frozen=True)
class Rule:
    """A threshold check: when ``predicate`` holds, ``build()`` is emitted."""
    name: str
    predicate: Callable[[ResumeScore, ResumeInsights], bool]
    build: Callable[[], Any]


def evaluate_rules(rules: List[Rule], score: ResumeScore,
                   insights: ResumeInsights) -> List[Any]:
    """Run rules in order and collect the output of every rule that fires."""
    return [rule.build() for rule in rules if rule.predicate(score, insights)]


def _advice(category, issue, suggestion, impact, examples=None):
    return lambda: AdviceItem(
        category=category,
        issue=issue,
        suggestion=suggestion,
        impact=impact,
        examples=list(examples) if examples else None,
    )


def _message(text):
    return lambda: text


# Critical checks first; order is part of the output contract.
ADVICE_RULES: List[Rule] = [
    Rule(
        'missing_contact_info',
        lambda s, i: not i.contact_info_complete,
        _advice(
            'Contact Information',
            "Your resume is missing a complete way to reach you. Recruiters "
            "need both an email address and a phone number.",
            "Add your email address and phone number at the top of the "
            "resume, right under your name.",
            'critical',
            [
                'jane.smith@email.com | (555) 123-4567',
                'City, State | linkedin.com/in/janesmith',
            ],
        ),
    ),
    Rule(
        'weak_experience',
        lambda s, i: s.content.experience < 50,
        _advice(
            'Work Experience',
            "Your work history is hard to follow. It is missing job titles, "
            "dates or a description of what you did.",
            "List each job with your title, the company, the dates you worked "
            "there and 3-5 bullet points describing what you were responsible "
            "for.",
            'critical',
            [
                'Software Developer, Acme Corp (2019 - 2023)',
                'Managed a team of 4 developers building the customer portal',
            ],
        ),
    ),
    Rule(
        'few_quantified_achievements',
        lambda s, i: i.quantified_achievements < 3,
        _advice(
            'Achievements',
            "Your resume describes tasks but shows few measurable results.",
            "Add numbers that show the size and impact of your work: "
            "percentages, money saved, people managed or projects delivered.",
            'high',
            [
                'Reduced customer support tickets by 30%',
                'Managed a $50,000 annual budget',
                'Trained 12 new team members',
            ],
        ),
    ),
    Rule(
        'weak_action_verbs',
        lambda s, i: s.optimization.action_verbs < 60,
        _advice(
            'Language',
            "Many bullet points start with weak phrases like "
            "'responsible for' or 'helped with'.",
            "Start each bullet point with a strong action verb that says "
            "what you did.",
            'high',
            [
                "Instead of 'Responsible for sales', write 'Increased sales by 15%'",
                "Instead of 'Helped with hiring', write 'Coordinated hiring for 3 teams'",
            ],
        ),
    ),
    Rule(
        'too_short',
        lambda s, i: i.word_count < 300,
        _advice(
            'Content Length',
            "Your resume is too brief to show what you can do.",
            "Expand your job descriptions and add sections such as a summary, "
            "projects or certifications. Aim for 400-800 words.",
            'high',
        ),
    ),
    Rule(
        'too_long',
        lambda s, i: i.word_count > 1000,
        _advice(
            'Content Length',
            "Your resume is longer than most recruiters will read.",
            "Cut older or less relevant roles down to one or two lines and "
            "keep the resume to 1-2 pages.",
            'medium',
        ),
    ),
    Rule(
        'weak_skills',
        lambda s, i: s.content.skills < 60,
        _advice(
            'Skills Section',
            "Your skills are missing or hard to find.",
            "Add a dedicated Skills section listing the tools, technologies "
            "and soft skills that match the jobs you want.",
            'medium',
            [
                'Technical: Python, SQL, Excel, Salesforce',
                'Soft skills: Communication, Leadership, Problem Solving',
            ],
        ),
    ),
    Rule(
        'few_keywords',
        lambda s, i: s.optimization.keywords < 50,
        _advice(
            'Keywords',
            "Your resume uses few of the terms employers search for.",
            "Read a few job postings for your target role and work their key "
            "terms into your experience and skills sections.",
            'medium',
        ),
    ),
    Rule(
        'missing_sections',
        lambda s, i: s.structure.sections < 70,
        _advice(
            'Structure',
            "Your resume is missing some of the standard sections employers "
            "expect.",
            "Use clear headings for Contact, Summary, Experience, Education "
            "and Skills so readers can find information quickly.",
            'medium',
        ),
    ),
]

STRENGTH_RULES: List[Rule] = [
    Rule('strong_experience', lambda s, i: s.content.experience >= 80,
         _message('Strong, well-described work experience')),
    Rule('strong_skills', lambda s, i: s.content.skills >= 80,
         _message('Comprehensive and relevant skill set')),
    Rule('strong_education', lambda s, i: s.content.education >= 80,
         _message('Solid educational background')),
    Rule('strong_formatting', lambda s, i: s.structure.formatting >= 80,
         _message('Clean, well-organized format')),
    Rule('strong_quantification', lambda s, i: s.optimization.quantification >= 80,
         _message('Achievements backed by numbers and results')),
    Rule('strong_action_verbs', lambda s, i: s.optimization.action_verbs >= 80,
         _message('Confident use of action verbs')),
    Rule('seasoned', lambda s, i: i.experience_years >= 5,
         _message('Several years of professional experience')),
    Rule('contact_complete', lambda s, i: i.contact_info_complete,
         _message('Complete contact information')),
]

CRITICAL_ISSUE_RULES: List[Rule] = [
    Rule('no_contact', lambda s, i: not i.contact_info_complete,
         _message('Missing email address or phone number')),
    Rule('thin_experience', lambda s, i: s.content.experience < 40,
         _message('Work experience is missing or too vague')),
    Rule('no_results', lambda s, i: i.quantified_achievements == 0,
         _message('No measurable achievements or results')),
    Rule('few_sections', lambda s, i: s.structure.sections < 50,
         _message('Key resume sections are missing')),
    Rule('too_short', lambda s, i: i.word_count < 200,
         _message('Resume is far too short')),
    Rule('passive_language', lambda s, i: s.optimization.action_verbs < 30,
         _message('Very few action verbs describing your work')),
]
