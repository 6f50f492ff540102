"""
Remote resume analyzer backed by an OpenAI chat-completion model.

Produces the same ResumeAnalysis schema as the heuristic ATSScorer so the
two backends are interchangeable. The reply is free text; the first
top-level JSON object in it is parsed and validated. Any failure is
reported as a single generic AnalysisError.
"""

import json
import re
from typing import Optional
from jinja2 import Template
from pydantic import ValidationError
from models.resume_models import ResumeAnalysis
import logging

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to analyze resume with AI. Please try again."

REQUIRED_FIELDS = ('score', 'advice', 'insights', 'strengths', 'criticalIssues', 'industryMatch')
REQUIRED_SCORE_FIELDS = ('overall', 'content', 'structure', 'optimization')

SYSTEM_PROMPT = (
    "You are an experienced HR professional and career coach. Provide practical, "
    "realistic resume feedback that normal people can understand and implement. "
    "Focus on what actually helps people get jobs."
)

ANALYSIS_PROMPT = Template('''
You are an experienced HR professional and career coach who has reviewed thousands of resumes. Analyze this resume and provide practical, realistic feedback that anyone can understand and implement.

Resume Content:
"""
{{ resume_text }}
"""

Please analyze this resume and return a JSON response with the following structure. Be realistic in your scoring - most resumes have room for improvement:

{
  "score": {
    "overall": number (0-100, be realistic - average resumes score 60-75),
    "content": {
      "experience": number (0-100, based on how well work history is described),
      "skills": number (0-100, based on relevant skills listed),
      "education": number (0-100, based on educational background),
      "achievements": number (0-100, based on specific accomplishments mentioned)
    },
    "structure": {
      "formatting": number (0-100, how professional and organized it looks),
      "sections": number (0-100, has key sections like contact, experience, education),
      "length": number (0-100, appropriate length - not too short or long),
      "readability": number (0-100, easy to scan and read quickly)
    },
    "optimization": {
      "keywords": number (0-100, uses relevant job-related terms),
      "actionVerbs": number (0-100, uses strong verbs like "managed", "created"),
      "quantification": number (0-100, includes numbers, percentages, results),
      "relevance": number (0-100, content matches typical job requirements)
    }
  },
  "advice": [
    {
      "category": "string (e.g., 'Work Experience', 'Contact Info', 'Skills')",
      "issue": "string (clear, simple explanation of what's missing or wrong)",
      "suggestion": "string (specific, actionable advice anyone can follow)",
      "impact": "critical|high|medium|low",
      "examples": ["practical examples they can use"]
    }
  ],
  "insights": {
    "wordCount": number,
    "pageEstimate": number,
    "experienceYears": number (estimate from dates/content),
    "skillsCount": number (count of skills mentioned),
    "quantifiedAchievements": number (count of numbers/results mentioned),
    "actionVerbsUsed": number,
    "contactInfoComplete": boolean,
    "sectionsFound": ["list of sections like contact, experience, education, skills"]
  },
  "strengths": ["list of what this person is doing well"],
  "criticalIssues": ["list of major problems that need immediate attention"],
  "industryMatch": number (0-100, how well it matches common job requirements)
}

Use whole numbers for every score. Focus on practical advice:
{% for point in guidance %}- {{ point }}
{% endfor %}
Common issues to look for:
{% for issue in common_issues %}- {{ issue }}
{% endfor %}
Provide advice that helps them get interviews, not just pass automated systems.
''')

GUIDANCE = [
    "Use simple language, not HR jargon",
    "Give specific examples they can copy",
    "Focus on what employers actually look for",
    "Be encouraging but honest",
    "Suggest realistic improvements",
    "Consider that most people aren't professional writers",
]

COMMON_ISSUES = [
    "Missing contact information",
    "Vague job descriptions",
    "No specific achievements or results",
    "Too long or too short",
    "Poor formatting or organization",
    "Generic skills lists",
    "Outdated information",
    "Spelling/grammar errors",
    "Missing key sections",
]


class AnalysisError(Exception):
    """Raised when the remote analyzer cannot produce a complete analysis."""


class AIResumeAnalyzer:
    def __init__(self, api_key: str, model: str = "gpt-4o-mini", client=None,
                 temperature: float = 0.3, max_tokens: int = 2500):
        if not api_key and client is None:
            raise AnalysisError("An OpenAI API key is required for AI analysis")
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client = client

    @property
    def client(self):
        if self._client is None:
            from openai import OpenAI
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def analyze_resume(self, text: str) -> ResumeAnalysis:
        """
        Send the resume to the model and parse its JSON reply.
        """
        try:
            prompt = self.build_prompt(text)
            reply = self.call_model(prompt)
            return self.parse_response(reply)
        except Exception as e:
            logger.error(f"AI analysis failed: {str(e)}")
            raise AnalysisError(GENERIC_FAILURE) from e

    def build_prompt(self, text: str) -> str:
        return ANALYSIS_PROMPT.render(
            resume_text=text,
            guidance=GUIDANCE,
            common_issues=COMMON_ISSUES,
        )

    def call_model(self, prompt: str) -> str:
        logger.info(f"Requesting AI analysis from {self.model}")
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {'role': 'system', 'content': SYSTEM_PROMPT},
                {'role': 'user', 'content': prompt},
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""

    def parse_response(self, reply: str) -> ResumeAnalysis:
        """
        Extract the JSON object from the reply (it may be wrapped in prose
        or markdown fences) and validate it against the analysis schema.
        """
        json_match = re.search(r'\{.*\}', reply, re.DOTALL)
        if not json_match:
            raise ValueError("No valid JSON found in response")

        data = json.loads(json_match.group())
        self.validate_analysis(data)

        try:
            return ResumeAnalysis.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Analysis does not match schema: {e}") from e

    @staticmethod
    def validate_analysis(data) -> None:
        if not isinstance(data, dict):
            raise ValueError("Analysis is not a JSON object")

        for field in REQUIRED_FIELDS:
            if field not in data:
                raise ValueError(f"Missing required field: {field}")

        score = data['score']
        if not isinstance(score, dict) or any(field not in score for field in REQUIRED_SCORE_FIELDS):
            raise ValueError("Invalid score structure")
