from typing import Optional
from services.ai_analyzer import AIResumeAnalyzer
from services.ats_scorer import ATSScorer
import config
import logging

logger = logging.getLogger(__name__)

HEURISTIC = "heuristic"
AI = "ai"
BACKENDS = (HEURISTIC, AI)


def build_analyzer(backend: str, api_key: Optional[str] = None):
    """
    Return an analyzer exposing ``analyze_resume(text) -> ResumeAnalysis``.

    The AI backend falls back to the configured OPENAI_API_KEY when no key
    is supplied by the caller.
    """
    backend = (backend or HEURISTIC).lower()
    logger.info(f"Using {backend} analyzer backend")

    if backend == HEURISTIC:
        return ATSScorer()
    if backend == AI:
        return AIResumeAnalyzer(api_key=api_key or config.OPENAI_API_KEY,
                                model=config.OPENAI_MODEL)

    raise ValueError(f"Unknown analyzer backend '{backend}'. Choose one of: {', '.join(BACKENDS)}")
