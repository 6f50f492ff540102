import json
from types import SimpleNamespace

import pytest

from services.ai_analyzer import AIResumeAnalyzer, AnalysisError, GENERIC_FAILURE


class StubCompletions:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def stub_client(reply=None, error=None):
    completions = StubCompletions(reply, error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


@pytest.fixture
def heuristic_payload(scorer, strong_resume):
    return scorer.analyze_resume(strong_resume).model_dump(by_alias=True)


def test_parses_json_wrapped_in_prose(scorer, strong_resume, heuristic_payload):
    reply = "Here is my analysis:\n```json\n" + json.dumps(heuristic_payload, indent=2) + "\n```\nGood luck!"
    client, _ = stub_client(reply)

    analysis = AIResumeAnalyzer("sk-test", client=client).analyze_resume(strong_resume)

    assert analysis == scorer.analyze_resume(strong_resume)


def test_sends_prompt_to_model(strong_resume, heuristic_payload):
    client, completions = stub_client(json.dumps(heuristic_payload))

    AIResumeAnalyzer("sk-test", model="gpt-4o-mini", client=client).analyze_resume(strong_resume)

    call = completions.calls[0]
    assert call["model"] == "gpt-4o-mini"
    assert call["temperature"] == 0.3
    assert call["max_tokens"] == 2500
    assert [m["role"] for m in call["messages"]] == ["system", "user"]
    assert "jane.smith@email.com" in call["messages"][1]["content"]


def test_prompt_lists_guidance():
    prompt = AIResumeAnalyzer("sk-test", client=object()).build_prompt("My resume")
    assert '"""\nMy resume\n"""' in prompt
    assert "- Missing contact information" in prompt
    assert "- Use simple language, not HR jargon" in prompt
    assert '"criticalIssues"' in prompt


@pytest.mark.parametrize("field", ["score", "advice", "insights", "strengths", "criticalIssues", "industryMatch"])
def test_missing_top_level_field_fails(heuristic_payload, field):
    del heuristic_payload[field]
    client, _ = stub_client(json.dumps(heuristic_payload))

    with pytest.raises(AnalysisError) as excinfo:
        AIResumeAnalyzer("sk-test", client=client).analyze_resume("resume")
    assert str(excinfo.value) == GENERIC_FAILURE


@pytest.mark.parametrize("field", ["overall", "content", "structure", "optimization"])
def test_missing_score_field_fails(heuristic_payload, field):
    del heuristic_payload["score"][field]
    client, _ = stub_client(json.dumps(heuristic_payload))

    with pytest.raises(AnalysisError):
        AIResumeAnalyzer("sk-test", client=client).analyze_resume("resume")


@pytest.mark.parametrize("reply", [
    "",
    "I cannot analyze this resume.",
    "{not valid json}",
    '{"score": 5}',
])
def test_unparseable_reply_fails(reply):
    client, _ = stub_client(reply)
    with pytest.raises(AnalysisError) as excinfo:
        AIResumeAnalyzer("sk-test", client=client).analyze_resume("resume")
    assert str(excinfo.value) == GENERIC_FAILURE


def test_out_of_range_score_fails(heuristic_payload):
    heuristic_payload["score"]["content"]["skills"] = 140
    client, _ = stub_client(json.dumps(heuristic_payload))

    with pytest.raises(AnalysisError):
        AIResumeAnalyzer("sk-test", client=client).analyze_resume("resume")


def test_api_error_is_reported_generically():
    client, _ = stub_client(error=RuntimeError("401 invalid api key"))

    with pytest.raises(AnalysisError) as excinfo:
        AIResumeAnalyzer("sk-test", client=client).analyze_resume("resume")
    assert str(excinfo.value) == GENERIC_FAILURE
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_requires_api_key():
    with pytest.raises(AnalysisError):
        AIResumeAnalyzer("")
