import json

import pytest
import requests

from agrobi.config import LLMConfig
from agrobi.errors import LLMError
from agrobi.llm import GeminiClient, MarketAnalysisRequest, build_prompt
from agrobi.llm import gemini

ANALYSIS = {
    "predictedPrice": 2.41,
    "trend": "up",
    "confidence": 0.72,
    "analysis": "Entressafra pressiona a oferta.",
    "risks": ["Seca no Sul"],
    "recommendations": ["Antecipar contratos"],
}


class FakeResponse:
    def __init__(self, body=None, status=200, text=None):
        self._body = body
        self.status_code = status
        self.text = text if text is not None else json.dumps(body)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"HTTP {self.status_code}")

    def json(self):
        return json.loads(self.text)


def _wrap(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture
def request_params():
    return MarketAnalysisRequest(region="MG", volume=50000, season="Entressafra", feed_price=1.8)


@pytest.fixture
def calls(monkeypatch):
    recorded = []
    responses = []

    def fake_post(url, headers=None, json=None, timeout=None):
        recorded.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        item = responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    monkeypatch.setattr(gemini.requests, "post", fake_post)
    return recorded, responses


def test_prompt_mentions_parameters(request_params):
    prompt = build_prompt(request_params)
    assert "região de MG" in prompt
    assert "50000 litros" in prompt
    assert "Entressafra" in prompt
    assert "R$ 1.80/kg" in prompt


def test_predict_market_parses_structured_reply(calls, request_params):
    recorded, responses = calls
    responses.append(FakeResponse(_wrap(json.dumps(ANALYSIS))))

    client = GeminiClient(api_key="k", model="m1")
    analysis = client.predict_market(request_params)

    assert analysis.predicted_price == 2.41
    assert analysis.trend == "up"
    assert analysis.risks == ["Seca no Sul"]
    sent = recorded[0]
    assert sent["url"].endswith("/models/m1:generateContent")
    assert sent["headers"]["x-goog-api-key"] == "k"
    assert sent["json"]["generationConfig"]["responseMimeType"] == "application/json"


def test_network_errors_are_retried_then_raised(calls, request_params):
    recorded, responses = calls
    responses.extend([requests.exceptions.ConnectionError("down")] * 2)

    with pytest.raises(LLMError, match="after 2 attempts"):
        GeminiClient(api_key="k", max_retries=2).predict_market(request_params)
    assert len(recorded) == 2


def test_retry_recovers(calls, request_params):
    _, responses = calls
    responses.extend([FakeResponse(status=503, text="busy"), FakeResponse(_wrap(json.dumps(ANALYSIS)))])
    assert GeminiClient(api_key="k", max_retries=2).predict_market(request_params).confidence == 0.72


@pytest.mark.parametrize(
    "body",
    [
        _wrap("not json"),
        _wrap(json.dumps({**ANALYSIS, "trend": "sideways"})),
        _wrap(json.dumps({**ANALYSIS, "confidence": 1.5})),
        _wrap(json.dumps({"predictedPrice": 2.0})),
        {"candidates": []},
    ],
)
def test_invalid_content_raises(calls, request_params, body):
    _, responses = calls
    responses.append(FakeResponse(body))
    with pytest.raises(LLMError):
        GeminiClient(api_key="k").predict_market(request_params)


def test_non_json_body_raises(calls, request_params):
    _, responses = calls
    responses.append(FakeResponse(text="<html>"))
    with pytest.raises(LLMError, match="non-JSON"):
        GeminiClient(api_key="k").predict_market(request_params)


def test_from_config_requires_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    with pytest.raises(LLMError, match="GEMINI_API_KEY"):
        GeminiClient.from_env()

    monkeypatch.setenv("API_KEY", "fallback")
    client = GeminiClient.from_config(LLMConfig(model="m2", timeout_sec=5))
    assert (client.api_key, client.model, client.timeout_sec) == ("fallback", "m2", 5)
