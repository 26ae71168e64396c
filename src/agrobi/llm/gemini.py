"""Generative-AI market analysis via the Gemini REST API.

Contract: send a structured prompt, receive structured JSON or raise. The
compounding forecast does not depend on this client.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Literal, Optional

import requests
from pydantic import BaseModel, Field, ValidationError

from agrobi.config import LLMConfig
from agrobi.errors import LLMError

logger = logging.getLogger(__name__)


class MarketAnalysisRequest(BaseModel):
    region: str
    volume: float = Field(gt=0)  # litres
    season: str  # "Safra" or "Entressafra"
    feed_price: float = Field(ge=0)  # R$/kg


class MarketAnalysis(BaseModel):
    predicted_price: float = Field(alias="predictedPrice")
    trend: Literal["up", "down", "stable"]
    confidence: float = Field(ge=0, le=1)
    analysis: str
    risks: list[str]
    recommendations: list[str]

    model_config = {"populate_by_name": True}


RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "predictedPrice": {"type": "NUMBER", "description": "Preço previsto por litro"},
        "trend": {"type": "STRING", "description": "Tendência: up, down ou stable"},
        "confidence": {"type": "NUMBER", "description": "Nível de confiança de 0 a 1"},
        "analysis": {"type": "STRING", "description": "Texto explicativo da análise"},
        "risks": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Lista de riscos identificados",
        },
        "recommendations": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Lista de ações recomendadas",
        },
    },
    "required": ["predictedPrice", "trend", "confidence", "analysis", "risks", "recommendations"],
}


def build_prompt(request: MarketAnalysisRequest) -> str:
    return (
        f"Analise a situação de compra de leite para a região de {request.region}.\n"
        f"Volume desejado: {request.volume:g} litros.\n"
        f"Estação: {request.season}.\n"
        f"Preço atual da ração: R$ {request.feed_price:.2f}/kg.\n\n"
        "Forneça uma análise estratégica de predição de preço, tendências de mercado, "
        "riscos logísticos e recomendações de negociação."
    )


@dataclass
class GeminiClient:
    """Thin client for the ``generateContent`` endpoint.

    Attributes:
        api_key: Gemini API key
        model: Model name
        base_url: API root
        timeout_sec: HTTP request timeout in seconds
        max_retries: Attempts before giving up on network errors
        thinking_budget: Token budget for model reasoning
    """

    api_key: str
    model: str = "gemini-3-pro-preview"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout_sec: int = 60
    max_retries: int = 2
    thinking_budget: int = 2000

    @classmethod
    def from_config(cls, cfg: LLMConfig, api_key: Optional[str] = None) -> "GeminiClient":
        key = api_key or os.environ.get(cfg.api_key_env) or os.environ.get("API_KEY")
        if not key:
            raise LLMError(f"Missing API key: set {cfg.api_key_env}")
        return cls(
            api_key=key,
            model=cfg.model,
            base_url=cfg.base_url,
            timeout_sec=cfg.timeout_sec,
            max_retries=cfg.max_retries,
            thinking_budget=cfg.thinking_budget,
        )

    @classmethod
    def from_env(cls) -> "GeminiClient":
        return cls.from_config(LLMConfig())

    @property
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"

    def _payload(self, prompt: str) -> dict:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
                "thinkingConfig": {"thinkingBudget": self.thinking_budget},
            },
        }

    def _post(self, payload: dict) -> dict:
        headers = {"x-goog-api-key": self.api_key, "Content-Type": "application/json"}

        last_exc: Optional[Exception] = None
        for attempt in range(1, self.max_retries + 1):
            try:
                resp = requests.post(
                    self.endpoint, headers=headers, json=payload, timeout=self.timeout_sec
                )
                resp.raise_for_status()
            except requests.exceptions.RequestException as exc:
                last_exc = exc
                logger.warning(f"Gemini request failed (attempt {attempt}/{self.max_retries}): {exc}")
                continue

            try:
                return resp.json()
            except ValueError as exc:
                raise LLMError(f"Gemini returned a non-JSON body: {exc}") from exc
        raise LLMError(f"Gemini request failed after {self.max_retries} attempts: {last_exc}")

    @staticmethod
    def _extract_text(body: dict) -> str:
        try:
            parts = body["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as exc:
            raise LLMError(f"Unexpected Gemini response shape: {exc}") from exc
        return "".join(p.get("text", "") for p in parts if isinstance(p, dict))

    def predict_market(self, request: MarketAnalysisRequest) -> MarketAnalysis:
        """Ask the model for a structured purchasing analysis.

        Raises:
            LLMError: on network failure or content that does not match the schema
        """
        logger.info(f"Requesting market analysis for {request.region} ({self.model})")
        body = self._post(self._payload(build_prompt(request)))
        text = self._extract_text(body)

        try:
            return MarketAnalysis.model_validate(json.loads(text or "{}"))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.error(f"Gemini analysis did not match the expected schema: {exc}")
            raise LLMError(f"Invalid analysis payload: {exc}") from exc
