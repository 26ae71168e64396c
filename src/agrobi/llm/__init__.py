from .gemini import GeminiClient, MarketAnalysis, MarketAnalysisRequest, build_prompt

__all__ = ["GeminiClient", "MarketAnalysis", "MarketAnalysisRequest", "build_prompt"]
