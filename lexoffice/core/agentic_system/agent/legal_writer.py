"""
Legal writer agent.

Thin wrapper over the Google Generative AI chat model that streams drafted
documents token by token and runs one-shot analyses, reporting token usage
so callers can log cost.

Dependencies: langchain_google_genai, langchain_core, tenacity
System role: Text generation for drafting and recovery analysis
"""

import logging
import time
from collections.abc import AsyncGenerator
from dataclasses import dataclass

from langchain_core.messages import AIMessageChunk, BaseMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential_jitter

from lexoffice.core.agentic_system.model_map import ModelConfig
from lexoffice.core.enums import ModelTier
from lexoffice.core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

SERVICE_NAME = "google_genai"


@dataclass
class GenerationUsage:
    """Token accounting filled in once a generation finishes."""

    tokens_in: int = 0
    tokens_out: int = 0
    duration_ms: int = 0


@dataclass
class GenerationResult:
    text: str
    model: str
    tier: ModelTier
    usage: GenerationUsage


def _content_text(content) -> str:
    """Flatten message content that may be a string or a list of blocks."""
    if isinstance(content, str):
        return content
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class LegalWriterAgent:
    """
    Text-generation agent with one chat model per tier.

    Models are created on first use so the application starts without an
    API key; the key is only required when a generation is requested.
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float = 120.0,
    ) -> None:
        """
        Initialize agent.

        Args:
            api_key: Google Generative AI key (falls back to GOOGLE_API_KEY env)
            timeout: Per-request timeout in seconds
        """
        self._api_key = api_key
        self._timeout = timeout
        self._models: dict[ModelTier, ChatGoogleGenerativeAI] = {}

    def _model(self, config: ModelConfig) -> ChatGoogleGenerativeAI:
        model = self._models.get(config.tier)
        if model is None:
            kwargs = {
                "model": config.model,
                "temperature": config.temperature,
                "max_output_tokens": config.max_output_tokens,
                "timeout": self._timeout,
            }
            if self._api_key:
                kwargs["google_api_key"] = self._api_key
            model = ChatGoogleGenerativeAI(**kwargs)
            self._models[config.tier] = model
        return model

    async def astream(
        self,
        config: ModelConfig,
        messages: list[BaseMessage],
        usage: GenerationUsage,
    ) -> AsyncGenerator[str, None]:
        """
        Stream generated text.

        Args:
            config: Tier configuration
            messages: Prompt messages (system + human)
            usage: Filled with token counts and duration when the stream ends

        Yields:
            str: Text fragments in generation order

        Raises:
            ExternalServiceError: If the provider call fails
        """
        logger.info(
            f"{__name__}:astream - START",
            extra={"model": config.model, "tier": config.tier.value},
        )
        start = time.monotonic()
        aggregate: AIMessageChunk | None = None

        try:
            async for chunk in self._model(config).astream(messages):
                aggregate = chunk if aggregate is None else aggregate + chunk
                text = _content_text(chunk.content)
                if text:
                    yield text
        except Exception as e:
            logger.error(f"{__name__}:astream - FAILED - {type(e).__name__}: {e}")
            raise ExternalServiceError(
                "Text generation failed", service=SERVICE_NAME, details={"error": str(e)}
            ) from e

        metadata = getattr(aggregate, "usage_metadata", None) or {}
        usage.tokens_in = metadata.get("input_tokens", 0)
        usage.tokens_out = metadata.get("output_tokens", 0)
        usage.duration_ms = int((time.monotonic() - start) * 1000)

        logger.info(
            f"{__name__}:astream - END",
            extra={
                "model": config.model,
                "tokens_in": usage.tokens_in,
                "tokens_out": usage.tokens_out,
                "duration_ms": usage.duration_ms,
            },
        )

    @retry(
        retry=retry_if_exception_type(Exception),
        stop=stop_after_attempt(3),
        wait=wait_exponential_jitter(initial=1, max=10, jitter=2),
        before_sleep=lambda retry_state: logger.warning(
            f"{__name__}:ainvoke - Retry {retry_state.attempt_number}/3 after provider error"
        ),
        reraise=True,
    )
    async def _invoke_with_retry(self, config: ModelConfig, messages: list[BaseMessage]):
        """Single provider call, retried on transient failures."""
        return await self._model(config).ainvoke(messages)

    async def ainvoke(
        self,
        config: ModelConfig,
        messages: list[BaseMessage],
    ) -> GenerationResult:
        """
        Run a single generation and return the full text.

        Raises:
            ExternalServiceError: If the provider call fails
        """
        start = time.monotonic()
        try:
            response = await self._invoke_with_retry(config, messages)
        except Exception as e:
            logger.error(f"{__name__}:ainvoke - FAILED - {type(e).__name__}: {e}")
            raise ExternalServiceError(
                "Text generation failed", service=SERVICE_NAME, details={"error": str(e)}
            ) from e

        metadata = getattr(response, "usage_metadata", None) or {}
        usage = GenerationUsage(
            tokens_in=metadata.get("input_tokens", 0),
            tokens_out=metadata.get("output_tokens", 0),
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        return GenerationResult(
            text=_content_text(response.content),
            model=config.model,
            tier=config.tier,
            usage=usage,
        )
