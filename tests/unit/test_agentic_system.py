"""
Unit tests for model selection, prompt assembly and the legal writer agent.

The chat model is replaced by an in-process fake so no provider is called.

System role: Verification of the text-generation layer
"""

from unittest.mock import AsyncMock

import pytest
from langchain_core.messages import AIMessage, AIMessageChunk, HumanMessage, SystemMessage

from lexoffice.configs.ai import AISettings
from lexoffice.core.agentic_system import build_model_configs, estimate_cost, select_model, tier_for_analysis
from lexoffice.core.agentic_system.agent import GenerationUsage, LegalWriterAgent
from lexoffice.core.agentic_system.prompts import (
    DRAFTING_PROMPT,
    CaseContext,
    DraftingContext,
    LibraryContext,
    ProjectContext,
    build_document_prompt,
    build_recovery_system_prompt,
    build_user_message,
)
from lexoffice.core.enums import DraftTone, ModelTier, RecoveryAnalysisType
from lexoffice.core.exceptions import ExternalServiceError


@pytest.fixture
def configs():
    settings = AISettings(
        standard_model="std-model",
        premium_model="pro-model",
        standard_cost_per_mtok_in=1.0,
        standard_cost_per_mtok_out=2.0,
    )
    return build_model_configs(settings)


class FakeChatModel:
    """Stand-in for the provider chat model."""

    def __init__(self, chunks=None, response=None, error=None):
        self.chunks = chunks or []
        self.response = response
        self.error = error
        self.received = None

    async def astream(self, messages):
        self.received = messages
        for chunk in self.chunks:
            yield chunk
        if self.error:
            raise self.error

    async def ainvoke(self, messages):
        self.received = messages
        if self.error:
            raise self.error
        return self.response


class TestModelMap:
    def test_pleadings_use_premium_tier(self, configs) -> None:
        config = select_model(configs, "INITIAL_PETITION")

        assert config.tier == ModelTier.PREMIUM
        assert config.model == "pro-model"

    def test_correspondence_uses_standard_tier(self, configs) -> None:
        assert select_model(configs, "FORMAL_EMAIL").tier == ModelTier.STANDARD

    def test_unknown_type_defaults_to_standard(self, configs) -> None:
        assert select_model(configs, "SOMETHING_NEW").tier == ModelTier.STANDARD

    def test_force_premium_overrides_map(self, configs) -> None:
        assert select_model(configs, "FORMAL_EMAIL", force_premium=True).tier == ModelTier.PREMIUM

    def test_premium_analysis_types(self) -> None:
        assert tier_for_analysis(RecoveryAnalysisType.PETITION) == ModelTier.PREMIUM
        assert tier_for_analysis(RecoveryAnalysisType.FRAUD_DETECTION) == ModelTier.PREMIUM
        assert tier_for_analysis(RecoveryAnalysisType.SCORING) == ModelTier.STANDARD

    def test_estimate_cost(self, configs) -> None:
        cost = estimate_cost(configs[ModelTier.STANDARD], 500_000, 250_000)

        assert cost == pytest.approx(1.0)


class TestDraftingPrompt:
    def test_sections_for_linked_records(self) -> None:
        # Arrange
        context = DraftingContext(
            document_type="INITIAL_PETITION",
            tone=DraftTone.PERSUASIVE,
            case=CaseContext(
                case_number="0001234-56.2024.8.11.0001",
                case_type="LITIGATION",
                status="ACTIVE",
                claim_value=1_234_500,
                client_name="Agro Ltda",
                client_tax_id="12.345.678/0001-90",
                creditors=[("Bank", "CLASS_II_SECURED", 500_000)],
            ),
            project=ProjectContext(code="PRJ-001", title="Release", category="CORPORATE", status="PLANNING"),
            library=[LibraryContext(title="STJ REsp 1", entry_type="CASE_LAW", content="x" * 5000)],
        )

        # Act
        prompt = build_document_prompt(context)

        # Assert
        assert "## SPECIFIC INSTRUCTIONS: INITIAL_PETITION" in prompt
        assert "## LINKED CASE" in prompt
        assert "- Claim value: R$ 12,345.00" in prompt
        assert "- Client: Agro Ltda (12.345.678/0001-90)" in prompt
        assert "- Bank (CLASS_II_SECURED) - R$ 5,000.00" in prompt
        assert "## LINKED PROJECT" in prompt
        assert "## FIRM KNOWLEDGE BASE" in prompt
        assert "x" * 1501 not in prompt
        assert prompt.rstrip().endswith("Standard length (4-10 pages).")
        assert "Persuasive tone" in prompt

    def test_minimal_prompt_has_no_linked_sections(self) -> None:
        prompt = build_document_prompt(DraftingContext(document_type="UNLISTED_TYPE"))

        assert "## LINKED CASE" not in prompt
        assert "## SPECIFIC INSTRUCTIONS" not in prompt
        assert "## SETTINGS" in prompt
        assert prompt.count("\n\n---\n\n") == 2

    def test_user_message_with_and_without_instructions(self) -> None:
        assert "Additional instructions: be brief" in build_user_message("DEFENSE", "be brief")
        assert build_user_message("DEFENSE").startswith("Draft a document of type DEFENSE")

    def test_template_keeps_braces_in_values(self) -> None:
        messages = DRAFTING_PROMPT.format_messages(system_prompt='{"a": 1}', user_message="go")

        assert isinstance(messages[0], SystemMessage)
        assert messages[0].content == '{"a": 1}'


class TestRecoveryPrompt:
    def test_extra_data_is_appended(self) -> None:
        prompt = build_recovery_system_prompt(RecoveryAnalysisType.STRATEGY, "Debtor: ACME", '{"k": 1}')

        assert "CASE CONTEXT:\n\nDebtor: ACME" in prompt
        assert prompt.endswith('ADDITIONAL DATA:\n\n{"k": 1}')

    def test_without_extra_data(self) -> None:
        prompt = build_recovery_system_prompt(RecoveryAnalysisType.SCORING, "Debtor: ACME")

        assert "ADDITIONAL DATA" not in prompt


class TestLegalWriterAgent:
    @pytest.mark.asyncio
    async def test_astream_yields_text_and_fills_usage(self, configs) -> None:
        # Arrange
        config = configs[ModelTier.STANDARD]
        agent = LegalWriterAgent(api_key="test-key")
        fake = FakeChatModel(
            chunks=[
                AIMessageChunk(content="Excelentíssimo "),
                AIMessageChunk(content=""),
                AIMessageChunk(
                    content="Senhor",
                    usage_metadata={"input_tokens": 40, "output_tokens": 2, "total_tokens": 42},
                ),
            ]
        )
        agent._models[config.tier] = fake
        usage = GenerationUsage()
        messages = [SystemMessage(content="sys"), HumanMessage(content="go")]

        # Act
        fragments = [text async for text in agent.astream(config, messages, usage)]

        # Assert
        assert fragments == ["Excelentíssimo ", "Senhor"]
        assert usage.tokens_in == 40
        assert usage.tokens_out == 2
        assert fake.received == messages

    @pytest.mark.asyncio
    async def test_astream_wraps_provider_errors(self, configs) -> None:
        config = configs[ModelTier.STANDARD]
        agent = LegalWriterAgent()
        agent._models[config.tier] = FakeChatModel(
            chunks=[AIMessageChunk(content="partial")],
            error=RuntimeError("quota"),
        )

        received = []
        with pytest.raises(ExternalServiceError) as exc_info:
            async for text in agent.astream(config, [HumanMessage(content="go")], GenerationUsage()):
                received.append(text)

        assert received == ["partial"]
        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_ainvoke_returns_result(self, configs) -> None:
        config = configs[ModelTier.PREMIUM]
        agent = LegalWriterAgent()
        agent._models[config.tier] = FakeChatModel(
            response=AIMessage(
                content="Score: 72",
                usage_metadata={"input_tokens": 100, "output_tokens": 5, "total_tokens": 105},
            )
        )

        result = await agent.ainvoke(config, [HumanMessage(content="go")])

        assert result.text == "Score: 72"
        assert result.model == "pro-model"
        assert result.tier == ModelTier.PREMIUM
        assert result.usage.tokens_in == 100
        assert result.usage.tokens_out == 5

    @pytest.mark.asyncio
    async def test_ainvoke_raises_external_service_error(self, configs, monkeypatch) -> None:
        agent = LegalWriterAgent()
        monkeypatch.setattr(agent, "_invoke_with_retry", AsyncMock(side_effect=TimeoutError("slow")))

        with pytest.raises(ExternalServiceError):
            await agent.ainvoke(configs[ModelTier.STANDARD], [HumanMessage(content="go")])
