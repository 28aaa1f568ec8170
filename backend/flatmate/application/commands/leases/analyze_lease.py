"""
AnalyzeLease Command - ask the LLM for a structured review of a lease text.

Paid tiers only. Nothing is persisted; on LLM failure the caller gets the
labelled fallback text with degraded=True instead of an error.
"""

import logging
from dataclasses import dataclass

from flatmate.application.common.interfaces import Command, CommandHandler
from flatmate.domain.exceptions import AccessDeniedError, DomainValidationError
from flatmate.domain.ports.llm_client import LLMClient
from flatmate.domain.result import Err
from flatmate.domain.services.lease_analysis import (
    LEASE_ANALYSIS_FALLBACK,
    build_lease_analysis_prompt,
)
from flatmate.domain.value_objects.user_id import UserId
from flatmate.observability.metrics import FallbackOperation, increment_llm_fallback

logger = logging.getLogger(__name__)

PAID_TIER_REQUIRED = "Lease analysis requires an active paid subscription"


@dataclass
class AnalyzeLeaseResult:
    analysis: str
    degraded: bool = False


@dataclass(frozen=True)
class AnalyzeLeaseCommand(Command[AnalyzeLeaseResult]):
    user_id: UserId
    tier: str
    text: str


class AnalyzeLeaseHandler(CommandHandler[AnalyzeLeaseResult]):
    def __init__(
        self,
        llm_client: LLMClient,
        allowed_tiers: frozenset[str] = frozenset({"monthly", "annual"}),
        max_length: int = 20000,
        max_tokens: int = 1000,
    ):
        self.llm_client = llm_client
        self.allowed_tiers = allowed_tiers
        self.max_length = max_length
        self.max_tokens = max_tokens

    async def execute(self, command: AnalyzeLeaseCommand) -> AnalyzeLeaseResult:
        if command.tier not in self.allowed_tiers:
            raise AccessDeniedError(PAID_TIER_REQUIRED)

        text = command.text.strip()
        if not text:
            raise DomainValidationError("Lease text is required")
        if len(text) > self.max_length:
            raise DomainValidationError(
                f"Lease text cannot exceed {self.max_length} characters"
            )

        result = await self.llm_client.complete(
            [{"role": "user", "content": build_lease_analysis_prompt(text)}],
            max_tokens=self.max_tokens,
        )
        if isinstance(result, Err):
            logger.warning(
                f"Lease analysis failed for {command.user_id}, using fallback: {result.error}"
            )
            increment_llm_fallback(FallbackOperation.LEASE_ANALYSIS)
            return AnalyzeLeaseResult(analysis=LEASE_ANALYSIS_FALLBACK, degraded=True)

        logger.info(f"Analyzed lease ({len(text)} chars) for {command.user_id}")
        return AnalyzeLeaseResult(analysis=result.value.strip())
