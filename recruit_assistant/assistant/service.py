"""OpenAI chat completion over the snapshot context (requires API key)."""

import logging
import re
from collections.abc import Sequence
from typing import Optional

from recruit_assistant.assistant.context import build_context, rank_profiles
from recruit_assistant.config import AssistantConfig
from recruit_assistant.data.snapshot import Snapshot
from recruit_assistant.errors import AssistantUnavailable
from recruit_assistant.profiles.models import EnrichedProfile

logger = logging.getLogger("recruit_assistant.assistant")

SYSTEM_PROMPT = """You are an expert recruitment AI assistant specializing in matching candidate profiles to job requirements.

Your role is to:
1. Analyze candidate profiles against job requirements.
2. Provide insights on skills matches and experience levels.
3. Recommend top candidates with clear reasoning.
4. Answer questions about recruitment data in a helpful, professional manner.

Always respond in markdown format with clear explanations, tables for
candidate comparisons (name, fit %, skills, experience) and actionable
insights for recruiters. Be concise but thorough."""

INSIGHTS_QUERY = "Give me a quick overview of the top candidates and their key strengths for the open roles"
INSIGHTS_PROFILES = 3

DEFAULT_REASONING = "Reasoning not explicitly provided"

_REASONING_RE = re.compile(r"Reasoning[:\s]+(.+?)(?=\n|$)", re.IGNORECASE)


def extract_reasoning(response: str) -> str:
    match = _REASONING_RE.search(response or "")
    return match.group(1).strip() if match else DEFAULT_REASONING


def build_user_prompt(query: str, context: str) -> str:
    return (
        f"User Query: {query}\n\n"
        f"{context}\n\n"
        "Please provide a comprehensive response addressing the user's query. "
        "Use markdown tables for candidate comparisons."
    )


class AssistantService:
    def __init__(self, config: AssistantConfig):
        self.config = config
        self._client = None

    @property
    def available(self) -> bool:
        return bool(self.config.api_key)

    def _get_client(self):
        if not self.config.api_key:
            raise AssistantUnavailable("No OpenAI API key configured")
        if self._client is None:
            try:
                from openai import OpenAI
            except ImportError as e:
                raise AssistantUnavailable("openai package required for AI analysis. Install with: pip install openai") from e
            kwargs = {"api_key": self.config.api_key}
            if self.config.base_url:
                kwargs["base_url"] = self.config.base_url
            self._client = OpenAI(**kwargs)
        return self._client

    def _complete(self, query: str, context: str) -> str:
        client = self._get_client()
        try:
            completion = client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": build_user_prompt(query, context)},
                ],
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
            )
        except Exception as e:
            logger.warning("AI completion failed for %r: %s", query[:80], e)
            raise AssistantUnavailable(f"AI completion failed: {type(e).__name__}") from e

        response = (completion.choices[0].message.content or "").strip() or "No response generated"
        logger.debug("AI completion for %r: %d chars", query[:80], len(response))
        return response

    def analyze(
        self,
        query: str,
        snapshot: Snapshot,
        profiles: Optional[Sequence[EnrichedProfile]] = None,
    ) -> dict:
        """Answer a recruiter question grounded in the snapshot.

        ``profiles`` narrows the candidates shown to the model, e.g. to a
        search result; by default the highest-fit candidates are used.
        Raises AssistantUnavailable when unconfigured or on API errors.
        """
        if profiles is None:
            profiles = rank_profiles(snapshot, self.config.max_profiles)
        else:
            profiles = list(profiles)[: self.config.max_profiles]

        context = build_context(snapshot, max_profiles=self.config.max_profiles, profiles=profiles)
        response = self._complete(query, context)

        return {
            "response": response,
            "reasoning": extract_reasoning(response),
            "confidence": 0.9,
            "profiles": [p.uuid for p in profiles],
        }

    def insights(self, snapshot: Snapshot) -> str:
        """Short overview of the top few candidates."""
        top = rank_profiles(snapshot, INSIGHTS_PROFILES)
        return self._complete(INSIGHTS_QUERY, build_context(snapshot, profiles=top))
