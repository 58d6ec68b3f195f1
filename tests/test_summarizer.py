"""
Tests for summarizer adapters.
"""

import pytest

from memory_consolidator.summarizer import (
    BaseSummarizer,
    CallableSummarizer,
    PromptSummarizer,
)


class TestBaseSummarizer:
    """Tests for the abstract interface."""

    def test_cannot_instantiate(self):
        """summarize must be implemented."""
        with pytest.raises(TypeError):
            BaseSummarizer()  # type: ignore[abstract]


class TestCallableSummarizer:
    """Tests for CallableSummarizer."""

    @pytest.mark.asyncio
    async def test_delegates(self):
        """The wrapped coroutine receives the texts."""
        async def join(texts):
            return " + ".join(texts)

        summarizer = CallableSummarizer(join)

        assert await summarizer.summarize(["a", "b"]) == "a + b"

    @pytest.mark.asyncio
    async def test_propagates_errors(self):
        """Errors are left for the merge step to handle."""
        async def fail(texts):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await CallableSummarizer(fail).summarize(["a"])


class TestPromptSummarizer:
    """Tests for PromptSummarizer."""

    def test_build_prompt(self):
        """All texts appear in the prompt, separated."""
        async def generate(prompt):
            return prompt

        summarizer = PromptSummarizer(generate, separator=" | ")
        prompt = summarizer.build_prompt(["first fact", "second fact"])

        assert "first fact | second fact" in prompt
        assert prompt.rstrip().endswith("Consolidated memory:")

    @pytest.mark.asyncio
    async def test_summarize_strips_output(self):
        """Model output is stripped of surrounding whitespace."""
        prompts = []

        async def generate(prompt):
            prompts.append(prompt)
            return "  merged memory text \n"

        summarizer = PromptSummarizer(generate, template="Merge: {memories}")

        assert await summarizer.summarize(["x", "y"]) == "merged memory text"
        assert prompts == ["Merge: x\n\n---\n\ny"]
