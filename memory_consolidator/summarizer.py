"""
Summarizer capability used to collapse clusters of related memories.

The pipeline only depends on ``BaseSummarizer.summarize``. Any text-generation
backend can sit behind it; its output is validated by the merge step.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable


CONSOLIDATE_PROMPT = """Consolidate these related memories into a single concise memory.
Keep every distinct fact, decision and preference; drop repetition.

Memories:
{memories}

Consolidated memory:"""


class BaseSummarizer(ABC):
    """Abstract base class for cluster summarizers."""

    @abstractmethod
    async def summarize(self, texts: list[str]) -> str:
        """
        Condense ``texts`` (a cluster's contents, in group order) into one string.

        Raise on failure; the caller skips the cluster.
        """
        pass


class CallableSummarizer(BaseSummarizer):
    """Adapts a plain ``async def f(texts) -> str`` to the summarizer interface."""

    def __init__(self, func: Callable[[list[str]], Awaitable[str]]):
        self._func = func

    async def summarize(self, texts: list[str]) -> str:
        return await self._func(texts)


class PromptSummarizer(BaseSummarizer):
    """
    Summarizer that renders a consolidation prompt and delegates generation.

    ``generate`` is any coroutine taking a prompt and returning model output,
    e.g. a bound method of an LLM client owned by the host application.
    """

    def __init__(
        self,
        generate: Callable[[str], Awaitable[str]],
        template: str = CONSOLIDATE_PROMPT,
        separator: str = "\n\n---\n\n",
    ):
        self._generate = generate
        self.template = template
        self.separator = separator

    def build_prompt(self, texts: list[str]) -> str:
        """Render the prompt for a cluster."""
        return self.template.format(memories=self.separator.join(texts))

    async def summarize(self, texts: list[str]) -> str:
        response = await self._generate(self.build_prompt(texts))
        return response.strip()
