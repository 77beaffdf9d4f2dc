# src/scout/ranking/ai.py
"""AI recommender that delegates ranking to a generative model."""

import asyncio
import logging
import re
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError

from pydantic import TypeAdapter, ValidationError

from scout.models import ProjectSummary, ScoredProject
from scout.providers.base import LLMClient
from scout.ranking.base import DEFAULT_TOP_N, Ranker
from scout.ranking.exceptions import RecommendationError

logger = logging.getLogger(__name__)

# Every AI pick gets this score: the model selects, it does not grade
AI_SCORE = 100

RECOMMEND_PROMPT = """You are a technical assistant for a project showcase platform.
A user is describing a problem: "{problem}"

Here are the available projects:
{projects}

Based on the user's problem, identify the top {top_n} projects that can provide a solution \
or technical reference.
Return ONLY a JSON array of strings (the Project IDs), nothing else."""

_CODE_FENCE = re.compile(r"```(?:json)?")
_ID_LIST = TypeAdapter(list[str])


def format_project_line(project: ProjectSummary) -> str:
    """Render one corpus project as a prompt line."""
    return (
        f"ID: {project.id} | Title: {project.title} | "
        f"Description: {project.description} | "
        f"Categories: {', '.join(project.category_names)}"
    )


def parse_recommended_ids(response_text: str) -> list[str]:
    """Validate a model response as a JSON array of project ID strings.

    Markdown code fences around the array are stripped first.

    Raises:
        RecommendationError: If the text is not a JSON array of strings.
    """
    cleaned = _CODE_FENCE.sub("", response_text).strip()
    try:
        return _ID_LIST.validate_json(cleaned)
    except ValidationError as e:
        raise RecommendationError(
            f"Model response is not a JSON array of IDs: {e.error_count()} error(s)",
            reason="parse",
            raw_response=response_text,
        ) from e


class AIRecommender(Ranker):
    """Ranks projects by asking an LLM to pick the most relevant IDs.

    The recommender is only available when it has an LLM client. Every failure
    (request error, timeout, malformed response, no known IDs) raises
    RecommendationError so the caller can fall back to keyword ranking.

    Example:
        from scout.providers.litellm import LiteLLMClient

        recommender = AIRecommender(llm_client=LiteLLMClient(api_key=key))
        results = await recommender.arank("track my inventory", corpus)
    """

    def __init__(
        self,
        llm_client: LLMClient | None,
        top_n: int = DEFAULT_TOP_N,
        prompt_template: str | None = None,
        temperature: float | None = None,
        timeout: float | None = 10.0,
    ) -> None:
        """Initialize the recommender.

        Args:
            llm_client: LLM client, or None when no credential is configured.
            top_n: Maximum number of projects to return.
            prompt_template: Custom prompt with {problem}, {projects}, {top_n}.
            temperature: LLM temperature. None to use model default.
            timeout: Seconds to wait for the LLM on both paths. None waits indefinitely.
        """
        super().__init__(top_n=top_n)
        self._client = llm_client
        self.prompt_template = prompt_template or RECOMMEND_PROMPT
        self.temperature = temperature
        self.timeout = timeout

    @property
    def is_available(self) -> bool:
        return self._client is not None

    def build_prompt(self, problem: str, corpus: list[ProjectSummary]) -> str:
        """Build the recommendation prompt for a problem and corpus."""
        return self.prompt_template.format(
            problem=problem,
            projects="\n".join(format_project_line(p) for p in corpus),
            top_n=self.top_n,
        )

    def map_ids(self, ids: list[str], corpus: list[ProjectSummary]) -> list[ScoredProject]:
        """Map returned IDs back to corpus projects in the model's order.

        Unknown IDs are dropped, repeated IDs keep their first position.

        Raises:
            RecommendationError: If no ID matches a corpus project.
        """
        by_id = {p.id: p for p in corpus}
        seen: set[str] = set()
        recommended: list[ScoredProject] = []
        for project_id in ids:
            project = by_id.get(project_id)
            if project is None or project_id in seen:
                continue
            seen.add(project_id)
            recommended.append(
                ScoredProject(
                    id=project.id,
                    title=project.title,
                    slug=project.slug,
                    description=project.description,
                    score=AI_SCORE,
                )
            )

        if not recommended:
            raise RecommendationError(
                f"None of the {len(ids)} recommended IDs match a known project",
                reason="empty",
            )
        return recommended[: self.top_n]

    def _require_client(self) -> LLMClient:
        if self._client is None:
            raise RecommendationError("No LLM client configured", reason="unavailable")
        return self._client

    def _messages(self, problem: str, corpus: list[ProjectSummary]) -> list[dict]:
        return [{"role": "user", "content": self.build_prompt(problem, corpus)}]

    def _finish(self, response_text: str, corpus: list[ProjectSummary]) -> list[ScoredProject]:
        logger.debug("Recommender response: %r", response_text)
        ids = parse_recommended_ids(response_text)
        logger.debug("Recommended IDs: %s", ids)
        return self.map_ids(ids, corpus)

    def _timeout_error(self) -> RecommendationError:
        return RecommendationError(
            f"LLM request timed out after {self.timeout}s", reason="timeout"
        )

    def rank(self, problem: str, corpus: list[ProjectSummary]) -> list[ScoredProject]:
        """Recommend projects, bounding the blocking LLM call by ``timeout``.

        The call runs on a worker thread. On timeout the thread is abandoned
        and its eventual answer discarded.
        """
        client = self._require_client()
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="scout-llm")
        try:
            future = executor.submit(
                client.complete,
                messages=self._messages(problem, corpus),
                temperature=self.temperature,
            )
            response_text = future.result(timeout=self.timeout)
        except FuturesTimeoutError as e:
            raise self._timeout_error() from e
        except Exception as e:
            raise RecommendationError(f"LLM request failed: {e}", reason="request") from e
        finally:
            executor.shutdown(wait=False)
        return self._finish(response_text, corpus)

    async def arank(self, problem: str, corpus: list[ProjectSummary]) -> list[ScoredProject]:
        """Recommend projects, bounding the LLM call by ``timeout``."""
        client = self._require_client()
        try:
            response_text = await asyncio.wait_for(
                client.acomplete(
                    messages=self._messages(problem, corpus),
                    temperature=self.temperature,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            raise self._timeout_error() from e
        except Exception as e:
            raise RecommendationError(f"LLM request failed: {e}", reason="request") from e
        return self._finish(response_text, corpus)

    recommend = rank
    arecommend = arank
