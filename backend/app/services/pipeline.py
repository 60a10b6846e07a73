"""End-to-end landing page generation: scrape/search, prompt, generate, default."""

import logging

from app.config import Settings
from app.exceptions import InputError
from app.models import GenerationResult, Role
from app.services.aggregator import ContentAggregator, classify_query
from app.services.page_defaults import to_page
from app.services.page_generator import PageGenerator
from app.services.prompt_composer import compose

logger = logging.getLogger(__name__)


class PagePipeline:
    """Runs one generation request from query to defaulted Page.

    Steps run strictly in order and each one needs the previous step's output.
    Failures propagate unchanged; nothing is retried.
    """

    def __init__(
        self,
        settings: Settings,
        aggregator: ContentAggregator | None = None,
        generator: PageGenerator | None = None,
    ):
        self.settings = settings
        self.aggregator = aggregator or ContentAggregator(settings)
        self.generator = generator or PageGenerator(settings)

    def run(self, q: str | None, role: Role | str = Role.AGENT) -> GenerationResult:
        """Generate a landing page for ``q`` written for ``role``.

        Raises:
            InputError: If ``q`` is missing or blank
            AggregationError: If Firecrawl fails
            GenerationRequestError: If the LLM call fails
            GenerationParseError: If the LLM output is not JSON
        """
        if not q or not q.strip():
            raise InputError("Missing input 'q'.")
        role = Role(role)

        logger.info(f"Generating {role.value} page for {classify_query(q)} query: {q!r}")

        scraped = self.aggregator.aggregate(q)
        logger.info(f"Aggregated {len(scraped)} chars of source content")

        prompts = compose(role, q, scraped, max_content_chars=self.settings.max_content_chars)
        raw = self.generator.generate(prompts.system, prompts.user)
        page = to_page(raw)

        logger.info(f"Generated page {page.meta.title!r} with {len(page.sections)} sections")
        return GenerationResult(page=page, q=q, role=role, scraped=scraped)
