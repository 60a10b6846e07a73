"""Error kinds raised by the page generation pipeline.

Every error is terminal for the request that raised it. The API layer maps
``InputError`` to a 400 and everything else to a 500.
"""


class PipelineError(Exception):
    """Base class for page generation failures."""


class InputError(PipelineError):
    """The caller supplied a missing or blank query."""


class UpstreamError(PipelineError):
    """An external capability failed; keeps the provider's status and body."""

    def __init__(self, message: str, status: int | None = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body


class AggregationError(UpstreamError):
    """The Firecrawl scrape/search call failed."""


class GenerationRequestError(UpstreamError):
    """The LLM provider call failed."""


class GenerationParseError(PipelineError):
    """The LLM returned text that does not parse as JSON."""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw
