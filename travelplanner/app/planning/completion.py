"""Chat-completion client used to generate itineraries."""

import logging

from openai import AsyncOpenAI, OpenAIError

from travelplanner.app.config import (
    MissingOpenAIKeyError,
    get_openai_api_key,
    get_settings,
)
from travelplanner.app.planning.errors import (
    ConfigurationError,
    GenerationError,
    ProviderUnavailableError,
)
from travelplanner.app.planning.prompt import SYSTEM_DIRECTIVE

logger = logging.getLogger(__name__)


class CompletionClient:
    """Thin wrapper over the OpenAI chat completions API.

    One call per plan request, no retries.
    """

    def __init__(
        self,
        model: str | None = None,
        temperature: float | None = None,
    ) -> None:
        settings = get_settings()
        self.model = model or settings.openai_plan_model
        self.temperature = (
            settings.openai_temperature if temperature is None else temperature
        )

    def ensure_configured(self) -> str:
        """Return the API key, or raise ConfigurationError if it is missing."""
        try:
            return get_openai_api_key()
        except MissingOpenAIKeyError as e:
            raise ConfigurationError(str(e)) from e

    def _create_client(self, api_key: str) -> AsyncOpenAI:
        """Create async OpenAI client with SDK-level retries disabled."""
        return AsyncOpenAI(api_key=api_key, max_retries=0)

    async def complete(self, prompt: str) -> str:
        """Send ``prompt`` and return the raw text of the first choice.

        Raises:
            ConfigurationError: If no API key is configured
            GenerationError: If the provider returned no content
            ProviderUnavailableError: If the provider call itself failed
        """
        api_key = self.ensure_configured()

        # The client owns a connection pool; close it on every path
        async with self._create_client(api_key) as client:
            try:
                response = await client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": SYSTEM_DIRECTIVE},
                        {"role": "user", "content": prompt},
                    ],
                    temperature=self.temperature,
                )
            except OpenAIError as e:
                logger.warning(
                    "plan_completion_failed",
                    extra={"model": self.model, "error": str(e)},
                )
                raise ProviderUnavailableError(
                    f"Completion provider request failed: {e}"
                ) from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise GenerationError("Failed to generate itinerary from AI")

        logger.info(
            "plan_completion",
            extra={
                "model": self.model,
                "chars": len(content),
                "tokens_in": getattr(response.usage, "prompt_tokens", None),
                "tokens_out": getattr(response.usage, "completion_tokens", None),
            },
        )
        return content


def get_completion_client() -> CompletionClient:
    """FastAPI dependency returning the completion client."""
    return CompletionClient()
