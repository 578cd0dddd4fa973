from typing import Optional

import httpx

from llm4docs.completion.CompletionClient import CompletionClient
from llm4docs.config import CompletionConfig
from llm4docs.errors import CompletionError
from llm4docs.logger import logger
from llm4docs.models import PromptRequest


class OpenAIChatCompletionClient(CompletionClient):
    """
    A CompletionClient that uses OpenAI's chat completion API.

    Exactly one request is made per call; failures are not retried.

    """

    def __init__(
        self,
        config: CompletionConfig,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Arguments:
            config: Endpoint, credentials and sampling parameters.
            http_client: An httpx.Client to send requests with. If omitted, a
                new client is opened (and closed) for every call.

        """
        self._config = config
        self._http_client = http_client

    def build_payload(self, request: PromptRequest) -> dict:
        return {
            "model": self._config.model,
            "messages": [
                {"role": "system", "content": request.context},
                {"role": "user", "content": request.instruction},
            ],
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
            # The selection is usually close to the answer, so hand it to the
            # provider as a predicted output.
            "prediction": {"type": "content", "content": request.selected_text},
        }

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

    def _post(self, payload: dict) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.post(
                self._config.endpoint,
                headers=self._headers(),
                json=payload,
                timeout=self._config.request_timeout_sec,
            )
        with httpx.Client(timeout=self._config.request_timeout_sec) as client:
            return client.post(
                self._config.endpoint, headers=self._headers(), json=payload
            )

    def complete(self, request: PromptRequest) -> str:
        """
        Send the request and return the trimmed text of the first choice.
        """
        payload = self.build_payload(request)
        logger.info(
            f"Requesting completion from {self._config.endpoint} "
            f"(model {self._config.model}, {len(request.selected_text)} "
            "selected characters)."
        )

        try:
            response = self._post(payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Completion request failed: {e}")
            raise CompletionError(
                f"Completion request failed with status "
                f"{e.response.status_code}: {e.response.text}"
            ) from e
        # InvalidURL is not an HTTPError, and non-ASCII header values fail
        # with UnicodeEncodeError before anything is sent.
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.error(f"Completion request failed: {e}")
            raise CompletionError(f"Completion request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Completion response was not valid JSON: {e}")
            raise CompletionError(f"Completion response was not valid JSON: {e}") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected completion response {data}: {e!r}")
            raise CompletionError(f"Unexpected completion response: {data}") from e
        if not isinstance(content, str):
            logger.error(f"Completion content is not text: {content!r}")
            raise CompletionError(f"Completion content is not text: {content!r}")

        return content.strip()
