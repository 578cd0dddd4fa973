from typing import Callable, Protocol, Union

from llm4docs.models import PromptRequest


class CompletionClient(Protocol):
    """
    A CompletionClient turns a PromptRequest into the text that will replace
    the user's selection.

    Implementors will almost certainly be LLM API calls. Any failure should be
    raised as a CompletionError so the caller can tell the user about it.

    """

    def complete(self, request: PromptRequest) -> str:
        """
        Return the completion text for the request, trimmed of surrounding
        whitespace.
        """
        ...


class StaticCompletionClient(CompletionClient):
    """
    A completion client that never leaves the process. It returns a fixed
    string, or whatever a callable makes of the request.

    Intended for testing and dry runs.

    """

    def __init__(self, response: Union[str, Callable[[PromptRequest], str]]):
        self._response = response
        self.requests: list[PromptRequest] = []

    def complete(self, request: PromptRequest) -> str:
        self.requests.append(request)
        if callable(self._response):
            return self._response(request).strip()
        return self._response.strip()
