from typing import Callable, Optional

from llm4docs.completion import (
    CompletionClient,
    Presets,
    build_custom_prompt,
    build_preset_prompt,
)
from llm4docs.config import Settings
from llm4docs.document_host import DocumentHost
from llm4docs.errors import LLM4DocsError
from llm4docs.logger import logger
from llm4docs.models import PromptRequest
from llm4docs.selection import read_selection, write_selection


class ActionDispatcher:
    """
    The user-invocable actions: each one reads the selection, builds a prompt,
    asks the completion client for a replacement and writes it back.

    Errors that end an action (no selection, failed completion) are logged,
    shown to the user through the host, and then re-raised. Neither of them
    leaves the document changed, because the write is the last step.

    """

    def __init__(
        self,
        host: DocumentHost,
        client: CompletionClient,
        settings: Optional[Settings] = None,
    ):
        self._host = host
        self._client = client
        self._settings = settings or Settings()
        logger.setLevel(self._settings.log_level)

    def available_actions(self) -> list[str]:
        return ["custom"] + Presets.names()

    def invoke(self, action_name: str, **kwargs) -> str:
        """
        Run an action by name. This is what a menu or sidebar calls.

        Arguments:
            action_name: "custom", or the name of a preset.
            kwargs: `context` for every action, plus `instruction` for
                "custom".

        """
        if action_name == "custom":
            return self.run_custom(**kwargs)
        if action_name not in Presets.names():
            raise KeyError(
                f"Unknown action {action_name!r}. Available actions: "
                f"{self.available_actions()}"
            )
        return self.run_preset(action_name, **kwargs)

    def run_preset(self, preset_name: str, context: Optional[str] = None) -> str:
        # Look the preset up before touching the document.
        Presets.get(preset_name)
        return self._run(
            preset_name,
            lambda text: build_preset_prompt(
                preset_name, text, context=self._context(context)
            ),
        )

    def run_custom(self, instruction: str, context: Optional[str] = None) -> str:
        return self._run(
            "custom",
            lambda text: build_custom_prompt(
                instruction, text, context=self._context(context)
            ),
        )

    def _context(self, context: Optional[str]) -> str:
        # An explicit empty string means "no system directive".
        if context is None:
            return self._settings.default_context
        return context

    def _run(self, name: str, build: Callable[[str], PromptRequest]) -> str:
        logger.info(f"Running action {name!r}.")
        try:
            extracted = read_selection(self._host)
            request = build(extracted.text)
            replacement = self._client.complete(request)
        except LLM4DocsError as e:
            logger.error(f"Action {name!r} failed: {e}")
            self._host.alert(str(e))
            raise

        logger.info(f"- {extracted.text}")
        logger.info(f"+ {replacement}")
        write_selection(
            self._host,
            extracted.selection,
            replacement,
            policy=self._settings.multi_fragment_policy,
        )
        logger.info(f"Action {name!r} done.")
        return replacement
