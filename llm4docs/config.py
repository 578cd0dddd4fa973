from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from llm4docs.models import MultiFragmentPolicy


class CompletionConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LLM4DOCS_OPENAI_")

    api_key: str = "sk-###"
    endpoint: str = "https://api.openai.com/v1/chat/completions"
    model: str = "gpt-4o"
    temperature: float = 0.7
    max_tokens: int = 1000

    # None means the provider's own timeouts apply; we don't set one.
    request_timeout_sec: Optional[float] = None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LLM4DOCS_")

    # The system-level directive used when an action is invoked without one.
    default_context: str = (
        "You are a careful writing assistant. You edit text that a user has "
        "selected in a document. Respond with the edited text only."
    )

    # How to write a replacement over a selection that spans several nodes.
    # "first_only" writes into the first node and leaves the rest alone;
    # "clear_span" also clears the selected parts of the following nodes.
    multi_fragment_policy: MultiFragmentPolicy = MultiFragmentPolicy.clear_span

    log_level: str = "INFO"
