from .CompletionClient import CompletionClient, StaticCompletionClient
from .OpenAIChatCompletionClient import OpenAIChatCompletionClient
from .PromptBuilder import build_custom_prompt, build_preset_prompt
from .prompts import Presets


__all__ = [
    "CompletionClient",
    "StaticCompletionClient",
    "OpenAIChatCompletionClient",
    "build_custom_prompt",
    "build_preset_prompt",
    "Presets",
]
