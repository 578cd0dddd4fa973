from llm4docs.completion.prompts import Presets
from llm4docs.models import PromptRequest


def build_preset_prompt(
    preset: str, selected_text: str, context: str = ""
) -> PromptRequest:
    """
    Apply the named preset template to the selected text.

    """
    template = Presets.get(preset)
    return PromptRequest(
        context=context,
        instruction=template.format(text=selected_text),
        selected_text=selected_text,
    )


def build_custom_prompt(
    instruction: str, selected_text: str, context: str = ""
) -> PromptRequest:
    """
    Combine a user-written instruction with the selected text.

    Empty instructions are passed through; rejecting them is up to whatever
    collected the instruction from the user.

    """
    return PromptRequest(
        context=context,
        instruction=f"{instruction}\n\n{selected_text}",
        selected_text=selected_text,
    )
