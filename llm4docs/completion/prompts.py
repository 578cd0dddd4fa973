"""
This file holds the library of preset instructions that can be applied to a
user's selection. Each preset is a template with a single `{text}` variable,
which is filled with the selected text. If you are about to edit one of these
presets, consider adding a new one instead so that users who rely on the old
wording are not surprised.

Every preset should ask for the rewritten text only, since whatever the model
returns is written straight into the document.

"""


class Presets:
    """
    Preset instructions for chat-based LLMs.

    These are just strings, but by scoping them to a class we can list them
    for a menu and check names early.

    """

    formal = """Rewrite the following text in a formal, professional register.
Keep the meaning and any concrete details. Only respond with the rewritten
text; do not include comments or suggestions.

{text}"""

    casual = """Rewrite the following text in a relaxed, conversational tone.
Keep the meaning. Only respond with the rewritten text; do not include
comments or suggestions.

{text}"""

    shorten = """Make the following text more concise without losing its
meaning. Only respond with the shortened text.

{text}"""

    expand = """Expand the following text with more detail and explanation,
keeping its tone. Only respond with the expanded text.

{text}"""

    fix_grammar = """Correct the spelling, grammar, and punctuation of the
following text. Do not change its wording otherwise. Only respond with the
corrected text.

{text}"""

    simplify = """Rewrite the following text using plain, simple language
that a general audience can follow. Only respond with the rewritten text.

{text}"""

    summarize = """Summarize the following text in a few sentences. Only
respond with the summary.

{text}"""

    @classmethod
    def names(cls) -> list[str]:
        return sorted(
            name
            for name, value in vars(cls).items()
            if not name.startswith("_") and isinstance(value, str)
        )

    @classmethod
    def get(cls, name: str) -> str:
        if name not in cls.names():
            raise KeyError(
                f"Unknown preset {name!r}. Available presets: {cls.names()}"
            )
        return getattr(cls, name)
