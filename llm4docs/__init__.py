from .errors import CompletionError, LLM4DocsError, NoSelectionError
from .models import (
    ExtractedSelection,
    MultiFragmentPolicy,
    NodeID,
    PromptRequest,
    RangeFragment,
    Selection,
)


__all__ = [
    "CompletionError",
    "LLM4DocsError",
    "NoSelectionError",
    "ExtractedSelection",
    "MultiFragmentPolicy",
    "NodeID",
    "PromptRequest",
    "RangeFragment",
    "Selection",
]
