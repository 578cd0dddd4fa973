from typing import Hashable, Optional
from pydantic import BaseModel, model_validator
from enum import Enum


NodeID = Hashable


class RangeFragment(BaseModel):
    """
    One contiguous piece of a user selection, scoped to a single text-bearing
    node in the host document.

    Offsets are character offsets into the node's full text. The end offset is
    inclusive, so a fragment covering "Hello" in "Hello world" is (0, 4).

    """

    node_id: NodeID
    is_partial: bool = False
    start_offset: Optional[int] = None
    end_offset_inclusive: Optional[int] = None

    @model_validator(mode="after")
    def _check_offsets(self) -> "RangeFragment":
        if not self.is_partial:
            return self
        if self.start_offset is None or self.end_offset_inclusive is None:
            raise ValueError("Partial fragments require both offsets.")
        if self.start_offset < 0 or self.end_offset_inclusive < self.start_offset - 1:
            raise ValueError(
                f"Invalid offsets ({self.start_offset}, "
                f"{self.end_offset_inclusive}) for node {self.node_id}."
            )
        return self

    def slice_bounds(self, text: str) -> tuple[int, int]:
        """
        Return python-style (start, end) slice bounds of this fragment in the
        given node text.

        """
        if not self.is_partial:
            return 0, len(text)
        return self.start_offset, self.end_offset_inclusive + 1  # type: ignore


class Selection(BaseModel):
    fragments: list[RangeFragment] = []

    @model_validator(mode="after")
    def _check_interior(self) -> "Selection":
        # Only the ends of a multi-node selection may cut into a node.
        for fragment in self.fragments[1:-1]:
            if fragment.is_partial:
                raise ValueError(
                    f"Interior fragment on node {fragment.node_id} is partial."
                )
        return self

    def is_empty(self) -> bool:
        return len(self.fragments) == 0


class ExtractedSelection(BaseModel):
    text: str
    selection: Selection


class PromptRequest(BaseModel):
    context: str
    instruction: str
    selected_text: str


class MultiFragmentPolicy(str, Enum):
    clear_span = "clear_span"
    first_only = "first_only"
