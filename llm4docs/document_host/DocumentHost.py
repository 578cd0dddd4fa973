from llm4docs.models import NodeID, Selection

from typing import Optional, Protocol


class DocumentHost(Protocol):
    """
    A DocumentHost is the narrow window this package has onto a rich-text
    document owned by some editor (a word processor add-on runtime, say).

    Text lives in text-bearing nodes, each identified by a NodeID, which can
    be any hashable object the host chooses. The user's selection is reported
    as an ordered list of RangeFragments over those nodes.

    Nothing else about the host document is visible: no formatting, no
    structure, no undo history.

    """

    def get_selection(self) -> Optional[Selection]:
        """
        Return the user's current selection, in document order, or None if
        nothing is selected.

        """
        ...

    def get_text(self, node_id: NodeID) -> str:
        """
        Get the full text of the specified node.

        """
        ...

    def set_text(self, node_id: NodeID, text: str) -> None:
        """
        Replace the full text of the specified node.

        """
        ...

    def alert(self, message: str) -> None:
        """
        Show a blocking message to the user.
        """
        ...
