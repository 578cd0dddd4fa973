from typing import Optional

from llm4docs.models import NodeID, RangeFragment, Selection
from llm4docs.document_host.DocumentHost import DocumentHost


class InMemoryDocumentHost(DocumentHost):
    """
    This DocumentHost implementation stores the document in memory, as a dict
    from node IDs to node text, and records alerts instead of showing them.

    It is intended for primary use in testing and debugging.

    """

    def __init__(
        self,
        nodes: dict[NodeID, str],
        selection: Optional[Selection] = None,
    ):
        """
        Create a new InMemoryDocumentHost.

        Arguments:
            nodes: A dict mapping node IDs to node text, in document order.
            selection: The initial selection, if any.

        """
        self._nodes = dict(nodes)
        self._selection = selection
        self.alerts: list[str] = []
        self.mutation_count = 0

    def select(self, *fragments: RangeFragment) -> Selection:
        """
        Set the current selection from the given fragments.

        """
        self._selection = Selection(fragments=list(fragments))
        return self._selection

    def clear_selection(self):
        self._selection = None

    def get_selection(self) -> Optional[Selection]:
        return self._selection

    def get_text(self, node_id: NodeID) -> str:
        if node_id not in self._nodes:
            raise KeyError(f"Node {node_id} not found.")
        return self._nodes[node_id]

    def set_text(self, node_id: NodeID, text: str) -> None:
        if node_id not in self._nodes:
            raise KeyError(f"Node {node_id} not found.")
        self._nodes[node_id] = text
        self.mutation_count += 1

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def to_dict(self):
        return {
            "type": self.__class__.__name__,
            "nodes": dict(self._nodes),
            "selection": self._selection.model_dump() if self._selection else None,
        }
