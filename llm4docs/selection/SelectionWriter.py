from typing import Optional

from llm4docs.document_host import DocumentHost
from llm4docs.logger import logger
from llm4docs.models import MultiFragmentPolicy, Selection


def write_selection(
    host: DocumentHost,
    selection: Optional[Selection],
    replacement: str,
    policy: MultiFragmentPolicy = MultiFragmentPolicy.clear_span,
) -> bool:
    """
    Write `replacement` into the document where `selection` was.

    The replacement always lands in the first fragment, after any unselected
    prefix of that node. For a single fragment, the unselected suffix of the
    node is kept too. What happens to the remaining fragments of a multi-node
    selection depends on `policy`:

    - clear_span: the selected text of every later fragment is removed, so
      the whole span reads as the replacement. A partial last fragment keeps
      its unselected suffix.
    - first_only: the first node is cut at the selection start, and later
      fragments are left as they were.

    Arguments:
        host: The document host to write to.
        selection: The selection returned by the reader. None or empty is a
            no-op, since the reader has already complained about that.
        replacement: Plain text; no markup is interpreted.
        policy: See above.

    Returns:
        True if the document was written, False otherwise.

    """
    if selection is None or selection.is_empty():
        logger.info("No selection to write to; skipping.")
        return False

    fragments = selection.fragments
    first = fragments[0]
    text = host.get_text(first.node_id)
    start, end = first.slice_bounds(text)

    if len(fragments) == 1:
        host.set_text(first.node_id, text[:start] + replacement + text[end:])
        logger.info(f"Replaced {end - start} characters in node {first.node_id}.")
        return True

    host.set_text(first.node_id, text[:start] + replacement)
    if policy == MultiFragmentPolicy.first_only:
        logger.info(
            f"Replaced selection start in node {first.node_id}; left "
            f"{len(fragments) - 1} later fragment(s) untouched."
        )
        return True

    for fragment in fragments[1:]:
        text = host.get_text(fragment.node_id)
        _, end = fragment.slice_bounds(text)
        host.set_text(fragment.node_id, text[end:])
    logger.info(
        f"Replaced selection spanning {len(fragments)} nodes, starting at node "
        f"{first.node_id}."
    )
    return True
