from llm4docs.document_host import DocumentHost
from llm4docs.errors import NoSelectionError
from llm4docs.logger import logger
from llm4docs.models import ExtractedSelection


def read_selection(host: DocumentHost) -> ExtractedSelection:
    """
    Read the host's current selection as one plain-text string.

    Each fragment contributes either its inclusive [start, end] slice of the
    node text (if partial) or the whole node text. The pieces are joined with
    no separator.

    Arguments:
        host: The document host to read from. It is never written to.

    Returns:
        ExtractedSelection: The text, plus the selection it was read from so
            that a writer can later put a replacement in the same place.

    """
    selection = host.get_selection()
    if selection is None or selection.is_empty():
        raise NoSelectionError()

    pieces = []
    for fragment in selection.fragments:
        text = host.get_text(fragment.node_id)
        start, end = fragment.slice_bounds(text)
        pieces.append(text[start:end])

    extracted = "".join(pieces)
    logger.debug(
        f"Read {len(extracted)} characters from {len(selection.fragments)} "
        "fragment(s)."
    )
    return ExtractedSelection(text=extracted, selection=selection)
