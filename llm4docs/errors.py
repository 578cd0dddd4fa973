class LLM4DocsError(Exception):
    """
    Base class for errors that end an action and are shown to the user.

    """


class NoSelectionError(LLM4DocsError):
    def __init__(self, message: str = "Please select some text first."):
        super().__init__(message)


class CompletionError(LLM4DocsError):
    """
    Raised for any failure building, sending, or parsing a completion request.

    """
