import sys

from llm4docs.actions import ActionDispatcher
from llm4docs.completion import OpenAIChatCompletionClient
from llm4docs.config import CompletionConfig, Settings
from llm4docs.document_host import InMemoryDocumentHost
from llm4docs.errors import LLM4DocsError
from llm4docs.models import RangeFragment


def main(argv: list[str]) -> int:
    """
    Run one action over text read from stdin, treating all of it as the
    selection, and print the edited text.

    Usage: python -m llm4docs.service <action> [instruction...]

    """
    settings = Settings()

    if not argv:
        print(f"Usage: {sys.argv[0]} <action> [instruction...]", file=sys.stderr)
        return 2
    action, instruction = argv[0], " ".join(argv[1:])
    if action == "custom" and not instruction.strip():
        print("A custom action needs an instruction.", file=sys.stderr)
        return 2

    host = InMemoryDocumentHost({"stdin": sys.stdin.read()})
    host.select(RangeFragment(node_id="stdin"))
    dispatcher = ActionDispatcher(
        host, OpenAIChatCompletionClient(CompletionConfig()), settings
    )

    kwargs = {"instruction": instruction} if action == "custom" else {}
    try:
        dispatcher.invoke(action, **kwargs)
    except LLM4DocsError:
        for alert in host.alerts:
            print(alert, file=sys.stderr)
        return 1
    except KeyError as e:
        print(e.args[0], file=sys.stderr)
        return 2

    print(host.get_text("stdin"))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
