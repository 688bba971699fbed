"""Interactive autocomplete prompts built on prompt_toolkit."""

from collections.abc import Callable, Iterable, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.validation import Validator

from brewcast.errors import InputError
from brewcast.prompt.fuzzy import filter_candidates


class SubsequenceCompleter(Completer):
    """Suggests every option the typed text is a subsequence of."""

    def __init__(self, options: Sequence[str]):
        self.options = list(options)

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        for match in filter_candidates(text.strip(), self.options):
            yield Completion(match, start_position=-len(text))


class LocationPrompter:
    """Asks the user to pick one entry from a fixed list.

    Free text is rejected: the answer must equal one of the options
    (case and surrounding whitespace ignored).
    """

    def __init__(self, session_factory: Callable[[], PromptSession] = PromptSession):
        self._session_factory = session_factory

    def choose(self, message: str, options: Sequence[str]) -> str:
        if not options:
            raise InputError(f"No options available for {message!r}")

        canonical = {o.casefold(): o for o in options}
        validator = Validator.from_callable(
            lambda text: text.strip().casefold() in canonical,
            error_message="Pick one of the suggested entries",
            move_cursor_to_end=True,
        )
        try:
            answer = self._session_factory().prompt(
                f"{message} ",
                completer=SubsequenceCompleter(options),
                complete_while_typing=True,
                validator=validator,
                validate_while_typing=False,
            )
        except (KeyboardInterrupt, EOFError) as e:
            raise InputError("Input cancelled") from e

        choice = canonical.get((answer or "").strip().casefold())
        if choice is None:
            raise InputError(f"{answer!r} is not one of the offered options")
        return choice
