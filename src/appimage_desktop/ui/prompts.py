"""Interactive prompts.

All questions the tool asks go through Prompter so tests can script the
answers by injecting input/output callables.
"""

from collections.abc import Callable, Sequence

from appimage_desktop.exceptions import UserAbortedError


class Prompter:
    """Asks the user for free text, yes/no answers and numbered choices."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ) -> None:
        """Initialize prompter.

        Args:
            input_func: Reads one answer given a prompt string
            output_func: Writes one line of text for the user

        """
        self._input = input_func
        self._output = output_func

    def show(self, message: str) -> None:
        """Write a line of text for the user."""
        self._output(message)

    def ask(self, message: str) -> str:
        """Ask for free text and return the stripped answer.

        Raises:
            UserAbortedError: If input ends (Ctrl-D)

        """
        try:
            return self._input(message).strip()
        except EOFError:
            raise UserAbortedError("") from None

    def confirm(self, message: str, *, default: bool) -> bool:
        """Ask a yes/no question.

        Only an explicit opposite answer overrides the default, so with
        ``default=True`` anything but "n"/"no" means yes.

        Args:
            message: Question text without the (Y/n) hint
            default: Answer used for anything but an explicit opposite

        Returns:
            The user's decision

        """
        hint = "(Y/n)" if default else "(y/N)"
        answer = self.ask(f"{message} {hint}: ").lower()
        if default:
            return answer not in ("n", "no")
        return answer in ("y", "yes")

    def choose(
        self,
        title: str,
        options: Sequence[str],
        prompt: str = "Enter your selection: ",
    ) -> int:
        """Show a numbered menu and return the index of the chosen option.

        Re-asks until the answer is a number within range.

        Args:
            title: Heading printed above the menu
            options: Option labels, shown numbered from 1
            prompt: Prompt for the answer

        Returns:
            Zero-based index into options

        Raises:
            ValueError: If options is empty
            UserAbortedError: If input ends (Ctrl-D)

        """
        if not options:
            msg = "choose() needs at least one option"
            raise ValueError(msg)

        self.show(title)
        width = len(str(len(options)))
        for number, option in enumerate(options, start=1):
            self.show(f" {number:>{width}}) {option}")

        while True:
            answer = self.ask(prompt)
            if answer.isdecimal() and 1 <= int(answer) <= len(options):
                return int(answer) - 1
            self.show("Invalid selection. Please try again.")
