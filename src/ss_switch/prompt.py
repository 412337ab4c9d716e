"""Interactive candidate selection."""

from InquirerPy import inquirer
from InquirerPy.base.control import Choice
from InquirerPy.utils import get_style

from .exceptions import PromptCancelled
from .lang import Localizer
from .models import ConfigCandidate
from .utils import format_candidate

STYLE = get_style(
    {
        "pointer": "ansibrightcyan",
        "long_instruction": "ansibrightblue",
        "answer": "ansicyan",
    },
    style_override=False,
)

POINTER = "👉"
MAX_HEIGHT = "70%"


def select_config(candidates: list[ConfigCandidate], localizer: Localizer) -> ConfigCandidate:
    """Ask the user to pick exactly one candidate.

    The first candidate is highlighted initially; the list must not be empty.

    Raises:
        PromptCancelled: If the user aborts or input is closed
    """
    choices = [Choice(value=candidate, name=format_candidate(candidate)) for candidate in candidates]
    prompt = inquirer.select(
        message=localizer.get("select-config"),
        choices=choices,
        default=candidates[0],
        pointer=POINTER,
        long_instruction=localizer.get("help-msg"),
        max_height=MAX_HEIGHT,
        style=STYLE,
        mandatory=True,
    )

    try:
        return prompt.execute()
    except (KeyboardInterrupt, EOFError) as e:
        raise PromptCancelled(localizer.get("prompt-cancelled")) from e
