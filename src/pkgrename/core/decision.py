"""
Interactive yes / no / all / none decisions.
"""

from typing import Callable, Optional

import typer

from .session import Decision, Kind, RenameSession


# Answer text -> (allowed, batch decision to settle on)
ANSWERS = {
    'y': (True, Decision.ASK),
    'yes': (True, Decision.ASK),
    'n': (False, Decision.ASK),
    'no': (False, Decision.ASK),
    'a': (True, Decision.ALL),
    'all': (True, Decision.ALL),
    'yes to all': (True, Decision.ALL),
    's': (False, Decision.NONE),
    'none': (False, Decision.NONE),
    'no to all': (False, Decision.NONE),
    'skip': (False, Decision.NONE),
    'skip all': (False, Decision.NONE),
}

CHOICES_HINT = "[y]es / [n]o / [a]ll / [s]kip all"

ESCALATION_MESSAGES = {
    Kind.CONTENTS: "Rewriting all file contents",
    Kind.RENAMES: "Renaming all files",
}


def parse_answer(answer: Optional[str]):
    """
    Interpret a raw answer.

    Returns
    -------
    allowed : bool
        Whether the current item is accepted
    decision : Decision
        ALL or NONE when the answer escalates, otherwise ASK

    Notes
    -----
    Unknown or empty answers skip the current item only.
    """
    if answer is None:
        return False, Decision.ASK
    return ANSWERS.get(answer.strip().lower(), (False, Decision.ASK))


def typer_prompt(message: str) -> str:
    """Ask on the terminal and return the raw answer."""
    return typer.prompt(f"{message} {CHOICES_HINT}", default="", show_default=False)


class DecisionGate:
    """
    Resolve rewrite candidates to allow/deny, prompting only while needed.

    Parameters
    ----------
    session : RenameSession
        Session holding the two decision flags
    prompt : callable, optional
        ``prompt(message) -> str`` returning the user's answer.
        Defaults to a Typer terminal prompt.
    """

    def __init__(self, session: RenameSession, prompt: Optional[Callable[[str], str]] = None):
        self.session = session
        self.prompt = prompt or typer_prompt

    def resolve(self, kind: Kind, message: str) -> bool:
        """
        Decide whether the candidate described by ``message`` is applied.

        Errors raised by the prompt callable propagate to the caller.
        """
        current = self.session.decision(kind)
        if current is Decision.ALL:
            return True
        if current is Decision.NONE:
            return False

        allowed, decision = parse_answer(self.prompt(message))
        if decision is not Decision.ASK:
            self.session.settle(kind, decision)
            if decision is Decision.ALL and not self.session.quiet:
                typer.echo(f"  - {ESCALATION_MESSAGES[Kind(kind)]}")
        return allowed
