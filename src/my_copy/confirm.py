"""Interactive overwrite confirmation."""
import logging
from typing import BinaryIO, Optional

import click

from my_copy.constants import (
    CANCEL_MESSAGE,
    INVALID_ANSWER_PROMPT,
    OVERWRITE_PROMPT,
    PROCEED_MESSAGE,
)
from my_copy.exceptions import ConfirmationError

L = logging.getLogger(__name__)

_YES = b"y"
_NO = b"n"


def _read_answer(stream: BinaryIO) -> bytes:
    try:
        line = stream.readline()
    except OSError as e:
        raise ConfirmationError() from e

    if not line:
        L.debug("End of input reached while waiting for an answer.")
        raise ConfirmationError()

    return line.strip().lower()


def confirm_overwrite(destination: str, stream: Optional[BinaryIO] = None) -> bool:
    """Ask whether an existing destination may be overwritten.

    The question is repeated until a 'y' or 'n' answer (any case) is given. Answers are
    compared as raw bytes, so input in any encoding is either accepted or re-prompted.

    Args:
        destination: Destination path, shown verbatim in the prompt.
        stream: Binary stream answers are read from, one line per answer.
            Defaults to the current standard input.

    Returns:
        True if the user agreed to overwrite, False if the copy was cancelled.

    Raises:
        ConfirmationError: If the input stream fails or is exhausted.
    """
    if stream is None:
        stream = click.get_binary_stream("stdin")

    click.echo(OVERWRITE_PROMPT.format(destination=destination), nl=False)

    while True:
        answer = _read_answer(stream)

        if answer == _YES:
            click.echo(PROCEED_MESSAGE)
            return True

        if answer == _NO:
            click.echo(CANCEL_MESSAGE)
            return False

        L.debug("Rejected answer %r", answer)
        click.echo(INVALID_ANSWER_PROMPT, nl=False)
