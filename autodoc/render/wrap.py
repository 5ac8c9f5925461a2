"""Word wrapping for description cells."""

from ..constants import WORD_BREAK


def wrap(text: str, max_words: int) -> str:
    """
    Wrap text to at most max_words words per visual line.

    Lines are joined with the intra-cell break sequence so that the result
    stays on one physical line inside a table cell.

    Args:
        text: Free text to wrap
        max_words: Words per line; zero or negative disables wrapping

    Returns:
        Wrapped text, or the input unchanged when there is nothing to wrap
    """
    if max_words <= 0 or not text.strip():
        return text

    words = text.split()
    lines = [
        " ".join(words[i : i + max_words]) for i in range(0, len(words), max_words)
    ]
    return WORD_BREAK.join(lines)
