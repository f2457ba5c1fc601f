"""Author list normalization."""

from typing import Sequence, Union


def normalize_authors(author: Union[str, Sequence[str]]) -> tuple[list[str], str]:
    """Return the authors as a list and as a newline-joined display string."""
    if isinstance(author, str):
        authors = [author]
    else:
        authors = list(author)
    return authors, "\n".join(authors)
