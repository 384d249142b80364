"""String case conversion used to derive identifiers from module names."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

__all__ = ["ModuleNames", "camel_case", "pascal_case", "split_words"]


_SEPARATORS = re.compile(r"[^0-9a-zA-Z]+")
_WORD_BOUNDARY = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def _ascii(value: str) -> str:
    text = unicodedata.normalize("NFKD", value)
    return text.encode("ascii", "ignore").decode("ascii")


def split_words(value: str) -> list[str]:
    """Break ``value`` into words.

    Separators are any run of characters that are not ASCII letters or digits.
    Inside a run, a lower case letter followed by an upper case one starts a new
    word, as does the switch between letters and digits. ``"userProfile"`` and
    ``"user-profile"`` both produce ``["user", "profile"]``.

    Words are lower-cased except for upper case runs such as ``ID`` in
    ``"userID"``, which keep their case unless the whole name is upper case
    (``"USER_ID"`` gives ``["user", "id"]``).
    """

    text = _ascii(value)
    shouting = text.isupper()
    words: list[str] = []
    for chunk in _SEPARATORS.split(text):
        if not chunk:
            continue
        for word in _WORD_BOUNDARY.findall(chunk):
            words.append(word if _is_acronym(word) and not shouting else word.lower())
    return words


def _is_acronym(word: str) -> bool:
    return len(word) > 1 and word.isupper()


def _capitalize(word: str) -> str:
    return word if _is_acronym(word) else word.capitalize()


def pascal_case(value: str) -> str:
    """Return the class style identifier for ``value`` (``"task item"`` -> ``"TaskItem"``)."""

    return "".join(_capitalize(word) for word in split_words(value))


def camel_case(value: str) -> str:
    """Return the variable style identifier for ``value`` (``"task item"`` -> ``"taskItem"``)."""

    words = split_words(value)
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(_capitalize(word) for word in rest)


@dataclass(frozen=True, slots=True)
class ModuleNames:
    """Identifiers derived from a user supplied module name.

    Attributes
    ----------
    name:
        The module name exactly as given. Used for the folder under the module
        root.
    class_name:
        Pascal case form substituted for the ``Base`` placeholder.
    variable_name:
        Camel case form substituted for the ``base`` placeholder.
    """

    name: str
    class_name: str
    variable_name: str

    @classmethod
    def from_name(cls, name: str) -> "ModuleNames":
        return cls(name=name, class_name=pascal_case(name), variable_name=camel_case(name))
