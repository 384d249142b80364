"""Access to the boilerplate templates shipped with craftflow."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .naming import ModuleNames

__all__ = [
    "CLASS_PLACEHOLDER",
    "TEMPLATE_DIR",
    "VARIABLE_PLACEHOLDER",
    "TemplateStore",
    "substitute",
]


TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

CLASS_PLACEHOLDER = "Base"
VARIABLE_PLACEHOLDER = "base"


def substitute(text: str, names: ModuleNames) -> str:
    """Replace the placeholders in ``text`` with the identifiers from ``names``.

    Matching is a plain substring search, so ``Base`` inside ``BaseUrl`` is
    rewritten as well. The class placeholder is replaced first.
    """

    return text.replace(CLASS_PLACEHOLDER, names.class_name).replace(
        VARIABLE_PLACEHOLDER, names.variable_name
    )


@dataclass(slots=True)
class TemplateStore:
    """Read templates by their file name relative to ``root``."""

    root: Path = field(default=TEMPLATE_DIR)
    encoding: str = "utf-8"

    def path(self, identifier: str) -> Path:
        return Path(self.root) / identifier

    def load(self, identifier: str) -> str:
        """Return the text of ``identifier``, reading it from disk on every call."""

        return self.path(identifier).read_text(encoding=self.encoding)

    def render(self, identifier: str, names: ModuleNames) -> str:
        """Load ``identifier`` and substitute the module placeholders."""

        return substitute(self.load(identifier), names)
