"""MenuLabels — localizable undo/redo menu titles."""

from __future__ import annotations

from string import Formatter

from pydantic import BaseModel, ConfigDict, field_validator

_REQUIRED_FIELDS = ("verb", "name")


class MenuLabels(BaseModel):
    """Immutable set of menu strings.

    ``pattern`` is a :meth:`str.format` template receiving ``verb`` and
    ``name``. Swap the instance to localize::

        UndoManager(labels=MenuLabels(undo="Rückgängig", redo="Wiederholen",
                                      pattern="{verb}: {name}"))
    """

    model_config = ConfigDict(frozen=True)

    undo: str = "Undo"
    redo: str = "Redo"
    pattern: str = '{verb} "{name}"'

    @field_validator("pattern")
    @classmethod
    def _check_placeholders(cls, value: str) -> str:
        fields: set[str] = set()
        # Formatter.parse raises ValueError on unbalanced braces.
        for _, field, spec, _ in Formatter().parse(value):
            if field is None:
                continue
            fields.add(field)
            if spec and "{" in spec:
                raise ValueError(f"pattern has a nested placeholder in {{{field}}}")
        missing = [f"{{{f}}}" for f in _REQUIRED_FIELDS if f not in fields]
        if missing:
            raise ValueError(f"pattern is missing placeholder(s): {', '.join(missing)}")
        unknown = sorted(fields - set(_REQUIRED_FIELDS))
        if unknown:
            names = ", ".join(repr(f) for f in unknown)
            raise ValueError(f"pattern has unknown placeholder(s): {names}")
        return value

    def title(self, verb: str, action_name: str | None) -> str:
        """Return ``pattern`` filled in, or the bare *verb* for an empty name."""
        if not action_name:
            return verb
        return self.pattern.format(verb=verb, name=action_name)

    def undo_title(self, action_name: str | None) -> str:
        return self.title(self.undo, action_name)

    def redo_title(self, action_name: str | None) -> str:
        return self.title(self.redo, action_name)


DEFAULT_MENU_LABELS = MenuLabels()
