"""Active-locale state cell.

One LocaleState holds the locale every resolution reads. Each
MessageResolver owns a cell; callers that want several resolvers to switch
language together inject the same cell into all of them.

Concurrency:
    No locking. Writes are a single attribute store, so the last writer
    wins and a resolution reads whichever value was stored when it began.

Python 3.13+. Zero external dependencies.
"""

import logging

from keyglot.constants import DEFAULT_LOCALE

__all__ = ["LocaleState"]

logger = logging.getLogger(__name__)


class LocaleState:
    """Mutable holder for the active locale.

    Example:
        >>> state = LocaleState()
        >>> state.get()
        'pt-BR'
        >>> state.set("en")
        >>> state.get()
        'en'
    """

    __slots__ = ("_locale",)

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        self._locale = locale

    def get(self) -> str:
        """Return the active locale."""
        return self._locale

    def set(self, locale: str) -> None:
        """Replace the active locale. Any value is accepted."""
        if locale != self._locale:
            logger.debug("Active locale changed: %s -> %s", self._locale, locale)
        self._locale = locale

    def __repr__(self) -> str:
        return f"LocaleState({self._locale!r})"
