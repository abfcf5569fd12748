"""MessageResolver - main API for key-based message resolution.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Mapping

from keyglot.constants import DEFAULT_LOCALE, LOG_TRUNCATE_DEBUG
from keyglot.diagnostics import (
    ErrorTemplate,
    MessageError,
    MessageReferenceError,
    PlaceholderError,
)
from keyglot.enums import MissKind
from keyglot.runtime.catalog import Catalog
from keyglot.runtime.interpolation import substitute
from keyglot.runtime.locale_state import LocaleState
from keyglot.runtime.tree import lookup_with_reason
from keyglot.runtime.value_types import MessageValue

__all__ = ["MessageResolver"]

logger = logging.getLogger(__name__)


class MessageResolver:
    """Resolve dotted keys to display strings for the active locale.

    Resolution never raises. Any miss (unknown locale, missing path, key
    naming a sub-tree) degrades to the key itself, and placeholders without
    a value stay in the output untouched, so missing translations are
    visible in the UI instead of crashing it.

    Examples:
        >>> resolver = MessageResolver({
        ...     "pt-BR": {
        ...         "ui": {
        ...             "salvar_apontamento": "Salvar apontamento",
        ...             "janela": "Apontamento - {{window}}",
        ...         },
        ...     },
        ... })
        >>> resolver.resolve("ui.salvar_apontamento")
        'Salvar apontamento'
        >>> resolver.resolve("ui.janela", {"window": "09:00"})
        'Apontamento - 09:00'
        >>> resolver.resolve("ui.inexistente")
        'ui.inexistente'
        >>> resolver.set_locale("xx")
        >>> resolver.resolve("ui.salvar_apontamento")
        'ui.salvar_apontamento'

    Locale state:
        Each resolver owns a LocaleState unless one is injected. Resolvers
        sharing a state switch language together; separately constructed
        resolvers (e.g. in parallel tests) never see each other's changes.
    """

    __slots__ = ("_catalog", "_fallback_locale", "_state")

    def __init__(
        self,
        catalog: Catalog | Mapping[str, Mapping[str, object]] | None = None,
        /,
        *,
        state: LocaleState | None = None,
        default_locale: str | None = None,
        fallback_locale: str | None = None,
    ) -> None:
        """Initialize resolver over a fully loaded catalog.

        Args:
            catalog: Catalog, or plain locale -> nested dict mapping
                     (converted with Catalog.from_mapping) [positional-only]
            state: Shared LocaleState to read/write (default: new private state)
            default_locale: Initial locale of the private state
                            (default: DEFAULT_LOCALE, "pt-BR")
            fallback_locale: Locale searched when the active bundle misses
                             (default: None, misses echo the key directly)

        Raises:
            ValueError: If both state and default_locale are given
        """
        if state is not None and default_locale is not None:
            msg = "Pass either state or default_locale, not both"
            raise ValueError(msg)

        match catalog:
            case Catalog():
                self._catalog = catalog
            case None:
                self._catalog = Catalog()
            case _:
                self._catalog = Catalog.from_mapping(catalog)

        self._state = (
            state
            if state is not None
            else LocaleState(default_locale if default_locale is not None else DEFAULT_LOCALE)
        )
        self._fallback_locale = fallback_locale

        logger.info(
            "MessageResolver initialized with %d locale(s) (active=%s, fallback=%s)",
            len(self._catalog),
            self._state.get(),
            fallback_locale,
        )

    @property
    def catalog(self) -> Catalog:
        """Catalog this resolver reads (read-only)."""
        return self._catalog

    @property
    def locales(self) -> tuple[str, ...]:
        """Locale codes with a loaded bundle."""
        return self._catalog.locales

    @property
    def state(self) -> LocaleState:
        """Locale state cell (shared when injected)."""
        return self._state

    @property
    def fallback_locale(self) -> str | None:
        """Locale searched after the active one, if any."""
        return self._fallback_locale

    def set_locale(self, locale: str) -> None:
        """Make locale the active locale.

        No validation is performed; a locale without a bundle simply makes
        every key resolve to itself (or to the fallback locale's message).
        """
        self._state.set(locale)

    def get_locale(self) -> str:
        """Return the active locale."""
        return self._state.get()

    def has_message(self, key: str, locale: str | None = None) -> bool:
        """Check whether key reaches a string message.

        Args:
            key: Dotted key
            locale: Locale to check (default: active locale). The fallback
                    locale is not consulted.

        Returns:
            True if the bundle exists and the key ends on a message
        """
        bundle = self._catalog.bundle(locale if locale is not None else self._state.get())
        if bundle is None:
            return False
        text, _ = lookup_with_reason(bundle, key)
        return text is not None

    def resolve(self, key: str, values: Mapping[str, MessageValue] | None = None) -> str:
        """Resolve key to its display string in the active locale.

        Args:
            key: Dotted key (e.g. "ui.salvar_apontamento")
            values: Placeholder values; None skips interpolation entirely

        Returns:
            Interpolated message, or the (interpolated) key on a miss.
            Never raises.
        """
        result, _ = self.resolve_with_errors(key, values)
        return result

    def resolve_with_errors(
        self, key: str, values: Mapping[str, MessageValue] | None = None
    ) -> tuple[str, tuple[MessageError, ...]]:
        """Resolve key and report every miss encountered.

        Args:
            key: Dotted key
            values: Placeholder values; None skips interpolation entirely

        Returns:
            Tuple of (result, errors)
            - result: Same string resolve() returns
            - errors: MessageReferenceError per bundle searched without
              success, then PlaceholderError per placeholder left in place

        Note:
            This method NEVER raises. Errors are values, not exceptions.

        Example:
            >>> resolver = MessageResolver({"pt-BR": {"a": "{{x}} e {{y}}"}})
            >>> result, errors = resolver.resolve_with_errors("a", {"x": 1})
            >>> result
            '1 e {{y}}'
            >>> [type(e).__name__ for e in errors]
            ['PlaceholderError']
        """
        locale = self._state.get()
        template, errors = self._find_template(key, locale)

        if template is None:
            logger.warning("Message '%s' not found for locale %s", key, locale)
            template = key

        result, unresolved = substitute(template, values)
        for name in unresolved:
            errors.append(
                PlaceholderError(ErrorTemplate.placeholder_not_provided(name, key, locale))
            )

        if errors:
            for err in errors:
                logger.debug("  - %s: %s", type(err).__name__, err)
        else:
            logger.debug("Resolved message '%s': %s", key, result[:LOG_TRUNCATE_DEBUG])

        return result, tuple(errors)

    def _find_template(self, key: str, locale: str) -> tuple[str | None, list[MessageError]]:
        """Search the active bundle, then the fallback bundle."""
        errors: list[MessageError] = []
        for candidate in self._search_order(locale):
            bundle = self._catalog.bundle(candidate)
            if bundle is None:
                errors.append(
                    MessageReferenceError(ErrorTemplate.bundle_not_found(key, candidate))
                )
                continue

            text, miss = lookup_with_reason(bundle, key)
            if text is not None:
                if candidate != locale:
                    logger.debug(
                        "Message '%s' resolved from fallback locale %s (requested %s)",
                        key,
                        candidate,
                        locale,
                    )
                return text, errors

            diagnostic = (
                ErrorTemplate.message_not_leaf(key, candidate)
                if miss is MissKind.NOT_LEAF
                else ErrorTemplate.message_not_found(key, candidate)
            )
            errors.append(MessageReferenceError(diagnostic))
        return None, errors

    def _search_order(self, locale: str) -> tuple[str, ...]:
        fallback = self._fallback_locale
        if fallback is None or fallback == locale:
            return (locale,)
        return (locale, fallback)

    def __repr__(self) -> str:
        return (
            f"MessageResolver(locales={self.locales!r}, "
            f"active={self._state.get()!r}, fallback={self._fallback_locale!r})"
        )
