"""Process-wide holder of the active theme.

The registry resolves the theme from the configuration on first use and
publishes it. Rendering code reads it with ``current_theme()``. A reload
resolves a new theme and swaps it in as a whole; a published theme is never
modified.

Usage:
    from tint.registry import current_theme, reload_theme

    theme = current_theme()
    ...
    reload_theme()  # after the config file changed
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from typing import Any

from tint.errors import ThemeError
from tint.logger import get_logger
from tint.settings import load_theme_document
from tint.themes import DEFAULT_THEME, Theme, load_theme

logger = get_logger(__name__)

ThemeLoader = Callable[[], Mapping[str, Any] | None]
ThemeListener = Callable[[Theme], None]


class ThemeRegistry:
    """Owns the active theme and controls when it is replaced.

    Writers (``init``, ``reload``, ``publish``) are serialized by a lock.
    Readers never lock: ``current`` reads a single attribute, so it returns
    either the previous or the new theme, never a mix of both.

    Listeners are called one publication at a time, each with the theme that
    is current when it runs. When publications overlap a listener may see the
    same theme twice, but the last call always carries the active theme.
    """

    def __init__(
        self,
        loader: ThemeLoader | None = None,
        *,
        strict: bool = True,
        defaults: Theme = DEFAULT_THEME,
    ) -> None:
        """Initialize the registry.

        Args:
            loader: Returns the raw theme document. Defaults to reading the
                configuration file.
            strict: Reject unknown keys in the theme document.
            defaults: Theme supplying unset slots.
        """
        self._loader: ThemeLoader = loader if loader is not None else load_theme_document
        self._strict = strict
        self._defaults = defaults
        self._theme: Theme | None = None
        self._lock = threading.Lock()
        self._notify_lock = threading.RLock()
        self._listeners: list[ThemeListener] = []

    @property
    def is_initialized(self) -> bool:
        """Whether a theme has been published."""
        return self._theme is not None

    def _resolve(self) -> Theme:
        return load_theme(self._loader(), strict=self._strict, defaults=self._defaults)

    def init(self) -> Theme:
        """Resolve and publish the theme, once.

        Returns:
            The published theme. Later calls return it without reloading.

        Raises:
            ThemeError: If the configuration is invalid.
        """
        with self._lock:
            if self._theme is not None:
                return self._theme
            theme = self._resolve()
            self._theme = theme
        logger.info("Theme initialized")
        self._notify()
        return theme

    def reload(self) -> Theme:
        """Resolve the theme again and replace the published one.

        Returns:
            The newly published theme.

        Raises:
            ThemeError: If the configuration is invalid. The previously
                published theme stays active.
        """
        with self._lock:
            try:
                theme = self._resolve()
            except ThemeError as exc:
                logger.warning(f"Theme reload failed, keeping current theme: {exc}")
                raise
            self._theme = theme
        logger.info("Theme reloaded")
        self._notify()
        return theme

    def publish(self, theme: Theme) -> None:
        """Replace the published theme with an already resolved one.

        Args:
            theme: Theme to publish.
        """
        with self._lock:
            self._theme = theme
        self._notify()

    def current(self) -> Theme:
        """Get the active theme, initializing it on first use.

        Returns:
            The published theme.

        Raises:
            ThemeError: If lazy initialization fails.
        """
        theme = self._theme
        if theme is None:
            return self.init()
        return theme

    def subscribe(self, listener: ThemeListener) -> None:
        """Call ``listener`` with every newly published theme."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: ThemeListener) -> None:
        """Stop notifying ``listener``. Unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        with self._notify_lock:
            theme = self._theme
            if theme is None:
                return
            for listener in list(self._listeners):
                try:
                    listener(theme)
                except Exception:
                    logger.exception(f"Theme listener {listener!r} failed")


_registry: ThemeRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> ThemeRegistry:
    """Get the process-wide registry, creating it on first use.

    Returns:
        The shared ThemeRegistry.
    """
    global _registry
    registry = _registry
    if registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = ThemeRegistry()
            registry = _registry
    return registry


def reset_registry(registry: ThemeRegistry | None = None) -> None:
    """Replace the process-wide registry.

    Args:
        registry: New registry. None drops the current one; the next access
            creates a fresh registry reading the configuration file.
    """
    global _registry
    with _registry_lock:
        _registry = registry


def init_theme() -> Theme:
    """Initialize the process-wide theme."""
    return get_registry().init()


def reload_theme() -> Theme:
    """Reload the process-wide theme."""
    return get_registry().reload()


def current_theme() -> Theme:
    """Get the process-wide active theme."""
    return get_registry().current()
