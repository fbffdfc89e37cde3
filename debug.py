# debug.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Dict, Iterator

COMPONENTS = ("rotor", "plugboard", "reflector", "stepping", "encipher", "settings")
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("ENIGMA")


class Debug:
    """Per-component switchboard in front of the ``ENIGMA`` logger.

    Importing this module never touches handlers or levels; output is
    wired up by `attached`, which the CLI enters for ``--debug``.
    """

    def __init__(self) -> None:
        self.enabled = True        # global switch
        self.components: Dict[str, bool] = {c: False for c in COMPONENTS}

    def log(self, component: str, message: str) -> None:
        if self.enabled and self.components.get(component, False):
            logger.debug("[%s] %s", component.upper(), message)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        self.components[component] = not self.components[component]

    def toggle_global(self, state: bool) -> None:
        self.enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return self.components.copy()

    @contextmanager
    def attached(self, *components: str, log_to: str | None = None) -> Iterator[None]:
        """Turn *components* on and give the logger its own handler for the block.

        Messages go to stderr, or to *log_to* when given. Component switches,
        logger level and handlers are all restored on exit.
        """
        saved = self.status()
        handler: logging.Handler = (
            logging.FileHandler(log_to, encoding="utf-8") if log_to else logging.StreamHandler()
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        old_level = logger.level

        self.enable(*components)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            yield
        finally:
            logger.removeHandler(handler)
            logger.setLevel(old_level)
            handler.close()
            self.components = saved

    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"


# one shared switchboard for every module
debug = Debug()
