# debug.py
from __future__ import annotations
import logging

COMPONENTS = (
    "keyboard",
    "plugboard",
    "switch",
    "stepping",
    "encipher",
    "decipher",
    "key",
)


class Debug:
    """Per-component debug tracing on the "PURPLE" logger.

    All instances share one component map. The root logger is left alone
    until some component is switched on, so importing the machine modules
    has no logging side effects.
    """

    _root_configured: bool = False
    _log_to: str | None = None
    _shared: dict[str, bool] = {c: False for c in COMPONENTS}

    def __init__(self, *, log_to: str | None = None) -> None:
        if log_to:
            Debug._log_to = log_to
        self.logger = logging.getLogger("PURPLE")
        self.enabled = True        # per-instance switch
        self.components: dict[str, bool] = Debug._shared

    @classmethod
    def _configure_root(cls) -> None:
        if cls._root_configured:
            return
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if cls._log_to:
            handlers.append(logging.FileHandler(cls._log_to, encoding="utf-8"))

        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
        )
        cls._root_configured = True

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if self.is_on(component):
            self.logger.debug("[%s] %s", component.upper(), message)

    def is_on(self, component: str) -> bool:
        return self.enabled and self.components.get(component, False)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True
        if components:
            self._configure_root()

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        self.components[component] = not self.components[component]
        if self.components[component]:
            self._configure_root()

    def toggle_global(self, state: bool) -> None:
        """Mute (False) or unmute (True) this instance; the shared map is kept."""
        self.enabled = state

    def status(self) -> dict[str, bool]:
        return self.components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"
