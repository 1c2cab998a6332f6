# debug.py
from __future__ import annotations
import logging
from collections.abc import Iterable

COMPONENTS = (
    "keyboard",
    "plugboard",
    "rotor",
    "reflector",
    "stepping",
    "encipher",
    "loader",
)


class Debug:
    """Per-component switchboard in front of the ``ENIGMA`` logger.

    One instance is handed to every part of a machine; a part only logs when
    its component is active.
    """

    _root_configured: bool = False

    def __init__(self, *components: str, log_to: str | None = None) -> None:
        """Activate *components*, or all of them when none are named."""
        if not Debug._root_configured:
            handlers: list[logging.Handler] = [logging.StreamHandler()]
            if log_to:
                handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

            logging.basicConfig(
                level=logging.DEBUG,
                format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                handlers=handlers,
            )
            Debug._root_configured = True

        self.logger = logging.getLogger("ENIGMA")
        self.active: frozenset[str] = self._checked(components or COMPONENTS)

    @classmethod
    def quiet(cls) -> "Debug":
        """No active components and no logging setup; the library default."""
        inst = object.__new__(cls)
        inst.logger = logging.getLogger("ENIGMA")
        inst.active = frozenset()
        return inst

    def is_on(self, component: str) -> bool:
        return component in self.active

    def log(self, component: str, message: str) -> None:
        if component in self.active:
            self.logger.debug("[%s] %s", component.upper(), message)

    @staticmethod
    def _checked(components: Iterable[str]) -> frozenset[str]:
        unknown = set(components) - set(COMPONENTS)
        if unknown:
            raise ValueError(f"No such component: {', '.join(sorted(unknown))}")
        return frozenset(components)

    def __repr__(self) -> str:
        return f"<Debug active={sorted(self.active)}>"
