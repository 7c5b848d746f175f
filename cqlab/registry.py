"""Keyed registry for pluggable output formats.

Renderers register themselves under a short key so that the command
line can offer every available format without an if-else chain::

    renderer_registry = Registry("renderer")

    @renderer_registry.register("ascii")
    class AsciiTableRenderer(TableRenderer):
        ...

    renderer = renderer_registry.create("ascii")
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Type, TypeVar

T = TypeVar("T")


class Registry:
    """Map string keys to classes and build instances on demand."""

    def __init__(self, name: str = "registry") -> None:
        """Initialize an empty registry.

        Args:
            name: Label used in error messages.
        """
        self._name = name
        self._classes: Dict[str, Type[Any]] = {}

    def register(self, key: str) -> Callable[[Type[T]], Type[T]]:
        """Class decorator storing the decorated class under ``key``.

        Raises:
            ValueError: If ``key`` is already taken.
        """
        def decorator(cls: Type[T]) -> Type[T]:
            taken = self._classes.get(key)
            if taken is not None:
                raise ValueError(
                    f"{self._name}: key '{key}' already registered "
                    f"to {taken.__name__}"
                )
            self._classes[key] = cls
            return cls
        return decorator

    def create(self, key: str, **kwargs: Any) -> Any:
        """Instantiate the class registered under ``key`` with ``kwargs``.

        Raises:
            KeyError: If nothing is registered under ``key``.
        """
        if key not in self._classes:
            available = ", ".join(sorted(self._classes))
            raise KeyError(
                f"{self._name}: unknown key '{key}'. Available: {available}"
            )
        return self._classes[key](**kwargs)

    def keys(self) -> List[str]:
        """Registered keys, in registration order (for argparse choices)."""
        return list(self._classes)

    def __contains__(self, key: str) -> bool:
        return key in self._classes

    def __len__(self) -> int:
        return len(self._classes)
