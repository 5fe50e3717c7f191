"""Content strategy registry.

Strategies register themselves by name when their module is imported::

    @register_content("random")
    class RandomContent(ContentStrategy):
        ...

    strategy = ContentRegistry.create("random")

Generators only hold the strategy instance; the registry is consulted once
at generator construction.
"""

from typing import Callable, ClassVar

from .base import ContentStrategy


class ContentRegistry:
    """Name to ``ContentStrategy`` subclass lookup."""

    _strategies: ClassVar[dict[str, type[ContentStrategy]]] = {}

    @classmethod
    def register(cls, name: str, strategy_cls: type[ContentStrategy]) -> None:
        """Register *strategy_cls* under *name*.

        Raises:
            TypeError: If the class is not a ContentStrategy
            ValueError: If a different class already uses *name*
        """
        if not (isinstance(strategy_cls, type) and issubclass(strategy_cls, ContentStrategy)):
            raise TypeError(f"{strategy_cls!r} is not a ContentStrategy subclass")

        existing = cls._strategies.get(name)
        if existing is not None and existing is not strategy_cls:
            raise ValueError(
                f"Content strategy {name!r} is already registered to {existing.__name__}"
            )
        cls._strategies[name] = strategy_cls

    @classmethod
    def get(cls, name: str) -> type[ContentStrategy]:
        if name not in cls._strategies:
            raise KeyError(f"Unknown content strategy: {name!r}. Available: {cls.available()}")
        return cls._strategies[name]

    @classmethod
    def create(cls, name: str) -> ContentStrategy:
        """Instantiate the strategy registered under *name*."""
        return cls.get(name)()

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._strategies)


def register_content(
    name: str,
) -> Callable[[type[ContentStrategy]], type[ContentStrategy]]:
    """Class decorator that registers a content strategy under *name*."""

    def decorator(cls: type[ContentStrategy]) -> type[ContentStrategy]:
        ContentRegistry.register(name, cls)
        cls.name = name
        return cls

    return decorator
