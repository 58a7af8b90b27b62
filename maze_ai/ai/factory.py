"""AI Factory for the maze game.

Central place to build selectors so every driver configures them the
same way.

Usage:
    from maze_ai.ai.factory import AIFactory, create_ai

    # Create with explicit type and config
    ai = AIFactory.create(AIType.BEAM, AIConfig(beam_width=3, beam_depth=4))

    # Create from a type name with keyword overrides
    ai = create_ai("greedy", rng_seed=7)

    # Register custom AI implementation
    AIFactory.register("custom_ai", CustomAIClass)
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..errors import ConfigurationError
from ..models import AIConfig, AIType

if TYPE_CHECKING:
    from .base import BaseAI
    from .evaluator import Evaluator

logger = logging.getLogger(__name__)

# Built-in selectors, imported lazily by module path.
_AI_CLASS_PATHS: dict[AIType, tuple[str, str]] = {
    AIType.RANDOM: ("maze_ai.ai.random_ai", "RandomAI"),
    AIType.GREEDY: ("maze_ai.ai.greedy_ai", "GreedyAI"),
    AIType.BEAM: ("maze_ai.ai.beam_ai", "BeamAI"),
}


class AIFactory:
    """Factory for creating selector instances."""

    _custom_registry: dict[str, Callable[..., BaseAI]] = {}

    _class_cache: dict[AIType, type[BaseAI]] = {}

    @classmethod
    def register(
        cls,
        identifier: str,
        constructor: Callable[..., BaseAI],
    ) -> None:
        """Register a custom AI implementation.

        Args:
            identifier: Unique string identifier for the AI type
            constructor: Callable that creates AI instances.
                         Should accept (config, evaluator) arguments.
        """
        if identifier in cls._custom_registry:
            logger.warning(f"Overwriting existing custom AI: {identifier}")
        cls._custom_registry[identifier] = constructor
        logger.debug(f"Registered custom AI: {identifier}")

    @classmethod
    def unregister(cls, identifier: str) -> bool:
        """Unregister a custom AI implementation.

        Returns:
            True if the identifier was found and removed, False otherwise
        """
        if identifier in cls._custom_registry:
            del cls._custom_registry[identifier]
            logger.debug(f"Unregistered custom AI: {identifier}")
            return True
        return False

    @classmethod
    def list_registered(cls) -> dict[str, str]:
        """List all registered AI types, built-in first."""
        result = {}
        for ai_type in AIType:
            result[ai_type.value] = f"Built-in: {ai_type.name}"
        for identifier, constructor in cls._custom_registry.items():
            doc = getattr(constructor, "__doc__", None) or "Custom AI"
            result[identifier] = f"Custom: {doc.split(chr(10))[0]}"
        return result

    @classmethod
    def _get_ai_class(cls, ai_type: AIType) -> type[BaseAI]:
        if ai_type in cls._class_cache:
            return cls._class_cache[ai_type]
        module_path, class_name = _AI_CLASS_PATHS[ai_type]
        ai_class = getattr(importlib.import_module(module_path), class_name)
        cls._class_cache[ai_type] = ai_class
        return ai_class

    @classmethod
    def create(
        cls,
        ai_type: AIType | str,
        config: AIConfig | None = None,
        evaluator: Evaluator | None = None,
    ) -> BaseAI:
        """Create a selector with explicit type and configuration.

        Args:
            ai_type: Built-in AIType (or its value) or a registered custom
                identifier
            config: AI configuration; defaults are used when omitted
            evaluator: Optional alternative state evaluator

        Raises:
            ConfigurationError: If the type is neither built-in nor registered
        """
        if isinstance(ai_type, str) and ai_type in cls._custom_registry:
            constructor = cls._custom_registry[ai_type]
            return constructor(config or AIConfig(), evaluator)

        try:
            resolved = AIType(ai_type)
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown AI type: {ai_type}",
                context={"available": ", ".join(cls.list_registered())},
            ) from e

        if config is None:
            config = AIConfig(ai_type=resolved)
        elif config.ai_type != resolved:
            config = config.model_copy(update={"ai_type": resolved})

        ai_class = cls._get_ai_class(resolved)
        return ai_class(config, evaluator)


def create_ai(ai_type: AIType | str, **overrides: Any) -> BaseAI:
    """Create a selector from a type and AIConfig field overrides.

    Environment overrides (MAZE_AI_BEAM_WIDTH / MAZE_AI_BEAM_DEPTH) apply
    unless the corresponding keyword is given.
    """
    evaluator = overrides.pop("evaluator", None)
    if isinstance(ai_type, str) and ai_type in AIFactory._custom_registry:
        return AIFactory.create(ai_type, AIConfig.from_env(**overrides), evaluator)
    try:
        resolved = AIType(ai_type)
    except ValueError as e:
        raise ConfigurationError(f"Unknown AI type: {ai_type}") from e
    config = AIConfig.from_env(ai_type=resolved, **overrides)
    return AIFactory.create(resolved, config, evaluator)
