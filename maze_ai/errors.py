"""
Maze AI Error Hierarchy

Unified exception hierarchy for the maze search package. Every custom
exception inherits from MazeError so drivers can catch and filter them
in one place.

Usage:
    from maze_ai.errors import NoLegalActionsError, InvalidMoveError

    try:
        action = ai.select_action(state)
    except NoLegalActionsError as e:
        logger.error(f"Degenerate board: {e.message}")
"""

from typing import Any

__all__ = [
    # AI errors
    "AIError",
    "ConfigurationError",
    "EmptyFrontierError",
    "InvalidMoveError",
    "InvalidSearchParametersError",
    "InvalidStateError",
    # Base error
    "MazeError",
    "NoLegalActionsError",
]


class MazeError(Exception):
    """Base exception for all maze AI errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "MAZE_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Game Rules Errors
# =============================================================================


class InvalidStateError(MazeError):
    """Malformed maze state.

    Raised when an initial state is built from a non-rectangular board,
    negative point values, an out-of-bounds start or a non-positive game
    length.
    """
    code: str = "INVALID_STATE"


class InvalidMoveError(MazeError):
    """Action that cannot be applied to the current state.

    Raised when the action id is unknown, when it would leave the board
    or when the state is already terminal.
    """
    code: str = "INVALID_MOVE"

    def __init__(
        self,
        message: str,
        action: int | None = None,
        turn: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        if action is not None:
            self.context["action"] = action
        if turn is not None:
            self.context["turn"] = turn


class ConfigurationError(MazeError):
    """Invalid configuration (unknown AI type, bad settings)."""
    code: str = "CONFIGURATION_ERROR"


# =============================================================================
# AI Errors
# =============================================================================


class AIError(MazeError):
    """Base class for AI-related errors."""
    code: str = "AI_ERROR"


class NoLegalActionsError(AIError):
    """The state offers no legal action.

    Only a 1x1 board can produce this. The decision call is aborted.
    """
    code: str = "NO_LEGAL_ACTIONS"

    def __init__(
        self,
        message: str,
        height: int | None = None,
        width: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        if height is not None:
            self.context["height"] = height
        if width is not None:
            self.context["width"] = width


class EmptyFrontierError(AIError):
    """Beam frontier was empty when a best state was required."""
    code: str = "EMPTY_FRONTIER"


class InvalidSearchParametersError(AIError):
    """Beam width or depth below one."""
    code: str = "INVALID_SEARCH_PARAMETERS"

    def __init__(
        self,
        message: str,
        beam_width: int | None = None,
        beam_depth: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        if beam_width is not None:
            self.context["beam_width"] = beam_width
        if beam_depth is not None:
            self.context["beam_depth"] = beam_depth
