# Configuration: colors, code length, turn limit, pacing, display.
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Ruleset:
    name: str = "classic"  # Identifier for this ruleset
    code_length: int = 4  # Number of pegs in the code
    # Default color set (Red, Orange, Yellow, Green, Blue, Indigo, Violet)
    colors: tuple[str, ...] = ("R", "O", "Y", "G", "B", "I", "V")
    max_attempts: int = 12  # Number of guesses per game
    think_delay: float = 1.0  # Seconds between computer turns (cosmetic)
    # Optional, for CLI rendering
    emoji_map: Mapping[str, str] = field(
        hash=False,
        default_factory=lambda: MappingProxyType(
            {
                "R": "🔴",
                "O": "🟠",
                "Y": "🟡",
                "G": "🟢",
                "B": "🔵",
                "I": "🟣",
                "V": "🟪",
                "BK": "⚫",
                "W": "⚪",
            }
        )
    )

    @property
    def num_colors(self) -> int:
        return len(self.colors)

    def with_overrides(self, **changes) -> "Ruleset":
        """Return a copy of this ruleset with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_RULES = Ruleset()
