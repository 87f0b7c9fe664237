"""
Search parameters handed to an automated evaluator.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    max_depth: int
    use_coin_parity: bool = True
    use_actual_mobility: bool = False
    use_potential_mobility: bool = False
    use_corner_score: bool = False
    use_stability_score: bool = True

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
