from __future__ import annotations

from typing import List, Optional

from packages.engine.errors import ConfigError
from .base import BaseStrategy, REGISTRY, register

from . import worst_case  # noqa: F401
from . import average  # noqa: F401
from . import gambling  # noqa: F401


def create_strategy(strategy_id: str, factor: Optional[float] = None) -> BaseStrategy:
    """
    Factory: instantiate a registered strategy by id.

    `factor` is only meaningful for "gambling" (defaults to 0.5 there).
    """
    try:
        cls = REGISTRY[strategy_id]
    except KeyError as e:
        raise ConfigError(
            f"Unknown strategy id: {strategy_id}. Available: {sorted(REGISTRY.keys())}") from e
    if strategy_id == gambling.GamblingStrategy.id:
        return cls() if factor is None else cls(factor)
    if factor is not None:
        raise ConfigError(f"strategy {strategy_id!r} does not take a factor")
    return cls()


def strategy_from_options(*, pessimistic: bool = False,
                          gambling_factor: Optional[float] = None) -> BaseStrategy:
    """
    Resolve the command-line flags into exactly one strategy.

      neither flag      -> average
      --pessimistic     -> worst-case
      --gambling F      -> gambling(F)
      both              -> ConfigError
    """
    if pessimistic and gambling_factor is not None:
        raise ConfigError("choose either --pessimistic or --gambling, not both")
    if pessimistic:
        return create_strategy(worst_case.WorstCaseStrategy.id)
    if gambling_factor is not None:
        return create_strategy(gambling.GamblingStrategy.id, gambling_factor)
    return create_strategy(average.AverageStrategy.id)


def get_strategy_ids() -> List[str]:
    """
    Return all registered strategy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseStrategy", "REGISTRY", "register", "create_strategy",
           "strategy_from_options", "get_strategy_ids"]
