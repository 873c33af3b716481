"""
Growth Scoring Engine - Observers.

============================================================
PURPOSE
============================================================
Injected observability sink for the scoring pipeline.

The scorers, aggregator, floor engine and blender never log.
The engine reports what happened to a ScoringObserver:
- component lists per dimension
- every floor that fired
- the final scorecard

============================================================
IMPLEMENTATIONS
============================================================
- NullObserver: default, does nothing
- LoggingObserver: standard logging (DEBUG / INFO)
- RecordingObserver: keeps events in memory

============================================================
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple

from .types import ComponentScore, Dimension, FloorApplication, Scorecard


logger = logging.getLogger(__name__)


# ============================================================
# OBSERVER PROTOCOL
# ============================================================


class ScoringObserver(Protocol):
    """
    Protocol for scoring observers.

    Observers must not mutate what they receive. Exceptions
    raised by an observer propagate to the caller.
    """

    def on_components(
        self,
        dimension: Dimension,
        components: Tuple[ComponentScore, ...],
        raw_score: int,
    ) -> None:
        """Called once per dimension after aggregation."""
        ...

    def on_floor_applied(self, application: FloorApplication) -> None:
        """Called for every floor rule that fired."""
        ...

    def on_scorecard(self, scorecard: Scorecard) -> None:
        """Called once with the final scorecard."""
        ...


# ============================================================
# NULL OBSERVER
# ============================================================


class NullObserver:
    """Observer that ignores every event."""

    def on_components(self, dimension, components, raw_score) -> None:
        pass

    def on_floor_applied(self, application) -> None:
        pass

    def on_scorecard(self, scorecard) -> None:
        pass


# ============================================================
# LOGGING OBSERVER
# ============================================================


class LoggingObserver:
    """
    Report scoring events through standard logging.

    Components go to DEBUG, floors and scorecards to INFO.
    Events below ``level`` are dropped here; the logger's own
    level and handlers stay under the application's control.
    """

    def __init__(
        self,
        log: Optional[logging.Logger] = None,
        label: str = "",
        level: int = logging.NOTSET,
    ):
        self._logger = log or logger
        self._label = label
        self.level = level

    def _prefix(self) -> str:
        return f"[{self._label}] " if self._label else ""

    def _enabled(self, level: int) -> bool:
        return level >= self.level and self._logger.isEnabledFor(level)

    def on_components(
        self,
        dimension: Dimension,
        components: Tuple[ComponentScore, ...],
        raw_score: int,
    ) -> None:
        if not self._enabled(logging.DEBUG):
            return
        detail = ", ".join(f"{c.name}={c.score:g}/{c.max:g}" for c in components)
        self._logger.debug(
            f"{self._prefix()}{dimension.rubric_name}: raw {raw_score}/100 ({detail})"
        )

    def on_floor_applied(self, application: FloorApplication) -> None:
        if not self._enabled(logging.INFO):
            return
        self._logger.info(
            f"{self._prefix()}Applied {application.dimension.value} floor "
            f"{application.rule_name}: {application.adjusted_score} "
            f"(was {application.raw_score}, minimum {application.minimum})"
        )

    def on_scorecard(self, scorecard: Scorecard) -> None:
        if not self._enabled(logging.INFO):
            return
        scores = ", ".join(f"{k}={v}" for k, v in scorecard.dimension_scores.items())
        self._logger.info(
            f"{self._prefix()}Scorecard: overall {scorecard.overall} "
            f"({scorecard.band.label}) {scores}"
        )


# ============================================================
# RECORDING OBSERVER
# ============================================================


@dataclass
class RecordingObserver:
    """Collect scoring events in memory, for tests and audits."""

    components: Dict[Dimension, Tuple[ComponentScore, ...]] = field(default_factory=dict)
    raw_scores: Dict[Dimension, int] = field(default_factory=dict)
    floors: List[FloorApplication] = field(default_factory=list)
    scorecards: List[Scorecard] = field(default_factory=list)

    def on_components(
        self,
        dimension: Dimension,
        components: Tuple[ComponentScore, ...],
        raw_score: int,
    ) -> None:
        self.components[dimension] = components
        self.raw_scores[dimension] = raw_score

    def on_floor_applied(self, application: FloorApplication) -> None:
        self.floors.append(application)

    def on_scorecard(self, scorecard: Scorecard) -> None:
        self.scorecards.append(scorecard)

    def floors_for(self, dimension: Dimension) -> List[FloorApplication]:
        return [f for f in self.floors if f.dimension == dimension]

    @property
    def last_scorecard(self) -> Optional[Scorecard]:
        return self.scorecards[-1] if self.scorecards else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "components": {
                d.value: [c.to_dict() for c in comps] for d, comps in self.components.items()
            },
            "raw_scores": {d.value: s for d, s in self.raw_scores.items()},
            "floors": [f.to_dict() for f in self.floors],
            "scorecards": [s.to_dict() for s in self.scorecards],
        }
