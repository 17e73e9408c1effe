"""Difficulty curve: cumulative score -> scroll speed and spawn gap."""

from dataclasses import dataclass

from ..config.settings import DifficultySettings


@dataclass(frozen=True)
class DifficultySample:
    """Curve values for one score."""

    difficulty: float
    speed: float
    min_gap: float


@dataclass(frozen=True)
class DifficultyCurve:
    """Pure score-driven difficulty.

    ``difficulty`` ramps linearly from 0 to 1 over ``score_span`` points.
    Speed rises with it while the base gap shrinks, so the distance between
    obstacles grows slower than the speed and the reaction window narrows.
    """

    score_span: int = 100
    base_speed: float = 3.0
    speed_range: float = 5.0
    gap_speed_factor: float = 22.0
    base_gap: float = 100.0

    @classmethod
    def from_settings(cls, settings: DifficultySettings) -> "DifficultyCurve":
        return cls(
            score_span=settings.score_span,
            base_speed=settings.base_speed,
            speed_range=settings.speed_range,
            gap_speed_factor=settings.gap_speed_factor,
            base_gap=settings.base_gap,
        )

    def difficulty(self, score: int) -> float:
        return max(0.0, min(score / self.score_span, 1.0))

    def speed(self, score: int) -> float:
        return self.base_speed + self.difficulty(score) * self.speed_range

    def min_gap(self, score: int) -> float:
        difficulty = self.difficulty(score)
        speed = self.base_speed + difficulty * self.speed_range
        return speed * self.gap_speed_factor + self.base_gap * (1.0 - difficulty)

    def at(self, score: int) -> DifficultySample:
        return DifficultySample(
            difficulty=self.difficulty(score),
            speed=self.speed(score),
            min_gap=self.min_gap(score),
        )
