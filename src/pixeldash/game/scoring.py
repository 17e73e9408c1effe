"""Score keeping and milestone detection."""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class ScoreTracker:
    """Counts exited obstacles and reports each milestone once."""

    def __init__(self, milestone_every: int = 10):
        self.milestone_every = milestone_every
        self.score = 0
        self.last_announced = 0

    def reset(self) -> None:
        self.score = 0
        self.last_announced = 0

    def record_exit(self) -> Optional[int]:
        """Count one obstacle leaving the playfield.

        Returns:
            The score if it just reached an unannounced milestone, else None
        """
        self.score += 1
        return self.check_milestone()

    def check_milestone(self) -> Optional[int]:
        score = self.score
        if score > 0 and score % self.milestone_every == 0 and score != self.last_announced:
            self.last_announced = score
            logger.info(f"Milestone reached: {score}")
            return score
        return None
