from pixeldash.game.scoring import ScoreTracker


def test_each_exit_adds_one():
    tracker = ScoreTracker()
    for expected in range(1, 6):
        tracker.record_exit()
        assert tracker.score == expected


def test_milestone_once_per_multiple_of_ten():
    tracker = ScoreTracker()
    milestones = [m for m in (tracker.record_exit() for _ in range(35)) if m is not None]
    assert milestones == [10, 20, 30]


def test_milestone_not_repeated_at_same_score():
    tracker = ScoreTracker()
    tracker.score = 9
    assert tracker.record_exit() == 10
    assert tracker.check_milestone() is None
    assert tracker.last_announced == 10


def test_zero_is_not_a_milestone():
    assert ScoreTracker().check_milestone() is None


def test_reset():
    tracker = ScoreTracker()
    tracker.score = 19
    tracker.record_exit()
    tracker.reset()
    assert tracker.score == 0
    assert tracker.last_announced == 0
