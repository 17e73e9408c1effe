from pixeldash.core.events import (
    Event,
    EventType,
    game_over_event,
    game_started_event,
    milestone_event,
    theme_changed_event,
)
from pixeldash.game.announcer import Announcer, format_announcement


def test_messages():
    assert format_announcement(milestone_event(20)) == "Score: 20"
    assert format_announcement(game_over_event(7)) == (
        "Game over! Final score: 7. Press the retry button or space to play again."
    )
    assert format_announcement(game_started_event()) == (
        "Game started! Press space or tap to jump over obstacles."
    )
    assert format_announcement(theme_changed_event("retrowave", "Too eighties?")) == (
        "Theme changed to Retrowave. Too eighties?"
    )
    assert format_announcement(theme_changed_event("mint")) == "Theme changed to Mint."


def test_unrelated_events_are_silent():
    assert format_announcement(Event(EventType.RESIZED, data={"width": 1, "height": 1})) is None


def test_sink_receives_announcements(event_bus):
    received = []
    announcer = Announcer(event_bus, sink=received.append)

    event_bus.emit(game_started_event())
    event_bus.emit(milestone_event(10))

    assert received == [
        "Game started! Press space or tap to jump over obstacles.",
        "Score: 10",
    ]
    assert announcer.last_message == "Score: 10"


def test_close_unsubscribes(event_bus):
    received = []
    announcer = Announcer(event_bus, sink=received.append)
    announcer.close()
    event_bus.emit(milestone_event(10))
    assert received == []
