from dataclasses import dataclass

from stellar_invaders.formation import Formation, FormationType
from stellar_invaders.level import Level, SpawnEvent
from stellar_invaders.level_manager import LevelManager


@dataclass
class Ship:
    position: tuple = (0, 0)


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def single_point_formation() -> Formation:
    return (
        Formation()
        .with_type(FormationType.RECTANGLE)
        .with_size(1, 1)
        .with_solidity(True)
        .with_spacing((0, 0))
    )


def make_event(trigger=0, count=1, interval=0) -> SpawnEvent:
    return (
        SpawnEvent()
        .with_trigger_time(trigger)
        .with_count(count)
        .with_interval(interval)
        .with_position((10, 20))
        .with_formation(single_point_formation())
        .with_game_object(Ship())
    )


def make_manager(level, reached=0):
    clock = FakeClock()
    spawned = []
    events = {"limit": 0, "finished": 0}

    def on_limit():
        events["limit"] += 1

    def on_finished():
        events["finished"] += 1

    manager = LevelManager(
        spawned.append,
        lambda: reached,
        clock=clock,
        on_enemy_limit_reached=on_limit,
        on_spawn_events_finished=on_finished,
    )
    manager.set_level(level)
    return manager, clock, spawned, events


def test_nothing_happens_before_start():
    level = Level(level_number=1, name="A", spawn_events=[make_event()])
    manager, clock, spawned, events = make_manager(level)
    manager.progress_level()
    assert spawned == []
    assert events == {"limit": 0, "finished": 0}
    assert manager.in_progress is False


def test_spawns_and_reports_finished():
    level = Level(level_number=1, name="A", spawn_events=[make_event()])
    manager, clock, spawned, events = make_manager(level)
    manager.start_level()
    manager.progress_level()
    assert [ship.position for ship in spawned] == [(10, 20)]
    assert manager.current_level.spawn_events == []
    assert events["finished"] == 1


def test_set_level_keeps_original_intact():
    level = Level(level_number=1, name="A", spawn_events=[make_event()])
    manager, clock, spawned, events = make_manager(level)
    manager.start_level()
    manager.progress_level()
    assert len(level.spawn_events) == 1
    assert level.spawn_events[0].finished is False


def test_trigger_time_is_respected():
    level = Level(level_number=1, name="A", spawn_events=[make_event(trigger=100)])
    manager, clock, spawned, events = make_manager(level)
    manager.start_level()
    clock.now = 0.05
    manager.progress_level()
    assert spawned == []
    assert events["finished"] == 0
    clock.now = 0.1
    manager.progress_level()
    assert len(spawned) == 1


def test_interval_between_waves():
    level = Level(level_number=1, name="A", spawn_events=[make_event(count=2, interval=100)])
    manager, clock, spawned, events = make_manager(level)
    manager.start_level()
    clock.now = 0.1
    manager.progress_level()
    assert len(spawned) == 1
    clock.now = 0.15
    manager.progress_level()
    assert len(spawned) == 1
    clock.now = 0.2
    manager.progress_level()
    assert len(spawned) == 2
    assert events["finished"] == 1


def test_enemy_limit_reached():
    level = Level(level_number=1, name="A", enemy_limit=1, spawn_events=[make_event(trigger=10_000)])
    manager, clock, spawned, events = make_manager(level, reached=2)
    manager.start_level()
    manager.progress_level()
    assert events["limit"] == 1
    assert events["finished"] == 0


def test_enemy_limit_not_exceeded_when_equal():
    level = Level(level_number=1, name="A", enemy_limit=2, spawn_events=[make_event(trigger=10_000)])
    manager, clock, spawned, events = make_manager(level, reached=2)
    manager.start_level()
    manager.progress_level()
    assert events["limit"] == 0


def test_negative_limit_disables_check():
    level = Level(level_number=1, name="A", enemy_limit=-1, spawn_events=[make_event(trigger=10_000)])
    manager, clock, spawned, events = make_manager(level, reached=50)
    manager.start_level()
    manager.progress_level()
    assert events["limit"] == 0


def test_stop_level_halts_progress():
    level = Level(level_number=1, name="A", spawn_events=[make_event()])
    manager, clock, spawned, events = make_manager(level)
    manager.start_level()
    manager.stop_level()
    manager.progress_level()
    assert spawned == []
    assert manager.in_progress is False


def test_elapsed_resets_on_start():
    manager, clock, spawned, events = make_manager(Level())
    clock.now = 5.0
    manager.start_level()
    clock.now = 5.25
    assert manager.elapsed_ms() == 250