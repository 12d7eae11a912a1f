from datetime import timedelta

from tilecraft.game_loop import GameLoop

STEP = GameLoop.FIXED_TIMESTEP.total_seconds()


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _loop(clock):
    record = {"tick": [], "fixed": [], "network": []}
    loop = GameLoop(
        on_tick=record["tick"].append,
        on_fixed_tick=record["fixed"].append,
        on_network_tick=record["network"].append,
        clock=clock,
    )
    return loop, record


def test_fixed_timestep_is_160ms():
    assert GameLoop.FIXED_TIMESTEP == timedelta(milliseconds=160)
    clock = FakeClock()
    loop, record = _loop(clock)
    loop.tick()
    clock.now += 0.155
    loop.tick()
    assert record["fixed"] == []
    clock.now += 0.170
    loop.tick()
    assert record["fixed"] == [0, 1]
    assert loop.elapsed_ticks == 2


def test_first_tick_sees_no_time():
    clock = FakeClock()
    clock.now = 42.0
    loop, record = _loop(clock)
    loop.tick()
    assert record["tick"] == [0.0]
    assert record["fixed"] == []
    assert record["network"] == [0]


def test_whole_steps_run_fixed_ticks_in_order():
    clock = FakeClock()
    loop, record = _loop(clock)
    loop.tick()
    clock.now += 3 * STEP
    loop.tick()
    assert record["fixed"] == [0, 1, 2]
    assert record["network"][-1] == loop.elapsed_ticks == 3
    assert abs(record["tick"][-1] - 3 * STEP) < 1e-6


def test_remainder_carries_between_ticks():
    clock = FakeClock()
    loop, record = _loop(clock)
    loop.tick()
    clock.now += 0.6 * STEP
    loop.tick()
    assert record["fixed"] == []
    clock.now += 0.6 * STEP
    loop.tick()
    assert record["fixed"] == [0]
    assert loop.elapsed_ticks == len(record["fixed"])


def test_callbacks_are_optional():
    clock = FakeClock()
    loop = GameLoop(clock=clock)
    loop.tick()
    clock.now += 2 * STEP
    loop.tick()
    assert loop.elapsed_ticks == 2