from quadkit.clock import Clock


class _FakeTime:
    def __init__(self, start):
        self.value = start

    def __call__(self):
        return self.value


def test_get_time_is_elapsed_since_start():
    fake = _FakeTime(100.0)
    clock = Clock(now=fake)
    assert clock.get_time() == 0.0
    fake.value = 103.5
    assert clock.get_time() == 3.5


def test_tick_sets_frame_time():
    clock = Clock(now=_FakeTime(0.0))
    clock.tick(0.25)
    assert clock.get_frame_time() == 0.25


def test_fps_from_frame_time():
    clock = Clock(now=_FakeTime(0.0))
    clock.tick(0.5)
    assert clock.get_fps() == 2


def test_fps_truncates():
    clock = Clock(now=_FakeTime(0.0))
    clock.tick(0.3)
    assert clock.get_fps() == int(1 / 0.3)
    assert clock.get_fps() <= 1 / 0.3


def test_fps_saturates_on_zero_frame_time():
    clock = Clock(now=_FakeTime(0.0))
    clock.tick(0.0)
    assert clock.get_fps() == 2**31 - 1