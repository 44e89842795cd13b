import time

from hello_face.animation_ticker import AnimationEvent, AnimationTicker


def _wait_for_tick(ticker, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        event = ticker.try_tick()
        if event is not None:
            return event
        time.sleep(0.005)
    return None


def test_animation_ticker_creation():
    ticker = AnimationTicker()
    assert ticker.try_tick() is None
    assert ticker.running is False


def test_animation_ticker_tick():
    ticker = AnimationTicker()
    ticker.start()
    try:
        assert _wait_for_tick(ticker) == AnimationEvent.TICK
    finally:
        ticker.stop()


def test_animation_ticker_stop():
    ticker = AnimationTicker()
    ticker.start()
    ticker.stop()
    while ticker.try_tick() is not None:
        pass
    time.sleep(0.05)
    assert ticker.try_tick() is None
    assert ticker.running is False


def test_animation_ticker_context_manager():
    with AnimationTicker() as ticker:
        assert ticker.running is True
        assert _wait_for_tick(ticker) == AnimationEvent.TICK
    assert ticker.running is False