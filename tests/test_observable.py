import asyncio

from moviehub.viewmodel.observable import MutableStateSlot


def test_observer_gets_current_value_on_subscribe():
    slot = MutableStateSlot("a")
    seen = []
    slot.observe(seen.append)
    assert seen == ["a"]


def test_only_changed_values_are_delivered():
    slot = MutableStateSlot(0)
    seen = []
    slot.observe(seen.append)
    assert slot.set_value(1) is True
    assert slot.set_value(1) is False
    slot.set_value(2)
    assert seen == [0, 1, 2]


def test_forced_value_is_delivered_even_if_equal():
    slot = MutableStateSlot("x")
    seen = []
    slot.observe(seen.append)
    assert slot.set_value("x", force=True) is True
    assert seen == ["x", "x"]


def test_unsubscribe_stops_delivery():
    slot = MutableStateSlot(0)
    seen = []
    unsubscribe = slot.observe(seen.append)
    unsubscribe()
    unsubscribe()
    slot.set_value(5)
    assert seen == [0]
    assert slot.observer_count == 0


def test_stream_replays_current_then_keeps_only_latest():
    async def scenario():
        slot = MutableStateSlot(0)
        stream = slot.stream()
        first = await stream.__anext__()
        slot.set_value(1)
        slot.set_value(2)
        second = await stream.__anext__()
        assert slot.observer_count == 1
        await stream.aclose()
        return first, second, slot.observer_count

    assert asyncio.run(scenario()) == (0, 2, 0)


def test_clear_observers():
    slot = MutableStateSlot(0)
    slot.observe(lambda value: None)
    slot.clear_observers()
    assert slot.observer_count == 0
