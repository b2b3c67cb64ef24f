"""Tests for change notification records and events."""

import pytest
from pydantic import ValidationError

from profilekit.profiles.changes import (
    ProfileChangedArgs,
    ProfileChangeType,
    ProfileChangingArgs,
    ProfileEvent,
)


class TestProfileChangedArgs:
    """Tests for ProfileChangedArgs."""

    def test_create_args(self):
        args = ProfileChangedArgs(
            change_type=ProfileChangeType.SET_VALUE,
            section="Window",
            entry="Width",
            value=800,
        )

        assert args.change_type == ProfileChangeType.SET_VALUE
        assert args.section == "Window"
        assert args.entry == "Width"
        assert args.value == 800

    def test_defaults(self):
        args = ProfileChangedArgs(change_type=ProfileChangeType.NAME)
        assert args.section is None
        assert args.entry is None
        assert args.value is None

    def test_is_immutable(self):
        args = ProfileChangedArgs(change_type=ProfileChangeType.REMOVE_SECTION, section="A")
        with pytest.raises(ValidationError):
            args.section = "B"

    def test_change_type_from_string(self):
        args = ProfileChangedArgs(change_type="read_only", value=True)
        assert args.change_type is ProfileChangeType.READ_ONLY


class TestProfileChangingArgs:
    """Tests for ProfileChangingArgs."""

    def test_cancel_defaults_to_false(self):
        args = ProfileChangingArgs(change_type=ProfileChangeType.SET_VALUE)
        assert args.cancel is False

    def test_cancel_is_writable(self):
        args = ProfileChangingArgs(change_type=ProfileChangeType.SET_VALUE)
        args.cancel = True
        assert args.cancel is True

    def test_description_stays_read_only(self):
        args = ProfileChangingArgs(change_type=ProfileChangeType.SET_VALUE, entry="Width")
        with pytest.raises(ValidationError):
            args.entry = "Height"

    def test_is_changed_args(self):
        assert isinstance(ProfileChangingArgs(change_type="other"), ProfileChangedArgs)


class TestProfileEvent:
    """Tests for ProfileEvent."""

    def test_empty_event(self):
        event = ProfileEvent()
        assert not event
        assert len(event) == 0

    def test_subscribe_keeps_order(self):
        event = ProfileEvent()
        handlers = [lambda s, e: None for _ in range(3)]
        for handler in handlers:
            event.subscribe(handler)

        assert list(event) == handlers
        assert event

    def test_subscribe_rejects_non_callable(self):
        with pytest.raises(TypeError):
            ProfileEvent().subscribe("not callable")

    def test_unsubscribe_removes_last_registration(self):
        event = ProfileEvent()

        def first(sender, e):
            pass

        def second(sender, e):
            pass

        event.subscribe(first)
        event.subscribe(second)
        event.subscribe(first)

        assert event.unsubscribe(first)
        assert list(event) == [first, second]

    def test_handler_may_unsubscribe_while_iterating(self):
        event = ProfileEvent()
        calls = []

        def once(sender, e):
            calls.append("once")
            event.unsubscribe(once)

        event.subscribe(once)
        event.subscribe(lambda s, e: calls.append("other"))

        for handler in event:
            handler(None, None)

        assert calls == ["once", "other"]
        assert len(event) == 1

    def test_copy_is_independent(self):
        event = ProfileEvent()
        event.subscribe(print)
        copy = event.copy()
        copy.subscribe(repr)

        assert len(event) == 1
        assert len(copy) == 2

    def test_clear(self):
        event = ProfileEvent()
        event.subscribe(print)
        event.clear()
        assert len(event) == 0
