import pytest

from neonshooter.keyboard import Input, KeyState

KEY_A = ord("A")
KEY_SPACE = 0x20


def test_nothing_pressed_initially():
    keys = Input()
    assert keys.state(KEY_A) is KeyState.NONE
    assert not keys.is_key_down(KEY_A)


def test_full_key_cycle():
    keys = Input()
    keys.update({KEY_A})
    assert keys.is_key_down(KEY_A)
    keys.update({KEY_A})
    assert keys.is_key_press(KEY_A)
    assert not keys.is_key_down(KEY_A)
    keys.update(set())
    assert keys.is_key_up(KEY_A)
    keys.update(set())
    assert keys.state(KEY_A) is KeyState.NONE


def test_keys_are_independent():
    keys = Input()
    keys.update([KEY_A])
    keys.update([KEY_SPACE])
    assert keys.is_key_up(KEY_A)
    assert keys.is_key_down(KEY_SPACE)


def test_out_of_range_key_in_update_raises():
    keys = Input()
    with pytest.raises(IndexError):
        keys.update([Input.KEY_MAX])


def test_out_of_range_query_raises():
    keys = Input()
    with pytest.raises(IndexError):
        keys.is_key_down(-1)