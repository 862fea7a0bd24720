import pytest

from vtermkit.keys import (
    CharKey,
    FunctionKey,
    KeyCode,
    KeyEvent,
    KeyEventKind,
    KeyEventState,
    KeyModifiers,
    MediaKey,
    MediaKeyCode,
    ModifierKey,
    ModifierKeyCode,
)


def test_equality():
    lowercase_d_with_shift = KeyEvent(CharKey("d"), KeyModifiers.SHIFT)
    uppercase_d_with_shift = KeyEvent(CharKey("D"), KeyModifiers.SHIFT)
    uppercase_d = KeyEvent(CharKey("D"), KeyModifiers.NONE)
    assert lowercase_d_with_shift == uppercase_d_with_shift
    assert uppercase_d == uppercase_d_with_shift


def test_hash():
    lowercase_d_with_shift = hash(KeyEvent(CharKey("d"), KeyModifiers.SHIFT))
    uppercase_d_with_shift = hash(KeyEvent(CharKey("D"), KeyModifiers.SHIFT))
    uppercase_d = hash(KeyEvent(CharKey("D"), KeyModifiers.NONE))
    assert lowercase_d_with_shift == uppercase_d_with_shift
    assert uppercase_d == uppercase_d_with_shift


def test_equal_events_collapse_in_set():
    events = {
        KeyEvent(CharKey("d"), KeyModifiers.SHIFT),
        KeyEvent(CharKey("D")),
        KeyEvent(CharKey("D"), KeyModifiers.SHIFT),
    }
    assert len(events) == 1


def test_lowercase_without_shift_differs_from_uppercase():
    assert KeyEvent(CharKey("d")) != KeyEvent(CharKey("D"))


def test_normalize_adds_shift_for_uppercase():
    event = KeyEvent(CharKey("Q"), KeyModifiers.CONTROL).normalize_case()
    assert event.modifiers == KeyModifiers.CONTROL | KeyModifiers.SHIFT
    assert event.code == CharKey("Q")


def test_normalize_uppercases_with_shift():
    event = KeyEvent(CharKey("q"), KeyModifiers.SHIFT).normalize_case()
    assert event.code == CharKey("Q")
    assert event.modifiers == KeyModifiers.SHIFT


def test_normalize_leaves_non_ascii_alone():
    event = KeyEvent(CharKey("é"), KeyModifiers.SHIFT).normalize_case()
    assert event.code == CharKey("é")
    upper = KeyEvent(CharKey("É")).normalize_case()
    assert upper.modifiers == KeyModifiers.NONE


def test_normalize_ignores_non_char_keys():
    event = KeyEvent(KeyCode.LEFT, KeyModifiers.SHIFT)
    assert event.normalize_case() is event


def test_from_code_defaults():
    event = KeyEvent.from_code(KeyCode.ESC)
    assert event.code is KeyCode.ESC
    assert event.modifiers == KeyModifiers.NONE
    assert event.kind is KeyEventKind.PRESS
    assert event.state == KeyEventState.NONE
    assert event == KeyEvent(KeyCode.ESC)


def test_kind_and_state_take_part_in_equality():
    press = KeyEvent(CharKey("a"))
    release = KeyEvent(CharKey("a"), kind=KeyEventKind.RELEASE)
    keypad = KeyEvent(CharKey("a"), state=KeyEventState.KEYPAD)
    assert press != release
    assert press != keypad


def test_payload_keys_compare_by_value():
    assert KeyEvent(FunctionKey(5)) == KeyEvent(FunctionKey(5))
    assert KeyEvent(FunctionKey(5)) != KeyEvent(FunctionKey(6))
    assert MediaKey(MediaKeyCode.PLAY) == MediaKey(MediaKeyCode.PLAY)
    assert ModifierKey(ModifierKeyCode.LEFT_SHIFT) != ModifierKey(
        ModifierKeyCode.RIGHT_SHIFT
    )


def test_not_equal_to_other_types():
    assert (KeyEvent(KeyCode.ENTER) == "enter") is False


@pytest.mark.parametrize("bad", ["", "ab"])
def test_char_key_rejects_bad_length(bad):
    with pytest.raises(ValueError):
        CharKey(bad)


@pytest.mark.parametrize("bad", [-1, 256])
def test_function_key_range(bad):
    with pytest.raises(ValueError):
        FunctionKey(bad)


def test_media_key_requires_media_code():
    with pytest.raises(TypeError):
        MediaKey(KeyCode.PAUSE)


def test_num_lock_shares_bit_with_caps_lock():
    caps = KeyEvent(CharKey("a"), state=KeyEventState.CAPS_LOCK)
    num = KeyEvent(CharKey("a"), state=KeyEventState.NUM_LOCK)
    assert caps == num
    assert hash(caps) == hash(num)
    assert caps.state.value == 0b1000


def test_modifier_bits_after_normalisation():
    event = KeyEvent(CharKey("A"), KeyModifiers.ALT).normalize_case()
    assert event.modifiers.value == 0b101