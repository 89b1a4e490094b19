"""Tests for result key derivation."""

from transcode_worker.keys import derive_target_key


def test_derive_target_key_replaces_extension() -> None:
    assert derive_target_key("clip.webm") == "clip.mp3"
    assert derive_target_key("uploads/2024/talk.webm") == "uploads/2024/talk.mp3"


def test_derive_target_key_first_occurrence_only() -> None:
    assert derive_target_key("a.webm.webm") == "a.mp3.webm"


def test_derive_target_key_without_webm_is_unchanged() -> None:
    assert derive_target_key("clip.ogg") == "clip.ogg"


def test_derive_target_key_is_pure() -> None:
    assert derive_target_key("x.webm") == derive_target_key("x.webm")
