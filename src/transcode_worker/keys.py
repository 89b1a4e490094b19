"""
Object key derivation for conversion results.

Result key format: the source key with its first ".webm" replaced by ".mp3",
e.g. uploads/talk.webm -> uploads/talk.mp3. Keys without ".webm" are returned
unchanged.
"""

SOURCE_EXTENSION = ".webm"
TARGET_EXTENSION = ".mp3"


def derive_target_key(source_key: str) -> str:
    """
    Build the output object key for a source key.

    Only the first occurrence is substituted: a.webm.webm -> a.mp3.webm.
    """
    return source_key.replace(SOURCE_EXTENSION, TARGET_EXTENSION, 1)
