"""Keyboard bindings for manual play."""

from game2048.core.direction import Direction

# ##: Arrow keys and WASD, in both cases.
KEY_BINDINGS: dict[str, Direction] = {
    'left': Direction.LEFT,
    'a': Direction.LEFT,
    'A': Direction.LEFT,
    'right': Direction.RIGHT,
    'd': Direction.RIGHT,
    'D': Direction.RIGHT,
    'up': Direction.UP,
    'w': Direction.UP,
    'W': Direction.UP,
    'down': Direction.DOWN,
    's': Direction.DOWN,
    'S': Direction.DOWN,
}


def direction_for_key(key: str | None) -> Direction | None:
    """Direction bound to a key name, or None for unbound keys."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key)
