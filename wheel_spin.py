import math

MIN_SPINS = 5
SPIN_DURATION_MS = 4000

# 12 o'clock, once the wheel's -90deg frame offset is applied.
POINTER_ANGLE = 0


def next_rotation(current, rng, min_spins=MIN_SPINS):
    return current + 360 * min_spins + rng.randint(0, 359)


def normalize_rotation(rotation):
    return rotation % 360


def effective_angle(rotation, pointer_angle=POINTER_ANGLE):
    return (pointer_angle - normalize_rotation(rotation) + 360) % 360


def winning_index(rotation, count, pointer_angle=POINTER_ANGLE):
    """Index of the slice sitting under the pointer once the wheel stops at ``rotation``."""
    if count < 1:
        raise ValueError(f"winning_index needs at least one option, got {count}")

    segment_angle = 360 / count
    index = math.floor(effective_angle(rotation, pointer_angle) / segment_angle)
    # Float division can land exactly on the upper edge for large counts.
    return min(index, count - 1)


def elapsed_ms(started_at_ms, now_ms):
    if not isinstance(started_at_ms, int):
        return None
    return max(now_ms - started_at_ms, 0)
