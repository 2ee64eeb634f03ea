import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from wheel_spin import MIN_SPINS, elapsed_ms, next_rotation, winning_index

logger = logging.getLogger(__name__)

MIN_OPTIONS_TO_SPIN = 2


@dataclass(frozen=True)
class Winner:
    label: str
    index: int


@dataclass(frozen=True)
class WheelState:
    options: Tuple[str, ...] = ()
    rotation: int = 0
    spinning: bool = False
    spin_id: int = 0
    spin_options: Tuple[str, ...] = ()
    spin_started_at_ms: Optional[int] = None
    winner: Optional[Winner] = None

    @property
    def can_spin(self):
        return not self.spinning and len(self.options) >= MIN_OPTIONS_TO_SPIN

    @property
    def winning_index(self):
        return self.winner.index if self.winner is not None else None


def add_option(state, text):
    clean_text = str(text or "").strip()
    if not clean_text:
        return state
    if state.spinning:
        logger.debug("Ignoring add of %r while spinning", clean_text)
        return state
    return replace(state, options=state.options + (clean_text,))


def remove_option(state, index):
    if state.spinning:
        logger.debug("Ignoring removal of index %s while spinning", index)
        return state
    if not 0 <= index < len(state.options):
        return state

    options = state.options[:index] + state.options[index + 1:]

    # Keep the winner pointing at the same logical entry.
    winner = state.winner
    if winner is not None:
        if winner.index == index:
            winner = None
        elif winner.index > index:
            winner = replace(winner, index=winner.index - 1)

    return replace(state, options=options, winner=winner)


def shuffle_options(state, rng):
    if state.spinning:
        logger.debug("Ignoring shuffle while spinning")
        return state
    options = list(state.options)
    rng.shuffle(options)
    return replace(state, options=tuple(options), winner=None)


def dismiss_winner(state):
    if state.winner is None:
        return state
    return replace(state, winner=None)


def start_spin(state, rng, now_ms, min_spins=MIN_SPINS):
    if state.spinning:
        logger.debug("Spin %s already running, trigger ignored", state.spin_id)
        return state
    if len(state.options) < MIN_OPTIONS_TO_SPIN:
        logger.debug("Need at least %s options to spin, have %s", MIN_OPTIONS_TO_SPIN, len(state.options))
        return state

    new_rotation = next_rotation(state.rotation, rng, min_spins)
    spin_id = state.spin_id + 1
    logger.info(
        "Spin %s started: %s options, rotation %s -> %s",
        spin_id, len(state.options), state.rotation, new_rotation
    )
    return replace(
        state,
        rotation=new_rotation,
        spinning=True,
        spin_id=spin_id,
        spin_options=state.options,
        spin_started_at_ms=now_ms,
        winner=None
    )


def complete_spin(state, spin_id):
    if not state.spinning or spin_id != state.spin_id:
        logger.debug("Dropping stale completion for spin %s (current %s)", spin_id, state.spin_id)
        return state

    # Resolve against the snapshot taken when the spin started.
    options = state.spin_options
    index = winning_index(state.rotation, len(options))
    winner = Winner(label=options[index], index=index)
    logger.info("Spin %s landed on %r (index %s)", spin_id, winner.label, winner.index)

    return replace(
        state,
        spinning=False,
        spin_options=(),
        spin_started_at_ms=None,
        winner=winner
    )


def is_spin_due(state, now_ms, duration_ms):
    if not state.spinning:
        return False
    elapsed = elapsed_ms(state.spin_started_at_ms, now_ms)
    return elapsed is not None and elapsed >= duration_ms
