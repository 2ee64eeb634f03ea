from dataclasses import dataclass
from typing import Optional

import streamlit as st
from streamlit.errors import StreamlitSecretNotFoundError

from wheel_spin import MIN_SPINS, SPIN_DURATION_MS


@dataclass(frozen=True)
class WheelSettings:
    spin_duration_ms: int = SPIN_DURATION_MS
    min_spins: int = MIN_SPINS
    seed: Optional[int] = None
    log_level: str = "INFO"


def _int(value, key, default):
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{key} must be an integer, got: {value!r}") from e


def settings_from_mapping(mapping):
    mapping = mapping or {}

    spin_duration_ms = _int(mapping.get("spin_duration_ms"), "spin_duration_ms", SPIN_DURATION_MS)
    min_spins = _int(mapping.get("min_spins"), "min_spins", MIN_SPINS)
    seed = _int(mapping.get("seed"), "seed", None)
    log_level = str(mapping.get("log_level") or "INFO").strip().upper() or "INFO"

    if spin_duration_ms <= 0:
        raise ValueError("spin_duration_ms must be > 0")
    if min_spins < 1:
        raise ValueError("min_spins must be >= 1")

    return WheelSettings(
        spin_duration_ms=spin_duration_ms,
        min_spins=min_spins,
        seed=seed,
        log_level=log_level
    )


def load_settings():
    try:
        wheel = st.secrets["wheel"]
    except (StreamlitSecretNotFoundError, KeyError, TypeError):
        return WheelSettings()

    return settings_from_mapping(dict(wheel))
