"""Display mode preference and the palette applied for each effective mode."""

import enum


class DisplayPreference(str, enum.Enum):
    """What the user picked. ``SYSTEM`` defers to the OS/browser signal."""
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"


class EffectiveMode(str, enum.Enum):
    """What is actually applied. Never ``system``."""
    LIGHT = "light"
    DARK = "dark"


# Fixed rotation used by the toggle button
PREFERENCE_CYCLE = (DisplayPreference.SYSTEM, DisplayPreference.LIGHT, DisplayPreference.DARK)

PREFERENCE_LABELS = {
    DisplayPreference.SYSTEM: "System mode",
    DisplayPreference.LIGHT: "Light mode",
    DisplayPreference.DARK: "Dark mode",
}


def next_preference(current: DisplayPreference) -> DisplayPreference:
    index = PREFERENCE_CYCLE.index(current)
    return PREFERENCE_CYCLE[(index + 1) % len(PREFERENCE_CYCLE)]


def resolve_mode(preference: DisplayPreference, system_signal: EffectiveMode) -> EffectiveMode:
    if preference is DisplayPreference.SYSTEM:
        return system_signal
    return EffectiveMode(preference.value)


def signal_from_prefers_dark(prefers_dark: bool) -> EffectiveMode:
    return EffectiveMode.DARK if prefers_dark else EffectiveMode.LIGHT


# ── Palettes ───────────────────────────────────────
PALETTES: dict[EffectiveMode, dict[str, dict[str, str]]] = {
    EffectiveMode.LIGHT: {
        "primary": {"main": "#7c3aed", "light": "#a78bfa", "dark": "#5b21b6"},
        "secondary": {"main": "#f43f5e", "light": "#fb7185", "dark": "#e11d48"},
        "error": {"main": "#ef4444"},
        "warning": {"main": "#f59e0b"},
        "info": {"main": "#0ea5e9"},
        "success": {"main": "#10b981"},
        "background": {"default": "#fafafa", "paper": "#ffffff"},
        "text": {"primary": "#18181b", "secondary": "#71717a"},
    },
    EffectiveMode.DARK: {
        "primary": {"main": "#a78bfa", "light": "#c4b5fd", "dark": "#7c3aed"},
        "secondary": {"main": "#fb7185", "light": "#fda4af", "dark": "#f43f5e"},
        "error": {"main": "#f87171"},
        "warning": {"main": "#fbbf24"},
        "info": {"main": "#38bdf8"},
        "success": {"main": "#34d399"},
        "background": {"default": "#09090b", "paper": "#18181b"},
        "text": {"primary": "#fafafa", "secondary": "#a1a1aa"},
    },
}
