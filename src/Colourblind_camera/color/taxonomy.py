# src/Colourblind_camera/color/taxonomy.py
"""
Chromatic colour taxonomy.

The hue circle is split into contiguous half-open ranges (Red wraps across 0/360).
Each range carries an ordered rule list; the first rule whose band flags all hold
names the colour, otherwise the range fallback applies. Rule order is precedence:
e.g. in Red, very_dark is checked before dark+muted, so a very dark muted red is
"Dark Red" and a dark muted one "Maroon".
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from Colourblind_camera.color.neutral import GRAYSCALE_ORDER

UNKNOWN = "Unknown"


# ---------------------------------------------------------------------
# Bands
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Bands:
    """
    Does:
        Lightness/saturation band flags for one colour. Bands overlap on purpose
        (light implies medium_light); rule order disambiguates.
    """
    very_light: bool
    light: bool
    medium_light: bool
    medium: bool
    dark: bool
    very_dark: bool
    very_pale: bool
    pale: bool
    muted: bool
    vivid: bool
    very_vivid: bool


def bands_for(sat_pct: float, light_pct: float) -> Bands:
    return Bands(
        very_light=light_pct > 80,
        light=light_pct > 62,
        medium_light=light_pct > 45,
        medium=light_pct > 32,
        dark=light_pct < 32,
        very_dark=light_pct < 20,
        very_pale=sat_pct < 20,
        pale=sat_pct < 35,
        muted=sat_pct < 50,
        vivid=sat_pct > 70,
        very_vivid=sat_pct > 85,
    )


# ---------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Rule:
    name: str
    when: Tuple[str, ...] = ()
    hue_above: Optional[float] = None

    def matches(self, bands: Bands, hue_deg: float) -> bool:
        if self.hue_above is not None and not hue_deg > self.hue_above:
            return False
        return all(getattr(bands, flag) for flag in self.when)


@dataclass(frozen=True, slots=True)
class HueRange:
    label: str
    start: float  # inclusive
    end: float    # exclusive; end < start means the range wraps through 0
    rules: Tuple[Rule, ...]
    fallback: str

    def contains(self, hue_deg: float) -> bool:
        if self.start <= self.end:
            return self.start <= hue_deg < self.end
        return hue_deg >= self.start or hue_deg < self.end

    def resolve(self, bands: Bands, hue_deg: float) -> str:
        for rule in self.rules:
            if rule.matches(bands, hue_deg):
                return rule.name
        return self.fallback


def _r(name: str, *when: str, hue_above: Optional[float] = None) -> Rule:
    return Rule(name=name, when=tuple(when), hue_above=hue_above)


HUE_RANGES: Tuple[HueRange, ...] = (
    HueRange("Red", 345.0, 10.0, (
        _r("White-Pink", "very_light", "very_pale"),
        _r("Light Pink", "very_light"),
        _r("Rose", "light", "pale"),
        _r("Salmon", "light", "muted"),
        _r("Coral", "light"),
        _r("Dark Red", "very_dark"),
        _r("Maroon", "dark", "muted"),
        _r("Burgundy", "dark"),
        _r("Bright Red", "very_vivid"),
        _r("Red", "vivid"),
        _r("Brick Red", "muted"),
    ), "Red"),
    HueRange("Red-Orange", 10.0, 25.0, (
        _r("Brown", "very_dark"),
        _r("Dark Brown", "dark"),
        _r("Peach", "very_light", "pale"),
        _r("Light Coral", "very_light"),
        _r("Coral", "light"),
        _r("Rust", "muted"),
    ), "Red-Orange"),
    HueRange("Orange", 25.0, 42.0, (
        _r("Dark Brown", "very_dark"),
        _r("Brown", "dark", "muted"),
        _r("Burnt Orange", "dark"),
        _r("Cream", "very_light", "very_pale"),
        _r("Peach", "very_light"),
        _r("Apricot", "light", "pale"),
        _r("Light Orange", "light"),
        _r("Tan", "pale"),
        _r("Bright Orange", "very_vivid"),
    ), "Orange"),
    HueRange("Gold", 42.0, 52.0, (
        _r("Brown", "very_dark"),
        _r("Olive Brown", "dark"),
        _r("Cream", "very_light", "pale"),
        _r("Light Gold", "very_light"),
        _r("Khaki", "pale"),
        _r("Gold", "vivid"),
    ), "Golden Yellow"),
    HueRange("Yellow", 52.0, 68.0, (
        _r("Olive", "very_dark"),
        _r("Dark Olive", "dark"),
        _r("Ivory", "very_light", "very_pale"),
        _r("Light Yellow", "very_light"),
        _r("Cream", "pale", "light"),
        _r("Beige", "pale"),
        _r("Bright Yellow", "very_vivid"),
        _r("Yellow", "vivid"),
        _r("Mustard", "muted"),
    ), "Yellow"),
    HueRange("Yellow-Green", 68.0, 85.0, (
        _r("Dark Olive", "very_dark"),
        _r("Olive", "dark"),
        _r("Light Lime", "very_light"),
        _r("Pale Green", "pale"),
        _r("Lime", "vivid"),
    ), "Yellow-Green"),
    HueRange("Green", 85.0, 155.0, (
        _r("Mint", "very_light", "very_pale"),
        _r("Pale Mint", "very_light", "pale"),
        _r("Light Green", "very_light"),
        _r("Sage", "light", "pale"),
        _r("Spring Green", "light"),
        _r("Dark Green", "very_dark"),
        _r("Forest Green", "dark", "muted"),
        _r("Hunter Green", "dark"),
        _r("Bright Green", "very_vivid"),
        _r("Green", "vivid"),
        _r("Olive Green", "muted"),
        _r("Teal Green", "medium", hue_above=140.0),
    ), "Green"),
    HueRange("Cyan-Green", 155.0, 175.0, (
        _r("Aqua", "very_light"),
        _r("Seafoam", "light"),
        _r("Dark Teal", "dark"),
        _r("Turquoise", "vivid"),
    ), "Teal"),
    HueRange("Cyan", 175.0, 195.0, (
        _r("Light Cyan", "very_light"),
        _r("Sky Blue", "light"),
        _r("Dark Cyan", "dark"),
        _r("Bright Cyan", "very_vivid"),
    ), "Cyan"),
    HueRange("Light Blue", 195.0, 215.0, (
        _r("Ice Blue", "very_light", "very_pale"),
        _r("Powder Blue", "very_light"),
        _r("Sky Blue", "light"),
        _r("Steel Blue", "dark"),
    ), "Light Blue"),
    HueRange("Blue", 215.0, 250.0, (
        _r("Periwinkle", "very_light", "very_pale"),
        _r("Light Blue", "very_light"),
        _r("Cornflower Blue", "light", "pale"),
        _r("Medium Blue", "light"),
        _r("Navy", "very_dark"),
        _r("Dark Blue", "dark"),
        _r("Bright Blue", "very_vivid"),
        _r("Blue", "vivid"),
        _r("Slate Blue", "muted"),
    ), "Blue"),
    HueRange("Blue-Purple", 250.0, 275.0, (
        _r("Lavender", "very_light"),
        _r("Periwinkle", "light"),
        _r("Indigo", "dark"),
        _r("Violet", "vivid"),
    ), "Blue-Violet"),
    HueRange("Purple", 275.0, 310.0, (
        _r("Pale Lavender", "very_light", "very_pale"),
        _r("Light Purple", "very_light"),
        _r("Lilac", "light", "pale"),
        _r("Orchid", "light"),
        _r("Dark Purple", "very_dark"),
        _r("Plum", "dark"),
        _r("Bright Purple", "very_vivid"),
        _r("Purple", "vivid"),
        _r("Mauve", "muted"),
    ), "Purple"),
    HueRange("Magenta/Pink", 310.0, 345.0, (
        _r("Blush", "very_light", "very_pale"),
        _r("Light Pink", "very_light"),
        _r("Rose Pink", "light", "pale"),
        _r("Pink", "light"),
        _r("Plum", "dark", "muted"),
        _r("Magenta", "dark"),
        _r("Hot Pink", "very_vivid"),
        _r("Fuchsia", "vivid"),
        _r("Dusty Rose", "muted"),
    ), "Magenta"),
)


# ---------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------

def hue_range_for(hue_deg: float) -> Optional[HueRange]:
    if not math.isfinite(hue_deg):
        return None
    for hr in HUE_RANGES:
        if hr.contains(hue_deg):
            return hr
    return None


def resolve_chromatic(hue_deg: float, sat_pct: float, light_pct: float, chroma: float = 0.0) -> str:
    """
    Does:
        Name a non-neutral colour from hue (degrees), saturation and lightness
        (percent). chroma is accepted for signature parity with the neutral gate;
        the table itself keys on bands only.
    """
    hr = hue_range_for(hue_deg)
    if hr is None:
        return UNKNOWN
    return hr.resolve(bands_for(sat_pct, light_pct), hue_deg)


def chromatic_names() -> Tuple[str, ...]:
    seen: dict[str, None] = {}
    for hr in HUE_RANGES:
        for rule in hr.rules:
            seen.setdefault(rule.name, None)
        seen.setdefault(hr.fallback, None)
    return tuple(seen)


def all_names() -> Tuple[str, ...]:
    """
    Does:
        The closed output vocabulary: chromatic names, grayscale bands, and the
        Unknown sentinel.
    """
    out = dict.fromkeys(chromatic_names())
    for name in reversed(GRAYSCALE_ORDER):
        out.setdefault(name, None)
    out.setdefault(UNKNOWN, None)
    return tuple(out)
