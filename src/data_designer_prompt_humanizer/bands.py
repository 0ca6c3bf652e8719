from __future__ import annotations

# Upper bound (inclusive) -> (band, badge). Scores above the last bound are "high".
_BANDS: tuple[tuple[int, str, str], ...] = (
    (20, "low", "\U0001f7e2"),
    (40, "medium", "\U0001f7e1"),
    (60, "elevated", "\U0001f7e0"),
)
_HIGH = ("high", "\U0001f534")


def score_band(score: int) -> str:
    for upper, band, _ in _BANDS:
        if score <= upper:
            return band
    return _HIGH[0]


def score_badge(score: int) -> str:
    for upper, _, badge in _BANDS:
        if score <= upper:
            return badge
    return _HIGH[1]
