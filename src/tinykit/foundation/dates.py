"""Date formatter built from a strftime pattern or from date/time styles."""

from __future__ import annotations

from datetime import date, datetime


# en-US style patterns. "long" and "full" times omit the zone: naive
# datetimes render %Z as an empty string, which strptime cannot round-trip.
DATE_STYLE_FORMATS = {
    "none": "",
    "short": "%m/%d/%y",
    "medium": "%b %d, %Y",
    "long": "%B %d, %Y",
    "full": "%A, %B %d, %Y",
}

TIME_STYLE_FORMATS = {
    "none": "",
    "short": "%I:%M %p",
    "medium": "%I:%M:%S %p",
    "long": "%I:%M:%S %p",
    "full": "%I:%M:%S %p",
}


def _validate_style(style: str, kind: str, styles: dict[str, str]) -> str:
    if style not in styles:
        raise ValueError(
            f"Unknown {kind} style '{style}'. Use one of: {', '.join(styles)}."
        )
    return styles[style]


class DateFormatter:
    """Formats and parses dates with a fixed pattern.

    An explicit ``date_format`` wins over ``date_style``/``time_style``.
    When both styles are ``"none"`` the formatter renders the empty string.
    """

    __slots__ = ("_date_format",)

    def __init__(
        self,
        date_format: str | None = None,
        *,
        date_style: str = "none",
        time_style: str = "none",
    ) -> None:
        if date_format is None:
            date_part = _validate_style(date_style, "date", DATE_STYLE_FORMATS)
            time_part = _validate_style(time_style, "time", TIME_STYLE_FORMATS)
            date_format = ", ".join(p for p in (date_part, time_part) if p)
        self._date_format = date_format

    @property
    def date_format(self) -> str:
        return self._date_format

    def format(self, value: date | datetime) -> str:
        if not self._date_format:
            return ""
        return value.strftime(self._date_format)

    def parse(self, text: str) -> datetime:
        if not self._date_format:
            raise ValueError("DateFormatter has no date or time pattern to parse with.")
        return datetime.strptime(text, self._date_format)

    def __repr__(self) -> str:
        return f"DateFormatter({self._date_format!r})"
