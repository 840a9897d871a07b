from __future__ import annotations

from dataclasses import dataclass

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class LabelProvider:
    """Localized calendar names, Monday-first and January-first."""

    code: str
    weekday_names: tuple[str, ...]
    weekday_abbreviations: tuple[str, ...]
    month_names: tuple[str, ...]
    rest_label: str
    week_title: str
    total_label: str

    def weekday(self, index: int) -> str:
        return self.weekday_names[index]

    def month(self, month: int) -> str:
        return self.month_names[month - 1]


ITALIAN = LabelProvider(
    code="it",
    weekday_names=("lunedì", "martedì", "mercoledì", "giovedì", "venerdì", "sabato", "domenica"),
    weekday_abbreviations=("Lun", "Mar", "Mer", "Gio", "Ven", "Sab", "Dom"),
    month_names=(
        "Gennaio", "Febbraio", "Marzo", "Aprile", "Maggio", "Giugno",
        "Luglio", "Agosto", "Settembre", "Ottobre", "Novembre", "Dicembre",
    ),
    rest_label="Riposo",
    week_title="Orario Settimanale",
    total_label="Totale",
)

ENGLISH = LabelProvider(
    code="en",
    weekday_names=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    weekday_abbreviations=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    month_names=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    rest_label="Rest",
    week_title="Weekly Schedule",
    total_label="Total",
)

_PROVIDERS = {p.code: p for p in (ITALIAN, ENGLISH)}


def get_labels(code: str | None) -> LabelProvider:
    if not code:
        return ITALIAN
    provider = _PROVIDERS.get(code.strip().lower()[:2])
    if provider is None:
        raise ValidationError(f"Unsupported locale: {code!r}")
    return provider
