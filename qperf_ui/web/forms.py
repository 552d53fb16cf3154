from __future__ import annotations

from typing import Mapping, Optional

from qperf_ui.domain.models import QUESTION_TYPES, RunOptions

FALSE_VALUES = {"0", "off", "false", "no", ""}


def qtype_field(code: str) -> str:
    return f"qtype_{code}"


def _last(form: Mapping, name: str) -> Optional[str]:
    # Checkboxes are paired with a hidden "0" input; the checkbox value comes last.
    if hasattr(form, "getlist"):
        values = form.getlist(name)
        return values[-1] if values else None
    return form.get(name)


def _flag(form: Mapping, name: str, default: bool) -> bool:
    raw = _last(form, name)
    if raw is None:
        return default
    return raw.strip().lower() not in FALSE_VALUES


def parse_options(form: Mapping) -> Optional[RunOptions]:
    """Build RunOptions from the posted form, or None if the form carried no option fields."""
    if "delimiter" not in form:
        return None
    return RunOptions(
        delimiter=_last(form, "delimiter") or "",
        tournament_label=(_last(form, "tournament") or "").strip(),
        display_individual_rounds=_flag(form, "display_rounds", False),
        question_type_flags=tuple(_flag(form, qtype_field(code), True) for code, _ in QUESTION_TYPES),
    )
