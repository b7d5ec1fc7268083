from __future__ import annotations

from jobform.forms.constants import IDENTITY_FIELDS
from jobform.forms.state import FormState
from jobform.schemas.application import ParsedResumeData


def merge_parsed_resume(form: FormState, parsed: ParsedResumeData) -> list[str]:
    """Apply an extraction result to the live form.

    Identity fields take the imported value whenever it is non-empty, even
    over existing input. A summary is prepended to the experience narrative.
    Returns the names of the fields that were written.
    """
    changed: list[str] = []
    for name in IDENTITY_FIELDS:
        incoming = getattr(parsed, name)
        if incoming:
            form.update_field(name, incoming)
            changed.append(name)

    if parsed.experience_summary:
        existing = form.state.experience
        form.update_field("experience", f"{parsed.experience_summary}\n\n{existing}".strip())
        changed.append("experience")
    return changed
