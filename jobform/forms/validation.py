from __future__ import annotations

from jobform.forms.constants import ACKNOWLEDGMENT_KEYS, REQUIRED_CONTACT_FIELDS
from jobform.schemas.application import ApplicationState, EligibilityView, PositionType


def all_acknowledged(state: ApplicationState) -> bool:
    return all(state.acknowledgments.get(key, False) for key in ACKNOWLEDGMENT_KEYS)


def contact_details_complete(state: ApplicationState) -> bool:
    return all(getattr(state, name) for name in REQUIRED_CONTACT_FIELDS)


def can_submit(state: ApplicationState) -> bool:
    return (
        contact_details_complete(state)
        and state.position_type == PositionType.FULL_TIME
        and all_acknowledged(state)
    )


def show_part_time_notice(state: ApplicationState) -> bool:
    return state.position_type == PositionType.PART_TIME


def show_acknowledgment_warning(state: ApplicationState) -> bool:
    return not all_acknowledged(state)


def unmet_requirements(state: ApplicationState) -> list[str]:
    unmet: list[str] = []
    if not contact_details_complete(state):
        unmet.append("Complete all required contact fields.")
    if state.position_type != PositionType.FULL_TIME:
        unmet.append('Select "Full-Time" as the position type.')
    if not all_acknowledged(state):
        unmet.append("Check all working-condition acknowledgments.")
    return unmet


def evaluate(state: ApplicationState) -> EligibilityView:
    return EligibilityView(
        can_submit=can_submit(state),
        all_acknowledged=all_acknowledged(state),
        show_part_time_notice=show_part_time_notice(state),
        show_acknowledgment_warning=show_acknowledgment_warning(state),
        unmet_requirements=unmet_requirements(state),
    )
