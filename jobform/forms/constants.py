from __future__ import annotations

JOB_TITLE = "Grounds Maintenance Specialist"
COMPANY_NAME = "GreenValley Golf & Country Club"

INTRO_TEXT = (
    "Thank you for your interest in joining the GreenValley family. We take immense pride in the "
    "pristine condition of our course, and our maintenance team is the heart of that effort.\n\n"
    "This role is vital to our operations. Before you begin, we want to be transparent about the "
    "nature of the work to ensure it is a perfect fit for you."
)

# Ordered (key, disclosure) pairs. Drives both the rendered checklist and submit gating.
ACKNOWLEDGMENTS: tuple[tuple[str, str], ...] = (
    (
        "ack_outdoor",
        "I understand this position requires working outdoors 95% of the time, in various weather "
        "conditions including summer heat, rain, and cold mornings.",
    ),
    (
        "ack_physical",
        "I am comfortable with the physical demands of the job, which include frequent lifting "
        "(up to 50lbs), stooping, bending, and long periods on my feet.",
    ),
    (
        "ack_machinery",
        "I am willing to operate heavy maintenance machinery (mowers, aerators, tractors) safely "
        "and responsibly (training provided).",
    ),
    (
        "ack_customers",
        "I understand that I will be working around golfers. While most are wonderful, some can be "
        "focused or frustrated with their game. I agree to remain kind, professional, and invisible "
        "to their play whenever possible.",
    ),
    (
        "ack_exhaustion",
        "I acknowledge that while the work is straightforward, it can be physically exhausting by "
        "the end of the day. I am prepared for an active, labor-intensive role.",
    ),
)

ACKNOWLEDGMENT_KEYS: tuple[str, ...] = tuple(key for key, _text in ACKNOWLEDGMENTS)

IDENTITY_FIELDS: tuple[str, ...] = ("first_name", "last_name", "email", "phone", "address")

TEXT_FIELDS: tuple[str, ...] = IDENTITY_FIELDS + (
    "position_type",
    "start_date",
    "experience",
    "references",
    "motivation",
)

REQUIRED_CONTACT_FIELDS: tuple[str, ...] = ("first_name", "last_name", "email", "phone")

SAVE_MESSAGE = "Progress saved! You can close this tab and resume your application later."
IMPORT_FAILED_MESSAGE = "We couldn't automatically read your resume. Please fill in the details manually."
UNSUPPORTED_FORMAT_MESSAGE = "Please upload a PDF or Image file. Convert Word docs to PDF first."
TOO_LARGE_MESSAGE = "File size is too large (Max 5MB)."
PART_TIME_NOTICE = (
    "Notice: At this time, we are strictly hiring for Full-Time positions to ensure the continuity "
    "of care for our grounds. Please select \"Full-Time\" if your schedule allows, otherwise we may "
    "not be able to process your application today."
)
ACKNOWLEDGMENT_WARNING = "Please acknowledge all conditions to proceed with the application."
SUBMIT_BLOCKED_MESSAGE = (
    "Please complete all required fields, select \"Full-Time\", and check all acknowledgments to proceed."
)

CONFIRMATION_TITLE = "Thank You!"
CONFIRMATION_TEMPLATE = (
    "Your application for the {job_title} position at {company_name} has been received. "
    "We appreciate the time you took to complete the transparency acknowledgments. "
    "Our team will review your information and reach out via email within 3-5 business days "
    "if we believe there is a strong match."
)


def default_acknowledgments() -> dict[str, bool]:
    return {key: False for key in ACKNOWLEDGMENT_KEYS}
