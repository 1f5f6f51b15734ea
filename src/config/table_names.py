from enum import Enum


class TableNames(str, Enum):
    EVENTS = "events"
    INVITES = "invites"
    RSVP_RESPONSES = "rsvp_responses"
