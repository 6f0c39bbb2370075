"""Member email variants.

Selects which transactional email is sent when a member is created with
``send_email`` enabled.
"""

from enum import Enum


class EmailType(str, Enum):
    """Member email variant.

    Attributes:
        SIGNIN: Magic link for an existing member to sign in.
        SIGNUP: Welcome email confirming a new membership.
        SUBSCRIBE: Newsletter subscription confirmation.
    """

    SIGNIN = "signin"
    SIGNUP = "signup"
    SUBSCRIBE = "subscribe"
