# bikerental/utils/constants.py

"""
Payload field names and lookups shared by services and controllers.
"""

# --- Required payload fields ---
USER_FIELDS = ("userName", "userAddress", "userAge")
BICYCLE_TEXT_FIELDS = ("type",)
RENT_FIELDS = ("rentTime", "bicycleId")


class Field:
    RENTER_ID = "renterId"
    IS_AVAILABLE = "isAvailable"


# --- Misc ---
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}
