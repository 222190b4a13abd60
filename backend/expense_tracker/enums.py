from enum import Enum

class UserRole(str, Enum):
    STANDARD = "STANDARD"
    ADMIN = "ADMIN"

class DistributionStatus(str, Enum):
    UNDER = "UNDER"
    WITHIN = "WITHIN"
    OVER = "OVER"
    UNSET = "UNSET"
