# File: reclist/core/common/enums.py

from enum import Enum, unique

@unique
class SortColumn(str, Enum):
    DATE = "date"
    TIME = "time"
    PHONE = "phone"
    EMAIL = "email"
    DURATION = "duration"

@unique
class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"
