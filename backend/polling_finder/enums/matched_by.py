from enum import StrEnum


class MatchedBy(StrEnum):
    POSTAL_CODE = 'postal_code'
    SETTLEMENT = 'settlement'
    ADDRESS = 'address'
