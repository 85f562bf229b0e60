import enum


class Term(str, enum.Enum):
    MIDYEAR = "MIDYEAR"
    FINAL = "FINAL"
