from app.utils.exceptions import InvalidMonthException


MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_MONTH_BY_NAME = {name.lower(): number for number, name in enumerate(MONTH_NAMES, start=1)}


def normalize_month(value: int | str) -> int:
    """
    Return the canonical month number (1-12).

    Accepts an int, a numeric string ("3", "03") or a case-insensitive
    English month name ("march", "March"). Raises InvalidMonthException otherwise.
    """
    if isinstance(value, bool):
        raise InvalidMonthException(value)

    if isinstance(value, str):
        key = value.strip().lower()
        if key in _MONTH_BY_NAME:
            return _MONTH_BY_NAME[key]
        # ASCII only: int() rejects superscripts that isdigit() accepts
        if not (key.isascii() and key.isdigit()):
            raise InvalidMonthException(value)
        number = int(key)
    elif isinstance(value, int):
        number = value
    else:
        raise InvalidMonthException(value)

    if not 1 <= number <= 12:
        raise InvalidMonthException(value)
    return number


def month_name(number: int) -> str:
    """Inverse of normalize_month: 1 -> "January"."""
    if isinstance(number, bool) or not isinstance(number, int) or not 1 <= number <= 12:
        raise InvalidMonthException(number)
    return MONTH_NAMES[number - 1]
