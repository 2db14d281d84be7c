import re

_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_msisdn(recipient: str | int) -> str:
    digits = _NON_DIGITS.sub("", str(recipient))
    if not digits:
        raise ValueError(f"Invalid recipient number: {recipient}")
    return digits
