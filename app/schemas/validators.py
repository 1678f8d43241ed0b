# app/schemas/validators.py

from datetime import date


def not_in_future(value: date, field_name: str) -> date:
    if value is not None and value > date.today():
        raise ValueError(f"The {field_name} date must be today or earlier.")
    return value
