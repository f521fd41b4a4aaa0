# invoicing/models/base.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        allow_inf_nan=False,
    )


def reject_null(value):
    # Partial updates may omit a required field but never clear it.
    if value is None:
        raise ValueError("Field cannot be null")
    return value
