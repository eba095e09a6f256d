"""Base models for the package"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from rich import print as _pprint


def make_model_config(**kwargs: Any) -> ConfigDict:
    """Return a Pydantic config"""
    return ConfigDict(
        frozen=True,
        validate_default=True,
        extra="forbid",
        use_enum_values=False,
        populate_by_name=True,
        **kwargs,  # type: ignore
    )


class GeoUriBaseModel(BaseModel):
    """Base class for all geo URI models"""

    model_config = make_model_config()

    def pprint(self):
        return _pprint(self)
