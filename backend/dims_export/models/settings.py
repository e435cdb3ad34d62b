"""
Export settings snapshot for a single DIMS export run.
"""
import math
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from dims_export.transform.units import is_metric


class ExportSettings(BaseModel):
    """
    Immutable DIMS export configuration.

    Blank or missing values fall back to the site defaults, so a partially
    filled settings file or request payload still yields a usable snapshot.
    """

    model_config = ConfigDict(frozen=True)

    DEFAULT_FACTOR: ClassVar[float] = 166.0
    FACTOR_TOLERANCE: ClassVar[float] = 1e-3

    dim_unit: str = "in"
    wgt_unit: str = "lb"
    vol_unit: str = "in"
    factor: float = DEFAULT_FACTOR
    site_id: str = "733"
    opt_info_2: str = "Y"
    opt_info_3: str = "Y"

    @field_validator(
        "dim_unit", "wgt_unit", "vol_unit", "site_id", "opt_info_2", "opt_info_3",
        mode="before",
    )
    @classmethod
    def default_blank_text(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return cls.model_fields[info.field_name].default
        # Hand-edited YAML turns site_id: 733 into an int
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("factor", mode="before")
    @classmethod
    def parse_factor(cls, v: Any) -> Any:
        # Stored as text by older settings files ("166")
        if v is None or (isinstance(v, str) and not v.strip()):
            return cls.DEFAULT_FACTOR
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def uses_metric_units(self) -> bool:
        """True when any configured unit is centimeters or kilograms."""
        return is_metric(self.dim_unit) or is_metric(self.vol_unit) or is_metric(self.wgt_unit)

    @property
    def has_default_factor(self) -> bool:
        """True when the dimensional-weight factor is still the inch/pound default."""
        return math.isfinite(self.factor) and abs(self.factor - self.DEFAULT_FACTOR) < self.FACTOR_TOLERANCE
