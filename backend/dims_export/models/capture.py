"""
Capture record snapshot consumed by the DIMS export.

Records come from the acquisition/persistence layer already normalized:
dimensions in inches, weight in pounds.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CaptureRecord:
    """One captured image of a part, with the measurements taken for it."""

    part_number: Optional[str]
    sequence: int = 0  # Ordering key within a part; not unique
    length_in: Optional[float] = None
    depth_in: Optional[float] = None  # Exported as NET_WIDTH
    height_in: Optional[float] = None
    weight_lb: Optional[float] = None
    time_stamp: Optional[str] = None  # Free-form, see transform.timestamps
    image_file_name: Optional[str] = None
