"""Input collection for the location/upload screen.

Turns a chosen file name into a dashboard code and tracks whether enough
input (valid number plus a picked location) exists to move on.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional

from econstruct.codes import CODE_LENGTH
from econstruct.context import Coordinate, DashboardContext

MIN_FILE_NUMBER = 1
MAX_FILE_NUMBER = 100
ACCEPTED_EXTENSIONS = ["csv", "ifc"]

DEFAULT_CENTER = Coordinate(lat=-37.78737, lng=175.28221)
DEFAULT_ZOOM = 17

MISSING_NUMBER_ERROR = "Filename must end in a number (001–100)."
OUT_OF_RANGE_ERROR = "Number must be 001–100."
NO_LOCATION_ERROR = "No location selected"


class SelectionIncomplete(ValueError):
    """Raised when continuing without a valid file number or location."""


@dataclass(frozen=True)
class FileNumberResult:
    number: Optional[int]
    error: str = ""


def extract_trailing_number(filename: str) -> FileNumberResult:
    base = re.sub(r"\.[^.]+\Z", "", filename or "")
    match = re.search(r"([0-9]{1,3})\Z", base)
    if not match:
        return FileNumberResult(number=None, error=MISSING_NUMBER_ERROR)
    n = int(match.group(1))
    if n < MIN_FILE_NUMBER or n > MAX_FILE_NUMBER:
        return FileNumberResult(number=None, error=OUT_OF_RANGE_ERROR)
    return FileNumberResult(number=n)


def format_code(number: int) -> str:
    return str(number).rjust(CODE_LENGTH, "0")


@dataclass(frozen=True)
class SelectionState:
    file_name: str = ""
    file_number: Optional[int] = None
    file_error: str = ""
    marker: Optional[Coordinate] = None
    center: Coordinate = DEFAULT_CENTER
    search: str = ""
    search_error: str = ""

    @property
    def can_continue(self) -> bool:
        return self.file_number is not None and not self.file_error and self.marker is not None

    def with_file(self, file_name: str) -> "SelectionState":
        result = extract_trailing_number(file_name)
        return replace(self, file_name=file_name, file_number=result.number, file_error=result.error)

    def with_marker(self, marker: Coordinate) -> "SelectionState":
        return replace(self, marker=marker)

    def with_search_result(self, location: Optional[Coordinate], error: str = "") -> "SelectionState":
        if location is None:
            return replace(self, search_error=error)
        return replace(self, center=location, marker=location, search_error="")

    def continue_code(self) -> str:
        if self.file_number is None or self.file_error:
            raise SelectionIncomplete(self.file_error or MISSING_NUMBER_ERROR)
        if self.marker is None:
            raise SelectionIncomplete(NO_LOCATION_ERROR)
        return format_code(self.file_number)

    def dashboard_context(self) -> DashboardContext:
        return DashboardContext(file_name=self.file_name, location=self.marker)
