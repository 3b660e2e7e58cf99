# runtime/location.py — MethodSource v1
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    file_path: str
    line_number: int   # 1-indexed, first line of the entity's own text

    def __post_init__(self) -> None:
        if isinstance(self.line_number, bool) or not isinstance(self.line_number, int):
            raise ValueError(f"line_number must be an int, got {self.line_number!r}")
        if self.line_number < 1:
            raise ValueError(f"line_number is 1-indexed, got {self.line_number}")

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line_number}"
