from dataclasses import dataclass
from typing import Tuple


@dataclass
class Settings:
    values: Tuple[str, ...] = ("A", "B", "C", "D", "E")
    target: str = "D"

    def __post_init__(self) -> None:
        self.values = tuple(self.values)
        if not isinstance(self.target, str) or not self.target:
            raise ValueError("target must be a non-empty string")
