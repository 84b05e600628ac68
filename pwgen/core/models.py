from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Tuple


PASSWORD_DEFAULT_LENGTH = 16
PASSWORD_MAX_LENGTH = 16384
USERNAME_DEFAULT_SUFFIX_DIGITS = 4
USERNAME_MAX_SUFFIX_DIGITS = 64
USERNAME_DEFAULT_DELIMITER = ""
MASK_CHAR = "*"


def mask_value(value: str) -> str:
    return MASK_CHAR * len(value)


@dataclass(frozen=True)
class CharsetSpec:
    categories: Tuple[str, ...] = ()
    exclude: str = ""


@dataclass(frozen=True)
class PasswordRequest:
    length: int = PASSWORD_DEFAULT_LENGTH
    charset: CharsetSpec = field(default_factory=CharsetSpec)
    hide_output: bool = False
    copy_to_clipboard: bool = True


@dataclass(frozen=True)
class PasswordResult:
    value: str
    pool: str
    estimated_entropy_bits: float = 0.0

    def as_lines(self, show_meta: bool = False, hide: bool = False) -> Tuple[str, ...]:
        shown = mask_value(self.value) if hide else self.value
        if not show_meta:
            return (shown,)
        bits_value = self.estimated_entropy_bits
        if math.isfinite(bits_value):
            rounded = round(bits_value, 3)
            if rounded.is_integer():
                bits_text = str(int(rounded))
            else:
                bits_text = f"{rounded:.3f}".rstrip("0").rstrip(".")
        else:
            bits_text = "unknown"
        return (f"{shown}\t[entropy={bits_text} bits pool={len(self.pool)}]",)


@dataclass(frozen=True)
class UsernameRequest:
    delimiter: str = USERNAME_DEFAULT_DELIMITER
    number_suffix_digits: int = USERNAME_DEFAULT_SUFFIX_DIGITS
    copy_to_clipboard: bool = True


@dataclass(frozen=True)
class UsernameResult:
    value: str

    def as_lines(self) -> Tuple[str, ...]:
        return (self.value,)
