from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from randex.contracts import StringOptions

CHARACTER_SETS: Mapping[StringOptions, str] = MappingProxyType(
    {
        StringOptions.LOWERCASE: "abcdefghijklmnopqrstuvwxyz",
        StringOptions.UPPERCASE: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
        StringOptions.NUMBERS: "0123456789",
        StringOptions.SPECIAL: "!@#$%^&*()_+-=[]{}|;:,.<>?/",
    }
)


def character_pool(options: StringOptions) -> str:
    return "".join(chars for flag, chars in CHARACTER_SETS.items() if flag in options)
