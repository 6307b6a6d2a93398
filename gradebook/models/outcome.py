"""
Prompt outcome variants.

Every validator and prompt in the system answers with one of these three
values instead of raising. Phase drivers check which one they got:

    Ok(value)         the input was accepted; ``value`` is the parsed result
    Invalid(reason)   the input was rejected; ``reason`` is shown to the user
    Cancelled()       the user typed the cancel token
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Ok:
    value: Any


@dataclass(frozen=True)
class Invalid:
    reason: str


@dataclass(frozen=True)
class Cancelled:
    pass


# What a validator returns (cancel is handled by the prompter)
ValidationResult = Union[Ok, Invalid]

# What a prompt returns (it re-asks until the input is valid)
PromptResult = Union[Ok, Cancelled]
