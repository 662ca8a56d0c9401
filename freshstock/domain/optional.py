"""
Present / Absent values for partial updates.

A patch command is a frozen dataclass whose fields default to ABSENT. Only
fields wrapped in Present are merged into the stored snapshot, so a zero or an
empty string sent by the client still overwrites, while an omitted field never
does.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class _Absent:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "ABSENT"


ABSENT = _Absent()


@dataclass(frozen=True)
class Present(Generic[T]):
    value: T


Option = Union[Present[T], _Absent]


def is_present(option: Any) -> bool:
    return isinstance(option, Present)


def present_fields(command) -> dict:
    """Return {field: value} for every Present field of a patch command"""
    return {
        f.name: getattr(command, f.name).value
        for f in fields(command)
        if is_present(getattr(command, f.name))
    }


def merge_present(snapshot, command):
    """
    Overwrite the snapshot's fields with the command's present values.

    Args:
        snapshot: Frozen dataclass loaded from storage
        command: Patch dataclass with Present/ABSENT fields named like the snapshot's

    Returns:
        A new snapshot; the input is left untouched
    """
    return replace(snapshot, **present_fields(command))
