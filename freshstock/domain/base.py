from dataclasses import asdict, fields
from typing import Dict

from freshstock.errors import FieldTooLong

FIELD_TOO_LONG = "a field exceeds the maximum length"


class Snapshot:
    """
    Mixin for frozen dataclass snapshots.

    Subclasses list in `omit_when_none` the optional fields that are left out
    of the JSON payload while unset.
    """

    omit_when_none = ()

    def to_dict(self) -> Dict:
        data = asdict(self)
        for name in self.omit_when_none:
            if data.get(name) is None:
                data.pop(name, None)
        return data

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]


def enforce_max_length(snapshot, limits: Dict[str, int]) -> None:
    """
    Reject string fields longer than their storage bound.

    Args:
        snapshot: Entity snapshot to check
        limits: Field name to maximum length

    Raises:
        FieldTooLong: If any bounded field exceeds its limit
    """
    for name, limit in limits.items():
        value = getattr(snapshot, name)
        if value is not None and len(value) > limit:
            raise FieldTooLong(FIELD_TOO_LONG)
