"""Common types shared across the core components."""

from enum import Enum


class Zone(Enum):
    """Zone interpretation attached to an instant.

    Only two effective zones exist:
    - UTC: civil fields derived with no offset and no DST
    - LOCAL: civil fields derived with the observer's local offset/DST rule

    NONE is the uninitialized sentinel. It never appears on a valid instant.
    """

    NONE = 0
    UTC = 1
    LOCAL = 2

    @property
    def zone_name(self) -> str | None:
        """Printable zone name, None for the NONE sentinel."""
        return _ZONE_NAMES.get(self)


_ZONE_NAMES: dict[Zone, str] = {
    Zone.UTC: "UTC",
    Zone.LOCAL: "LOCAL",
}
