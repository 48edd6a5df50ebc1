"""Permission-change mini-language: ``[u](+|-)[rwx]{1,3}``.

``+`` sets and ``-`` clears the named permissions. Without the ``u`` prefix
the change applies to owner, group and others alike; with it, to the owner
only.

Examples::

    "+x"   -> executable for everyone
    "u-wx" -> owner loses write and execute
"""

from __future__ import annotations

import re
import stat

from ._exceptions import InvalidModeError

_MODE_RE = re.compile(r"(u?)([+-])([rwx]{1,3})")

_OWNER_BITS = {"r": stat.S_IRUSR, "w": stat.S_IWUSR, "x": stat.S_IXUSR}
_ALL_BITS = {
    "r": stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH,
    "w": stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH,
    "x": stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH,
}


class PermissionChange:
    __slots__ = ("owner_only", "grant", "permissions")

    def __init__(self, owner_only: bool, grant: bool, permissions: frozenset[str]) -> None:
        self.owner_only: bool = owner_only
        self.grant: bool = grant
        self.permissions: frozenset[str] = permissions

    @property
    def mask(self) -> int:
        table = _OWNER_BITS if self.owner_only else _ALL_BITS
        bits = 0
        for perm in self.permissions:
            bits |= table[perm]
        return bits

    def apply(self, st_mode: int) -> int:
        """Return the permission bits of *st_mode* with this change applied."""
        current = stat.S_IMODE(st_mode)
        if self.grant:
            return current | self.mask
        return current & ~self.mask

    def __repr__(self) -> str:
        sign = "+" if self.grant else "-"
        owner = "u" if self.owner_only else ""
        perms = "".join(p for p in "rwx" if p in self.permissions)
        return f"PermissionChange('{owner}{sign}{perms}')"


def parse_mode(mode: str) -> PermissionChange:
    m = _MODE_RE.fullmatch(mode)
    if m is None:
        raise InvalidModeError(mode)
    owner, sign, perms = m.groups()
    return PermissionChange(
        owner_only=bool(owner),
        grant=sign == "+",
        permissions=frozenset(perms),
    )
