"""Approved command verb vocabulary."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Verb:
    """An approved verb, its alias prefix and its group."""
    name: str
    alias_prefix: str
    group: str


_TABLE = {
    "Common": [
        ("Add", "a"), ("Clear", "cl"), ("Close", "cs"), ("Copy", "cp"),
        ("Enter", "et"), ("Exit", "ex"), ("Find", "fd"), ("Format", "f"),
        ("Get", "g"), ("Hide", "h"), ("Join", "j"), ("Lock", "lk"),
        ("Move", "m"), ("New", "n"), ("Open", "op"), ("Optimize", "om"),
        ("Pop", "pop"), ("Push", "pu"), ("Redo", "re"), ("Remove", "r"),
        ("Rename", "rn"), ("Reset", "rs"), ("Resize", "rz"), ("Search", "sr"),
        ("Select", "sc"), ("Set", "s"), ("Show", "sh"), ("Skip", "sk"),
        ("Split", "sl"), ("Step", "st"), ("Switch", "sw"), ("Undo", "un"),
        ("Unlock", "uk"), ("Watch", "wc"),
    ],
    "Communications": [
        ("Connect", "cc"), ("Disconnect", "dc"), ("Read", "rd"),
        ("Receive", "rc"), ("Send", "sd"), ("Write", "wr"),
    ],
    "Data": [
        ("Backup", "ba"), ("Checkpoint", "ch"), ("Compare", "cr"),
        ("Compress", "cm"), ("Convert", "cv"), ("ConvertFrom", "cf"),
        ("ConvertTo", "ct"), ("Dismount", "dm"), ("Edit", "ed"),
        ("Expand", "en"), ("Export", "ep"), ("Group", "gp"),
        ("Import", "ip"), ("Initialize", "in"), ("Limit", "l"),
        ("Merge", "mg"), ("Mount", "mt"), ("Out", "o"), ("Publish", "pb"),
        ("Restore", "rr"), ("Save", "sv"), ("Sync", "sy"),
        ("Unpublish", "ub"), ("Update", "ud"),
    ],
    "Diagnostic": [
        ("Debug", "db"), ("Measure", "ms"), ("Ping", "pi"), ("Repair", "rp"),
        ("Resolve", "rv"), ("Test", "t"), ("Trace", "tr"),
    ],
    "Lifecycle": [
        ("Approve", "ap"), ("Assert", "as"), ("Build", "bd"),
        ("Complete", "cmp"), ("Confirm", "cn"), ("Deny", "dn"),
        ("Deploy", "dp"), ("Disable", "d"), ("Enable", "e"),
        ("Install", "is"), ("Invoke", "i"), ("Register", "rg"),
        ("Request", "rq"), ("Restart", "rt"), ("Resume", "ru"),
        ("Start", "sa"), ("Stop", "sp"), ("Submit", "sb"),
        ("Suspend", "ss"), ("Uninstall", "us"), ("Unregister", "ur"),
        ("Wait", "w"),
    ],
    "Security": [
        ("Block", "bl"), ("Grant", "gr"), ("Protect", "pt"),
        ("Revoke", "rk"), ("Unblock", "ul"), ("Unprotect", "up"),
    ],
    "Other": [
        ("Use", "u"),
    ],
}

APPROVED_VERBS: tuple[Verb, ...] = tuple(
    Verb(name=name, alias_prefix=prefix, group=group)
    for group, entries in _TABLE.items()
    for name, prefix in entries
)

GROUPS: tuple[str, ...] = tuple(_TABLE)


def find_verbs(pattern: str = "", group: Optional[str] = None) -> list[Verb]:
    """Verbs whose name contains ``pattern``, ignoring case."""
    needle = pattern.lower()
    matches = [v for v in APPROVED_VERBS if needle in v.name.lower()]
    if group:
        matches = [v for v in matches if v.group.lower() == group.lower()]
    return matches
