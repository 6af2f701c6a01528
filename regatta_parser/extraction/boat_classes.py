"""Known dinghy and keelboat classes and their crew sizes."""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class BoatClass:
    name: str
    crew_size: int
    pattern: str
    aliases: tuple[str, ...] = ()


BOAT_CLASSES: tuple[BoatClass, ...] = (
    BoatClass("Optimist", 1, r"Optimist(?:\s*[AB])?|Opti\s*[ABC]", ("opti",)),
    BoatClass("Laser Bug", 1, r"Laser\s*Bug"),
    BoatClass("ILCA", 1, r"ILCA\s*[467]", ("ilca",)),
    BoatClass("Laser", 1, r"Laser"),
    BoatClass("Teeny", 1, r"Teeny"),
    BoatClass("O'pen Skiff", 1, r"O'?pen\s*Skiff"),
    BoatClass("Europe", 1, r"Europe"),
    BoatClass("Finn", 1, r"Finn(?:\s*Dinghy)?"),
    BoatClass("OK-Jolle", 1, r"OK[\-\s]?Jolle"),
    BoatClass("Cadet", 2, r"Cadet"),
    BoatClass("RS Feva", 2, r"RS\s*Feva"),
    BoatClass("420er", 2, r"420er", ("420",)),
    BoatClass("470er", 2, r"470er", ("470",)),
    BoatClass("29er", 2, r"29er"),
    BoatClass("49er FX", 2, r"49er\s*FX"),
    BoatClass("49er", 2, r"49er"),
    BoatClass("Pirat", 2, r"Pirat"),
    BoatClass("Korsar", 2, r"Korsar"),
    BoatClass("J70", 4, r"J\s*/?\s*70"),
)

BOAT_CLASS_RE = re.compile(
    r"(?<![A-Za-z0-9])("
    + "|".join(f"(?:{bc.pattern})" for bc in BOAT_CLASSES)
    + r")(?![A-Za-z0-9])",
    re.IGNORECASE,
)


def find_boat_class(text: str) -> str | None:
    """Return the first boat class name printed in ``text``, as printed."""
    match = BOAT_CLASS_RE.search(text)
    return match.group(1).strip() if match else None


def lookup_boat_class(name: str | None) -> BoatClass | None:
    if not name:
        return None
    cleaned = name.strip()
    for boat_class in BOAT_CLASSES:
        if re.fullmatch(boat_class.pattern, cleaned, re.IGNORECASE):
            return boat_class
    lowered = cleaned.lower()
    for boat_class in BOAT_CLASSES:
        if lowered == boat_class.name.lower() or lowered in boat_class.aliases:
            return boat_class
    return None


def crew_size_for(name: str | None) -> int:
    """Crew size for a class name; unknown classes count as single-handed."""
    boat_class = lookup_boat_class(name)
    return boat_class.crew_size if boat_class else 1
