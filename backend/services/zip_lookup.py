"""Static ZIP-prefix → state / congressional district lookup.

This is an approximation. ZIP codes do not nest inside states or districts
cleanly; a real geocoding or district service is needed for exact matches.
The table maps USPS 3-digit ZIP prefixes to the state they are assigned to,
which is right for nearly every residential ZIP. District lists are only
known for a few metro prefixes and for single-district jurisdictions.
"""

import logging
import re

from config import settings
from errors import InvalidZipError

logger = logging.getLogger(__name__)

STATE_NAMES = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas", "CA": "California",
    "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware", "FL": "Florida", "GA": "Georgia",
    "HI": "Hawaii", "ID": "Idaho", "IL": "Illinois", "IN": "Indiana", "IA": "Iowa",
    "KS": "Kansas", "KY": "Kentucky", "LA": "Louisiana", "ME": "Maine", "MD": "Maryland",
    "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota", "MS": "Mississippi",
    "MO": "Missouri", "MT": "Montana", "NE": "Nebraska", "NV": "Nevada", "NH": "New Hampshire",
    "NJ": "New Jersey", "NM": "New Mexico", "NY": "New York", "NC": "North Carolina",
    "ND": "North Dakota", "OH": "Ohio", "OK": "Oklahoma", "OR": "Oregon", "PA": "Pennsylvania",
    "RI": "Rhode Island", "SC": "South Carolina", "SD": "South Dakota", "TN": "Tennessee",
    "TX": "Texas", "UT": "Utah", "VT": "Vermont", "VA": "Virginia", "WA": "Washington",
    "WV": "West Virginia", "WI": "Wisconsin", "WY": "Wyoming",
    "DC": "District of Columbia", "PR": "Puerto Rico", "VI": "U.S. Virgin Islands", "GU": "Guam",
}

# Inclusive (first, last, state) ranges of 3-digit ZIP prefixes.
# Unassigned and military (AA/AE/AP) prefixes are left out on purpose.
ZIP_PREFIX_RANGES = [
    (5, 5, "NY"), (6, 7, "PR"), (8, 8, "VI"), (9, 9, "PR"),
    (10, 27, "MA"), (28, 29, "RI"), (30, 38, "NH"), (39, 49, "ME"),
    (50, 54, "VT"), (55, 55, "MA"), (56, 59, "VT"), (60, 69, "CT"),
    (70, 89, "NJ"),
    (100, 149, "NY"), (150, 196, "PA"), (197, 199, "DE"),
    (200, 200, "DC"), (201, 201, "VA"), (202, 205, "DC"), (206, 212, "MD"), (214, 219, "MD"),
    (220, 246, "VA"), (247, 268, "WV"), (270, 289, "NC"), (290, 299, "SC"),
    (300, 319, "GA"), (320, 339, "FL"), (341, 342, "FL"), (344, 344, "FL"),
    (346, 347, "FL"), (349, 349, "FL"),
    (350, 352, "AL"), (354, 369, "AL"), (370, 385, "TN"), (386, 397, "MS"), (398, 399, "GA"),
    (400, 427, "KY"), (430, 459, "OH"), (460, 479, "IN"), (480, 499, "MI"),
    (500, 528, "IA"), (530, 549, "WI"), (550, 567, "MN"), (569, 569, "DC"),
    (570, 577, "SD"), (580, 588, "ND"), (590, 599, "MT"),
    (600, 629, "IL"), (630, 658, "MO"), (660, 679, "KS"), (680, 693, "NE"),
    (700, 714, "LA"), (716, 729, "AR"), (730, 732, "OK"), (733, 733, "TX"),
    (734, 749, "OK"), (750, 799, "TX"),
    (800, 816, "CO"), (820, 831, "WY"), (832, 838, "ID"), (840, 847, "UT"),
    (850, 865, "AZ"), (870, 884, "NM"), (885, 885, "TX"), (889, 898, "NV"),
    (900, 961, "CA"), (967, 968, "HI"), (969, 969, "GU"),
    (970, 979, "OR"), (980, 994, "WA"), (995, 999, "AK"),
]

ZIP_PREFIX_TO_STATE = {
    f"{prefix:03d}": state
    for first, last, state in ZIP_PREFIX_RANGES
    for prefix in range(first, last + 1)
}

# Jurisdictions with a single at-large seat (or a non-voting delegate).
AT_LARGE = {"AK", "DE", "ND", "SD", "VT", "WY", "DC", "PR", "VI", "GU"}

# Rough district lists for a few metro prefixes, most populous first.
ZIP_PREFIX_DISTRICTS = {
    "021": [7, 8, 5],        # Boston
    "100": [12, 10, 13],     # Manhattan
    "112": [8, 10, 9, 7],    # Brooklyn
    "191": [3, 2],           # Philadelphia
    "303": [5, 13, 6],       # Atlanta
    "331": [27, 26, 24],     # Miami
    "606": [7, 1, 5, 9],     # Chicago
    "770": [18, 9, 7, 29],   # Houston
    "787": [37, 35, 10],     # Austin
    "850": [3, 4, 5],        # Phoenix
    "900": [34, 37, 36],     # Los Angeles
    "941": [11, 15],         # San Francisco
    "981": [7, 9],           # Seattle
}

_NON_DIGITS = re.compile(r"\D")
_STATE_CODE = re.compile(r"\b([A-Za-z]{2})\b")
_ZIP_IN_TEXT = re.compile(r"\b(\d{5})(?:-\d{4})?\b")
# Longest names first so "West Virginia" wins over "Virginia".
_STATE_NAME = re.compile(
    r"\b(" + "|".join(re.escape(n) for n in sorted(STATE_NAMES.values(), key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)
_NAME_TO_CODE = {name.lower(): code for code, name in STATE_NAMES.items()}
# "NE" after a street word is the northeast quadrant (Washington DC), not Nebraska.
_STREET_BEFORE = re.compile(
    r"\b(?:St|Street|Ave|Avenue|Rd|Road|Blvd|Boulevard|Dr|Drive|Ln|Lane|Way|Pl|Place|Ct|Court|"
    r"Ter|Terrace|Pkwy|Parkway|Hwy|Highway|Cir|Circle|Sq|Square)\.?\s+$",
    re.IGNORECASE,
)


def normalize_zip(value: str) -> str:
    """Return the 5-digit ZIP for a ZIP or ZIP+4 string."""
    digits = _NON_DIGITS.sub("", value or "")
    if len(digits) not in (5, 9) or digits[:5] == "00000":
        raise InvalidZipError(value)
    return digits[:5]


def is_known_prefix(zipcode: str) -> bool:
    return zipcode[:3] in ZIP_PREFIX_TO_STATE


def state_for_zip(zipcode: str) -> str:
    """State for a ZIP's 3-digit prefix, or the configured default when unmapped."""
    state = ZIP_PREFIX_TO_STATE.get(zipcode[:3])
    if state is None:
        logger.info("ZIP prefix %s not in table, defaulting to %s", zipcode[:3], settings.default_state)
        return settings.default_state
    return state


def districts_for_zip(zipcode: str) -> list[int]:
    """Approximate district numbers for a ZIP. Empty when unknown."""
    if zipcode[:3] in ZIP_PREFIX_DISTRICTS:
        return list(ZIP_PREFIX_DISTRICTS[zipcode[:3]])
    if state_for_zip(zipcode) in AT_LARGE and is_known_prefix(zipcode):
        return [0]
    return []


def zip_from_address(address: str) -> str | None:
    """Last 5-digit ZIP (or ZIP+4) in a free-form address."""
    zips = _ZIP_IN_TEXT.findall(address)
    return zips[-1] if zips else None


def _is_compass_suffix(address: str, match: re.Match) -> bool:
    return match.group(1) == "NE" and bool(_STREET_BEFORE.search(address[: match.start()]))


def state_from_address(address: str) -> str | None:
    """Best-effort state code for a free-form US address."""
    tokens = _STATE_CODE.findall(address)

    upper = [
        m.group(1)
        for m in _STATE_CODE.finditer(address)
        if m.group(1).isupper() and m.group(1) in STATE_NAMES and not _is_compass_suffix(address, m)
    ]
    if upper:
        return upper[-1]

    zipcode = zip_from_address(address)
    if zipcode and is_known_prefix(zipcode):
        return ZIP_PREFIX_TO_STATE[zipcode[:3]]

    names = _STATE_NAME.findall(address)
    if names:
        return _NAME_TO_CODE[names[-1].lower()]

    loose = [t.upper() for t in tokens if t.upper() in STATE_NAMES]
    return loose[-1] if loose else None
