"""Size Checker -- a parody username "analysis".

Core functions for deriving a stable, entirely made-up measurement from a
username, plus the username, loading-sequence and sharing helpers used by
the CLI, the Streamlit page and the static docs page.
"""

import math
import random
import re
from urllib.parse import quote


# ── Configuration ──────────────────────────────────────────────────────────

SIZE_MIN = 3.0
SIZE_MAX = 10.0
SIZE_MEAN = 6.5
SIZE_STDDEV = 1.2

CM_PER_INCH = 2.54
CONFIDENCE_MIN = 75
USERNAME_MAX_LENGTH = 15

# Ranges are half-open [lo, hi) except the last one, which is closed.
CATEGORIES = [
    {
        "range": (3.0, 4.1),
        "descriptions": [
            "Small but mighty! Like an espresso shot: concentrated, "
            "efficient and somehow keeps everyone awake. ☕",
            "Compact and travel-friendly! You fit in carry-on luggage and "
            "never pay the oversize fee. 🧳",
            "Bite-sized brilliance! Why use more when less gets the job "
            "done perfectly? 🎯",
            "Pocket rocket! Portable, punchy and probably invited to more "
            "parties than anyone else. 🚀",
        ],
    },
    {
        "range": (4.1, 5.6),
        "descriptions": [
            "Solidly average and proud of it! The reliable hatchback of "
            "personalities: dependable, efficient, surprisingly fun. 🚗",
            "Right in the sweet spot! Not too much, not too little. "
            "Goldilocks would approve. 🐻",
            "Perfectly standard! Like a good pair of jeans: comfortable and "
            "suitable for most occasions. 👖",
            "The people's champion! You represent the everyman with dignity "
            "and style. 🗳️",
        ],
    },
    {
        "range": (5.6, 7.1),
        "descriptions": [
            "Above average and loving life! A premium roast with just a "
            "little extra kick. ☕",
            "Impressive balance of confidence and humility. The Swiss Army "
            "knife of personalities! 🔧",
            "Solid readings! You probably read instruction manuals and "
            "actually follow them. Respect. 📋",
            "Generously endowed in the personality department. A balanced "
            "diet of awesomeness! 🍽️",
        ],
    },
    {
        "range": (7.1, 8.6),
        "descriptions": [
            "Entering impressive territory! A luxury sedan: spacious, "
            "comfortable and a little enviable. 🚙",
            "Substantial readings! You give great hugs and have strong "
            "opinions about pizza toppings. 🍕",
            "Confidently proportioned! You never need to honk in traffic; "
            "your presence speaks for itself. 📯",
            "Generous dimensions! You tip well and remember everyone's "
            "birthday. Big heart, big personality. 💝",
        ],
    },
    {
        "range": (8.6, 10.0),
        "descriptions": [
            "Absolutely massive energy! Like a pickup truck: practical, "
            "powerful, great at moving furniture. 🛻",
            "Legendary proportions! Your personality fills entire rooms and "
            "occasionally the hallway. 🚪",
            "Off the charts! Living proof that some people hit the genetic "
            "lottery. Great at reaching high shelves. 🎰",
            "Enormous presence! A gentle giant who gives the best bear hugs "
            "in recorded history. 🐻",
        ],
    },
]

FALLBACK_DESCRIPTION = (
    "You're absolutely unique and that's what makes you special! 🌟"
)

LOADING_MESSAGES = [
    "Analyzing tweet frequency...",
    "Measuring confidence levels...",
    "Calculating proportions...",
    "Assessing personality traits...",
    "Evaluating communication style...",
    "Processing social signals...",
    "Computing final measurements...",
]

ABOUT_TEXT = (
    "Size Checker is a parody. It does not look at your account, your "
    "tweets or anything else about you. The \"result\" is computed from "
    "the letters of the username alone, so the same name always gets the "
    "same answer. Please do not take it seriously."
)

PRIVACY_TEXT = (
    "Nothing you type leaves your device. There are no accounts, no "
    "cookies, no analytics and no server-side storage. Usernames are "
    "hashed in memory to pick a number and forgotten as soon as you press "
    "\"Try again\"."
)

_USERNAME_CHARS = re.compile(r"[^A-Za-z0-9_]")
_USERNAME_RE = re.compile(r"[A-Za-z0-9_]{1,%d}" % USERNAME_MAX_LENGTH)


# ── Hashing & seeded randomness ────────────────────────────────────────────


def hash_username(username: str) -> int:
    """Return a non-negative 32-bit string hash of *username*.

    Case-insensitive: the name is lower-cased first.  The accumulator
    ``h * 31 + code_point`` wraps like a signed 32-bit integer after every
    character, and the absolute value of the final result is returned.
    """
    h = 0
    for ch in username.lower():
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
        if h >= 0x80000000:
            h -= 0x100000000
    return abs(h)


def seeded_random(seed: int) -> int:
    """Return a reproducible pseudo-random integer in ``[0, 999999]``."""
    x = math.sin(seed) * 10000
    return math.floor((x - math.floor(x)) * 1000000)


def round_one_decimal(value: float) -> float:
    """Round half-up to one decimal place (``2.25 -> 2.3``, not ``2.2``)."""
    return _round_half_up(value * 10) / 10


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


# ── Distribution mapping ───────────────────────────────────────────────────


def normal_distribution(seed: int, minimum: float, maximum: float, mean: float) -> float:
    """Map *seed* onto a bell curve around *mean*, clamped to the bounds.

    Two uniform samples in ``[0, 1)`` come from ``seed`` and ``seed + 1``
    and go through a Box-Muller transform; the resulting normal value is
    scaled by 1.2 and shifted by *mean*.
    """
    u1 = seeded_random(seed) % 1000 / 1000
    u2 = seeded_random(seed + 1) % 1000 / 1000

    direction = math.cos(2 * math.pi * u2)
    if u1 == 0:
        # log(0) is -inf: the normal value is infinite and lands on a bound
        if direction > 0:
            return maximum
        if direction < 0:
            return minimum
        return mean

    normal = math.sqrt(-2 * math.log(u1)) * direction

    scaled = normal * 1.2 + mean
    return max(minimum, min(maximum, scaled))


def percentile_for(
    measurement: float,
    mean: float = SIZE_MEAN,
    stddev: float = SIZE_STDDEV,
) -> int:
    """Return the rank of *measurement* in ``[1, 99]`` under a normal model.

    The z-score is clamped to three standard deviations either side and
    mapped linearly onto the percentile scale.
    """
    z = (measurement - mean) / stddev
    z = max(-3.0, min(3.0, z))
    return max(1, min(99, _round_half_up(50 + z * 16.67)))


# ── Categories ─────────────────────────────────────────────────────────────


def validate_categories(
    categories: list[dict],
    minimum: float = SIZE_MIN,
    maximum: float = SIZE_MAX,
) -> None:
    """Raise :class:`ValueError` unless *categories* partition the bounds.

    Every range must be non-empty with at least one description, the first
    must start at *minimum*, the last must end at *maximum*, and each range
    must end exactly where the next one starts.
    """
    if not categories:
        raise ValueError("At least one category is required")

    for category in categories:
        lo, hi = category["range"]
        if lo >= hi:
            raise ValueError(f"Empty or inverted category range [{lo}, {hi}]")
        if not category["descriptions"]:
            raise ValueError(f"Category [{lo}, {hi}] has no descriptions")

    first_lo = categories[0]["range"][0]
    last_hi = categories[-1]["range"][1]
    if first_lo != minimum:
        raise ValueError(f"First category starts at {first_lo}, expected {minimum}")
    if last_hi != maximum:
        raise ValueError(f"Last category ends at {last_hi}, expected {maximum}")

    for current, following in zip(categories, categories[1:]):
        hi = current["range"][1]
        next_lo = following["range"][0]
        if hi < next_lo:
            raise ValueError(f"Gap between {hi} and {next_lo}")
        if hi > next_lo:
            raise ValueError(f"Overlap between {next_lo} and {hi}")


def description_for(size: float, hash_value: int, categories: list[dict] = CATEGORIES) -> str:
    """Pick the description for *size*, or the fallback if nothing matches."""
    last = len(categories) - 1
    for i, category in enumerate(categories):
        lo, hi = category["range"]
        if lo <= size < hi or (i == last and size == hi):
            descriptions = category["descriptions"]
            return descriptions[hash_value % len(descriptions)]

    return FALLBACK_DESCRIPTION


validate_categories(CATEGORIES)


# ── Result generation ──────────────────────────────────────────────────────


def generate_results(username: str, *, percentile: bool = False) -> dict:
    """Derive the parody result for an already-sanitised *username*.

    Returns a dict with keys:
        size        -- float, displayed value (one decimal)
        unit        -- str, "inches" or "cm"
        measurement -- float, value in inches before unit conversion
        confidence  -- int 75-99
        description -- str
        percentile  -- int 1-99, or None unless *percentile* is set
    """
    h = hash_username(username)

    measurement = round_one_decimal(normal_distribution(h, SIZE_MIN, SIZE_MAX, SIZE_MEAN))
    confidence = CONFIDENCE_MIN + h % 25
    description = description_for(measurement, h)

    # One name in ten gets metric units, for variety
    use_metric = h % 10 == 0

    return {
        "size": round_one_decimal(measurement * CM_PER_INCH) if use_metric else measurement,
        "unit": "cm" if use_metric else "inches",
        "measurement": measurement,
        "confidence": confidence,
        "description": description,
        "percentile": percentile_for(measurement) if percentile else None,
    }


# ── Username handling ──────────────────────────────────────────────────────


def sanitize_username(raw: str) -> str:
    """Reduce *raw* to the characters a username may hold, truncated.

    A leading ``@`` and any other character outside ``[A-Za-z0-9_]`` are
    dropped; the remainder is cut to 15 characters.
    """
    return _USERNAME_CHARS.sub("", raw)[:USERNAME_MAX_LENGTH]


def is_valid_username(username: str) -> bool:
    return _USERNAME_RE.fullmatch(username) is not None


# ── Loading sequence ───────────────────────────────────────────────────────


def loading_steps(total: float | None = None) -> list[tuple[str, float]]:
    """Pair each loading message with its share of *total* seconds.

    When *total* is omitted a cosmetic duration between 3 and 6 seconds is
    drawn at random.  It only paces the animation; results never depend on it.
    """
    if total is None:
        total = random.randint(3000, 6000) / 1000
    if total < 0:
        raise ValueError("Loading time cannot be negative")

    step = total / len(LOADING_MESSAGES)
    return [(message, step) for message in LOADING_MESSAGES]


# ── Sharing ────────────────────────────────────────────────────────────────


def share_text(username: str, result: dict) -> str:
    return (
        f"I just checked @{username}'s size and it's "
        f"{result['size']} {result['unit']}! 📏 "
        f"({result['confidence']}% accuracy) Check yours at"
    )


def share_url(username: str, result: dict, site_url: str) -> str:
    """Return a Twitter/X web-intent link sharing *result*.

    Both parameters are encoded like JavaScript's ``encodeURIComponent``.
    """
    text = quote(share_text(username, result), safe="!*'()")
    url = quote(site_url, safe="!*'()")
    return f"https://twitter.com/intent/tweet?text={text}&url={url}"
