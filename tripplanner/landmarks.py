# tripplanner/landmarks.py
"""
Best-guess location captions for photo-provider results.

`label_photo` looks at the photo's alt description and tags and returns a
short human-readable place name for the gallery overlay. It never fails and
never returns an empty string: when nothing useful is found the searched
destination is used.
"""
from typing import Any, Iterable, Mapping, Optional

# Ordered (needle, display name). Named landmarks come before cities, and
# cities before generic nouns, so "red fort" wins over a bare "fort".
LANDMARK_PATTERNS = (
    # International landmarks and cities
    ("taj mahal", "Taj Mahal"),
    ("eiffel tower", "Eiffel Tower"),
    ("big ben", "Big Ben"),
    ("colosseum", "Colosseum"),
    ("sydney opera house", "Sydney Opera House"),
    ("statue of liberty", "Statue of Liberty"),
    ("golden gate bridge", "Golden Gate Bridge"),
    ("machu picchu", "Machu Picchu"),
    ("christ the redeemer", "Christ the Redeemer"),
    ("petra", "Petra"),
    ("angkor wat", "Angkor Wat"),
    ("mount fuji", "Mount Fuji"),
    ("santorini", "Santorini"),
    ("bali", "Bali"),
    ("dubai", "Dubai"),
    ("venice", "Venice"),
    ("prague", "Prague"),
    ("barcelona", "Barcelona"),
    ("amsterdam", "Amsterdam"),
    ("istanbul", "Istanbul"),
    ("cairo", "Cairo"),
    ("moscow", "Moscow"),
    ("tokyo", "Tokyo"),
    ("kyoto", "Kyoto"),
    ("osaka", "Osaka"),
    ("seoul", "Seoul"),
    ("bangkok", "Bangkok"),
    ("singapore", "Singapore"),
    ("hong kong", "Hong Kong"),
    ("shanghai", "Shanghai"),
    ("beijing", "Beijing"),
    # Indian landmarks and places
    ("red fort", "Red Fort"),
    ("qutub minar", "Qutub Minar"),
    ("lotus temple", "Lotus Temple"),
    ("india gate", "India Gate"),
    ("gateway of india", "Gateway of India"),
    ("marine drive", "Marine Drive"),
    ("amber fort", "Amber Fort"),
    ("hawa mahal", "Hawa Mahal"),
    ("city palace", "City Palace"),
    ("jantar mantar", "Jantar Mantar"),
    ("mysore palace", "Mysore Palace"),
    ("ellora caves", "Ellora Caves"),
    ("ajanta caves", "Ajanta Caves"),
    ("hampi", "Hampi"),
    ("juhu beach", "Juhu Beach"),
    ("bandra", "Bandra"),
    ("andheri", "Andheri"),
    ("powai", "Powai"),
    ("malad", "Malad"),
    ("borivali", "Borivali"),
    ("thane", "Thane"),
    ("navi mumbai", "Navi Mumbai"),
    ("pune", "Pune"),
    ("nashik", "Nashik"),
    ("aurangabad", "Aurangabad"),
    ("ellora", "Ellora"),
    ("ajanta", "Ajanta"),
    ("mysore", "Mysore"),
    ("bangalore", "Bangalore"),
    ("chennai", "Chennai"),
    ("hyderabad", "Hyderabad"),
    ("kolkata", "Kolkata"),
    ("ahmedabad", "Ahmedabad"),
    ("jaipur", "Jaipur"),
    ("goa", "Goa"),
    ("kerala", "Kerala"),
    ("rajasthan", "Rajasthan"),
    ("kashmir", "Kashmir"),
    ("ladakh", "Ladakh"),
    ("himachal", "Himachal Pradesh"),
    ("manali", "Manali"),
    ("shimla", "Shimla"),
    ("darjeeling", "Darjeeling"),
    ("ooty", "Ooty"),
    ("munnar", "Munnar"),
    ("coorg", "Coorg"),
    ("mumbai", "Mumbai"),
    ("delhi", "Delhi"),
    # Generic categories
    ("palace", "Palace"),
    ("temple", "Temple"),
    ("fort", "Fort"),
    ("tower", "Tower"),
    ("bridge", "Bridge"),
    ("church", "Church"),
    ("mosque", "Mosque"),
    ("cathedral", "Cathedral"),
    ("museum", "Museum"),
    ("garden", "Garden"),
    ("park", "Park"),
    ("beach", "Beach"),
    ("mountain", "Mountain"),
    ("lake", "Lake"),
    ("river", "River"),
    ("valley", "Valley"),
    ("island", "Island"),
    ("monument", "Monument"),
    ("landmark", "Landmark"),
)

STOP_WORDS = frozenset(
    {
        "The", "And", "Or", "But", "For", "Nor", "Yet", "So", "With", "From",
        "Into", "During", "Including", "Until", "Against", "Among", "Throughout",
        "Despite", "Towards", "Upon", "Concerning", "To", "Of", "At", "By", "In",
        "On", "Without", "Under", "Over", "Above", "Below", "Between", "Through",
        "Before", "After", "Since", "While", "Because", "Although", "If",
        "Unless", "When", "Where", "Why", "How", "What", "Which", "Who", "Whom",
        "Whose", "This", "That", "These", "Those",
    }
)

LOCATION_TAG_TYPES = frozenset({"landing_page", "search"})

LOCATION_KEYWORDS = (
    "landmark", "monument", "palace", "temple", "fort", "tower", "bridge",
    "church", "mosque", "cathedral", "museum", "garden", "park", "beach",
    "mountain", "lake", "river", "valley", "island", "city", "town", "village",
)


def match_landmark(text: str) -> Optional[str]:
    """Return the display name of the first pattern found in `text`, if any."""
    folded = text.casefold()
    for needle, name in LANDMARK_PATTERNS:
        if needle in folded:
            return name
    return None


def first_proper_noun(text: str) -> Optional[str]:
    # Runs on the original casing; a case-folded caption has no capitals left.
    for word in text.split():
        if len(word) > 2 and word[0].isupper() and word not in STOP_WORDS:
            return word
    return None


def first_location_tag(tags: Iterable[Mapping[str, Any]]) -> Optional[str]:
    for tag in tags:
        title = tag.get("title") or ""
        if not title:
            continue
        if tag.get("type") in LOCATION_TAG_TYPES:
            return title
        folded = title.casefold()
        if any(keyword in folded for keyword in LOCATION_KEYWORDS):
            return title
    return None


def label_photo(photo: Mapping[str, Any], fallback: str) -> str:
    """
    Pick a display label for a raw photo-provider result.

    Priority: known landmark in the alt description, then the first
    capitalised non-stop-word in it, then the first location-like tag,
    then `fallback` (the searched destination).
    """
    alt_text = photo.get("alt_description") or ""
    if alt_text:
        label = match_landmark(alt_text) or first_proper_noun(alt_text)
        if label:
            return label

    label = first_location_tag(photo.get("tags") or [])
    if label:
        return label

    return fallback
