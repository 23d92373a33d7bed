# tripplanner/regions.py

# Indian states; photo searches for these need an explicit country qualifier.
INDIAN_STATES = frozenset(
    {
        "andhra pradesh",
        "arunachal pradesh",
        "assam",
        "bihar",
        "chhattisgarh",
        "goa",
        "gujarat",
        "haryana",
        "himachal pradesh",
        "jharkhand",
        "karnataka",
        "kerala",
        "madhya pradesh",
        "maharashtra",
        "manipur",
        "meghalaya",
        "mizoram",
        "nagaland",
        "odisha",
        "punjab",
        "rajasthan",
        "sikkim",
        "tamil nadu",
        "telangana",
        "tripura",
        "uttar pradesh",
        "uttarakhand",
        "west bengal",
    }
)


def is_subregion(name: str) -> bool:
    """Exact, case-insensitive membership in the known region list."""
    return (name or "").strip().casefold() in INDIAN_STATES
