"""Dietary tag vocabulary shared by tagging and recommendations."""

DIETARY_TAGS: tuple[str, ...] = (
    "Vegetarian",
    "Vegan",
    "Halal",
    "Kosher",
    "Gluten-Free",
    "Dairy-Free",
    "Egg-Free",
    "Nut-Free",
    "Contains Dairy",
    "Contains Eggs",
    "Contains Gluten",
    "Contains Nuts",
    "Spicy",
    "Low-Carb",
    "High-Protein",
)

ALLERGEN_PREFIX = "Contains "
FREE_SUFFIX = "-Free"


def allergen_tag(allergy: str) -> str:
    """Tag marking a meal that contains the allergen."""
    return f"{ALLERGEN_PREFIX}{allergy}"


def free_tags(allergy: str) -> tuple[str, ...]:
    """Tags marking a meal that is free of the allergen.

    Plural allergies also match the singular form, so "Nuts" matches
    "Nut-Free" as well as "Nuts-Free".
    """
    tags = (f"{allergy}{FREE_SUFFIX}",)
    if len(allergy) > 1 and allergy.endswith("s"):
        tags += (f"{allergy[:-1]}{FREE_SUFFIX}",)
    return tags


def filter_known_tags(tags: list[str]) -> list[str]:
    """Keep vocabulary tags only, de-duplicated in input order."""
    known = set(DIETARY_TAGS)
    seen: set[str] = set()
    result: list[str] = []
    for tag in tags:
        cleaned = tag.strip()
        if cleaned in known and cleaned not in seen:
            seen.add(cleaned)
            result.append(cleaned)
    return result
