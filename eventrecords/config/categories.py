"""Default event categories and their subcategories.

Every category maps to a list that ends with the catch-all "Other" entry.
The registry in `eventrecords.taxonomy` copies these at construction, so
runtime additions never leak back into this module.
"""

from typing import Dict, List

# Catch-all subcategory present under every category
CATCH_ALL_SUBCATEGORY = "Other"

# Catch-all category, not listed on the dashboard
CATCH_ALL_CATEGORY = "Other"

DEFAULT_SUBCATEGORIES: Dict[str, List[str]] = {
    'Technical': [
        "Hackathon",
        "Workshop",
        "Coding Competition",
        "Project Exhibition",
        "Technical Quiz",
        "Paper Presentation",
        CATCH_ALL_SUBCATEGORY,
    ],
    'Cultural': [
        "Dance",
        "Music",
        "Drama",
        "Fashion Show",
        "Art Exhibition",
        "Photography",
        CATCH_ALL_SUBCATEGORY,
    ],
    'Sports': [
        "Cricket",
        "Football",
        "Basketball",
        "Volleyball",
        "Athletics",
        "Chess",
        CATCH_ALL_SUBCATEGORY,
    ],
    CATCH_ALL_CATEGORY: [CATCH_ALL_SUBCATEGORY],
}
