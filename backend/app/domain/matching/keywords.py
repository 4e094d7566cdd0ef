"""
Keyword Expansion Tables

Static lookup data for the interest matcher. Loaded once at import and
exposed read-only.

- INTEREST_KEYWORDS: specific interest -> terms that identify it in a
  club/course/college text. Term order matters (first name/description
  hit wins).
- CATEGORY_KEYWORDS: broad interest group -> terms that suggest it.
"""

from types import MappingProxyType
from typing import Mapping, Tuple


INTEREST_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    # Martial arts
    "martial arts": (
        "judo", "taekwondo", "muay thai", "karate",
        "grappling", "fencing", "martial", "combat",
    ),
    "judo": ("judo",),
    "taekwondo": ("taekwondo",),
    "muay thai": ("muay thai",),
    "karate": ("karate",),
    "fencing": ("fencing",),
    "grappling": ("grappling",),
    
    "soccer": ("soccer", "football"),
    
    # Running
    "running": ("cross country", "track", "running"),
    "cross country": ("cross country",),
    
    # Greek life
    "fraternities": (
        "fraternity", "greek letter", "alpha", "sigma",
        "delta", "kappa", "phi", "tau",
    ),
    "sororities": (
        "sorority", "greek letter", "alpha", "sigma",
        "delta", "kappa", "phi",
    ),
    "greek life": ("fraternity", "sorority", "greek letter", "greek"),
    
    # Other sports
    "basketball": ("basketball",),
    "volleyball": ("volleyball",),
    "tennis": ("tennis",),
    "swimming": ("swimming", "water polo"),
    "cycling": ("cycling", "bike"),
    "baseball": ("baseball",),
    "softball": ("softball",),
    "lacrosse": ("lacrosse",),
    "rugby": ("rugby",),
    "ultimate frisbee": ("ultimate",),
    "badminton": ("badminton",),
    "triathlon": ("triathlon",),
    "sailing": ("sailing",),
    "surfing": ("surfing",),
    "ice hockey": ("ice hockey", "hockey"),
    
    # Tech
    "ai/ml": ("ai", "machine learning", "artificial intelligence", "ml"),
    "web development": ("web", "developer", "frontend", "backend"),
    "cybersecurity": ("cybersecurity", "security", "infosec"),
    "data science": ("data science", "data analysis", "analytics"),
    "game development": ("game", "gaming", "game design"),
    
    # Arts
    "a cappella": ("a cappella", "acappella", "capella"),
    "dance": ("dance", "dancing"),
    "music": ("music", "musical"),
    "theater": ("theater", "theatre", "drama"),
    
    # Business
    "entrepreneurship": ("entrepreneurship", "startup", "entrepreneur"),
    "investing": ("investing", "investment", "finance"),
})


CATEGORY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Sports": ("sport club", "athletic"),
    "Tech": ("technology", "computer", "engineering", "coding", "programming"),
    "Writing": ("writing", "literary", "journalism", "poetry"),
    "Science": ("science", "research", "laboratory", "academic"),
    "Outdoors": ("outdoor", "nature", "hiking", "camping"),
    "Arts": ("art", "creative", "design", "visual", "performing"),
    "Business": ("business", "finance", "marketing", "consulting"),
    "Health & Wellness": ("health", "medical", "wellness", "pre-med"),
    "Gaming": ("gaming", "game", "esports"),
    "Social Impact": ("service", "volunteer", "non-profit"),
    "Socialization": ("fraternity", "sorority", "greek", "social"),
})


# Interest fragments that trigger the Greek-letter category bonus
GREEK_INTEREST_MARKERS: Tuple[str, ...] = ("fraternity", "sorority", "greek")

# Interest fragments that get a consolation point from a "Sport Club" category
SPORT_INTEREST_MARKERS: Tuple[str, ...] = (
    "martial", "soccer", "running", "basketball", "volleyball", "tennis",
)
