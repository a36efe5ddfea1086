"""Application constants.

Contains query limits, the UUID shape pattern, and the demo catalogue used
by the seeder.
"""

import re

# ---------------------------------------------------------------------------
# Query limits (fixed caps, no cursors)
# ---------------------------------------------------------------------------
USERS_LIST_LIMIT: int = 500
PROBLEMS_LIST_LIMIT: int = 200
COLLABORATORS_LIST_LIMIT: int = 500
MY_MATCHES_DEFAULT_LIMIT: int = 200
MY_MATCHES_MAX_LIMIT: int = 500

# ---------------------------------------------------------------------------
# RFC 4122 UUID, versions 1-5
# ---------------------------------------------------------------------------
UUID_PATTERN: re.Pattern[str] = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Column lists shared between queries and response models
# ---------------------------------------------------------------------------
USER_COLUMNS: str = "id, display_name, created_at"
PROBLEM_COLUMNS: str = (
    "id, title, description, category, location, country_code, created_at"
)
MATCH_COLUMNS: str = "id, user_id, problem_id, role, created_at"

# ---------------------------------------------------------------------------
# Seeder
# ---------------------------------------------------------------------------
SEED_USERS_RNG_SEED: int = 42
SEED_MATCHES_RNG_SEED: int = 2026
SEED_DEFAULT_USER_COUNT: int = 40
SEED_MIN_LINKS_PER_USER: int = 3
SEED_MAX_LINKS_PER_USER: int = 7
SEED_SOLVER_PROBABILITY: float = 0.65
SEED_INSERT_BATCH_SIZE: int = 500

# PostgREST refuses unfiltered deletes; every real id differs from this one.
NIL_UUID: str = "00000000-0000-0000-0000-000000000000"

SEED_DISPLAY_NAMES: list[str] = [
    "Alex", "Sam", "Jordan", "Taylor", "Morgan", "Riley", "Casey", "Jamie",
    "Avery", "Quinn", "Cameron", "Dakota", "Emerson", "Finley", "Harper",
    "Hayden", "Jules", "Kai", "Logan", "Parker", "Reese", "Rowan", "Skyler",
    "Spencer", "Tatum", "Blake", "Drew", "Elliot", "Marley", "Noa", "Sasha",
    "Val", "Charlie", "Robin", "Kris",
]

SEED_PROBLEMS: list[dict[str, str | None]] = [
    # Europe
    {
        "title": "Food waste in cities",
        "description": "Redistribute surplus edible food from shops to communities.",
        "category": "Sustainability",
        "location": "Paris, FR",
        "country_code": "FR",
    },
    {
        "title": "Night transport safety",
        "description": "Reporting + safer route guidance for late-night riders.",
        "category": "Safety",
        "location": "Madrid, ES",
        "country_code": "ES",
    },
    {
        "title": "Housing affordability",
        "description": "Tools for tenants to find fair rents and support programs.",
        "category": "Housing",
        "location": "Lisbon, PT",
        "country_code": "PT",
    },
    {
        "title": "Digital skills gap",
        "description": "Upskilling program for adults shifting careers.",
        "category": "Education",
        "location": "Berlin, DE",
        "country_code": "DE",
    },
    {
        "title": "Urban air quality alerts",
        "description": "Neighborhood-level alerts + mitigation recommendations.",
        "category": "Environment",
        "location": "Milan, IT",
        "country_code": "IT",
    },
    {
        "title": "Accessible sidewalks",
        "description": "Map and prioritize broken curb ramps & sidewalks.",
        "category": "Accessibility",
        "location": "Dublin, IE",
        "country_code": "IE",
    },
    {
        "title": "Elder loneliness",
        "description": "Match volunteers with seniors for weekly calls/visits.",
        "category": "Health",
        "location": "Amsterdam, NL",
        "country_code": "NL",
    },
    {
        "title": "Student mental health",
        "description": "Peer support + triage pathways to professional care.",
        "category": "Health",
        "location": "London, GB",
        "country_code": "GB",
    },
    {
        "title": "Recycling confusion",
        "description": "Clear local rules + scan-to-sort guidance.",
        "category": "Sustainability",
        "location": "Copenhagen, DK",
        "country_code": "DK",
    },
    # Americas
    {
        "title": "Access to mental health resources",
        "description": "Reduce wait times with triage + community support model.",
        "category": "Health",
        "location": "Seattle, US",
        "country_code": "US",
    },
    {
        "title": "Water quality monitoring",
        "description": "Low-cost testing + incident reporting for rivers.",
        "category": "Environment",
        "location": "Bogotá, CO",
        "country_code": "CO",
    },
    {
        "title": "Job readiness for youth",
        "description": "Mentorship + apprenticeship matching for first jobs.",
        "category": "Education",
        "location": "Mexico City, MX",
        "country_code": "MX",
    },
    {
        "title": "Food deserts",
        "description": "Local supply routing to underserved neighborhoods.",
        "category": "Health",
        "location": "Detroit, US",
        "country_code": "US",
    },
    {
        "title": "Disaster response coordination",
        "description": "Volunteer coordination + resource inventory during storms.",
        "category": "Safety",
        "location": "Miami, US",
        "country_code": "US",
    },
    {
        "title": "Public school supplies",
        "description": "Donations + distribution tracking for classrooms.",
        "category": "Education",
        "location": "Austin, US",
        "country_code": "US",
    },
    # Asia / Africa / Oceania
    {
        "title": "Heatwave readiness",
        "description": "Cooling centers map + SMS alerts for vulnerable residents.",
        "category": "Safety",
        "location": "Delhi, IN",
        "country_code": "IN",
    },
    {
        "title": "Access to clean water points",
        "description": "Map broken pumps + coordinate repairs.",
        "category": "Environment",
        "location": "Nairobi, KE",
        "country_code": "KE",
    },
    {
        "title": "Community health navigation",
        "description": "Help residents find clinics and understand services.",
        "category": "Health",
        "location": "Cape Town, ZA",
        "country_code": "ZA",
    },
    {
        "title": "Wildfire smoke guidance",
        "description": "Indoor air tips + mask availability map.",
        "category": "Environment",
        "location": "Sydney, AU",
        "country_code": "AU",
    },
    {
        "title": "Language access in services",
        "description": "Translate key service steps and provide interpretation links.",
        "category": "Accessibility",
        "location": "Tokyo, JP",
        "country_code": "JP",
    },
]
