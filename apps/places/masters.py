#!/usr/bin/env python3
"""
Master data for place search
Fixed genre taxonomy, budget bands, distance presets, feature flags, sort keys and prefectures
"""

# Parent genres (fixed)
PARENT_GENRES = [
    {"id": "cafe",     "name": "Cafe",              "icon": "☕"},
    {"id": "japanese", "name": "Japanese",          "icon": "🍱"},
    {"id": "western",  "name": "Western",           "icon": "🍝"},
    {"id": "chinese",  "name": "Chinese",           "icon": "🥟"},
    {"id": "asian",    "name": "Asian & Ethnic",    "icon": "🍜"},
    {"id": "meat",     "name": "Yakiniku & Meat",   "icon": "🥩"},
    {"id": "izakaya",  "name": "Izakaya & Bar",     "icon": "🍺"},
    {"id": "ramen",    "name": "Ramen & Noodles",   "icon": "🍜"},
    {"id": "sweets",   "name": "Sweets",            "icon": "🍰"},
]

# Child genres keyed by parent id
CHILD_GENRES = {
    "cafe": [
        {"id": "cafe_general",   "name": "Cafe"},
        {"id": "cafe_specialty", "name": "Specialty coffee"},
        {"id": "cafe_chain",     "name": "Chain cafe"},
        {"id": "cafe_kissaten",  "name": "Kissaten"},
    ],
    "japanese": [
        {"id": "sushi",    "name": "Sushi"},
        {"id": "tempura",  "name": "Tempura"},
        {"id": "kaiseki",  "name": "Kaiseki"},
        {"id": "udon",     "name": "Udon"},
        {"id": "soba",     "name": "Soba"},
        {"id": "tonkatsu", "name": "Tonkatsu"},
        {"id": "yakitori", "name": "Yakitori"},
    ],
    "western": [
        {"id": "italian",   "name": "Italian"},
        {"id": "french",    "name": "French"},
        {"id": "spanish",   "name": "Spanish"},
        {"id": "steak",     "name": "Steak"},
        {"id": "hamburger", "name": "Hamburger"},
        {"id": "pizza",     "name": "Pizza"},
    ],
    "chinese": [
        {"id": "chinese_general",   "name": "Chinese"},
        {"id": "chinese_sichuan",   "name": "Sichuan"},
        {"id": "chinese_cantonese", "name": "Cantonese"},
        {"id": "chinese_dimsum",    "name": "Dim sum"},
    ],
    "asian": [
        {"id": "thai",       "name": "Thai"},
        {"id": "vietnamese", "name": "Vietnamese"},
        {"id": "korean",     "name": "Korean"},
        {"id": "indian",     "name": "Indian"},
        {"id": "mexican",    "name": "Mexican"},
    ],
    "meat": [
        {"id": "yakiniku",   "name": "Yakiniku"},
        {"id": "horumon",    "name": "Horumon"},
        {"id": "shabushabu", "name": "Shabu-shabu"},
        {"id": "sukiyaki",   "name": "Sukiyaki"},
    ],
    "izakaya": [
        {"id": "izakaya_general", "name": "Izakaya"},
        {"id": "tachinomi",       "name": "Standing bar"},
        {"id": "beer_bar",        "name": "Beer bar"},
        {"id": "wine_bar",        "name": "Wine bar"},
        {"id": "cocktail_bar",    "name": "Cocktail bar"},
        {"id": "whisky_bar",      "name": "Whisky bar"},
    ],
    "ramen": [
        {"id": "ramen_general", "name": "Ramen"},
        {"id": "tsukemen",      "name": "Tsukemen"},
        {"id": "tantanmen",     "name": "Tantanmen"},
    ],
    "sweets": [
        {"id": "cake",      "name": "Cake"},
        {"id": "parfait",   "name": "Parfait"},
        {"id": "wagashi",   "name": "Wagashi"},
        {"id": "crepe",     "name": "Crepe"},
        {"id": "ice_cream", "name": "Ice cream"},
    ],
}

# Budget bands, yen; max=None is open-ended
BUDGET_BANDS = {
    "lunch": [
        {"id": "lunch_1", "label": "~¥1,000",      "min": 0,    "max": 1000},
        {"id": "lunch_2", "label": "¥1,000–2,000", "min": 1000, "max": 2000},
        {"id": "lunch_3", "label": "¥2,000–3,000", "min": 2000, "max": 3000},
        {"id": "lunch_4", "label": "¥3,000+",      "min": 3000, "max": None},
    ],
    "dinner": [
        {"id": "dinner_1", "label": "~¥3,000",      "min": 0,    "max": 3000},
        {"id": "dinner_2", "label": "¥3,000–5,000", "min": 3000, "max": 5000},
        {"id": "dinner_3", "label": "¥5,000–8,000", "min": 5000, "max": 8000},
        {"id": "dinner_4", "label": "¥8,000+",      "min": 8000, "max": None},
    ],
}

BUDGET_TYPES = tuple(BUDGET_BANDS.keys())

DISTANCE_OPTIONS = [
    {"id": "300m", "label": "Within 300m", "meters": 300},
    {"id": "1km",  "label": "Within 1km",  "meters": 1000},
    {"id": "3km",  "label": "Within 3km",  "meters": 3000},
    {"id": "5km",  "label": "Within 5km",  "meters": 5000},
    {"id": "any",  "label": "Any distance", "meters": None},
]

FEATURE_OPTIONS = {
    "smoking": {
        "label": "Smoking",
        "options": [
            {"id": "non_smoking", "label": "Non-smoking"},
            {"id": "separated",   "label": "Separated smoking area"},
            {"id": "smoking_ok",  "label": "Smoking allowed"},
        ],
    },
    "privateRoom": {
        "label": "Private room",
        "options": [
            {"id": "private_room_yes", "label": "Yes"},
            {"id": "private_room_no",  "label": "No"},
        ],
    },
    "takeout": {
        "label": "Takeout",
        "options": [
            {"id": "takeout_yes", "label": "Yes"},
            {"id": "takeout_no",  "label": "No"},
        ],
    },
    "wifi": {
        "label": "Wi-Fi",
        "options": [
            {"id": "wifi_yes", "label": "Yes"},
        ],
    },
    "power": {
        "label": "Power outlets",
        "options": [
            {"id": "power_yes", "label": "Yes"},
        ],
    },
}

# Descriptive tags the summarizer may attach to a place
SUMMARY_FEATURES = [
    "private room",
    "couples",
    "quiet",
    "business dinner",
    "casual",
    "upscale",
    "kid friendly",
]

SORT_OPTIONS = [
    {"id": "recommended", "label": "Recommended"},
    {"id": "distance",    "label": "Nearest"},
    {"id": "rating",      "label": "Highest rated"},
    {"id": "reviews",     "label": "Most reviewed"},
    {"id": "new",         "label": "Newest"},
]

SORT_KEYS = tuple(option["id"] for option in SORT_OPTIONS)
DEFAULT_SORT = "recommended"

PREFECTURES = [
    {"id": "hokkaido",  "name": "Hokkaido"},
    {"id": "aomori",    "name": "Aomori"},
    {"id": "iwate",     "name": "Iwate"},
    {"id": "miyagi",    "name": "Miyagi"},
    {"id": "akita",     "name": "Akita"},
    {"id": "yamagata",  "name": "Yamagata"},
    {"id": "fukushima", "name": "Fukushima"},
    {"id": "ibaraki",   "name": "Ibaraki"},
    {"id": "tochigi",   "name": "Tochigi"},
    {"id": "gunma",     "name": "Gunma"},
    {"id": "saitama",   "name": "Saitama"},
    {"id": "chiba",     "name": "Chiba"},
    {"id": "tokyo",     "name": "Tokyo"},
    {"id": "kanagawa",  "name": "Kanagawa"},
    {"id": "niigata",   "name": "Niigata"},
    {"id": "toyama",    "name": "Toyama"},
    {"id": "ishikawa",  "name": "Ishikawa"},
    {"id": "fukui",     "name": "Fukui"},
    {"id": "yamanashi", "name": "Yamanashi"},
    {"id": "nagano",    "name": "Nagano"},
    {"id": "gifu",      "name": "Gifu"},
    {"id": "shizuoka",  "name": "Shizuoka"},
    {"id": "aichi",     "name": "Aichi"},
    {"id": "mie",       "name": "Mie"},
    {"id": "shiga",     "name": "Shiga"},
    {"id": "kyoto",     "name": "Kyoto"},
    {"id": "osaka",     "name": "Osaka"},
    {"id": "hyogo",     "name": "Hyogo"},
    {"id": "nara",      "name": "Nara"},
    {"id": "wakayama",  "name": "Wakayama"},
    {"id": "tottori",   "name": "Tottori"},
    {"id": "shimane",   "name": "Shimane"},
    {"id": "okayama",   "name": "Okayama"},
    {"id": "hiroshima", "name": "Hiroshima"},
    {"id": "yamaguchi", "name": "Yamaguchi"},
    {"id": "tokushima", "name": "Tokushima"},
    {"id": "kagawa",    "name": "Kagawa"},
    {"id": "ehime",     "name": "Ehime"},
    {"id": "kochi",     "name": "Kochi"},
    {"id": "fukuoka",   "name": "Fukuoka"},
    {"id": "saga",      "name": "Saga"},
    {"id": "nagasaki",  "name": "Nagasaki"},
    {"id": "kumamoto",  "name": "Kumamoto"},
    {"id": "oita",      "name": "Oita"},
    {"id": "miyazaki",  "name": "Miyazaki"},
    {"id": "kagoshima", "name": "Kagoshima"},
    {"id": "okinawa",   "name": "Okinawa"},
]
