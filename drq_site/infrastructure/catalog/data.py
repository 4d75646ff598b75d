"""Compiled-in site content: services, locations, articles, navigation, service areas.

Plain data only; StaticCatalog and the in-memory repositories turn these
into typed, read-only objects at startup.
"""

SERVICES = [
    {
        "id": "water-damage",
        "title": "Water Damage Restoration",
        "description": "Emergency water extraction and restoration services available 24/7.",
        "keywords": ["flood", "water", "leak", "storm", "extraction", "drying"],
        "features": [
            "Advanced Water Extraction",
            "Structural Drying",
            "Moisture Detection",
            "Mould Prevention",
        ],
        "steps": ["Water Extraction", "Structural Drying", "Restoration", "Prevention"],
        "response_time": "1-2 hours",
        "emergency": True,
    },
    {
        "id": "fire-damage",
        "title": "Fire Damage Recovery",
        "description": "Professional fire and smoke damage restoration services.",
        "keywords": ["fire", "smoke", "burn", "ash", "soot", "restoration"],
        "features": [
            "Smoke Removal",
            "Odour Control",
            "Content Restoration",
            "Structural Repairs",
        ],
        "steps": ["Assessment", "Cleanup", "Restoration", "Deodorization"],
        "response_time": "1-2 hours",
        "emergency": True,
    },
    {
        "id": "mould-remediation",
        "title": "Mould Remediation",
        "description": "Expert mould detection and removal services.",
        "keywords": ["mould", "mold", "fungus", "spores", "humidity", "remediation"],
        "features": [
            "Mould Testing",
            "Safe Removal",
            "Prevention Strategies",
            "Air Quality Testing",
        ],
        "steps": ["Inspection", "Containment", "Removal", "Prevention"],
        "response_time": "24-48 hours",
        "emergency": False,
    },
    {
        "id": "sewage-cleanup",
        "title": "Sewage Cleanup",
        "description": "Professional sewage cleanup, sanitization and decontamination services.",
        "keywords": ["sewage", "sewer", "backup", "sanitization", "contamination", "waste"],
        "features": [
            "Safe Waste Removal",
            "Disinfection Services",
            "Odour Elimination",
            "Health Safety Measures",
        ],
        "steps": ["Containment", "Removal", "Sanitization", "Restoration"],
        "response_time": "1-2 hours",
        "emergency": True,
    },
    {
        "id": "flood-recovery",
        "title": "Flood Recovery",
        "description": "Flood water removal, sanitization and content recovery after storms.",
        "keywords": ["flood", "flooding", "storm", "cyclone", "inundation"],
        "features": [
            "Flood Water Removal",
            "Sanitization Services",
            "Content Recovery",
            "Structural Assessment",
        ],
        "steps": ["Water Removal", "Sanitization", "Drying", "Restoration"],
        "response_time": "1-2 hours",
        "emergency": True,
    },
]

COMMON_SERVICE_FEATURES = [
    "24/7 Emergency Response",
    "Professional Equipment",
    "Experienced Technicians",
    "Insurance Claim Support",
]

COMMON_PROCESS_STEPS = [
    ("Assessment", "Thorough inspection and damage assessment"),
    ("Planning", "Detailed restoration plan development"),
    ("Execution", "Professional restoration services"),
    ("Completion", "Final inspection and quality assurance"),
]

LOCATIONS = [
    {
        "id": "brisbane",
        "name": "Brisbane",
        "regions": [
            "Brisbane CBD",
            "Brisbane South",
            "Brisbane West",
            "Brisbane North",
            "Brisbane East",
            "Brisbane Central",
        ],
        "suburbs": [
            "Spring Hill", "Fortitude Valley", "West End", "Mount Gravatt",
            "Indooroopilly", "Toowong", "Chermside", "Aspley", "Wynnum",
            "New Farm", "Paddington",
        ],
    },
    {
        "id": "ipswich",
        "name": "Ipswich",
        "regions": ["Ipswich City", "Ipswich Country", "Lockyer Valley", "Scenic Rim"],
        "suburbs": ["Booval", "Goodna", "Springfield", "Karalee", "Gatton", "Beaudesert"],
    },
    {
        "id": "logan",
        "name": "Logan",
        "regions": ["Logan Central", "Logan Village"],
        "suburbs": ["Woodridge", "Springwood", "Daisy Hill", "Waterford", "Beenleigh"],
    },
    {
        "id": "redlands",
        "name": "Redland Shire",
        "regions": ["Redlands"],
        "suburbs": ["Cleveland", "Capalaba", "Victoria Point", "Wellington Point"],
    },
    {
        "id": "gold-coast",
        "name": "Gold Coast",
        "regions": ["Gold Coast Central", "Gold Coast Hinterland"],
        "suburbs": ["Surfers Paradise", "Broadbeach", "Southport", "Nerang", "Mudgeeraba"],
    },
]

ARTICLES = [
    {
        "id": "water-damage-prevention",
        "title": "Essential Water Damage Prevention Tips for Queensland Homes",
        "description": (
            "Learn how to protect your home from water damage during "
            "Queensland's wet season with these expert prevention tips."
        ),
        "tags": ["water", "prevention", "maintenance"],
    },
    {
        "id": "fire-safety-guide",
        "title": "Complete Fire Safety Guide for Residential Properties",
        "description": (
            "A comprehensive guide to fire safety, including prevention measures, "
            "evacuation plans, and immediate response procedures."
        ),
        "tags": ["fire", "safety", "evacuation"],
    },
    {
        "id": "mould-prevention",
        "title": "Identifying and Preventing Mould Growth After Floods",
        "description": (
            "Expert advice on detecting early signs of mould and preventing growth "
            "following flood or water damage incidents."
        ),
        "tags": ["mould", "health", "flood"],
    },
]

NAV_ITEMS = [
    {"id": "home", "title": "Home", "href": "/"},
    {"id": "services", "title": "Services", "href": "/services"},
    {"id": "service-areas", "title": "Service Areas", "href": "/service-areas"},
    {"id": "about", "title": "About Us", "href": "/about"},
    {"id": "contact", "title": "Contact", "href": "/contact"},
    {"id": "emergency", "title": "Emergency", "href": "/emergency"},
    {"id": "blog", "title": "Blog", "href": "/blog"},
    {"id": "faq", "title": "FAQ", "href": "/faq"},
]

SERVICE_AREAS = [
    {"id": 1, "name": "Brisbane", "postcode": "4000", "state": "QLD"},
    {"id": 2, "name": "Gold Coast", "postcode": "4217", "state": "QLD"},
    {"id": 3, "name": "Sunshine Coast", "postcode": "4557", "state": "QLD"},
]

POSTCODE_RANGES = [
    ("Brisbane", "4000", "4199"),
    ("Gold Coast", "4207", "4230"),
    ("Ipswich", "4300", "4306"),
    ("Logan", "4114", "4133"),
    ("Sunshine Coast", "4550", "4575"),
]
