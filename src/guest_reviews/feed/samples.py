"""Built-in review and property data.

``FALLBACK_REVIEWS`` stands in for the Hostaway feed when it cannot be
reached. ``SAMPLE_PROPERTIES`` and ``SAMPLE_REVIEWS`` are the catalogue a fresh
in-memory instance boots with. Reviews are in the upstream (camelCase) shape
so they pass through the same normalization as live data; category ratings
are on the 10-point scale.
"""

FALLBACK_REVIEWS = [
    {
        "id": "7453",
        "type": "guest-to-host",
        "status": "published",
        "rating": 5,
        "publicReview": "Shane and family are wonderful! Would definitely host again :)",
        "reviewCategory": [
            {"category": "cleanliness", "rating": 10},
            {"category": "communication", "rating": 10},
            {"category": "respect_house_rules", "rating": 10},
        ],
        "submittedAt": "2020-08-21T22:45:14Z",
        "guestName": "Shane Finkelstein",
        "listingName": "2B N1 A - 29 Shoreditch Heights",
    }
]

SAMPLE_PROPERTIES = [
    {
        "name": "Modern 2BR in Trendy Shoreditch",
        "address": "29 Shoreditch Heights, London E1 6JE",
        "description": (
            "Experience the best of London living in this beautifully designed 2-bedroom apartment "
            "in the heart of Shoreditch."
        ),
        "price": 125,
        "category": "apartment",
        "bedrooms": 2,
        "bathrooms": 2,
    },
    {
        "name": "Stylish Camden Apartment",
        "address": "15 Camden Square, London NW1 9XA",
        "description": "A contemporary apartment in the vibrant Camden area with excellent transport links.",
        "price": 110,
        "category": "apartment",
        "bedrooms": 1,
        "bathrooms": 1,
    },
    {
        "name": "Luxury Notting Hill Studio",
        "address": "8 Notting Hill Gardens, London W11 3DF",
        "description": "A beautiful studio apartment in prestigious Notting Hill with modern amenities.",
        "price": 95,
        "category": "studio",
        "bedrooms": 1,
        "bathrooms": 1,
    },
    {
        "name": "Cozy Covent Garden Flat",
        "address": "42 Covent Garden Plaza, London WC2E 8RF",
        "description": "A charming flat in the heart of Covent Garden, perfect for theater and shopping enthusiasts.",
        "price": 140,
        "category": "flat",
        "bedrooms": 1,
        "bathrooms": 1,
    },
    {
        "name": "Spacious Kensington House",
        "address": "78 Kensington High Street, London W8 4PE",
        "description": "A magnificent 3-bedroom house in prestigious Kensington with garden access.",
        "price": 200,
        "category": "house",
        "bedrooms": 3,
        "bathrooms": 2,
    },
    {
        "name": "Contemporary Canary Wharf Studio",
        "address": "12 Canary Wharf Drive, London E14 5AB",
        "description": "Modern studio apartment in the financial district with stunning city views.",
        "price": 120,
        "category": "studio",
        "bedrooms": 1,
        "bathrooms": 1,
    },
    {
        "name": "Historic Greenwich Townhouse",
        "address": "25 Greenwich Park Road, London SE10 9LS",
        "description": "Beautiful Victorian townhouse near Greenwich Park with period features.",
        "price": 180,
        "category": "townhouse",
        "bedrooms": 4,
        "bathrooms": 3,
    },
    {
        "name": "Chic Hackney Loft",
        "address": "88 Hackney Road, London E2 7QL",
        "description": "Industrial-style loft in trendy Hackney with exposed brick and high ceilings.",
        "price": 130,
        "category": "loft",
        "bedrooms": 2,
        "bathrooms": 2,
    },
]


def _categories(cleanliness, communication, house_rules):
    return [
        {"category": "cleanliness", "rating": cleanliness},
        {"category": "communication", "rating": communication},
        {"category": "respect_house_rules", "rating": house_rules},
    ]


SAMPLE_REVIEWS = [
    {
        "id": "review-001",
        "type": "guest-to-host",
        "status": "published",
        "channel": "airbnb",
        "rating": 5,
        "publicReview": (
            "Amazing apartment in the heart of Shoreditch! The location couldn't be better and the space "
            "was beautifully designed. Would definitely stay again."
        ),
        "reviewCategory": _categories(10, 10, 10),
        "submittedAt": "2024-01-15T00:00:00Z",
        "guestName": "Emily Johnson",
        "listingName": "Modern 2BR in Trendy Shoreditch - Apartment",
    },
    {
        "id": "review-002",
        "type": "guest-to-host",
        "status": "published",
        "channel": "booking.com",
        "rating": 4,
        "publicReview": (
            "Great location in Camden, close to everything. The apartment was clean and comfortable. "
            "Minor issues with WiFi but overall excellent stay."
        ),
        "reviewCategory": _categories(8, 8, 10),
        "submittedAt": "2024-01-20T00:00:00Z",
        "guestName": "Marcus Williams",
        "listingName": "Stylish Camden Apartment - Modern Living",
    },
    {
        "id": "review-003",
        "type": "guest-to-host",
        "status": "published",
        "channel": "hostaway",
        "rating": 5,
        "publicReview": (
            "Perfect studio in Notting Hill! Luxurious finishes and excellent amenities. "
            "The host was very responsive and helpful."
        ),
        "reviewCategory": _categories(10, 10, 8),
        "submittedAt": "2024-01-25T00:00:00Z",
        "guestName": "Sarah Chen",
        "listingName": "Luxury Notting Hill Studio - Premium",
    },
    {
        "id": "review-004",
        "type": "guest-to-host",
        "status": "published",
        "channel": "airbnb",
        "rating": 3,
        "publicReview": (
            "The flat was okay but had some cleanliness issues. "
            "Location in Covent Garden is fantastic for theater and shopping."
        ),
        "reviewCategory": _categories(4, 8, 8),
        "submittedAt": "2024-02-01T00:00:00Z",
        "guestName": "David Thompson",
        "listingName": "Cozy Covent Garden Flat - Theater District",
    },
    {
        "id": "review-005",
        "type": "guest-to-host",
        "status": "published",
        "channel": "direct",
        "rating": 5,
        "publicReview": (
            "Absolutely stunning house in Kensington! Spacious, beautifully decorated, "
            "and the garden was a wonderful bonus. Perfect for families."
        ),
        "reviewCategory": _categories(10, 10, 10),
        "submittedAt": "2024-02-05T00:00:00Z",
        "guestName": "Jennifer Davis",
        "listingName": "Spacious Kensington House - Family Home",
    },
    {
        "id": "review-006",
        "type": "guest-to-host",
        "status": "published",
        "channel": "hostaway",
        "rating": 4,
        "publicReview": (
            "Modern studio with incredible city views from Canary Wharf. Great for business travelers. "
            "Only downside was some noise from construction nearby."
        ),
        "reviewCategory": _categories(10, 8, 8),
        "submittedAt": "2024-02-10T00:00:00Z",
        "guestName": "Michael Rodriguez",
        "listingName": "Contemporary Canary Wharf Studio - Business",
    },
    {
        "id": "review-007",
        "type": "guest-to-host",
        "status": "published",
        "channel": "booking.com",
        "rating": 5,
        "publicReview": (
            "Beautiful Victorian townhouse near Greenwich Park. The historical features are charming "
            "and the location is peaceful yet well-connected."
        ),
        "reviewCategory": _categories(10, 10, 10),
        "submittedAt": "2024-02-15T00:00:00Z",
        "guestName": "Anna Martinez",
        "listingName": "Historic Greenwich Townhouse - Victorian Charm",
    },
    {
        "id": "review-008",
        "type": "guest-to-host",
        "status": "published",
        "channel": "airbnb",
        "rating": 4,
        "publicReview": (
            "Cool industrial loft in Hackney. Love the exposed brick and high ceilings. "
            "Area is trendy with lots of great restaurants and bars nearby."
        ),
        "reviewCategory": _categories(8, 8, 10),
        "submittedAt": "2024-02-20T00:00:00Z",
        "guestName": "James Wilson",
        "listingName": "Chic Hackney Loft - Industrial Style",
    },
    {
        "id": "review-009",
        "type": "guest-to-host",
        "status": "published",
        "channel": "hostaway",
        "rating": 2,
        "publicReview": (
            "Had high expectations but was disappointed. "
            "The apartment needs maintenance and cleaning was not up to standard."
        ),
        "reviewCategory": _categories(4, 6, 8),
        "submittedAt": "2024-02-25T00:00:00Z",
        "guestName": "Lisa Brown",
        "listingName": "Modern 2BR in Trendy Shoreditch - Apartment",
    },
    {
        "id": "review-010",
        "type": "guest-to-host",
        "status": "published",
        "channel": "direct",
        "rating": 5,
        "publicReview": (
            "Excellent stay in Camden! Everything was perfect - location, cleanliness, amenities. "
            "Highly recommend for anyone visiting London."
        ),
        "reviewCategory": _categories(10, 10, 10),
        "submittedAt": "2024-03-01T00:00:00Z",
        "guestName": "Robert Taylor",
        "listingName": "Stylish Camden Apartment - Modern Living",
    },
]
