from __future__ import annotations

from typing import Any

SAMPLE_SERVICES: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Acme Plumbing",
        "tagline": "Leaks fixed the same day",
        "description": "Licensed plumbers for repairs, water heaters and remodels.",
        "category": "Home Services",
        "city": "Austin",
        "rating": 4.8,
        "reviews": 120,
        "price": "$",
        "features": ["24/7 emergency", "Free estimates", "Licensed & insured"],
        "color": "#4caf50",
        "image": "https://images.example.com/services/acme-plumbing.jpg",
        "phone": "(512) 555-0101",
        "email": "hello@acmeplumbing.example.com",
        "address": "101 Congress Ave, Austin, TX",
    },
    {
        "id": 2,
        "name": "Zen Spa",
        "tagline": "Massage and skin care in a quiet space",
        "description": "Deep tissue massage, facials and aromatherapy sessions.",
        "category": "Health & Wellness",
        "city": "Austin",
        "rating": 4.5,
        "reviews": 80,
        "price": "$$",
        "features": ["Couples rooms", "Organic products"],
        "color": "#ff5722",
        "image": "https://images.example.com/services/zen-spa.jpg",
        "phone": "(512) 555-0144",
        "email": "book@zenspa.example.com",
        "address": "2200 S Lamar Blvd, Austin, TX",
    },
    {
        "id": 3,
        "name": "Acme Tech",
        "tagline": "IT support for small offices",
        "description": "Network setup, managed backups and help desk on demand.",
        "category": "Technology",
        "city": "Dallas",
        "rating": 4.9,
        "reviews": 50,
        "price": "$$$",
        "features": ["Remote support", "Same-week onboarding", "Security audits"],
        "color": "#2196f3",
        "image": "https://images.example.com/services/acme-tech.jpg",
        "phone": "(214) 555-0188",
        "email": "support@acmetech.example.com",
        "address": "1900 Elm St, Dallas, TX",
    },
    {
        "id": 4,
        "name": "Bright Ledger CPA",
        "tagline": "Taxes and bookkeeping without the headache",
        "description": "Small business accounting, payroll and quarterly tax filing.",
        "category": "Professional Services",
        "city": "Houston",
        "rating": 4.7,
        "reviews": 64,
        "price": "$$$",
        "features": ["Free consultation", "Cloud bookkeeping"],
        "color": "#673ab7",
        "image": "https://images.example.com/services/bright-ledger.jpg",
        "phone": "(713) 555-0123",
        "email": "office@brightledger.example.com",
        "address": "600 Travis St, Houston, TX",
    },
    {
        "id": 5,
        "name": "Taco Trail Catering",
        "tagline": "Street tacos for events of any size",
        "description": "Full-service taco bar catering for weddings, offices and parties.",
        "category": "Food & Beverage",
        "city": "Austin",
        "rating": 4.6,
        "reviews": 210,
        "price": "$$",
        "features": ["Vegan options", "On-site grill", "Drinks package"],
        "color": "#ff9800",
        "image": "https://images.example.com/services/taco-trail.jpg",
        "phone": "(512) 555-0190",
        "email": "events@tacotrail.example.com",
        "address": "800 E 6th St, Austin, TX",
    },
    {
        "id": 6,
        "name": "Lone Star Movers",
        "tagline": "Local and long-distance moves",
        "description": "Packing, loading and climate-controlled storage across Texas.",
        "category": "Transportation",
        "city": "Dallas",
        "rating": 4.3,
        "reviews": 175,
        "price": "$$",
        "features": ["Packing supplies", "Storage"],
        "color": "#009688",
        "image": "https://images.example.com/services/lone-star-movers.jpg",
        "phone": "(214) 555-0111",
        "email": "quotes@lonestarmovers.example.com",
        "address": "3300 Main St, Dallas, TX",
    },
    {
        "id": 7,
        "name": "Petal & Stem",
        "tagline": "Fresh flowers delivered daily",
        "description": "Custom bouquets and event floral design with same-day delivery.",
        "category": "Retail",
        "city": "Houston",
        "rating": 4.8,
        "reviews": 95,
        "price": "$$",
        "features": ["Same-day delivery", "Subscriptions", "Event design"],
        "color": "#e91e63",
        "image": "https://images.example.com/services/petal-and-stem.jpg",
        "phone": "(713) 555-0177",
        "email": "orders@petalandstem.example.com",
        "address": "1200 Westheimer Rd, Houston, TX",
    },
    {
        "id": 8,
        "name": "Clearview Window Cleaning",
        "tagline": "Streak-free glass, inside and out",
        "description": "Residential and commercial window washing and gutter cleaning.",
        "category": "Home Services",
        "city": "Houston",
        "rating": 4.4,
        "reviews": 42,
        "price": "$",
        "features": ["Eco-friendly", "Gutter cleaning"],
        "color": "#4caf50",
        "image": "https://images.example.com/services/clearview.jpg",
        "phone": "(713) 555-0150",
        "email": "info@clearview.example.com",
        "address": "45 Heights Blvd, Houston, TX",
    },
]
