"""Example catalog loaded into an empty products table."""

from __future__ import annotations

SEED_PRODUCTS = [
    {"name": "iPhone 15 Pro", "price": 999, "color": "Titanium", "description": "Flagship phone"},
    {"name": "iPhone 15", "price": 799, "color": "Blue", "description": "Standard phone"},
    {"name": "MacBook Pro", "price": 1999, "color": "Space Gray", "description": "Powerful laptop"},
    {"name": "MacBook Air", "price": 1099, "color": "Silver", "description": "Lightweight laptop"},
    {"name": "iPad Pro", "price": 1199, "color": "Silver", "description": "Tablet for pros"},
    {"name": "iPad Air", "price": 699, "color": "Blue", "description": "Tablet for everyone"},
    {"name": "Apple Watch Ultra", "price": 799, "color": "Titanium", "description": "Premium smartwatch"},
    {"name": "Apple Watch SE", "price": 279, "color": "Black", "description": "Affordable smartwatch"},
    {"name": "AirPods Pro", "price": 249, "color": "White", "description": "Noise-cancelling earbuds"},
    {"name": "HomePod Mini", "price": 99, "color": "Space Gray", "description": "Smart speaker"},
]
