# samples.py - Datos de ejemplo (seed de MongoDB y arranque en memoria)

SAMPLE_ITEMS = [
    {
        "name": "Laptop Computer",
        "description": "High-performance laptop for development work",
        "quantity": 15,
        "price": 999.99,
        "category": "Electronics",
    },
    {
        "name": "Office Chair",
        "description": "Ergonomic office chair with lumbar support",
        "quantity": 8,
        "price": 299.99,
        "category": "Furniture",
    },
    {
        "name": "Wireless Mouse",
        "description": "Bluetooth wireless mouse with precision tracking",
        "quantity": 25,
        "price": 49.99,
        "category": "Electronics",
    },
    {
        "name": "Programming Book",
        "description": "Complete guide to modern JavaScript development",
        "quantity": 12,
        "price": 39.99,
        "category": "Books",
    },
]
