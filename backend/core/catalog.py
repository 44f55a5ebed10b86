"""Fixed label sets and the sample bar stock used to seed empty stores."""

PRODUCT_CATEGORIES = ("Spirits", "Beer", "Wine", "Mixers", "Garnishes")

PRODUCT_UNITS = ("bottles", "L", "ml", "units", "cases")

# Largest quantity or threshold a store holds (signed 32-bit INTEGER column).
MAX_QUANTITY = 2**31 - 1


SAMPLE_ITEMS = [
    {"name": "Jack Daniel's Tennessee Whiskey", "category": "Spirits", "quantity": 24, "unit": "bottles", "lowStockThreshold": 12},
    {"name": "Grey Goose Vodka", "category": "Spirits", "quantity": 8, "unit": "bottles", "lowStockThreshold": 10},
    {"name": "Bombay Sapphire Gin", "category": "Spirits", "quantity": 15, "unit": "bottles", "lowStockThreshold": 8},
    {"name": "Bacardi Superior Rum", "category": "Spirits", "quantity": 6, "unit": "bottles", "lowStockThreshold": 10},
    {"name": "Corona Extra", "category": "Beer", "quantity": 48, "unit": "bottles", "lowStockThreshold": 24},
    {"name": "Guinness Draught", "category": "Beer", "quantity": 36, "unit": "bottles", "lowStockThreshold": 20},
    {"name": "Cabernet Sauvignon", "category": "Wine", "quantity": 12, "unit": "bottles", "lowStockThreshold": 6},
    {"name": "Sauvignon Blanc", "category": "Wine", "quantity": 10, "unit": "bottles", "lowStockThreshold": 6},
    {"name": "Tonic Water", "category": "Mixers", "quantity": 30, "unit": "bottles", "lowStockThreshold": 15},
    {"name": "Cranberry Juice", "category": "Mixers", "quantity": 5, "unit": "L", "lowStockThreshold": 8},
    {"name": "Fresh Limes", "category": "Garnishes", "quantity": 50, "unit": "units", "lowStockThreshold": 20},
    {"name": "Fresh Mint", "category": "Garnishes", "quantity": 3, "unit": "units", "lowStockThreshold": 5},
]
