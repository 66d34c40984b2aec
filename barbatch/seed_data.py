"""Sample menu and price table used by POST /api/dev/seed and scripts/."""

SAMPLE_COCKTAILS = [
    {
        "name": "Blackberry Collins",
        "method": "Shake",
        "glass_type": "Highball",
        "season": "Summer 2025",
        "featured": True,
        "menu_price": 18,
        "instructions": "1. Shake vodka, lemon, syrup and puree with ice.\n2. Strain over fresh ice.\n3. Top with ginger beer.",
        "ingredients": [
            {"name": "Vodka", "amount": "1.5", "unit": "oz", "preferred_unit": "liters"},
            {"name": "Lemon Juice", "amount": "0.75", "unit": "oz", "preferred_unit": "quarts"},
            {"name": "Simple Syrup", "amount": "0.75", "unit": "oz", "preferred_unit": "quarts"},
            {"name": "Blackberry Puree", "amount": "0.5", "unit": "oz", "preferred_unit": "quarts"},
            {"name": "Ginger Beer", "amount": "3", "unit": "oz", "preferred_unit": "12oz can"},
            {"name": "Blackberry", "amount": "1", "unit": "each", "preferred_unit": "each"},
        ],
    },
    {
        "name": "Blue and Yellow Mimosa",
        "method": "Build",
        "glass_type": "Flute",
        "season": "Spring 2025",
        "menu_price": 17,
        "instructions": "1. Add orange juice and prosecco to a flute.\n2. Pour blue curacao slowly down the side.",
        "ingredients": [
            {"name": "Prosecco", "amount": "2", "unit": "oz", "preferred_unit": "liters"},
            {"name": "Orange Juice", "amount": "2", "unit": "oz", "preferred_unit": "quarts"},
            {"name": "Blue Curacao", "amount": "0.25", "unit": "oz", "preferred_unit": "liters"},
        ],
    },
    {
        "name": "Classic Pisco Sour",
        "method": "Shake",
        "glass_type": "Coupe",
        "season": "Summer 2025",
        "menu_price": 20,
        "instructions": "1. Dry-shake everything.\n2. Shake again with ice.\n3. Strain and garnish with bitters drops.",
        "ingredients": [
            {"name": "Pisco", "amount": "2", "unit": "oz", "preferred_unit": "liters"},
            {"name": "Lime Juice", "amount": "1", "unit": "oz", "preferred_unit": "quarts"},
            {"name": "Simple Syrup", "amount": "0.75", "unit": "oz", "preferred_unit": "quarts"},
            {"name": "Egg White", "amount": "1", "unit": "each", "preferred_unit": "each"},
        ],
    },
    {
        "name": "Cranberry Cinnamon Whiskey Sour",
        "method": "Shake",
        "glass_type": "Rocks",
        "season": "Fall 2025",
        "menu_price": 20,
        "instructions": "1. Shake everything with ice.\n2. Strain over ice.\n3. Garnish with a cranberry skewer.",
        "ingredients": [
            {"name": "Bourbon", "amount": "1.5", "unit": "oz", "preferred_unit": "liters"},
            {"name": "Lemon Juice", "amount": "0.75", "unit": "oz", "preferred_unit": "quarts"},
            {"name": "Cranberry Cinnamon Syrup", "amount": "1", "unit": "oz", "preferred_unit": "quarts"},
            {"name": "Angostura Bitters", "amount": "1", "unit": "dash", "preferred_unit": "4oz bottle"},
            {"name": "Cranberries", "amount": "3", "unit": "each", "preferred_unit": "each"},
        ],
    },
    {
        "name": "Espresso Martini",
        "method": "Shake",
        "glass_type": "Coupe",
        "season": "Fall 2025",
        "featured": True,
        "menu_price": 22,
        "instructions": "1. Shake hard with lots of ice.\n2. Strain into a chilled coupe.\n3. Garnish with 3 coffee beans.",
        "ingredients": [
            {"name": "Vodka", "amount": "2", "unit": "oz", "preferred_unit": "liters"},
            {"name": "Espresso", "amount": "2", "unit": "oz", "preferred_unit": "liters"},
            {"name": "Kahlua (Coffee Liqueur)", "amount": "0.5", "unit": "oz", "preferred_unit": "liters"},
            {"name": "Simple Syrup", "amount": "0.25", "unit": "oz", "preferred_unit": "quarts"},
            {"name": "Coffee Bean", "amount": "3", "unit": "each", "preferred_unit": "each"},
        ],
    },
]

LIQUOR_PRICES = [
    {"name": "Vodka", "price": 22.00, "bottle_size_ml": 750},
    {"name": "Bourbon", "price": 28.00, "bottle_size_ml": 750},
    {"name": "Bourbon or Rye", "price": 28.00, "bottle_size_ml": 750},
    {"name": "White Rum", "price": 18.00, "bottle_size_ml": 750},
    {"name": "Gin", "price": 25.00, "bottle_size_ml": 750},
    {"name": "Tequila (Reposado)", "price": 30.00, "bottle_size_ml": 750},
    {"name": "Pisco", "price": 25.00, "bottle_size_ml": 750},
    {"name": "Champagne", "price": 40.00, "bottle_size_ml": 750},
    {"name": "Prosecco", "price": 14.00, "bottle_size_ml": 750},
    {"name": "Sparkling Wine", "price": 12.00, "bottle_size_ml": 750},
    {"name": "Blue Curacao", "price": 12.00, "bottle_size_ml": 750},
    {"name": "Kahlua (Coffee Liqueur)", "price": 24.00, "bottle_size_ml": 750},
    {"name": "Pear Liqueur", "price": 22.00, "bottle_size_ml": 750},
    {"name": "Maraschino Liqueur (Optional)", "price": 30.00, "bottle_size_ml": 750},
    {"name": "Angostura Bitters", "price": 12.00, "bottle_size_ml": 118},
]
