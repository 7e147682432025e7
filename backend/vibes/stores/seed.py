"""Seed catalogs loaded into a fresh CatalogStore."""

MENU = {
    "appetizers": [
        {"id": 1, "name": "Caesar Salat", "description": "Frischer Römersalat mit Caesar-Dressing", "price": 11.90, "type": "Portion"},
        {"id": 2, "name": "Bruschetta", "description": "Geröstetes Brot mit Tomaten und Basilikum", "price": 9.20, "type": "Portion"},
        {"id": 3, "name": "Tagessuppe", "description": "Tägliche Auswahl des Küchenchefs", "price": 8.30, "type": "Schüssel"},
    ],
    "mains": [
        {"id": 4, "name": "Gegrillter Lachs", "description": "Atlantischer Lachs mit Zitronenbuttersauce", "price": 23.00, "type": "Portion"},
        {"id": 5, "name": "Ribeye Steak", "description": "340g Ribeye-Steak mit geröstetem Gemüse", "price": 30.40, "type": "Portion"},
        {"id": 6, "name": "Vegetarische Pasta", "description": "Frische Pasta mit saisonalem Gemüse", "price": 17.50, "type": "Portion"},
        {"id": 7, "name": "Hähnchen-Risotto", "description": "Cremiges Risotto mit Hähnchen und Pilzen", "price": 21.20, "type": "Portion"},
    ],
    "desserts": [
        {"id": 8, "name": "Schokoladen-Lava-Kuchen", "description": "Warmer Schokoladenkuchen mit flüssigem Kern", "price": 10.10, "type": "Portion"},
        {"id": 9, "name": "Tiramisu", "description": "Klassisches italienisches Dessert", "price": 9.20, "type": "Portion"},
        {"id": 10, "name": "Käsekuchen", "description": "New York Style Käsekuchen", "price": 9.20, "type": "Stück"},
    ],
    "drinks": [
        {"id": 11, "name": "Hauswein Rot", "description": "Trockener Rotwein", "price": 6.50, "type": "Glas"},
        {"id": 12, "name": "Hauswein Weiß", "description": "Trockener Weißwein", "price": 6.50, "type": "Glas"},
        {"id": 13, "name": "Mineralwasser", "description": "Still oder sprudelnd", "price": 3.20, "type": "Flasche"},
        {"id": 14, "name": "Espresso", "description": "Frisch gemahlen", "price": 2.80, "type": "Tasse"},
    ],
}

WELLNESS = {
    "massages": [
        {"id": 1, "name": "Klassische Massage", "price": 85.0, "duration": "60 Minuten"},
        {"id": 2, "name": "Hot Stone Massage", "price": 120.0, "duration": "75 Minuten"},
        {"id": 3, "name": "Aromatherapie Massage", "price": 95.0, "duration": "60 Minuten"},
        {"id": 4, "name": "Sportmassage", "price": 90.0, "duration": "45 Minuten"},
    ],
    "treatments": [
        {"id": 5, "name": "Gesichtsbehandlung", "price": 110.0, "duration": "75 Minuten"},
        {"id": 6, "name": "Körperpeeling", "price": 75.0, "duration": "45 Minuten"},
        {"id": 7, "name": "Wraps & Packungen", "price": 95.0, "duration": "60 Minuten"},
        {"id": 8, "name": "Maniküre & Pediküre", "price": 65.0, "duration": "60 Minuten"},
    ],
    "packages": [
        {"id": 9, "name": "Wellness-Tag", "price": 220.0, "duration": "4 Stunden"},
        {"id": 10, "name": "Entspannungspaket", "price": 160.0, "duration": "2 Stunden"},
        {"id": 11, "name": "Verwöhnpaket", "price": 280.0, "duration": "3.5 Stunden"},
    ],
    "facilities": [
        {"id": 12, "name": "Sauna", "price": 25.0, "duration": "Tageszugang"},
        {"id": 13, "name": "Dampfbad", "price": 20.0, "duration": "Tageszugang"},
    ],
}

CATALOGS = {"menu": MENU, "wellness": WELLNESS}
