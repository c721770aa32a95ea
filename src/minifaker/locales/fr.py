"""French locale data.

Only names, phone formats and city names are provided; generators that
need other tables raise ``MissingFieldError`` for this locale.
"""

# fmt: off
LOCALE = {
    "firstNames": [
        "Adèle", "Alexandre", "Alice", "Antoine", "Camille", "Chloé", "Clément",
        "Élise", "Emma", "Gabriel", "Hugo", "Inès", "Jeanne", "Jules", "Léa",
        "Louis", "Louise", "Lucas", "Manon", "Mathis", "Nathan", "Océane",
        "Raphaël", "Sarah", "Théo",
    ],
    "maleFirstNames": [
        "Alexandre", "Antoine", "Clément", "Gabriel", "Hugo", "Jules", "Louis",
        "Lucas", "Mathis", "Nathan", "Raphaël", "Théo",
    ],
    "femaleFirstNames": [
        "Adèle", "Alice", "Camille", "Chloé", "Élise", "Emma", "Inès", "Jeanne",
        "Léa", "Louise", "Manon", "Océane", "Sarah",
    ],
    "lastNames": [
        "Bernard", "Bonnet", "Dubois", "Durand", "Fournier", "Garnier",
        "Girard", "Lambert", "Laurent", "Lefebvre", "Leroy", "Martin", "Mercier",
        "Michel", "Moreau", "Morel", "Petit", "Richard", "Robert", "Roux",
        "Simon", "Thomas",
    ],
    "phoneFormats": [
        "01########",
        "02########",
        "03########",
        "04########",
        "05########",
        "06########",
        "07########",
        "+33 1########",
        "+33 6########",
        "01 ## ## ## ##",
        "06 ## ## ## ##",
        "+33 (0)1 ## ## ## ##",
    ],
    "cityNames": [
        "Paris", "Marseille", "Lyon", "Toulouse", "Nice", "Nantes", "Strasbourg",
        "Montpellier", "Bordeaux", "Lille", "Rennes", "Reims", "Le Havre",
        "Saint-Étienne", "Toulon", "Grenoble", "Dijon", "Angers", "Nîmes",
        "Villeurbanne",
    ],
}
# fmt: on
