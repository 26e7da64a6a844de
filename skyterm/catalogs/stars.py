"""
Bright star catalog.

About a hundred naked-eye stars, enough to draw the common constellation
figures and to fill a chart down to magnitude ~3.5. Coordinates are J2000,
rounded to 0.01h / 0.01°, which is well under a character cell.
"""

from __future__ import annotations

from ..universe.bodies import Star
from .fixed import FixedCatalog

# Format: (name, magnitude, ra_hours, dec_deg, spectral_type)
BRIGHT_STARS = [
    # Brightest twenty
    ("Sirius",          -1.46,  6.75, -16.72, "A"),
    ("Canopus",         -0.74,  6.40, -52.70, "F"),
    ("Arcturus",        -0.05, 14.26,  19.18, "K"),
    ("Rigel Kentaurus", -0.01, 14.66, -60.83, "G"),
    ("Vega",             0.03, 18.62,  38.78, "A"),
    ("Capella",          0.08,  5.28,  46.00, "G"),
    ("Rigel",            0.13,  5.24,  -8.20, "B"),
    ("Procyon",          0.38,  7.66,   5.22, "F"),
    ("Achernar",         0.45,  1.63, -57.24, "B"),
    ("Betelgeuse",       0.50,  5.92,   7.41, "M"),
    ("Hadar",            0.61, 14.06, -60.37, "B"),
    ("Altair",           0.76, 19.85,   8.87, "A"),
    ("Acrux",            0.77, 12.44, -63.10, "B"),
    ("Aldebaran",        0.85,  4.60,  16.51, "K"),
    ("Spica",            0.98, 13.42, -11.16, "B"),
    ("Antares",          1.06, 16.49, -26.43, "M"),
    ("Pollux",           1.14,  7.75,  28.03, "K"),
    ("Fomalhaut",        1.16, 22.96, -29.62, "A"),
    ("Deneb",            1.25, 20.69,  45.28, "A"),
    ("Mimosa",           1.25, 12.79, -59.69, "B"),

    # Orion
    ("Bellatrix",        1.64,  5.42,   6.35, "B"),
    ("Alnilam",          1.69,  5.60,  -1.20, "B"),
    ("Alnitak",          1.77,  5.68,  -1.94, "O"),
    ("Mintaka",          2.23,  5.53,  -0.30, "B"),
    ("Saiph",            2.06,  5.80,  -9.67, "B"),

    # Ursa Major
    ("Alioth",           1.76, 12.90,  55.96, "A"),
    ("Dubhe",            1.79, 11.06,  61.75, "K"),
    ("Alkaid",           1.85, 13.79,  49.31, "B"),
    ("Mizar",            2.23, 13.40,  54.93, "A"),
    ("Merak",            2.34, 11.03,  56.38, "A"),
    ("Phecda",           2.41, 11.90,  53.69, "A"),
    ("Megrez",           3.32, 12.26,  57.03, "A"),

    # Leo
    ("Regulus",          1.35, 10.14,  11.97, "B"),
    ("Denebola",         2.14, 11.82,  14.57, "A"),
    ("Algieba",          2.08, 10.33,  19.84, "K"),
    ("Zosma",            2.56, 11.24,  20.52, "A"),
    ("Chertan",          3.33, 11.24,  15.43, "A"),

    # Gemini
    ("Castor",           1.58,  7.58,  31.89, "A"),
    ("Alhena",           1.93,  6.63,  16.40, "A"),

    # Taurus / Auriga
    ("Elnath",           1.65,  5.44,  28.61, "B"),
    ("Menkalinan",       1.90,  6.00,  44.95, "A"),

    # Virgo / Bootes
    ("Porrima",          2.74, 12.69,  -1.45, "F"),
    ("Vindemiatrix",     2.85, 13.04,  10.96, "G"),
    ("Nekkar",           3.50, 15.03,  40.39, "G"),
    ("Seginus",          3.04, 14.53,  38.31, "A"),
    ("Izar",             2.37, 14.75,  27.07, "K"),

    # Scorpius / Sagittarius
    ("Shaula",           1.62, 17.56, -37.10, "B"),
    ("Sargas",           1.86, 17.62, -43.00, "F"),
    ("Dschubba",         2.32, 16.00, -22.62, "B"),
    ("Kaus Australis",   1.79, 18.40, -34.38, "B"),
    ("Nunki",            2.05, 18.92, -26.30, "B"),

    # Aquila / Cygnus / Lyra
    ("Tarazed",          2.72, 19.77,  10.61, "K"),
    ("Alshain",          3.71, 19.92,   6.41, "A"),
    ("Sadr",             2.23, 20.37,  40.26, "F"),
    ("Gienah",           2.48, 20.77,  33.97, "K"),
    ("Albireo",          3.05, 19.51,  27.96, "K"),
    ("Fawaris",          2.87, 19.75,  45.13, "B"),
    ("Sheliak",          3.52, 18.83,  33.36, "B"),
    ("Sulafat",          3.25, 18.98,  32.69, "B"),

    # Aquarius / Pegasus / Andromeda
    ("Sadalsuud",        2.90, 21.52,  -5.57, "G"),
    ("Sadalmelik",       3.00, 22.10,  -0.32, "G"),
    ("Enif",             2.38, 21.74,   9.88, "K"),
    ("Scheat",           2.44, 23.06,  28.08, "M"),
    ("Markab",           2.49, 23.08,  15.21, "B"),
    ("Algenib",          2.83,  0.22,  15.18, "B"),
    ("Alpheratz",        2.06,  0.14,  29.09, "B"),
    ("Mirach",           2.07,  1.16,  35.62, "M"),
    ("Almach",           2.10,  2.07,  42.33, "K"),

    # Cassiopeia / Perseus
    ("Schedar",          2.24,  0.67,  56.54, "K"),
    ("Caph",             2.28,  0.15,  59.15, "F"),
    ("Gamma Cassiopeiae", 2.47, 0.95,  60.72, "B"),
    ("Ruchbah",          2.68,  1.43,  60.24, "A"),
    ("Segin",            3.37,  1.91,  63.67, "B"),
    ("Mirfak",           1.79,  3.41,  49.86, "F"),
    ("Algol",            2.09,  3.14,  40.96, "B"),

    # Aries / Cetus / Eridanus
    ("Hamal",            2.00,  2.12,  23.46, "K"),
    ("Sheratan",         2.64,  1.91,  20.81, "A"),
    ("Deneb Kaitos",     2.04,  0.73, -17.99, "K"),
    ("Menkar",           2.54,  3.04,   4.09, "M"),
    ("Cursa",            2.79,  5.13,  -5.09, "A"),
    ("Zaurak",           3.03,  3.97, -13.51, "M"),

    # Canis Major / Cancer / Corvus
    ("Adhara",           1.50,  6.98, -28.97, "B"),
    ("Wezen",            1.83,  7.14, -26.39, "F"),
    ("Mirzam",           1.98,  6.38, -17.96, "B"),
    ("Aludra",           2.45,  7.40, -29.30, "B"),
    ("Acubens",          4.26,  8.97,  11.86, "A"),
    ("Gienah Corvi",     2.58, 12.26, -17.54, "B"),
    ("Algorab",          2.94, 12.50, -16.52, "A"),
    ("Kraz",             2.65, 12.57, -23.40, "G"),
    ("Minkar",           3.02, 12.17, -22.62, "K"),

    # Centaurus / Lupus / Libra
    ("Menkent",          2.06, 14.11, -36.37, "K"),
    ("Men",              2.68, 14.70, -43.13, "B"),
    ("Zubenelgenubi",    2.75, 14.85, -16.04, "A"),
    ("Zubeneschamali",   2.61, 15.28,  -9.38, "B"),

    # Ophiuchus / Hercules / Corona Borealis
    ("Rasalhague",       2.08, 17.58,  12.56, "A"),
    ("Sabik",            2.43, 17.17, -15.72, "A"),
    ("Rasalgethi",       3.37, 17.24,  14.39, "M"),
    ("Kornephoros",      2.78, 16.50,  21.49, "G"),
    ("Alphecca",         2.22, 15.58,  26.71, "A"),

    # Crux
    ("Gacrux",           1.59, 12.52, -57.11, "M"),
    ("Imai",             2.79, 12.25, -58.75, "B"),

    # Southern sky
    ("Alnair",           1.73, 22.14, -46.98, "B"),
    ("Al Dhanab",        3.01, 22.71, -46.88, "M"),
    ("Peacock",          1.94, 20.43, -56.74, "B"),
    ("Alpha Tucanae",    2.87, 22.31, -60.26, "K"),
    ("Ankaa",            2.40,  0.44, -42.31, "K"),

    # Ursa Minor
    ("Polaris",          1.98,  2.53,  89.26, "F"),
    ("Kochab",           2.08, 14.85,  74.16, "K"),
    ("Pherkad",          3.05, 15.35,  71.83, "A"),
]


def load_bright_stars() -> list[Star]:
    return [Star(name=name, magnitude=mag, ra=ra, dec=dec, spectral_type=sp)
            for name, mag, ra, dec, sp in BRIGHT_STARS]


class StarCatalog(FixedCatalog[Star]):
    """The built-in bright star list, positions updated per tick."""

    def __init__(self):
        super().__init__(load_bright_stars())
