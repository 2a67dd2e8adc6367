"""Worked name examples lifted from each airline's official reference page.

Airlines whose pages carry no explicit name examples are left out:
Qatar Airways, Turkish Airlines, Thai Airways, Firefly, Cebu Pacific, Saudia.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class ReferenceCase:
    airline: str
    note: str
    given: str
    patronymic: str = ""
    surname: str = ""
    expected: Dict[str, str] = field(default_factory=dict)


REFERENCE_CASES: Tuple[ReferenceCase, ...] = (
    # Malaysia Airlines booking guide
    ReferenceCase(
        "mas", "MAS booking guide: Malay name with BIN",
        "AHMAD FALIQ", "BIN", "HAMEDI",
        {"first": "AHMAD FALIQ", "last": "BIN HAMEDI"},
    ),
    ReferenceCase(
        "mas", "MAS booking guide: Chinese name, surname entered separately",
        "MEE LING", "", "TAN",
        {"first": "MEE LING", "last": "TAN"},
    ),
    ReferenceCase(
        "mas", "MAS booking guide: Western name, middle included in given",
        "JOHN WILLIAM", "", "SMITH",
        {"first": "JOHN WILLIAM", "last": "SMITH"},
    ),
    # AirAsia support article mentions @ replacement
    ReferenceCase(
        "airasia", "AirAsia guide: Malay name with BIN",
        "AHMAD FALIQ", "BIN", "HAMEDI",
        {"first": "AHMAD FALIQ", "last": "BIN HAMEDI"},
    ),
    ReferenceCase(
        "airasia", "AirAsia guide: @ symbol replaced by space",
        "SITI@NADIA", "BINTI", "AHMAD",
        {"first": "SITI NADIA", "last": "BINTI AHMAD"},
    ),
    ReferenceCase(
        "airasia", "AirAsia guide: hyphen replaced by space",
        "MARY-JANE", "", "WATSON",
        {"first": "MARY JANE", "last": "WATSON"},
    ),
    # Batik Air FAQ
    ReferenceCase(
        "batikair", "Batik Air FAQ example: BIN dropped from Last Name",
        "MOHAMMED FAZIL", "BIN", "MOHAMMED FALEEL",
        {"first": "MOHAMMED FAZIL", "last": "MOHAMMED FALEEL"},
    ),
    ReferenceCase(
        "batikair", "Batik Air FAQ example: single name duplicated",
        "ISKANDAR", "", "",
        {"first": "ISKANDAR", "last": "ISKANDAR"},
    ),
    # ANA name typing guide
    ReferenceCase(
        "ana", "ANA guide: given name split into First + Middle at first space",
        "JOHN WILLIAM", "", "DOE",
        {"first": "JOHN", "middle": "WILLIAM", "last": "DOE"},
    ),
    ReferenceCase(
        "ana", "ANA guide: single given word, no middle",
        "JOHN", "", "DOE",
        {"first": "JOHN", "middle": "", "last": "DOE"},
    ),
    ReferenceCase(
        "ana", "ANA guide: Malay name across three fields",
        "AHMAD FALIQ", "BIN", "HAMEDI",
        {"first": "AHMAD", "middle": "FALIQ", "last": "BIN HAMEDI"},
    ),
    # Japan Airlines passenger name guide
    ReferenceCase(
        "jal", "JAL guide: three fields, Last Name field shown first in JAL UI",
        "JOHN WILLIAM", "", "DOE",
        {"first": "JOHN", "middle": "WILLIAM", "last": "DOE"},
    ),
    # China Airlines traveler name guide
    ReferenceCase(
        "china_airlines", "China Airlines guide: spaces removed from given name",
        "JOHN WILLIAM", "", "DOE",
        {"first": "JOHNWILLIAM", "last": "DOE"},
    ),
    ReferenceCase(
        "china_airlines", "China Airlines guide: single name duplicated, no spaces",
        "MADONNA", "", "",
        {"first": "MADONNA", "last": "MADONNA"},
    ),
    ReferenceCase(
        "china_airlines", "China Airlines guide: Chinese name, no spaces in family name field",
        "MEE LING", "", "TAN",
        {"first": "MEELING", "last": "TAN"},
    ),
    # Royal Brunei FAQ
    ReferenceCase(
        "royal_brunei", "Royal Brunei FAQ: NAIRA ELAILAH BINTI ERHAN NOUSHAD",
        "NAIRA ELAILAH", "BINTI", "ERHAN NOUSHAD",
        {"first": "NAIRA ELAILAH", "last": "BINTI ERHAN NOUSHAD"},
    ),
    ReferenceCase(
        "royal_brunei", "Royal Brunei FAQ: MICHAEL FANG FA RONG (Chinese name)",
        "FA RONG MICHAEL", "", "FANG",
        {"first": "FA RONG MICHAEL", "last": "FANG"},
    ),
    ReferenceCase(
        "srilankan", "SriLankan Airlines name tips: standard two-field split",
        "JOHN", "", "DOE",
        {"first": "JOHN", "last": "DOE"},
    ),
    ReferenceCase(
        "scoot", "Scoot guide: middle name stays in First Name field",
        "JOHN ALLEN", "", "DOE",
        {"first": "JOHN ALLEN", "last": "DOE"},
    ),
    # Lion Air FAQ
    ReferenceCase(
        "lion_air", "Lion Air FAQ: single name duplicated in both fields",
        "ISKANDAR", "", "",
        {"first": "ISKANDAR", "last": "ISKANDAR"},
    ),
    ReferenceCase(
        "lion_air", "Lion Air FAQ: normal name",
        "JOHN", "", "DOE",
        {"first": "JOHN", "last": "DOE"},
    ),
    # HK Express passenger name FAQ
    ReferenceCase(
        "hk_express", "HK Express FAQ: CHAN Tai-Man example (Surname first)",
        "TAI MAN", "", "CHAN",
        {"first": "TAI MAN", "last": "CHAN"},
    ),
    ReferenceCase(
        "hk_express", "HK Express FAQ: hyphen removed from TAI-MAN",
        "TAI-MAN", "", "CHAN",
        {"first": "TAI MAN", "last": "CHAN"},
    ),
    ReferenceCase(
        "air_india", "Air India guide: middle name in First Name field",
        "JOHN ALLEN", "", "DOE",
        {"first": "JOHN ALLEN", "last": "DOE"},
    ),
    ReferenceCase(
        "etihad", "Etihad FAQ: SAMUEL JONATHAN VICTOR example",
        "SAMUEL JONATHAN", "", "VICTOR",
        {"first": "SAMUEL JONATHAN", "last": "VICTOR"},
    ),
    ReferenceCase(
        "oman_air", "Oman Air FAQ: standard two-field split",
        "JOHN", "", "DOE",
        {"first": "JOHN", "last": "DOE"},
    ),
)
