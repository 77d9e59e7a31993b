"""Enums for the RAB domain models.

Values are the Indonesian display labels used in the form and embedded
verbatim in the generation prompt.
"""

from enum import StrEnum


class BaliLocation(StrEnum):
    """Regencies (Kabupaten/Kota) of Bali used as the location-markup key."""

    BADUNG = "Badung"
    DENPASAR = "Denpasar"
    GIANYAR = "Gianyar"
    TABANAN = "Tabanan"
    BULELENG = "Buleleng"
    JEMBRANA = "Jembrana"
    BANGLI = "Bangli"
    KLUNGKUNG = "Klungkung"
    KARANGASEM = "Karangasem"


class BuildingType(StrEnum):
    """Building function categories offered in the form."""

    RESIDENTIAL = "Rumah Tinggal"
    VILLA = "Villa Private/Komersial"
    KOST = "Rumah Kost (Boarding House)"
    APARTMENT = "Apartemen Low-Rise"
    OFFICE = "Kantor"
    COMMERCIAL = "Ruko/Toko"
    WAREHOUSE = "Gudang"
    OTHER = "Lainnya (Custom)"


class MaterialQuality(StrEnum):
    """Material quality tier."""

    BUDGET = "Ekonomis"
    STANDARD = "Standar"
    PREMIUM = "Mewah"
