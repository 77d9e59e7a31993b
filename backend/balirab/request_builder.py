"""Estimate request builder.

Turns a :class:`ProjectDetails` into the natural-language instruction and
the JSON Schema the generation service must answer with. The costing
methodology is encoded as directives; the service, not this module,
performs the arithmetic:

1. **Base price (HSD)** — typical Bali material and labour rates per item.
2. **Location markup** — fixed lookup by regency (+10%, +5% or +0%).
3. **Contractor margin** — flat +15% (5% overhead + 10% profit); the fully
   loaded number becomes ``unitPrice``.
4. **Physical cost** — sum of ``volume x unitPrice`` over all items.
5. **Tax** — PPN 11% on the physical cost gives ``grandTotal``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from balirab.data.form_options import METHODOLOGY_REFERENCE
from balirab.data.pricing import (
    CONTRACTOR_MARGIN_PERCENT,
    DEFAULT_LOCATION_MARKUP,
    LOCATION_MARKUPS,
    OVERHEAD_PERCENT,
    PROFIT_PERCENT,
    TAX_PERCENT,
)
from balirab.exceptions import InputValidationError
from balirab.models.enums import BaliLocation, BuildingType
from balirab.models.project import ProjectDetails


@dataclass(frozen=True)
class EstimateRequest:
    """A prompt plus the output schema the response must conform to."""

    prompt: str
    schema: dict[str, Any]


# ---------------------------------------------------------------------------
# Output schema
# ---------------------------------------------------------------------------

_ITEM_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "description": {
            "type": "string",
            "description": "Uraian pekerjaan sesuai nomenklatur SNI/AHSP.",
        },
        "unit": {
            "type": "string",
            "description": "Satuan (m2, m3, kg, bh, ls, unit).",
        },
        "volume": {"type": "number", "description": "Volume pekerjaan."},
        "unitPrice": {
            "type": "number",
            "description": (
                "Harga Satuan Jadi (Termasuk Mat+Upah+Alat+Overhead+Profit)."
            ),
        },
        "totalPrice": {
            "type": "number",
            "description": "Total harga (Volume x Unit Price).",
        },
    },
    "required": ["description", "unit", "volume", "unitPrice", "totalPrice"],
}

RAB_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "projectSummary": {
            "type": "string",
            "description": (
                "Ringkasan teknis, asumsi harga material utama (Semen/Pasir) "
                "yang digunakan, dan faktor lokasi."
            ),
        },
        "estimatedDuration": {
            "type": "string",
            "description": "Estimasi waktu pengerjaan (contoh: 6 Bulan).",
        },
        "grandTotal": {
            "type": "number",
            "description": (
                f"Total biaya keseluruhan proyek (Termasuk PPN {TAX_PERCENT}%)."
            ),
        },
        "categories": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "categoryName": {
                        "type": "string",
                        "description": (
                            "Kategori (I. Pekerjaan Persiapan, "
                            "II. Pekerjaan Tanah & Pondasi, dst)."
                        ),
                    },
                    "subtotal": {
                        "type": "number",
                        "description": "Total biaya kategori ini.",
                    },
                    "items": {"type": "array", "items": _ITEM_SCHEMA},
                },
                "required": ["categoryName", "subtotal", "items"],
            },
        },
    },
    "required": ["projectSummary", "estimatedDuration", "grandTotal", "categories"],
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def location_markup_percent(location: BaliLocation | str) -> int:
    """Return the fixed location markup (percent) for a regency.

    Unknown regencies get the default markup of 0%.
    """
    try:
        key = BaliLocation(location)
    except ValueError:
        return DEFAULT_LOCATION_MARKUP
    return LOCATION_MARKUPS.get(key, DEFAULT_LOCATION_MARKUP)


def effective_building_type(details: ProjectDetails) -> str:
    """Return the building-type label to embed in the prompt.

    Raises
    ------
    InputValidationError
        If the Other variant is selected without a custom description.
    """
    if details.building_type == BuildingType.OTHER:
        custom = (details.custom_building_type or "").strip()
        if not custom:
            msg = "A custom building type is required when 'Other' is selected"
            raise InputValidationError(msg)
        return custom
    return details.building_type.value


def _format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` (``60.0`` -> ``60``)."""
    return f"{value:g}"


def _markup_table_lines() -> list[str]:
    by_percent: dict[int, list[str]] = {}
    for location, percent in LOCATION_MARKUPS.items():
        by_percent.setdefault(percent, []).append(location.value)

    lines: list[str] = []
    for percent in sorted(by_percent, reverse=True):
        names = by_percent[percent]
        quoted = " atau ".join(f'"{n}"' for n in names)
        if percent > 0:
            lines.append(
                f"- Jika Lokasi = {quoted}: Tambahkan markup **+{percent}%** "
                "pada harga dasar."
            )
        else:
            lines.append(
                f"- Jika Kabupaten lain ({', '.join(names)}): "
                f"**+{percent}%** (Harga standar)."
            )
    return lines


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


def build_estimate_request(details: ProjectDetails) -> EstimateRequest:
    """Build the prompt and output schema for one estimate.

    Pure: the same details always produce the same request.

    Raises
    ------
    InputValidationError
        If the details violate the Other/custom building-type invariant.
    """
    building_type = effective_building_type(details)
    markup = location_markup_percent(details.location)
    location = str(details.location)

    lines = [
        "PERAN:",
        "Anda adalah Senior Quantity Surveyor (QS) dan Ahli Teknik Sipil "
        "profesional yang berdomisili di Bali, Indonesia.",
        "",
        "TUGAS:",
        "Buatlah Rencana Anggaran Biaya (RAB) detail untuk proyek konstruksi "
        "berikut.",
        "",
        "DATA PROYEK:",
        f"- Nama: {details.project_name}",
        f"- Lokasi: {location} (Bali)",
        f"- Luas Tanah: {_format_number(details.land_area)} m2",
        f"- Luas Bangunan: {_format_number(details.building_area)} m2",
        f"- Lantai: {details.floors}",
        f"- Tipe: {building_type}",
        f"- Kualitas Material: {details.quality}",
        f"- Catatan: {details.notes.strip() or '-'}",
        "",
        "LANDASAN TEORITIS & REFERENSI HARGA (WAJIB):",
        f"1. **Analisa:** Gunakan {METHODOLOGY_REFERENCE} terbaru.",
        "2. **Harga Dasar (HSD):** Gunakan harga pasar material dan upah riil "
        "di Bali saat ini (Semen Gresik/Tiga Roda, Pasir Lumajang/Muntilan, "
        "Batu Kali lokal, Upah Tukang Bali).",
        "3. **Formula Dasar:** Harga Satuan Pekerjaan (HSP) = "
        "(Koefisien x Harga Satuan Bahan) + (Koefisien x Upah Tenaga) + "
        "(Koefisien x Harga Alat).",
        "",
        "LOGIKA PERHITUNGAN BIAYA (STEP-BY-STEP):",
        "1. **Tentukan HSD Dasar:** Estimasi harga dasar material & upah.",
        "2. **Terapkan FAKTOR LOKASI (Location Adjustment):**",
        *_markup_table_lines(),
        f"   Faktor lokasi yang berlaku untuk proyek ini ({location}): "
        f"**+{markup}%**.",
        "3. **Tambahkan OVERHEAD & PROFIT:**",
        f"   Tambahkan Margin Kontraktor sebesar **{CONTRACTOR_MARGIN_PERCENT}%** "
        f"(Overhead {OVERHEAD_PERCENT}% + Profit {PROFIT_PERCENT}%) ke dalam "
        "Harga Satuan Jadi.",
        f"   Rumus Unit Price di JSON = (HSP Dasar x Faktor Lokasi) + "
        f"{CONTRACTOR_MARGIN_PERCENT}%.",
        "4. **Hitung PAJAK (PPN):**",
        "   Total biaya fisik konstruksi = Sum(Volume x Unit Price).",
        f"   Grand Total = Total Biaya Fisik + **PPN {TAX_PERCENT}%**.",
        "",
        "INSTRUKSI OUTPUT JSON:",
        "1. **Detail Item:** Breakdown pekerjaan harus mendetail sesuai "
        "tahapan konstruksi (Persiapan, Tanah, Pondasi, Beton, Dinding, Lantai, "
        "Atap, Plafon, Pintu/Jendela, Pengecatan, Sanitasi, Elektrikal).",
        "2. **Kategori:** Awali setiap nama kategori dengan angka Romawi dan "
        "titik (contoh: I. Pekerjaan Persiapan).",
        "3. **Volume:** Hitung volume secara logis berdasarkan Luas Bangunan dan "
        "Jumlah Lantai. Untuk Dinding, Plafon, dan Lantai gunakan rasio teknik "
        "sipil yang akurat terhadap luas bangunan, bukan angka acak.",
        "4. **Unit Price:** Pastikan harga satuan SUDAH termasuk Material, Upah, "
        "Alat, Faktor Lokasi, Overhead, dan Profit.",
        "5. **Project Summary:** Jelaskan secara naratif singkat spesifikasi "
        "struktur utama, asumsi harga utama (harga Semen/sak dan Upah Tukang) "
        "dan persentase penyesuaian harga daerah yang diterapkan.",
        "",
        "Format Output JSON harus sesuai skema yang diberikan.",
    ]

    return EstimateRequest(prompt="\n".join(lines), schema=RAB_RESPONSE_SCHEMA)
