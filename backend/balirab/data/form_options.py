"""Static options shown by the estimator form and export documents."""

from __future__ import annotations

NOTE_SUGGESTIONS: tuple[str, ...] = (
    "Pondasi Cakar Ayam",
    "Rangka Atap Baja Ringan",
    "Ada Kolam Renang",
    "Lantai Granit 60x60",
    "Kamar Mandi Dalam (Ensuite)",
    "Pagar Keliling",
    "Konsep Minimalis Modern",
    "Konsep Bali Tropis",
    "Banyak Bukaan Kaca",
    "Taman Landscape",
)

METHODOLOGY_REFERENCE = "SNI 2835:2023 & AHSP PUPR"

DISCLAIMER_TITLE = "Batasan Pertanggungjawaban (Disclaimer)"

DISCLAIMER_LINES: tuple[str, ...] = (
    "Aplikasi ini adalah alat bantu Estimasi Awal (Owner's Estimate) yang "
    "menggunakan standar SNI 2835:2023 dan AHSP. Hasil perhitungan TIDAK "
    "bersifat mengikat secara hukum dan tidak dapat menggantikan peran "
    "konsultan Quantity Surveyor (QS) atau Kontraktor profesional.",
    "Volume pekerjaan dihitung berdasarkan rasio luas (taksiran), bukan "
    "berdasarkan pengukuran gambar kerja (DED) yang presisi.",
    "Harga satuan mengikuti rata-rata pasar Bali, namun harga riil toko "
    "dapat berubah sewaktu-waktu (fluktuasi).",
    "Kondisi tanah diasumsikan normal (tanah datar & keras). Biaya tambahan "
    "mungkin timbul untuk lahan miring, rawa, atau akses sulit.",
)


def add_note_suggestion(notes: str, suggestion: str) -> str:
    """Append a quick-insert phrase to the notes, comma separated."""
    current = notes.strip()
    separator = ", " if current else ""
    return f"{current}{separator}{suggestion}"
