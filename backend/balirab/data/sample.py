"""Canned RAB result used by the sample-estimate endpoint.

Numbers are internally consistent: subtotals equal the item totals and the
grand total is the physical cost plus 11% PPN.
"""

from __future__ import annotations

from balirab.models.enums import BaliLocation, BuildingType, MaterialQuality
from balirab.models.project import ProjectDetails
from balirab.models.rab import RABCategory, RABItem, RABResult

SAMPLE_PROJECT = ProjectDetails(
    project_name="Villa Test",
    location=BaliLocation.DENPASAR,
    land_area=100,
    building_area=60,
    floors=1,
    building_type=BuildingType.VILLA,
    quality=MaterialQuality.STANDARD,
)

# Categories are deliberately out of order; the normalizer sorts them.
SAMPLE_RESULT = RABResult(
    project_summary=(
        "Villa satu lantai 60 m2 dengan struktur beton bertulang K-225 dan "
        "atap baja ringan. Asumsi harga utama: Semen Rp 68.000/sak, upah "
        "tukang Rp 150.000/hari. Faktor lokasi Denpasar +10% telah "
        "diterapkan, ditambah overhead & profit 15%."
    ),
    categories=[
        RABCategory(
            category_name="III. Pekerjaan Pondasi",
            items=[
                RABItem(
                    description="Pondasi batu kali 1:4",
                    unit="m3",
                    volume=18.0,
                    unit_price=1_450_000,
                    total_price=26_100_000,
                ),
                RABItem(
                    description="Sloof beton 15/20",
                    unit="m3",
                    volume=2.4,
                    unit_price=5_250_000,
                    total_price=12_600_000,
                ),
            ],
            subtotal=38_700_000,
        ),
        RABCategory(
            category_name="I. Pekerjaan Persiapan",
            items=[
                RABItem(
                    description="Pembersihan lahan",
                    unit="m2",
                    volume=100.0,
                    unit_price=15_000,
                    total_price=1_500_000,
                ),
                RABItem(
                    description="Pengukuran dan bowplank",
                    unit="m1",
                    volume=40.0,
                    unit_price=75_000,
                    total_price=3_000_000,
                ),
            ],
            subtotal=4_500_000,
        ),
        RABCategory(
            category_name="II. Pekerjaan Tanah",
            items=[
                RABItem(
                    description="Galian tanah pondasi",
                    unit="m3",
                    volume=24.0,
                    unit_price=110_000,
                    total_price=2_640_000,
                ),
                RABItem(
                    description="Urugan pasir bawah pondasi",
                    unit="m3",
                    volume=3.0,
                    unit_price=320_000,
                    total_price=960_000,
                ),
            ],
            subtotal=3_600_000,
        ),
    ],
    grand_total=51_948_000,
    estimated_duration="4 Bulan",
)
