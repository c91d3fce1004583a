"""Insight templates per (pillar category, gap classification).

Placeholders: {pillar}, {focus}, {self_score}, {reality_score}, {gap_abs}.
"""

from __future__ import annotations

from aisg.models.enums import GapClass, PillarCategory

INSIGHT_TEMPLATES: dict[tuple[PillarCategory, GapClass], str] = {
    (PillarCategory.METRIC, GapClass.SIGNIFICANT_OVERESTIMATION): (
        "{pillar}: klaim {self_score}/5 jauh di atas data realitas {reality_score}/5 "
        "(selisih {gap_abs} poin). Angka kuartalan belum mendukung persepsi Anda tentang "
        "{focus}; jadikan data sebagai cermin utama sebelum menilai diri."
    ),
    (PillarCategory.METRIC, GapClass.MILD_OVERESTIMATION): (
        "{pillar}: penilaian diri {self_score}/5 sedikit lebih tinggi dari realitas "
        "{reality_score}/5 (selisih {gap_abs} poin). Dorongan kecil pada {focus} akan "
        "menutup jarak ini dalam satu kuartal."
    ),
    (PillarCategory.METRIC, GapClass.ACCURATE): (
        "{pillar}: penilaian diri {self_score}/5 selaras dengan data realitas "
        "{reality_score}/5. Anda membaca kinerja {focus} secara objektif."
    ),
    (PillarCategory.METRIC, GapClass.UNDERESTIMATION): (
        "{pillar}: data realitas {reality_score}/5 justru lebih tinggi {gap_abs} poin dari "
        "penilaian diri {self_score}/5. Hasil {focus} Anda lebih baik dari yang Anda kira; "
        "ini peluang coaching untuk membangun kepercayaan diri."
    ),
    (PillarCategory.BEHAVIORAL, GapClass.SIGNIFICANT_OVERESTIMATION): (
        "{pillar}: klaim {self_score}/5 terpaut {gap_abs} poin dari skor realitas "
        "{reality_score}/5. Perilaku {focus} perlu dibuktikan lewat tindakan yang "
        "teramati, bukan sekadar keyakinan diri."
    ),
    (PillarCategory.BEHAVIORAL, GapClass.MILD_OVERESTIMATION): (
        "{pillar}: klaim {self_score}/5 sedikit di atas skor realitas {reality_score}/5 "
        "(selisih {gap_abs} poin). Tunjukkan bukti konkret {focus} agar penilaian "
        "atasan dan diri sendiri bertemu."
    ),
    (PillarCategory.BEHAVIORAL, GapClass.ACCURATE): (
        "{pillar}: penilaian diri {self_score}/5 sama dengan skor realitas "
        "{reality_score}/5. Kesadaran diri Anda tentang {focus} sudah akurat."
    ),
    (PillarCategory.BEHAVIORAL, GapClass.UNDERESTIMATION): (
        "{pillar}: skor realitas {reality_score}/5 melampaui penilaian diri {self_score}/5 "
        "sebesar {gap_abs} poin. Anda terlalu rendah hati soal {focus}; bahas di sesi "
        "coaching agar potensi ini dimanfaatkan."
    ),
}
