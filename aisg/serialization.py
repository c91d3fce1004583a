"""Convert engine results into the camelCase audit record stored per evaluation."""

from __future__ import annotations

from dataclasses import fields as dataclass_fields
from dataclasses import is_dataclass
from enum import Enum
from typing import Any

from aisg.engine.result import AuditResult, ProDemRecommendation, SWOTAnalysis

SWOT_BUCKETS = ("strength", "weakness", "opportunity", "threat")


def to_camel(name: str) -> str:
    """snake_case -> camelCase (``zona_kinerja`` -> ``zonaKinerja``)."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _to_payload(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {to_camel(f.name): _to_payload(getattr(value, f.name)) for f in dataclass_fields(value)}
    if isinstance(value, (list, tuple)):
        return [_to_payload(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _to_payload(v) for k, v in value.items()}
    return value


def _swot_to_dict(swot: SWOTAnalysis) -> tuple[dict[str, list[str]], dict[str, list[str]]]:
    """Split SWOT items into plain text buckets and a parallel source map."""
    texts = {b: [item.text for item in getattr(swot, b)] for b in SWOT_BUCKETS}
    sources = {b: [item.source for item in getattr(swot, b)] for b in SWOT_BUCKETS}
    return texts, sources


def _prodem_to_dict(prodem: ProDemRecommendation) -> dict[str, Any]:
    data = _to_payload(prodem)
    if prodem.next_level is None:
        del data["nextLevel"]
    return data


def result_to_payload(result: AuditResult) -> dict[str, Any]:
    """Serialize an AuditResult to the record the persistence layer stores.

    Keys follow the stored audit record: zones flattened to the top level,
    pillars under ``pillarAnswers``, the report body under ``auditReport``
    with SWOT as lists of strings, plus ``prodemRekomendasi`` and
    ``magicSection``.
    """
    report = result.report
    swot_text, swot_sources = _swot_to_dict(report.swot)
    return {
        "nama": result.nama,
        "jabatan": result.jabatan,
        "cabang": result.cabang,
        "tanggalLahir": result.tanggal_lahir,
        "methodologyVersion": result.methodology_version,
        "pillarAnswers": _to_payload(result.pillars),
        "totalSelfScore": result.total_self_score,
        "totalRealityScore": result.total_reality_score,
        "totalGap": result.total_gap,
        "zonaKinerja": result.zones.zona_kinerja.value,
        "zonaPerilaku": result.zones.zona_perilaku.value,
        "zonaFinal": result.zones.zona_final.value,
        "skorKinerja": result.zones.skor_kinerja,
        "skorPerilaku": result.zones.skor_perilaku,
        "profil": result.profil.value,
        "auditReport": {
            "executiveSummary": report.executive_summary,
            "insightLengkap": report.insight_lengkap,
            "swotAnalysis": swot_text,
            "swotSources": swot_sources,
            "coachingPoints": list(report.coaching_points),
            "actionPlan": _to_payload(report.action_plan),
            "progressKuartal": _to_payload(report.progress_kuartal),
            "ews": _to_payload(report.ews),
            "kesesuaianVisi": _to_payload(report.kesesuaian_visi),
        },
        "prodemRekomendasi": _prodem_to_dict(result.prodem),
        "magicSection": _to_payload(result.magic),
    }
