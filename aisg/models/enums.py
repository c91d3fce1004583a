from enum import Enum


class PillarCategory(str, Enum):
    METRIC = "metric"
    BEHAVIORAL = "behavioral"


class GapClass(str, Enum):
    SIGNIFICANT_OVERESTIMATION = "significant_overestimation"
    MILD_OVERESTIMATION = "mild_overestimation"
    ACCURATE = "accurate"
    UNDERESTIMATION = "underestimation"


class Zone(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    CRITICAL = "critical"


class FinalZone(str, Enum):
    HIJAU = "hijau"
    KUNING = "kuning"
    MERAH = "merah"


class GapTendency(str, Enum):
    OVER = "over"
    BALANCED = "balanced"
    UNDER = "under"


class ProfileTag(str, Enum):
    LEADER = "Leader"
    VISIONARY = "Visionary"
    PERFORMER = "Performer"
    AT_RISK = "At-Risk"


class Recommendation(str, Enum):
    PROMOSI = "Promosi"
    DIPERTAHANKAN = "Dipertahankan"
    PEMBINAAN = "Pembinaan"
    DEMOSI = "Demosi"


class StrategyType(str, Enum):
    SAVE_BY_MARGIN = "Save by Margin"
    SAVE_BY_STAFF = "Save by Staff"
    NOT_APPLICABLE = "N/A"


class Generation(str, Enum):
    GEN_Z = "Gen Z"
    MILLENNIAL = "Millennial"
    GEN_X = "Gen X"
    BOOMER = "Boomer"


class VisionStatus(str, Enum):
    ALIGN = "Align"
    PERLU_PENYESUAIAN = "Perlu Penyesuaian"
    BELUM_SESUAI = "Belum Sesuai"


class TrendLabel(str, Enum):
    NAIK = "naik"
    TURUN = "turun"
    STABIL = "stabil"
