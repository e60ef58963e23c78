"""Closed table of EDICT annotation codes.

Every parenthesised code that EDICT2 uses to mark part of speech, usage,
field of application or dialect is a member of :class:`Detail`. The enum value
is the code exactly as it appears in the dictionary (case matters: ``uK`` and
``uk`` are different markers).
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional


class DetailCategory(str, Enum):
    POS = "pos"
    MISC = "misc"
    FIELD = "field"
    DIALECT = "dialect"


_POS = DetailCategory.POS
_MISC = DetailCategory.MISC
_FIELD = DetailCategory.FIELD
_DIALECT = DetailCategory.DIALECT


class Detail(str, Enum):
    """Annotation tag; ``Detail.ADJ_NO.value == "adj-no"``."""

    def __new__(cls, code: str, category: DetailCategory) -> "Detail":
        obj = str.__new__(cls, code)
        obj._value_ = code
        obj.category = category
        return obj

    def __str__(self) -> str:
        return self.value

    # Part of speech: adjectives
    ADJ = "adj", _POS
    ADJ_F = "adj-f", _POS
    ADJ_I = "adj-i", _POS
    ADJ_IX = "adj-ix", _POS
    ADJ_KARI = "adj-kari", _POS
    ADJ_KU = "adj-ku", _POS
    ADJ_NA = "adj-na", _POS
    ADJ_NARI = "adj-nari", _POS
    ADJ_NO = "adj-no", _POS
    ADJ_PN = "adj-pn", _POS
    ADJ_SHIKU = "adj-shiku", _POS
    ADJ_T = "adj-t", _POS

    # Part of speech: adverbs, auxiliaries, particles and friends
    ADV = "adv", _POS
    ADV_TO = "adv-to", _POS
    AUX = "aux", _POS
    AUX_ADJ = "aux-adj", _POS
    AUX_V = "aux-v", _POS
    CONJ = "conj", _POS
    COP = "cop", _POS
    CTR = "ctr", _POS
    EXP = "exp", _POS
    INT = "int", _POS
    IV = "iv", _POS
    NUM = "num", _POS
    PN = "pn", _POS
    PREF = "pref", _POS
    PRT = "prt", _POS
    SUF = "suf", _POS
    UNC = "unc", _POS

    # Part of speech: nouns
    N = "n", _POS
    N_ADV = "n-adv", _POS
    N_PR = "n-pr", _POS
    N_PREF = "n-pref", _POS
    N_SUF = "n-suf", _POS
    N_T = "n-t", _POS

    # Part of speech: verbs
    V_UNSPEC = "v-unspec", _POS
    V1 = "v1", _POS
    V1_S = "v1-s", _POS
    V2A_S = "v2a-s", _POS
    V2B_K = "v2b-k", _POS
    V2B_S = "v2b-s", _POS
    V2D_K = "v2d-k", _POS
    V2D_S = "v2d-s", _POS
    V2G_K = "v2g-k", _POS
    V2G_S = "v2g-s", _POS
    V2H_K = "v2h-k", _POS
    V2H_S = "v2h-s", _POS
    V2K_K = "v2k-k", _POS
    V2K_S = "v2k-s", _POS
    V2M_K = "v2m-k", _POS
    V2M_S = "v2m-s", _POS
    V2N_S = "v2n-s", _POS
    V2R_K = "v2r-k", _POS
    V2R_S = "v2r-s", _POS
    V2S_S = "v2s-s", _POS
    V2T_K = "v2t-k", _POS
    V2T_S = "v2t-s", _POS
    V2W_S = "v2w-s", _POS
    V2Y_K = "v2y-k", _POS
    V2Y_S = "v2y-s", _POS
    V2Z_S = "v2z-s", _POS
    V4B = "v4b", _POS
    V4G = "v4g", _POS
    V4H = "v4h", _POS
    V4K = "v4k", _POS
    V4M = "v4m", _POS
    V4N = "v4n", _POS
    V4R = "v4r", _POS
    V4S = "v4s", _POS
    V4T = "v4t", _POS
    V5 = "v5", _POS
    V5ARU = "v5aru", _POS
    V5B = "v5b", _POS
    V5G = "v5g", _POS
    V5K = "v5k", _POS
    V5K_S = "v5k-s", _POS
    V5M = "v5m", _POS
    V5N = "v5n", _POS
    V5R = "v5r", _POS
    V5R_I = "v5r-i", _POS
    V5S = "v5s", _POS
    V5T = "v5t", _POS
    V5U = "v5u", _POS
    V5U_S = "v5u-s", _POS
    V5URU = "v5uru", _POS
    VI = "vi", _POS
    VK = "vk", _POS
    VN = "vn", _POS
    VR = "vr", _POS
    VS = "vs", _POS
    VS_C = "vs-c", _POS
    VS_I = "vs-i", _POS
    VS_S = "vs-s", _POS
    VT = "vt", _POS
    VZ = "vz", _POS

    # Usage and orthography markers
    ABBR = "abbr", _MISC
    ARCH = "arch", _MISC
    ATEJI = "ateji", _MISC
    CHN = "chn", _MISC
    COL = "col", _MISC
    DEROG = "derog", _MISC
    EXCLUSIVELY_KANJI = "eK", _MISC
    EXCLUSIVELY_KANA = "ek", _MISC
    FAM = "fam", _MISC
    FEM = "fem", _MISC
    GIKUN = "gikun", _MISC
    HON = "hon", _MISC
    HUM = "hum", _MISC
    IRREGULAR_KANJI = "iK", _MISC
    ID = "id", _MISC
    IRREGULAR_KANA = "ik", _MISC
    IO = "io", _MISC
    JOC = "joc", _MISC
    M_SL = "m-sl", _MISC
    MALE = "male", _MISC
    MALE_PL = "male-pl", _MISC
    OUTDATED_KANJI = "oK", _MISC
    OBS = "obs", _MISC
    OBSC = "obsc", _MISC
    OIK = "oik", _MISC
    OUTDATED_KANA = "ok", _MISC
    ON_MIM = "on-mim", _MISC
    POET = "poet", _MISC
    POL = "pol", _MISC
    PROVERB = "proverb", _MISC
    QUOTE = "quote", _MISC
    RARE = "rare", _MISC
    SENS = "sens", _MISC
    SL = "sl", _MISC
    USUALLY_KANJI = "uK", _MISC
    USUALLY_KANA = "uk", _MISC
    VULG = "vulg", _MISC
    X = "X", _MISC
    YOJI = "yoji", _MISC

    # Field of application
    BUDDH = "Buddh", _FIELD
    MA = "MA", _FIELD
    ANAT = "anat", _FIELD
    ARCHIT = "archit", _FIELD
    ASTRON = "astron", _FIELD
    BASEB = "baseb", _FIELD
    BIOL = "biol", _FIELD
    BOT = "bot", _FIELD
    BUS = "bus", _FIELD
    CHEM = "chem", _FIELD
    COMP = "comp", _FIELD
    ECON = "econ", _FIELD
    ENGR = "engr", _FIELD
    FINC = "finc", _FIELD
    FOOD = "food", _FIELD
    GEOL = "geol", _FIELD
    GEOM = "geom", _FIELD
    GRAM = "gram", _FIELD
    LAW = "law", _FIELD
    LING = "ling", _FIELD
    MAHJ = "mahj", _FIELD
    MATH = "math", _FIELD
    MED = "med", _FIELD
    MIL = "mil", _FIELD
    MUSIC = "music", _FIELD
    PHYSICS = "physics", _FIELD
    SHINTO = "Shinto", _FIELD
    SHOGI = "shogi", _FIELD
    SPORTS = "sports", _FIELD
    SUMO = "sumo", _FIELD
    ZOOL = "zool", _FIELD

    # Dialects
    HOB = "hob", _DIALECT
    KSB = "ksb", _DIALECT
    KTB = "ktb", _DIALECT
    KYB = "kyb", _DIALECT
    KYU = "kyu", _DIALECT
    NAB = "nab", _DIALECT
    OSB = "osb", _DIALECT
    RKB = "rkb", _DIALECT
    THB = "thb", _DIALECT
    TSB = "tsb", _DIALECT
    TSUG = "tsug", _DIALECT


DETAIL_FOR: Mapping[str, Detail] = MappingProxyType(
    {detail.value: detail for detail in Detail}
)


def code_for(detail: Detail) -> str:
    return detail.value


def detail_for(code: str) -> Optional[Detail]:
    """Exact lookup; ``None`` means the code is not an EDICT annotation."""

    return DETAIL_FOR.get(code)


def is_known_code(code: str) -> bool:
    return code in DETAIL_FOR


def category_of(detail: Detail) -> DetailCategory:
    return detail.category


def describe_taxonomy() -> List[Dict[str, str]]:
    return [
        {"code": detail.value, "name": detail.name, "category": detail.category.value}
        for detail in Detail
    ]
