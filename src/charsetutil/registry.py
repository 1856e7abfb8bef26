"""Encoding label registry.

Labels follow the WHATWG Encoding Standard (https://encoding.spec.whatwg.org/),
the same table web browsers use: a label is trimmed of ASCII whitespace,
lower-cased, and matched against the known labels of each encoding.  Every
encoding maps onto a Python codec that does the actual transcoding.

Encodings that have no Python codec (``replacement``, ``x-user-defined``)
are not registered, so their labels are unsupported.
"""

from __future__ import annotations

import codecs
import dataclasses
import logging

from charsetutil.errors import UnsupportedCharsetError

logger = logging.getLogger(__name__)

# ASCII whitespace as defined by the WHATWG Infra standard.
_ASCII_WHITESPACE = "\t\n\f\r "


@dataclasses.dataclass(frozen=True, slots=True)
class CharsetInfo:
    """Metadata for a single supported encoding.

    :param name: Canonical WHATWG name, e.g. ``"Shift_JIS"``.
    :param python_codec: Python codec used to transcode, e.g. ``"cp932"``.
    :param labels: Every label (lower-case) that resolves to this encoding.
    :param languages: ISO 639-1 codes of the languages written in this
        encoding.  Empty for language-agnostic encodings such as UTF-8.
    :param is_multibyte: Whether characters may span several bytes.
    :param codec_aliases: Python codec names a detector may report for this
        encoding (subsets and close variants included).
    """

    name: str
    python_codec: str
    labels: tuple[str, ...]
    languages: tuple[str, ...] = ()
    is_multibyte: bool = False
    codec_aliases: tuple[str, ...] = ()


_CYRILLIC = ("bg", "mk", "ru", "sr", "uk")
_CENTRAL_EUROPEAN = ("cs", "hr", "hu", "pl", "ro", "sk", "sl")
_BALTIC = ("et", "lt", "lv")
_WESTERN = ("de", "en", "es", "fr", "it", "nl", "pt")

REGISTRY: tuple[CharsetInfo, ...] = (
    CharsetInfo(
        name="UTF-8",
        python_codec="utf_8",
        labels=(
            "unicode-1-1-utf-8",
            "unicode11utf8",
            "unicode20utf8",
            "utf-8",
            "utf8",
            "x-unicode20utf8",
        ),
        is_multibyte=True,
    ),
    CharsetInfo(
        name="IBM866",
        python_codec="cp866",
        labels=("866", "cp866", "csibm866", "ibm866"),
        languages=("ru",),
    ),
    CharsetInfo(
        name="ISO-8859-2",
        python_codec="iso8859_2",
        labels=(
            "csisolatin2",
            "iso-8859-2",
            "iso-ir-101",
            "iso8859-2",
            "iso88592",
            "iso_8859-2",
            "iso_8859-2:1987",
            "l2",
            "latin2",
        ),
        languages=_CENTRAL_EUROPEAN,
    ),
    CharsetInfo(
        name="ISO-8859-3",
        python_codec="iso8859_3",
        labels=(
            "csisolatin3",
            "iso-8859-3",
            "iso-ir-109",
            "iso8859-3",
            "iso88593",
            "iso_8859-3",
            "iso_8859-3:1988",
            "l3",
            "latin3",
        ),
        languages=("eo", "mt", "tr"),
    ),
    CharsetInfo(
        name="ISO-8859-4",
        python_codec="iso8859_4",
        labels=(
            "csisolatin4",
            "iso-8859-4",
            "iso-ir-110",
            "iso8859-4",
            "iso88594",
            "iso_8859-4",
            "iso_8859-4:1988",
            "l4",
            "latin4",
        ),
        languages=_BALTIC,
    ),
    CharsetInfo(
        name="ISO-8859-5",
        python_codec="iso8859_5",
        labels=(
            "csisolatincyrillic",
            "cyrillic",
            "iso-8859-5",
            "iso-ir-144",
            "iso8859-5",
            "iso88595",
            "iso_8859-5",
            "iso_8859-5:1988",
        ),
        languages=_CYRILLIC,
    ),
    CharsetInfo(
        name="ISO-8859-6",
        python_codec="iso8859_6",
        labels=(
            "arabic",
            "asmo-708",
            "csiso88596e",
            "csiso88596i",
            "csisolatinarabic",
            "ecma-114",
            "iso-8859-6",
            "iso-8859-6-e",
            "iso-8859-6-i",
            "iso-ir-127",
            "iso8859-6",
            "iso88596",
            "iso_8859-6",
            "iso_8859-6:1987",
        ),
        languages=("ar",),
    ),
    CharsetInfo(
        name="ISO-8859-7",
        python_codec="iso8859_7",
        labels=(
            "csisolatingreek",
            "ecma-118",
            "elot_928",
            "greek",
            "greek8",
            "iso-8859-7",
            "iso-ir-126",
            "iso8859-7",
            "iso88597",
            "iso_8859-7",
            "iso_8859-7:1987",
            "sun_eu_greek",
        ),
        languages=("el",),
    ),
    CharsetInfo(
        name="ISO-8859-8",
        python_codec="iso8859_8",
        labels=(
            "csiso88598e",
            "csisolatinhebrew",
            "hebrew",
            "iso-8859-8",
            "iso-8859-8-e",
            "iso-ir-138",
            "iso8859-8",
            "iso88598",
            "iso_8859-8",
            "iso_8859-8:1988",
            "visual",
        ),
        languages=("he",),
    ),
    # Logical-order Hebrew.  Byte-identical to ISO-8859-8, which comes first
    # and so owns the iso8859_8 codec in reverse lookups.
    CharsetInfo(
        name="ISO-8859-8-I",
        python_codec="iso8859_8",
        labels=("csiso88598i", "iso-8859-8-i", "logical"),
        languages=("he",),
    ),
    CharsetInfo(
        name="ISO-8859-10",
        python_codec="iso8859_10",
        labels=(
            "csisolatin6",
            "iso-8859-10",
            "iso-ir-157",
            "iso8859-10",
            "iso885910",
            "l6",
            "latin6",
        ),
        languages=("da", "fi", "is", "no", "sv"),
    ),
    CharsetInfo(
        name="ISO-8859-13",
        python_codec="iso8859_13",
        labels=("iso-8859-13", "iso8859-13", "iso885913"),
        languages=_BALTIC,
    ),
    CharsetInfo(
        name="ISO-8859-14",
        python_codec="iso8859_14",
        labels=("iso-8859-14", "iso8859-14", "iso885914"),
        languages=("cy", "ga"),
    ),
    CharsetInfo(
        name="ISO-8859-15",
        python_codec="iso8859_15",
        labels=(
            "csisolatin9",
            "iso-8859-15",
            "iso8859-15",
            "iso885915",
            "iso_8859-15",
            "l9",
        ),
        languages=_WESTERN,
    ),
    CharsetInfo(
        name="ISO-8859-16",
        python_codec="iso8859_16",
        labels=("iso-8859-16",),
        languages=("hr", "hu", "pl", "ro", "sl"),
    ),
    CharsetInfo(
        name="KOI8-R",
        python_codec="koi8_r",
        labels=("cskoi8r", "koi", "koi8", "koi8-r", "koi8_r"),
        languages=("ru",),
    ),
    CharsetInfo(
        name="KOI8-U",
        python_codec="koi8_u",
        labels=("koi8-ru", "koi8-u"),
        languages=("ru", "uk"),
    ),
    CharsetInfo(
        name="macintosh",
        python_codec="mac_roman",
        labels=("csmacintosh", "mac", "macintosh", "x-mac-roman"),
        languages=_WESTERN,
    ),
    CharsetInfo(
        name="windows-874",
        python_codec="cp874",
        labels=(
            "dos-874",
            "iso-8859-11",
            "iso8859-11",
            "iso885911",
            "tis-620",
            "windows-874",
        ),
        languages=("th",),
        codec_aliases=("cp874", "tis_620", "iso8859_11"),
    ),
    CharsetInfo(
        name="windows-1250",
        python_codec="cp1250",
        labels=("cp1250", "windows-1250", "x-cp1250"),
        languages=_CENTRAL_EUROPEAN,
    ),
    CharsetInfo(
        name="windows-1251",
        python_codec="cp1251",
        labels=("cp1251", "windows-1251", "x-cp1251"),
        languages=_CYRILLIC,
    ),
    CharsetInfo(
        name="windows-1252",
        python_codec="cp1252",
        labels=(
            "ansi_x3.4-1968",
            "ascii",
            "cp1252",
            "cp819",
            "csisolatin1",
            "ibm819",
            "iso-8859-1",
            "iso-ir-100",
            "iso8859-1",
            "iso88591",
            "iso_8859-1",
            "iso_8859-1:1987",
            "l1",
            "latin1",
            "us-ascii",
            "windows-1252",
            "x-cp1252",
        ),
        languages=("da", "de", "en", "es", "fi", "fr", "it", "nl", "no", "pt", "sv"),
        codec_aliases=("cp1252", "latin_1", "ascii"),
    ),
    CharsetInfo(
        name="windows-1253",
        python_codec="cp1253",
        labels=("cp1253", "windows-1253", "x-cp1253"),
        languages=("el",),
    ),
    CharsetInfo(
        name="windows-1254",
        python_codec="cp1254",
        labels=(
            "cp1254",
            "csisolatin5",
            "iso-8859-9",
            "iso-ir-148",
            "iso8859-9",
            "iso88599",
            "iso_8859-9",
            "iso_8859-9:1989",
            "l5",
            "latin5",
            "windows-1254",
            "x-cp1254",
        ),
        languages=("tr",),
        codec_aliases=("cp1254", "iso8859_9"),
    ),
    CharsetInfo(
        name="windows-1255",
        python_codec="cp1255",
        labels=("cp1255", "windows-1255", "x-cp1255"),
        languages=("he",),
    ),
    CharsetInfo(
        name="windows-1256",
        python_codec="cp1256",
        labels=("cp1256", "windows-1256", "x-cp1256"),
        languages=("ar", "fa", "ur"),
    ),
    CharsetInfo(
        name="windows-1257",
        python_codec="cp1257",
        labels=("cp1257", "windows-1257", "x-cp1257"),
        languages=_BALTIC,
    ),
    CharsetInfo(
        name="windows-1258",
        python_codec="cp1258",
        labels=("cp1258", "windows-1258", "x-cp1258"),
        languages=("vi",),
    ),
    CharsetInfo(
        name="x-mac-cyrillic",
        python_codec="mac_cyrillic",
        labels=("x-mac-cyrillic", "x-mac-ukrainian"),
        languages=("bg", "ru", "uk"),
    ),
    CharsetInfo(
        name="GBK",
        python_codec="gbk",
        labels=(
            "chinese",
            "csgb2312",
            "csiso58gb231280",
            "gb2312",
            "gb_2312",
            "gb_2312-80",
            "gbk",
            "iso-ir-58",
            "x-gbk",
        ),
        languages=("zh",),
        is_multibyte=True,
        codec_aliases=("gbk", "gb2312"),
    ),
    CharsetInfo(
        name="gb18030",
        python_codec="gb18030",
        labels=("gb18030",),
        languages=("zh",),
        is_multibyte=True,
    ),
    CharsetInfo(
        name="Big5",
        python_codec="big5hkscs",
        labels=("big5", "big5-hkscs", "cn-big5", "csbig5", "x-x-big5"),
        languages=("zh",),
        is_multibyte=True,
        codec_aliases=("big5hkscs", "big5", "cp950"),
    ),
    CharsetInfo(
        name="EUC-JP",
        python_codec="euc_jp",
        labels=("cseucpkdfmtjapanese", "euc-jp", "x-euc-jp"),
        languages=("ja",),
        is_multibyte=True,
        codec_aliases=("euc_jp", "euc_jis_2004", "euc_jisx0213"),
    ),
    CharsetInfo(
        name="ISO-2022-JP",
        python_codec="iso2022_jp",
        labels=("csiso2022jp", "iso-2022-jp"),
        languages=("ja",),
        is_multibyte=True,
    ),
    # The web's Shift_JIS is Microsoft's code page 932 (Windows-31J).
    CharsetInfo(
        name="Shift_JIS",
        python_codec="cp932",
        labels=(
            "csshiftjis",
            "ms932",
            "ms_kanji",
            "shift-jis",
            "shift_jis",
            "sjis",
            "windows-31j",
            "x-sjis",
        ),
        languages=("ja",),
        is_multibyte=True,
        codec_aliases=("cp932", "shift_jis", "shift_jis_2004", "shift_jisx0213"),
    ),
    # The web's EUC-KR is Microsoft's code page 949 (Unified Hangul Code).
    CharsetInfo(
        name="EUC-KR",
        python_codec="cp949",
        labels=(
            "cseuckr",
            "csksc56011987",
            "euc-kr",
            "iso-ir-149",
            "korean",
            "ks_c_5601-1987",
            "ks_c_5601-1989",
            "ksc5601",
            "ksc_5601",
            "windows-949",
        ),
        languages=("ko",),
        is_multibyte=True,
        codec_aliases=("cp949", "euc_kr"),
    ),
    CharsetInfo(
        name="UTF-16BE",
        python_codec="utf_16_be",
        labels=("unicodefffe", "utf-16be"),
        is_multibyte=True,
    ),
    CharsetInfo(
        name="UTF-16LE",
        python_codec="utf_16_le",
        labels=(
            "csunicode",
            "iso-10646-ucs-2",
            "ucs-2",
            "unicode",
            "unicodefeff",
            "utf-16",
            "utf-16le",
        ),
        is_multibyte=True,
    ),
)


def normalize_label(label: str) -> str:
    """Trim ASCII whitespace and lower-case *label* for table lookup."""
    return label.strip(_ASCII_WHITESPACE).lower()


def _codec_name(name: str) -> str | None:
    """Return Python's canonical codec name for *name*, or ``None``."""
    try:
        return codecs.lookup(name).name
    except LookupError:
        return None


def _build_label_index() -> dict[str, CharsetInfo]:
    index: dict[str, CharsetInfo] = {}
    for info in REGISTRY:
        for label in info.labels:
            index[label] = info
    return index


def _build_codec_index() -> dict[str, CharsetInfo]:
    index: dict[str, CharsetInfo] = {}
    for info in REGISTRY:
        for alias in info.codec_aliases or (info.python_codec,):
            name = _codec_name(alias)
            if name is not None:
                index.setdefault(name, info)
    return index


# Read-only after import; safe to share between threads.
_LABEL_INDEX: dict[str, CharsetInfo] = _build_label_index()
_CODEC_INDEX: dict[str, CharsetInfo] = _build_codec_index()


def lookup_charset(label: str) -> CharsetInfo:
    """Resolve an encoding *label* to its :class:`CharsetInfo`.

    :raises UnsupportedCharsetError: If *label* is not a known label.
    """
    info = _LABEL_INDEX.get(normalize_label(label))
    if info is None:
        raise UnsupportedCharsetError(label)
    logger.debug("label %r resolved to %s (%s)", label, info.name, info.python_codec)
    return info


def lookup_codec(label: str) -> codecs.CodecInfo:
    """Resolve an encoding *label* to the Python codec that implements it.

    This is the default codec lookup used by the decoder and encoder.

    :raises UnsupportedCharsetError: If *label* is not a known label.
    """
    return codecs.lookup(lookup_charset(label).python_codec)


def charset_for_codec(name: str) -> CharsetInfo | None:
    """Find the registered encoding for a codec or charset *name*.

    Accepts the names detectors report (``"EUC-JP"``, ``"utf-8"``,
    ``"SHIFT_JIS"``, ``"ascii"`` ...).  Returns ``None`` for names that match
    no registered encoding.
    """
    codec = _codec_name(name)
    if codec is None:
        return None
    return _CODEC_INDEX.get(codec)
