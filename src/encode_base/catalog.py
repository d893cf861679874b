"""Supported target encodings and their codec table."""

from __future__ import annotations

import codecs
import enum
from dataclasses import dataclass
from types import MappingProxyType

from encode_base.errors import UnknownEncodingError

SOURCE_CODEC = "utf-8"


class EncodingSelector(enum.Enum):
    """Closed set of target encodings a file can be converted to."""

    UTF8 = "UTF-8"
    LATIN1 = "ISO8859-1"
    EUC_KR = "EUC-KR"
    SHIFT_JIS = "SHIFT-JIS"

    @property
    def label(self) -> str:
        """Human-readable name shown to users."""
        return self.value

    def __str__(self) -> str:
        return self.value


DEFAULT_SELECTOR = EncodingSelector.UTF8


@dataclass(frozen=True)
class EncodingSpec:
    """Concrete codec behind a selector.

    Parameters
    ----------
    selector : EncodingSelector
        Selector this entry belongs to.
    codec : str
        Name understood by :func:`codecs.lookup`.
    aliases : tuple[str, ...]
        Extra spellings accepted by :func:`parse_selector`.
    translations : tuple[tuple[str, str], ...]
        Characters rewritten before encoding because the codec has no slot
        for them but the target byte is conventional.
    """

    selector: EncodingSelector
    codec: str
    aliases: tuple[str, ...] = ()
    translations: tuple[tuple[str, str], ...] = ()

    @property
    def label(self) -> str:
        """Display label of the owning selector."""
        return self.selector.label

    def decode(self, data: bytes, errors: str = "strict") -> str:
        """Decode bytes with this codec."""
        return codecs.decode(data, self.codec, errors)

    def encode(self, text: str, errors: str = "strict") -> bytes:
        """Encode text with this codec."""
        if self.translations:
            text = text.translate(str.maketrans(dict(self.translations)))
        return codecs.encode(text, self.codec, errors)


# EUC-KR and Shift_JIS resolve to the Windows supersets used by web encoders.
_TABLE: dict[EncodingSelector, EncodingSpec] = {
    EncodingSelector.UTF8: EncodingSpec(
        EncodingSelector.UTF8, "utf-8", aliases=("utf8", "utf-8", "utf_8")
    ),
    EncodingSelector.LATIN1: EncodingSpec(
        EncodingSelector.LATIN1,
        "latin-1",
        aliases=("latin1", "latin-1", "iso-8859-1", "iso8859-1", "iso88591"),
    ),
    EncodingSelector.EUC_KR: EncodingSpec(
        EncodingSelector.EUC_KR, "cp949", aliases=("euckr", "euc-kr", "euc_kr")
    ),
    EncodingSelector.SHIFT_JIS: EncodingSpec(
        EncodingSelector.SHIFT_JIS,
        "cp932",
        aliases=("shiftjis", "shift-jis", "shift_jis", "sjis"),
        # JIS X 0201 roman: yen sign and overline share the ASCII bytes.
        translations=(("\u00a5", "\\"), ("\u203e", "~")),
    ),
}


def _check_table(table: dict[EncodingSelector, EncodingSpec]) -> None:
    missing = set(EncodingSelector) - set(table)
    if missing:  # pragma: no cover
        names = sorted(selector.name for selector in missing)
        raise RuntimeError(f"encoding table has no entry for: {names}")
    for spec in table.values():
        codecs.lookup(spec.codec)


_check_table(_TABLE)

CATALOG = MappingProxyType(_TABLE)


def codec_for(selector: EncodingSelector) -> EncodingSpec:
    """Return the codec entry for ``selector``."""
    return CATALOG[selector]


def supported_encodings() -> tuple[EncodingSpec, ...]:
    """List all catalog entries in declaration order."""
    return tuple(CATALOG[selector] for selector in EncodingSelector)


def parse_selector(value: str | EncodingSelector) -> EncodingSelector:
    """Resolve a selector from its name, label or alias.

    Parameters
    ----------
    value : str | EncodingSelector
        Selector instance, enum name (``"EUC_KR"``), label (``"EUC-KR"``)
        or alias (``"sjis"``). Matching is case-insensitive.

    Returns
    -------
    EncodingSelector
        Matching selector.

    Raises
    ------
    UnknownEncodingError
        If ``value`` does not name a supported encoding.
    """
    if isinstance(value, EncodingSelector):
        return value
    needle = value.strip().lower()
    for selector in EncodingSelector:
        spec = CATALOG[selector]
        names = {selector.name.lower(), selector.label.lower(), *spec.aliases}
        if needle in names:
            return selector
    choices = ", ".join(selector.label for selector in EncodingSelector)
    raise UnknownEncodingError(
        f"unsupported encoding '{value}'; choose one of: {choices}"
    )
