"""Addenda record variants attached to an Entry Detail record.

Only the variant kind matters to the Entry Detail composition rule, so each
variant keeps its 94-character line verbatim and round-trips it unchanged.
The set of variants is closed:

- :class:`ForwardAddenda` (type code ``05``): remittance detail on a forward
  entry; several may accompany one entry.
- :class:`NocAddenda` (type code ``98``): notification of change.
- :class:`ReturnAddenda` (type code ``99``): return of a forward entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, Self, TypeAlias

from .errors import InvalidEnumValue, RecordLengthMismatch, WrongRecordType
from .fields import RECORD_LENGTH

AddendaKind = Literal["Forward", "NOC", "Return"]

ADDENDA_RECORD_TYPE = "7"


def _check_line(line: str, type_code: str) -> None:
    if len(line) != RECORD_LENGTH:
        raise RecordLengthMismatch(line, RECORD_LENGTH)
    if line[0] != ADDENDA_RECORD_TYPE:
        raise WrongRecordType(line[0], ADDENDA_RECORD_TYPE)
    if line[1:3] != type_code:
        raise InvalidEnumValue("typeCode", line[1:3], f"expected addenda type code {type_code}")


@dataclass(frozen=True, slots=True)
class _Addenda:
    line: str

    kind: ClassVar[AddendaKind]
    type_code: ClassVar[str]

    @classmethod
    def parse(cls, line: str) -> Self:
        line = line.rstrip("\r\n")
        _check_line(line, cls.type_code)
        return cls(line=line)

    def render(self) -> str:
        return self.line

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class ForwardAddenda(_Addenda):
    kind: ClassVar[AddendaKind] = "Forward"
    type_code: ClassVar[str] = "05"


@dataclass(frozen=True, slots=True)
class NocAddenda(_Addenda):
    kind: ClassVar[AddendaKind] = "NOC"
    type_code: ClassVar[str] = "98"


@dataclass(frozen=True, slots=True)
class ReturnAddenda(_Addenda):
    kind: ClassVar[AddendaKind] = "Return"
    type_code: ClassVar[str] = "99"


Addenda: TypeAlias = ForwardAddenda | NocAddenda | ReturnAddenda

_BY_TYPE_CODE: dict[str, type[ForwardAddenda | NocAddenda | ReturnAddenda]] = {
    ForwardAddenda.type_code: ForwardAddenda,
    NocAddenda.type_code: NocAddenda,
    ReturnAddenda.type_code: ReturnAddenda,
}


def parse_addenda(line: str) -> Addenda:
    """Parse an addenda line into its variant based on columns 2-3."""

    line = line.rstrip("\r\n")
    variant = _BY_TYPE_CODE.get(line[1:3])
    if variant is None:
        raise InvalidEnumValue("typeCode", line[1:3], "unsupported addenda type code")
    return variant.parse(line)


__all__ = [
    "ADDENDA_RECORD_TYPE",
    "Addenda",
    "AddendaKind",
    "ForwardAddenda",
    "NocAddenda",
    "ReturnAddenda",
    "parse_addenda",
]
