"""The NACHA Entry Detail record (record type ``6``).

An Entry Detail record carries one credit or debit instruction: the
receiving institution's routing number, the receiver's account number and
name, the amount in cents, and a trace number assigned by the originating
institution. Records are read from and written to 94-character lines through
the shared codec in :mod:`ach_entry.fields`; semantic checks happen only in
:meth:`EntryDetail.validate`.

Addenda composition
-------------------
:meth:`EntryDetail.add_addenda` keeps at most one coherent kind of addenda on
a record. Return and NOC addenda are singular and replace whatever was
attached before; forward addenda accumulate. ``category`` always mirrors the
most recently attached kind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from .addenda import Addenda, NocAddenda, ReturnAddenda, parse_addenda
from .check_digit import calculate_check_digit
from .errors import (
    CheckDigitMismatch,
    InvalidCharacterSet,
    InvalidEnumValue,
    MalformedNumericField,
    MissingRequiredField,
    RecordLengthMismatch,
    WrongRecordType,
)
from .fields import (
    ENTRY_DETAIL_LAYOUT,
    RECORD_LENGTH,
    pad_routing,
    parse_alphanumeric,
    parse_numeric,
    render_alphanumeric,
    render_numeric,
    split_routing_number,
)
from .logging_setup import get_logger
from .validators import is_alphanumeric_legal, is_field_present, is_transaction_code_legal

if TYPE_CHECKING:
    from .models import EntryDetailPayload

ENTRY_DETAIL_RECORD_TYPE = "6"

Category = Literal["Forward", "Return", "NOC"]
# Sent to the receiving institution.
CATEGORY_FORWARD: Category = "Forward"
# A forward entry coming back to the originating institution.
CATEGORY_RETURN: Category = "Return"
# Notification of change for a forward entry.
CATEGORY_NOC: Category = "NOC"

PaymentType = Literal["R", "S"]

_logger = get_logger("ach_entry.entry_detail")

_COLUMNS = {f.name: f for f in ENTRY_DETAIL_LAYOUT}


def _is_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def normalize_payment_type(value: str) -> PaymentType:
    """``"R"`` (recurring) when ``value`` trims/uppercases to R, else ``"S"``."""

    return "R" if value.strip().upper() == "R" else "S"


@dataclass(slots=True)
class EntryDetail:
    """A single Entry Detail record.

    Text fields hold the values as assigned or parsed (parsed values keep
    their column padding). Numeric fields hold plain integers.
    """

    # Client-defined reference; never written to the line.
    id: str = ""
    record_type: str = ENTRY_DETAIL_RECORD_TYPE
    transaction_code: int = 0
    # Receiving institution routing number without its check digit.
    rdfi_identification: str = ""
    check_digit: str = ""
    # Alphanumeric: space padded, never zero padded.
    dfi_account_number: str = ""
    # Cents.
    amount: int = 0
    identification_number: str = ""
    individual_name: str = ""
    # WEB entries use this as the payment type code (R or S).
    discretionary_data: str = ""
    addenda_record_indicator: int = 0
    trace_number: int = 0
    addenda: list[Addenda] = field(default_factory=list)
    category: Category = CATEGORY_FORWARD

    # ------------------------------------------------------------------
    # Text I/O
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, line: str) -> EntryDetail:
        """Build a record from a 94-character line."""

        record = cls()
        record.read(line)
        return record

    def read(self, line: str) -> None:
        """Overwrite the line-backed fields from ``line``.

        Extraction is purely positional; only the line length and numeric
        columns are checked here. The record type is set to ``"6"`` whatever
        the tag column holds. ``id``, ``addenda`` and ``category`` are left
        untouched.
        """

        line = line.rstrip("\r\n")
        if len(line) != RECORD_LENGTH:
            raise RecordLengthMismatch(line, RECORD_LENGTH)

        def num(name: str) -> int:
            return parse_numeric(_COLUMNS[name].slice(line), name)

        def text(name: str) -> str:
            return parse_alphanumeric(_COLUMNS[name].slice(line))

        # The tag column always reads as this record kind.
        self.record_type = ENTRY_DETAIL_RECORD_TYPE
        self.transaction_code = num("transactionCode")
        self.rdfi_identification = text("rdfiIdentification")
        self.check_digit = text("checkDigit")
        self.dfi_account_number = text("dfiAccountNumber")
        self.amount = num("amount")
        self.identification_number = text("identificationNumber")
        self.individual_name = text("individualName")
        self.discretionary_data = text("discretionaryData")
        self.addenda_record_indicator = num("addendaRecordIndicator")
        self.trace_number = num("traceNumber")
        _logger.debug("parsed entry detail trace=%s", self.trace_number)

    def render(self) -> str:
        """Return the 94-character line for this record."""

        return "".join(
            (
                render_alphanumeric(self.record_type, 1),
                render_numeric(self.transaction_code, 2, "transactionCode"),
                self.rdfi_identification_field(),
                render_alphanumeric(self.check_digit, 1),
                self.dfi_account_number_field(),
                self.amount_field(),
                self.identification_number_field(),
                self.individual_name_field(),
                self.discretionary_data_field(),
                render_numeric(self.addenda_record_indicator, 1, "addendaRecordIndicator"),
                self.trace_number_field(),
            )
        )

    def __str__(self) -> str:
        return self.render()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> None:
        """Check the record against the format rules.

        Checks run in a fixed order and the first failure is raised as a
        :class:`~ach_entry.errors.FieldError`. The record is never modified.
        """

        self._field_inclusion()
        if self.record_type != ENTRY_DETAIL_RECORD_TYPE:
            raise WrongRecordType(self.record_type, ENTRY_DETAIL_RECORD_TYPE)
        if not is_transaction_code_legal(self.transaction_code):
            raise InvalidEnumValue("transactionCode", self.transaction_code)
        for name, value in (
            ("dfiAccountNumber", self.dfi_account_number),
            ("identificationNumber", self.identification_number),
            ("individualName", self.individual_name),
            ("discretionaryData", self.discretionary_data),
        ):
            if not is_alphanumeric_legal(value):
                raise InvalidCharacterSet(name, value)

        identifier = self.rdfi_identification_field()
        if not _is_digits(identifier):
            raise MalformedNumericField("rdfiIdentification", self.rdfi_identification)
        if len(self.check_digit) != 1 or not _is_digits(self.check_digit):
            raise MalformedNumericField("checkDigit", self.check_digit)
        calculated = calculate_check_digit(identifier)
        if calculated != int(self.check_digit):
            raise CheckDigitMismatch("checkDigit", self.check_digit, calculated)

    def _field_inclusion(self) -> None:
        # Mandatory fields must not hold their default values.
        for name, value in (
            ("recordType", self.record_type),
            ("transactionCode", self.transaction_code),
            ("rdfiIdentification", self.rdfi_identification),
            ("dfiAccountNumber", self.dfi_account_number),
            ("individualName", self.individual_name),
            ("traceNumber", self.trace_number),
        ):
            if not is_field_present(value):
                raise MissingRequiredField(name, value)

    def is_valid(self) -> bool:
        try:
            self.validate()
        except ValueError:
            return False
        return True

    # ------------------------------------------------------------------
    # Addenda
    # ------------------------------------------------------------------

    def add_addenda(self, addenda: Addenda) -> list[Addenda]:
        """Attach ``addenda`` and re-tag ``category``; return the addenda list."""

        self.addenda_record_indicator = 1
        match addenda:
            case ReturnAddenda():
                self.category = CATEGORY_RETURN
                self.addenda = [addenda]
            case NocAddenda():
                self.category = CATEGORY_NOC
                self.addenda = [addenda]
            case _:
                self.category = CATEGORY_FORWARD
                self.addenda.append(addenda)
        _logger.debug(
            "attached %s addenda to trace=%s (%d total)",
            addenda.kind,
            self.trace_number,
            len(self.addenda),
        )
        return self.addenda

    # ------------------------------------------------------------------
    # Derived fields and setters
    # ------------------------------------------------------------------

    def set_rdfi(self, routing_number: str) -> EntryDetail:
        """Assign identifier and check digit from a 9-digit routing number."""

        self.rdfi_identification, self.check_digit = split_routing_number(routing_number)
        return self

    def set_trace_number(self, odfi_identification: str, sequence: int) -> None:
        """Trace number = 8-digit ODFI identification + 7-digit sequence."""

        trace = pad_routing(odfi_identification, 8) + render_numeric(sequence, 7, "traceNumber")
        self.trace_number = parse_numeric(trace, "traceNumber")

    def credit_or_debit(self) -> Literal["C", "D", ""]:
        code = str(self.transaction_code)
        if len(code) < 2:
            return ""
        if code[1] in "123":
            return "C"
        if code[1] in "678":
            return "D"
        return ""

    def set_payment_type(self, value: str) -> None:
        self.discretionary_data = normalize_payment_type(value)

    def payment_type(self) -> PaymentType:
        """Normalized WEB payment type; does not modify the record."""

        return normalize_payment_type(self.discretionary_data)

    def payment_type_field(self) -> str:
        """Re-canonicalize ``discretionary_data`` as a payment type and return it.

        For callers that depend on reading the payment type normalizing the
        stored value in place.
        """

        self.set_payment_type(self.discretionary_data)
        return self.discretionary_data

    # CCD entries name the individual name column "receiving company".
    @property
    def receiving_company(self) -> str:
        return self.individual_name

    @receiving_company.setter
    def receiving_company(self, value: str) -> None:
        self.individual_name = value

    # ------------------------------------------------------------------
    # Rendered field accessors
    # ------------------------------------------------------------------

    def rdfi_identification_field(self) -> str:
        return pad_routing(self.rdfi_identification, 8)

    def dfi_account_number_field(self) -> str:
        return render_alphanumeric(self.dfi_account_number, 17)

    def amount_field(self) -> str:
        return render_numeric(self.amount, 10, "amount")

    def identification_number_field(self) -> str:
        return render_alphanumeric(self.identification_number, 15)

    def individual_name_field(self) -> str:
        return render_alphanumeric(self.individual_name, 22)

    def receiving_company_field(self) -> str:
        return self.individual_name_field()

    def discretionary_data_field(self) -> str:
        return render_alphanumeric(self.discretionary_data, 2)

    def trace_number_field(self) -> str:
        return render_numeric(self.trace_number, 15, "traceNumber")

    # ------------------------------------------------------------------
    # JSON payloads
    # ------------------------------------------------------------------

    def to_payload(self) -> EntryDetailPayload:
        from .models import EntryDetailPayload

        return EntryDetailPayload(
            id=self.id,
            transaction_code=self.transaction_code,
            rdfi_identification=self.rdfi_identification,
            check_digit=self.check_digit,
            dfi_account_number=self.dfi_account_number,
            amount=self.amount,
            identification_number=self.identification_number,
            individual_name=self.individual_name,
            discretionary_data=self.discretionary_data,
            addenda_record_indicator=self.addenda_record_indicator,
            trace_number=self.trace_number,
            addenda=[a.render() for a in self.addenda],
            category=self.category,
        )

    @classmethod
    def from_payload(cls, payload: EntryDetailPayload) -> EntryDetail:
        """Rebuild a record from a payload, re-attaching its addenda in order.

        The category implied by the addenda must agree with the payload's
        ``category``.
        """

        record = cls(
            id=payload.id,
            transaction_code=payload.transaction_code,
            rdfi_identification=payload.rdfi_identification,
            check_digit=payload.check_digit,
            dfi_account_number=payload.dfi_account_number,
            amount=payload.amount,
            identification_number=payload.identification_number,
            individual_name=payload.individual_name,
            discretionary_data=payload.discretionary_data,
            addenda_record_indicator=payload.addenda_record_indicator,
            trace_number=payload.trace_number,
        )
        for line in payload.addenda:
            record.add_addenda(parse_addenda(line))
        if record.category != payload.category:
            raise InvalidEnumValue(
                "category",
                payload.category,
                f"does not match attached addenda ({record.category})",
            )
        return record


__all__ = [
    "ENTRY_DETAIL_RECORD_TYPE",
    "Category",
    "CATEGORY_FORWARD",
    "CATEGORY_RETURN",
    "CATEGORY_NOC",
    "PaymentType",
    "EntryDetail",
    "normalize_payment_type",
]
