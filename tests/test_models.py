import json

import pytest
from pydantic import ValidationError

from ach_entry import EntryDetail, EntryDetailPayload, InvalidEnumValue, parse_addenda
from tests.helpers.records import FORWARD_ADDENDA_LINE, RETURN_ADDENDA_LINE


def test_payload_uses_camel_case_keys(entry):
    data = entry.to_payload().model_dump(by_alias=True)
    assert data["transactionCode"] == 22
    assert data["rdfiIdentification"] == "23138010"
    assert data["checkDigit"] == "4"
    assert data["dfiAccountNumber"] == "12345678"
    assert data["traceNumber"] == 121042880000001
    assert data["addendaRecordIndicator"] == 0
    assert data["category"] == "Forward"
    assert data["addenda"] == []


def test_payload_round_trip_through_json(entry, entry_line):
    entry.id = "abc-123"
    entry.add_addenda(parse_addenda(FORWARD_ADDENDA_LINE))
    text = entry.to_payload().model_dump_json(by_alias=True)

    restored = EntryDetail.from_payload(EntryDetailPayload.model_validate_json(text))
    assert restored.id == "abc-123"
    assert restored.addenda == entry.addenda
    assert restored.category == "Forward"
    assert restored.render() == entry.render()
    assert restored.render()[:78] == entry_line[:78]


def test_payload_from_original_json_shape():
    text = json.dumps(
        {
            "id": "",
            "transactionCode": 27,
            "rdfiIdentification": "12104288",
            "checkDigit": "2",
            "dfiAccountNumber": "744-5678-99",
            "amount": 500000,
            "identificationNumber": "location1234567",
            "individualName": "Best Co. #23",
            "discretionaryData": "S",
            "addendaRecordIndicator": 1,
            "traceNumber": 31300070000001,
            "addenda": [RETURN_ADDENDA_LINE],
            "category": "Return",
        }
    )
    entry = EntryDetail.from_payload(EntryDetailPayload.model_validate_json(text))
    assert entry.category == "Return"
    assert entry.credit_or_debit() == "D"
    entry.validate()


def test_payload_accepts_field_names():
    payload = EntryDetailPayload(
        transaction_code=22,
        rdfi_identification="23138010",
        check_digit="4",
        dfi_account_number="1",
        amount=1,
        individual_name="A",
        trace_number=1,
    )
    assert payload.category == "Forward"


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("dfiAccountNumber", "1" * 18),
        ("individualName", "N" * 23),
        ("amount", -1),
        ("amount", 10_000_000_000),
        ("traceNumber", 10**15),
        ("addendaRecordIndicator", 2),
        ("category", "Other"),
        ("amount", "100"),
    ],
)
def test_payload_rejects_out_of_range_values(entry, key, value):
    data = entry.to_payload().model_dump(by_alias=True)
    data[key] = value
    with pytest.raises(ValidationError):
        EntryDetailPayload.model_validate(data)


def test_payload_rejects_unknown_keys(entry):
    data = entry.to_payload().model_dump(by_alias=True)
    data["batchNumber"] = 1
    with pytest.raises(ValidationError):
        EntryDetailPayload.model_validate(data)


def test_payload_requires_indicator_with_addenda(entry):
    data = entry.to_payload().model_dump(by_alias=True)
    data["addenda"] = [FORWARD_ADDENDA_LINE]
    with pytest.raises(ValidationError):
        EntryDetailPayload.model_validate(data)


def test_payload_rejects_short_addenda_lines(entry):
    data = entry.to_payload().model_dump(by_alias=True)
    data["addenda"] = ["705"]
    data["addendaRecordIndicator"] = 1
    with pytest.raises(ValidationError):
        EntryDetailPayload.model_validate(data)


def test_from_payload_rejects_inconsistent_category(entry):
    data = entry.to_payload().model_dump(by_alias=True)
    data["addenda"] = [FORWARD_ADDENDA_LINE]
    data["addendaRecordIndicator"] = 1
    data["category"] = "NOC"
    with pytest.raises(InvalidEnumValue) as exc:
        EntryDetail.from_payload(EntryDetailPayload.model_validate(data))
    assert exc.value.field_name == "category"
