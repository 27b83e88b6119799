"""Sample NACHA lines shared by the tests."""

# A valid PPD checking credit to routing number 231380104.
ENTRY_LINE = (
    "6"  # record type
    "22"  # transaction code
    "23138010"  # RDFI identification
    "4"  # check digit
    "12345678         "  # DFI account number (17)
    "0100000000"  # amount (10)
    "ID-0001        "  # identification number (15)
    "Wade Arnold           "  # individual name (22)
    "  "  # discretionary data
    "0"  # addenda record indicator
    "121042880000001"  # trace number (15)
)

FORWARD_ADDENDA_LINE = "705" + "PAYMENT RELATED INFORMATION".ljust(80) + "0001" + "0000001"
NOC_ADDENDA_LINE = "798" + "C01".ljust(80) + "0000" + "0000001"
RETURN_ADDENDA_LINE = "799" + "R07".ljust(80) + "0000" + "0000001"
