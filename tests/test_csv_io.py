"""Tests for CSV import and export."""

from datetime import date

import pytest

from ro_track.customers import new_customer
from ro_track.io import (
    export_customers_csv,
    import_customers,
    import_exported_csv,
    parse_csv_line,
)
from ro_track.io.csv_export import EXPORT_HEADERS
from ro_track.io.csv_import import (
    BAD_DATE,
    BAD_RENT,
    BAD_SERIAL,
    DUPLICATE_SERIAL,
    NO_DATA,
)

TODAY = date(2024, 6, 1)
VALID_ROW = "101, Doe John, 123 Main St, 9876543210, AquaPure, 2023-05-15, 250"


def _import(text: str, existing=()):
    return import_customers(text, existing, years_ahead=0, today=TODAY)


class TestParseCsvLine:
    """Tests for parse_csv_line."""

    def test_trims_fields(self) -> None:
        assert parse_csv_line(" a ,b,  c ") == ["a", "b", "c"]

    def test_quoted_commas_and_quotes(self) -> None:
        line = '7, "Sharma, Anil", "Flat 4, ""Green"" Towers"'

        assert parse_csv_line(line) == ["7", "Sharma, Anil", 'Flat 4, "Green" Towers']

    def test_empty_line(self) -> None:
        assert parse_csv_line("") == [""]


class TestImportCustomers:
    """Tests for import_customers."""

    def test_valid_row(self) -> None:
        """Test a well-formed row becomes a customer with a schedule."""
        result = _import(VALID_ROW)

        assert result.errors == []
        assert result.success_count == 1
        customer = result.customers[0]
        assert customer.serial_number == 101
        assert customer.name == "Doe John"
        assert customer.address == "123 Main St"
        assert customer.mobile == "9876543210"
        assert customer.ro_model == "AquaPure"
        assert customer.installation_date == date(2023, 5, 15)
        assert customer.monthly_rent == 250
        assert customer.enable_monthly_reminder is False
        assert customer.payments[0].key == (2023, 4)

    def test_duplicate_against_existing(self) -> None:
        """Test a duplicate row is rejected without affecting others."""
        text = "\n".join([VALID_ROW, VALID_ROW.replace("101", "102", 1)])

        result = _import(text, existing={101})

        assert [c.serial_number for c in result.customers] == [102]
        assert len(result.errors) == 1
        assert result.errors[0].line_number == 1
        assert result.errors[0].message == DUPLICATE_SERIAL
        assert result.errors[0].data == VALID_ROW

    def test_duplicate_within_batch(self) -> None:
        text = "\n".join([VALID_ROW, VALID_ROW])

        result = _import(text)

        assert result.success_count == 1
        assert result.errors[0].line_number == 2
        assert result.errors[0].message == DUPLICATE_SERIAL

    def test_rejected_row_does_not_reserve_serial(self) -> None:
        """Test a row failing later checks leaves its serial free."""
        bad_date = VALID_ROW.replace("2023-05-15", "15/05/2023")

        result = _import("\n".join([bad_date, VALID_ROW]))

        assert result.errors[0].message == BAD_DATE
        assert result.success_count == 1

    @pytest.mark.parametrize(
        "row, message",
        [
            (VALID_ROW.replace("101", "abc", 1), BAD_SERIAL),
            (VALID_ROW.replace("101", "0", 1), BAD_SERIAL),
            (VALID_ROW.replace("101", "-4", 1), BAD_SERIAL),
            (VALID_ROW.replace("101", "1_01", 1), BAD_SERIAL),
            (VALID_ROW.replace("101", "\uff11\uff10\uff11", 1), BAD_SERIAL),
            (VALID_ROW.replace("101", "+101", 1), BAD_SERIAL),
            (VALID_ROW.replace("2023-05-15", "2023/05/15"), BAD_DATE),
            (VALID_ROW.replace("2023-05-15", "2023-02-30"), BAD_DATE),
            (VALID_ROW.replace(", 250", ", -5"), BAD_RENT),
            (VALID_ROW.replace(", 250", ", 25.5"), BAD_RENT),
            (VALID_ROW.replace(", 250", ", 2_50"), BAD_RENT),
            (VALID_ROW.replace(", 250", ", \u0968\u096b\u0966"), BAD_RENT),
            (VALID_ROW.replace(", 250", ", "), BAD_RENT),
        ],
    )
    def test_bad_rows(self, row: str, message: str) -> None:
        result = _import(row)

        assert result.customers == []
        assert result.errors[0].message == message

    def test_underscore_grouping_rejected(self) -> None:
        """Test integer literals with digit separators are not accepted."""
        result = _import("1_000, A, B, 9876543210, M, 2023-05-15, 2_50")

        assert result.customers == []
        assert result.errors[0].message == BAD_SERIAL

    def test_wrong_field_count(self) -> None:
        result = _import("101, Doe John, 123 Main St, 9876543210, AquaPure, 2023-05-15")

        assert result.errors[0].message.startswith("Expected 7 fields, but found 6.")

    def test_zero_rent_accepted(self) -> None:
        result = _import(VALID_ROW.replace(", 250", ", 0"))

        assert result.customers[0].monthly_rent == 0

    def test_quoted_fields(self) -> None:
        row = '5, "Sharma, Anil", "Flat 4, ""Green"" Towers", 9876500000, AquaPure, 2024-01-01, 300'

        result = _import(row)

        assert result.customers[0].name == "Sharma, Anil"
        assert result.customers[0].address == 'Flat 4, "Green" Towers'

    def test_blank_lines_not_counted(self) -> None:
        """Test line numbers skip blank lines."""
        text = f"\n{VALID_ROW}\n\n   \n{VALID_ROW}\n"

        result = _import(text)

        assert result.success_count == 1
        assert result.errors[0].line_number == 2

    @pytest.mark.parametrize("text", ["", "\n  \n"])
    def test_no_data(self, text: str) -> None:
        result = _import(text)

        assert result.customers == []
        assert result.errors[0].line_number == 0
        assert result.errors[0].message == NO_DATA


class TestExport:
    """Tests for export_customers_csv and import_exported_csv."""

    @pytest.fixture
    def customers(self):
        return [
            new_customer(
                serial_number=1,
                name='Anil "Bunty" Sharma',
                address="Flat 4, Green Towers, Pune",
                mobile="9876500000",
                ro_model="AquaPure",
                installation_date=date(2023, 5, 15),
                monthly_rent=250,
                enable_monthly_reminder=True,
                years_ahead=0,
                today=TODAY,
            ),
            new_customer(
                serial_number=2,
                name="Meena Iyer",
                address="7 Lake Road",
                mobile="9123456780",
                ro_model="PureFlow",
                installation_date=date(2024, 2, 29),
                monthly_rent=400,
                years_ahead=0,
                today=TODAY,
            ),
        ]

    def test_export_format(self, customers) -> None:
        lines = export_customers_csv(customers).split("\n")

        assert lines[0] == ",".join(EXPORT_HEADERS)
        assert lines[1] == (
            '1,"Anil ""Bunty"" Sharma","Flat 4, Green Towers, Pune",'
            "9876500000,AquaPure,2023-05-15,250,true"
        )
        assert lines[2] == "2,Meena Iyer,7 Lake Road,9123456780,PureFlow,2024-02-29,400,false"

    def test_export_empty(self) -> None:
        assert export_customers_csv([]) == ",".join(EXPORT_HEADERS)

    def test_round_trip(self, customers) -> None:
        """Test export then restore keeps every exported field."""
        result = import_exported_csv(export_customers_csv(customers), years_ahead=0, today=TODAY)

        assert result.errors == []
        fields = (
            "serial_number",
            "name",
            "address",
            "mobile",
            "ro_model",
            "installation_date",
            "monthly_rent",
            "enable_monthly_reminder",
        )
        for original, restored in zip(customers, result.customers):
            for name in fields:
                assert getattr(restored, name) == getattr(original, name)
            assert restored.id != original.id

    def test_restore_rejects_existing_serials(self, customers) -> None:
        result = import_exported_csv(
            export_customers_csv(customers), existing_serial_numbers={2}, today=TODAY
        )

        assert [c.serial_number for c in result.customers] == [1]
        assert result.errors[0].line_number == 2
        assert result.errors[0].message == DUPLICATE_SERIAL

    def test_restore_missing_columns(self) -> None:
        result = import_exported_csv("serialNumber,name\n1,A")

        assert result.customers == []
        assert result.errors[0].line_number == 0
        assert "installationDate" in result.errors[0].message

    def test_restore_short_row(self, customers) -> None:
        text = export_customers_csv(customers) + "\n3,Short Row"

        result = import_exported_csv(text, today=TODAY)

        assert result.success_count == 2
        assert result.errors[0].message == "Expected 8 fields, but found 2."

    def test_restore_without_flag_column(self) -> None:
        """Test older exports without the reminder column still load."""
        text = ",".join(EXPORT_HEADERS[:-1]) + "\n9,Ravi,Main Rd,9000000000,Aqua,2024-01-01,300"

        result = import_exported_csv(text, today=TODAY)

        assert result.customers[0].enable_monthly_reminder is False

    def test_restore_empty(self) -> None:
        assert import_exported_csv("").errors[0].message == NO_DATA
