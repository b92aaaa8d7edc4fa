"""Unit tests for export_service."""
import pytest
from datetime import date

from src.models.registration import Registration
from src.services.export_service import EXPORT_HEADERS, encode_csv, export_filename, export_row

HEADER = (
    "Nome Completo;E-mail;Departamento;Nível Automação;Acessibilidade;"
    "Detalhe Acessibilidade;Dia Participação;Observações;Data Criação"
)


@pytest.fixture
def ana():
    """The end-to-end example registration, as returned by the store."""
    return Registration(
        id="a1",
        full_name="Ana Silva",
        corporate_email="ana@acme.com",
        department="TI",
        automation_level="medio",
        needs_accessibility=False,
        participation_day="2025-01-16",
        created_at="2025-01-10T09:30:00-03:00",
    )


@pytest.fixture
def bruno():
    return Registration(
        id="b2",
        full_name="Bruno Costa",
        corporate_email="bruno@acme.com",
        department="RH",
        automation_level="alto",
        needs_accessibility=True,
        accessibility_detail="Cadeira de rodas",
        participation_day="2025-01-20",
        notes="Chego às 10h",
        created_at="2025-01-11T18:05:42.123456-03:00",
    )


class TestEncodeCsv:
    """Tests for encode_csv."""

    def test_single_record_exact_output(self, ana):
        """Header, one fully quoted row, BOM prefix."""
        output = encode_csv([ana])

        assert output == (
            "\ufeff"
            + HEADER
            + "\n"
            + '"Ana Silva";"ana@acme.com";"TI";"medio";"Não";"";"16/01/2025";"";"10/01/2025 09:30"'
        ).encode("utf-8")

    def test_starts_with_utf8_bom(self, ana):
        assert encode_csv([ana]).startswith(b"\xef\xbb\xbf")

    def test_header_is_unquoted(self, ana):
        text = encode_csv([ana]).decode("utf-8-sig")
        assert text.splitlines()[0] == HEADER
        assert HEADER.split(";") == EXPORT_HEADERS

    def test_row_per_record_in_input_order(self, ana, bruno):
        lines = encode_csv([bruno, ana]).decode("utf-8-sig").split("\n")

        assert len(lines) == 3
        assert lines[1] == (
            '"Bruno Costa";"bruno@acme.com";"RH";"alto";"Sim";"Cadeira de rodas";'
            '"20/01/2025";"Chego às 10h";"11/01/2025 18:05"'
        )
        assert lines[2].startswith('"Ana Silva";')

    def test_no_trailing_newline(self, ana):
        assert not encode_csv([ana]).endswith(b"\n")

    def test_empty_input_is_header_only(self):
        assert encode_csv([]) == ("\ufeff" + HEADER).encode("utf-8")

    def test_embedded_quotes_are_doubled(self, ana):
        """Hardened on purpose: quotes in free text no longer break columns."""
        ana.notes = 'Prefiro o "turno da manhã"; obrigado'

        row = encode_csv([ana]).decode("utf-8-sig").split("\n")[1]

        assert '"Prefiro o ""turno da manhã""; obrigado"' in row

    def test_values_without_quotes_match_legacy_format(self, bruno):
        """Without embedded quotes every field is simply wrapped in quotes."""
        row = encode_csv([bruno]).decode("utf-8-sig").split("\n")[1]
        legacy = ";".join(f'"{value}"' for value in export_row(bruno))
        assert row == legacy


class TestExportRow:
    """Tests for export_row."""

    def test_columns(self, bruno):
        assert export_row(bruno) == [
            "Bruno Costa",
            "bruno@acme.com",
            "RH",
            "alto",
            "Sim",
            "Cadeira de rodas",
            "20/01/2025",
            "Chego às 10h",
            "11/01/2025 18:05",
        ]

    def test_missing_created_at_is_blank(self, ana):
        ana.created_at = None
        assert export_row(ana)[-1] == ""


class TestExportFilename:
    """Tests for export_filename."""

    def test_uses_iso_date(self):
        assert export_filename(date(2025, 1, 21)) == "inscricoes_2025-01-21.csv"

    def test_defaults_to_today(self):
        assert export_filename() == f"inscricoes_{date.today().isoformat()}.csv"
