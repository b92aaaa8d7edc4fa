"""CSV export of registrations for spreadsheet tools."""
import csv
import io
from datetime import date
from typing import List, Optional, Sequence

from src.models.registration import Registration
from src.utils.constants import EXPORT_FILENAME_PREFIX
from src.utils.date_utils import format_day, format_timestamp

EXPORT_HEADERS = [
    "Nome Completo",
    "E-mail",
    "Departamento",
    "Nível Automação",
    "Acessibilidade",
    "Detalhe Acessibilidade",
    "Dia Participação",
    "Observações",
    "Data Criação",
]

DELIMITER = ";"
BOM = "\ufeff"


def export_row(registration: Registration) -> List[str]:
    """Column values for one registration, in EXPORT_HEADERS order."""
    return [
        registration.full_name,
        registration.corporate_email,
        registration.department,
        registration.automation_level,
        "Sim" if registration.needs_accessibility else "Não",
        registration.accessibility_detail or "",
        format_day(registration.participation_day),
        registration.notes or "",
        format_timestamp(registration.created_at) if registration.created_at else "",
    ]


def encode_csv(records: Sequence[Registration]) -> bytes:
    """
    Encode registrations as a semicolon-delimited CSV document.

    The header row is unquoted; every data field is double-quoted and
    embedded quotes are doubled. Rows are joined with "\\n" and the UTF-8
    output starts with a byte-order mark so Excel picks the encoding.
    """
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=DELIMITER,
        quotechar='"',
        quoting=csv.QUOTE_ALL,
        lineterminator="\n",
    )
    for registration in records:
        writer.writerow(export_row(registration))

    lines = [DELIMITER.join(EXPORT_HEADERS)]
    body = buffer.getvalue()
    if body:
        lines.append(body[:-1])

    return (BOM + "\n".join(lines)).encode("utf-8")


def export_filename(today: Optional[date] = None) -> str:
    """Download name: inscricoes_<YYYY-MM-DD>.csv."""
    today = today or date.today()
    return f"{EXPORT_FILENAME_PREFIX}_{today.isoformat()}.csv"
