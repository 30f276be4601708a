"""Customer import and export."""

from ro_track.io.csv_export import export_customers_csv, import_exported_csv
from ro_track.io.csv_import import ImportResult, ImportRowError, import_customers, parse_csv_line

__all__ = [
    "ImportResult",
    "ImportRowError",
    "export_customers_csv",
    "import_customers",
    "import_exported_csv",
    "parse_csv_line",
]
