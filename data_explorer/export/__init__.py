from .csv_export import CSV_HEADER, CsvQuoting, records_to_csv

__all__ = ["CSV_HEADER", "CsvQuoting", "records_to_csv"]
