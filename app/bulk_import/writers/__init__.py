from app.bulk_import.writers.base import RecordWriter
from app.bulk_import.writers.http_writer import HttpRecordWriter

__all__ = ["HttpRecordWriter", "RecordWriter"]
