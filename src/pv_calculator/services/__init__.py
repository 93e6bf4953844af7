"""Services subpackage - PV row list and export."""
from .pv_rows import PVRowList
from .export import rows_to_frame, rows_to_csv

__all__ = ['PVRowList', 'rows_to_frame', 'rows_to_csv']
