from .equity_tool import EquityTool
from .table_state import Slot, TableState

__all__ = ["EquityTool", "TableState", "Slot"]
