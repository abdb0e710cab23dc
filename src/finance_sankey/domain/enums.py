from enum import Enum

class FlowDirection(Enum):
    """Represents whether a line item feeds the institution or is paid out of it"""
    INFLOW = "Inflow" # revenue
    OUTFLOW = "Outflow" # expense
