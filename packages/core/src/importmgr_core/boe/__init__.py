from importmgr_core.boe.calculator import BoeCalculationError, calculate_duties
from importmgr_core.boe.models import (
    BoeCalculationResult,
    BoeFormValues,
    BoeItemInput,
    CalculatedDutyItem,
    InvoiceItem,
    Shipment,
)

__all__ = [
    "BoeCalculationError",
    "BoeCalculationResult",
    "BoeFormValues",
    "BoeItemInput",
    "CalculatedDutyItem",
    "InvoiceItem",
    "Shipment",
    "calculate_duties",
]
