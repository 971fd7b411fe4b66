from .documents import RevenueDocumentService
from .finance import BatchMarginRunner, BudgetSynchronizer, CurrentProfileRateResolver, FinanceService

__all__ = [
    "FinanceService",
    "BudgetSynchronizer",
    "BatchMarginRunner",
    "CurrentProfileRateResolver",
    "RevenueDocumentService",
]
