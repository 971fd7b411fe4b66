from .batch import BatchMarginRunner
from .models import (
    CostBreakdown,
    MarginSummary,
    ProjectMargin,
    ServiceBreakdownRow,
    ServiceProfitability,
    TaskActuals,
    TaskVariance,
    TimeValueTotals,
)
from .rates import CurrentProfileRateResolver, RateResolver
from .service import FinanceService
from .sync import BudgetSynchronizer

__all__ = [
    "FinanceService",
    "BudgetSynchronizer",
    "BatchMarginRunner",
    "RateResolver",
    "CurrentProfileRateResolver",
    "CostBreakdown",
    "ProjectMargin",
    "MarginSummary",
    "TimeValueTotals",
    "TaskActuals",
    "TaskVariance",
    "ServiceBreakdownRow",
    "ServiceProfitability",
]
