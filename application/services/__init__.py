from .dashboard_service import DashboardService
from .rate_service import RateService
from .validation_service import CurrencyValidationService

__all__ = ['CurrencyValidationService', 'DashboardService', 'RateService']
