"""
Work Context Middleware

Identifies the customer and working currency of each request from the
X-Customer-Id and X-Currency headers.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import HTTPException, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ..database import customer_db
from ..engine.errors import UnknownCurrencyError
from ..engine.money import Currency
from ..models.customer import Customer
from ..services import get_currency_service

logger = logging.getLogger(__name__)

CUSTOMER_HEADER = "X-Customer-Id"
CURRENCY_HEADER = "X-Currency"


@dataclass
class WorkContext:
    """Customer and working currency of the current request"""
    customer: Customer
    currency: Currency


class WorkContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware that reads the work context headers into request state.

    Resolution against customer and currency storage happens in the
    WorkContextDependency, so routes without a customer are unaffected.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request.state.customer_id = request.headers.get(CUSTOMER_HEADER)
        request.state.currency_code = request.headers.get(CURRENCY_HEADER)

        response = await call_next(request)
        return response


class WorkContextDependency:
    """FastAPI dependency resolving the work context of a request"""

    async def __call__(self, request: Request) -> WorkContext:
        customer = self._resolve_customer(getattr(request.state, "customer_id", None))

        currency_code = getattr(request.state, "currency_code", None)
        try:
            currency = get_currency_service().get_currency(currency_code)
        except UnknownCurrencyError as e:
            logger.warning(f"Rejected request with unknown currency: {e.currency_code}")
            raise HTTPException(status_code=400, detail=f"Unknown currency: {e.currency_code}")

        return WorkContext(customer=customer, currency=currency)

    @staticmethod
    def _resolve_customer(raw_customer_id: Optional[str]) -> Customer:
        customer = None
        if raw_customer_id and raw_customer_id.strip().isdigit():
            customer = customer_db.get_customer(int(raw_customer_id))

        if customer is None:
            raise HTTPException(status_code=404, detail="Customer not found")
        return customer


# Dependency instances
work_context = WorkContextDependency()
