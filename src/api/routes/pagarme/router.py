"""Router principal da Pagar.me: agrega todos os endpoints de pagamento."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.pagarme.checkout import router as checkout_router
from api.routes.pagarme.customers import router as customers_router
from api.routes.pagarme.filiais import router as filiais_router
from api.routes.pagarme.orders import router as orders_router
from api.routes.pagarme.payment_links import router as payment_links_router

router = APIRouter()

router.include_router(orders_router, tags=["orders"])
router.include_router(payment_links_router, tags=["payment-links"])
router.include_router(checkout_router, tags=["checkout"])
router.include_router(customers_router, tags=["customers"])
router.include_router(filiais_router, tags=["filiais"])
