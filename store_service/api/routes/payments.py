from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
import logging

from ...schemas.payment import PaymentCreate, PaymentCreatedResponse
from ...services.payment_service import PaymentService
from ..dependencies import get_payment_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("", response_model=PaymentCreatedResponse, status_code=201)
def create_payment(
        payment: PaymentCreate,
        payment_service: PaymentService = Depends(get_payment_service)
):
    """Записать платеж с позициями (деньги не списываются)"""
    try:
        created = payment_service.create_payment(payment)
    except SQLAlchemyError as e:
        logger.error(f"❌ Error creating payment: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return {"message": "Payment accepted", "payment": created}
