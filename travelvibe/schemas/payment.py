from pydantic import BaseModel

class PaymentCreate(BaseModel):
    bookingId: str
    amount: float
    paymentMethod: str
