from pydantic import BaseModel
from typing import Literal, Optional

class BookingCreate(BaseModel):
    # status/user_id in the body are not fields here and are dropped
    type: Literal["CAR", "FLIGHT", "HOTEL"]
    itemId: int
    numPersons: Optional[int] = None
    totalAmount: float
