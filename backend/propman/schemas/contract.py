from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field

from propman.schemas.common import AuditPayload, AuditResponse, Money


class ContractFields(BaseModel):
    contract_no: str = Field("", max_length=100)
    cmd_id: int = 0
    base_id: int = 0
    class_id: int = 0
    grp_id: int = 0
    tenant_no: str = Field("", max_length=100)
    business_name: str = Field("", max_length=255)
    nature_of_business: str = Field("", max_length=255)
    contract_start_date: Optional[datetime] = None
    contract_end_date: Optional[datetime] = None
    commercial_operation_date: Optional[datetime] = None
    initial_rent_pm: Money = Decimal(0)
    initial_rent_pa: Money = Decimal(0)
    payment_term_months: int = 0
    increase_rate_percent: Optional[Money] = None
    increase_interval_months: Optional[int] = None
    sd_rate_months: Optional[int] = None
    security_deposit_amount: Optional[Money] = None
    rental_value: Optional[Money] = None
    govt_share_condition: str = Field("", max_length=255)
    paf_share: Optional[Money] = None
    status: bool = False


class ContractCreate(AuditPayload, ContractFields):
    pass


class ContractUpdate(ContractCreate):
    id: Optional[int] = 0


class ContractResponse(AuditResponse, ContractFields):
    pass


class ContractDetail(ContractResponse):
    cmd_name: str = ""
    base_name: str = ""
    class_name: str = ""
    grp_name: str = ""
