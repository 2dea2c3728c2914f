from pydantic import BaseModel, ConfigDict

from qcheck.models.company import CompanyStatus

class CompanyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    status: CompanyStatus
